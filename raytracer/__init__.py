"""
raytracer — tolerant point/vector/color algebra, canvas and PPM encoding.
"""

import logging

from raytracer.core.config import DEFAULT_PPM_SETTINGS, PpmSettings, load_ppm_settings
from raytracer.core.geometry import (
    DegenerateVectorError,
    InvalidTupleCombination,
    Point,
    Vector,
    cross,
    dot,
    magnitude,
    normalize,
    point,
    tuple_from_w,
    vector,
)
from raytracer.core.graphics import (
    BLACK,
    Canvas,
    Color,
    PixelOutOfBoundsError,
    canvas,
    canvas_to_ppm,
    color,
    pixel_at,
    write_pixel,
)
from raytracer.core.math import EPSILON, Scalar

__version__ = "0.1.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    # Math
    "EPSILON",
    "Scalar",
    # Geometry
    "Point",
    "Vector",
    "point",
    "vector",
    "tuple_from_w",
    "magnitude",
    "normalize",
    "dot",
    "cross",
    "InvalidTupleCombination",
    "DegenerateVectorError",
    # Graphics
    "Color",
    "color",
    "BLACK",
    "Canvas",
    "canvas",
    "write_pixel",
    "pixel_at",
    "canvas_to_ppm",
    "PixelOutOfBoundsError",
    # Config
    "PpmSettings",
    "DEFAULT_PPM_SETTINGS",
    "load_ppm_settings",
]
