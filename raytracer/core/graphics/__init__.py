"""
Graphics — цвет, canvas и PPM encoder.
"""

from raytracer.core.graphics.canvas import (
    Canvas,
    PixelOutOfBoundsError,
    canvas,
    pixel_at,
    write_pixel,
)
from raytracer.core.graphics.color import BLACK, Color, color
from raytracer.core.graphics.ppm import canvas_to_ppm, scale_channels, wrap_row

__all__ = [
    # Color
    "Color",
    "color",
    "BLACK",
    # Canvas
    "Canvas",
    "canvas",
    "write_pixel",
    "pixel_at",
    "PixelOutOfBoundsError",
    # PPM
    "canvas_to_ppm",
    "scale_channels",
    "wrap_row",
]
