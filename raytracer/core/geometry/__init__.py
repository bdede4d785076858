"""
Geometry — Point/Vector алгебра и производные операции.
"""

from raytracer.core.geometry.operations import (
    DegenerateVectorError,
    cross,
    dot,
    magnitude,
    normalize,
)
from raytracer.core.geometry.tuples import (
    InvalidTupleCombination,
    Point,
    Vector,
    point,
    tuple_from_w,
    vector,
)

__all__ = [
    # Tuples
    "Point",
    "Vector",
    "point",
    "vector",
    "tuple_from_w",
    "InvalidTupleCombination",
    # Operations
    "magnitude",
    "normalize",
    "dot",
    "cross",
    "DegenerateVectorError",
]
