"""
Core math modules для raytracer

Толерантный скаляр и численные примитивы, на которых построена вся геометрия.
"""

# Tolerance
from raytracer.core.math.tolerance import (
    # Epsilon constants
    EPSILON,
    # Epsilon comparisons
    approx_equal,
    is_zero,
    # Validation
    require_integer,
    validate_non_negative_int,
)

# Scalar
from raytracer.core.math.scalar import Scalar

__all__ = [
    # Tolerance: Epsilon constants
    "EPSILON",
    # Tolerance: Epsilon comparisons
    "approx_equal",
    "is_zero",
    # Tolerance: Validation
    "require_integer",
    "validate_non_negative_int",
    # Scalar
    "Scalar",
]
