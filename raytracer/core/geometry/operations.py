"""
Vector operations — производные операции над Vector

- magnitude(v) = sqrt(x² + y² + z²)
- normalize(v) = v / magnitude(v)
- dot(a, b)    = ax·bx + ay·by + az·bz
- cross(a, b)  = (ay·bz - az·by, az·bx - ax·bz, ax·by - ay·bx)

Все операции определены только для Vector; для Point на входе
выбрасывается InvalidTupleCombination.
"""

from raytracer.core.geometry.tuples import InvalidTupleCombination, Vector
from raytracer.core.math.scalar import Scalar
from raytracer.core.math.tolerance import is_zero


# =============================================================================
# EXCEPTIONS
# =============================================================================


class DegenerateVectorError(ValueError):
    """
    Нормализация вектора с длиной в пределах EPSILON от нуля.

    Нарушение предусловия: вызывающий код не должен нормализовать такой вектор.
    Результат не «исправляется» молча.
    """

    pass


def _require_vector(value, name: str) -> Vector:
    if not isinstance(value, Vector):
        raise InvalidTupleCombination(
            f"{name} must be a Vector, got {type(value).__name__}"
        )
    return value


# =============================================================================
# OPERATIONS
# =============================================================================


def magnitude(v: Vector) -> Scalar:
    """Длина вектора."""
    _require_vector(v, "v")
    return (v.x.pow(2) + v.y.pow(2) + v.z.pow(2)).sqrt()


def normalize(v: Vector) -> Vector:
    """
    Единичный вектор того же направления.

    Raises:
        DegenerateVectorError: Если magnitude(v) ≈ 0
        InvalidTupleCombination: Если v не Vector

    Examples:
        >>> normalize(Vector(4.0, 0.0, 0.0)) == Vector(1.0, 0.0, 0.0)
        True
    """
    length = magnitude(v)
    if is_zero(length.value):
        raise DegenerateVectorError(f"Cannot normalize near-zero vector {v!r}")
    return v / length


def dot(a: Vector, b: Vector) -> Scalar:
    """Скалярное произведение."""
    _require_vector(a, "a")
    _require_vector(b, "b")
    return a.x * b.x + a.y * b.y + a.z * b.z


def cross(a: Vector, b: Vector) -> Vector:
    """
    Векторное произведение (антикоммутативно: cross(a, b) == -cross(b, a)).
    """
    _require_vector(a, "a")
    _require_vector(b, "b")
    return Vector(
        a.y * b.z - a.z * b.y,
        a.z * b.x - a.x * b.z,
        a.x * b.y - a.y * b.x,
    )
