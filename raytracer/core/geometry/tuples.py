"""
Tuples — Point и Vector поверх толерантного скаляра

Два закрытых варианта с общим хранением координат (x, y, z):
- Point  — позиция, однородная компонента w = 1
- Vector — направление, однородная компонента w = 0

Вариант задаётся классом, а не полем w: допустимые комбинации проверяются
при диспетчеризации операторов.

ДОПУСТИМЫЕ КОМБИНАЦИИ:
    P + V → P      V + V → V      V + P → P
    P - P → V      P - V → P      V - V → V
    -P → P         -V → V
    P * s, P / s → P               V * s, V / s → V

ЗАПРЕЩЕНО (InvalidTupleCombination):
    P + P          V - P

Point и Vector никогда не равны друг другу, даже при совпадающих координатах.
"""

import numbers
from dataclasses import dataclass
from typing import ClassVar

from raytracer.core.math.scalar import Scalar
from raytracer.core.math.tolerance import approx_equal


# =============================================================================
# EXCEPTIONS
# =============================================================================


class InvalidTupleCombination(TypeError):
    """
    Алгебраическая комбинация без геометрического смысла (например, point + point).

    Никогда не приводится к правдоподобному результату: вызывающий код
    получает исключение.
    """

    pass


# =============================================================================
# BASE
# =============================================================================


def _is_scalar_like(value) -> bool:
    return isinstance(value, (Scalar, numbers.Real))


@dataclass(frozen=True, eq=False)
class _Tuple3:
    """Общее хранение координат для Point и Vector."""

    x: Scalar
    y: Scalar
    z: Scalar

    W: ClassVar[float]

    def __post_init__(self) -> None:
        object.__setattr__(self, "x", Scalar.of(self.x))
        object.__setattr__(self, "y", Scalar.of(self.y))
        object.__setattr__(self, "z", Scalar.of(self.z))

    @property
    def w(self) -> float:
        """Однородная компонента (1.0 для Point, 0.0 для Vector)."""
        return self.W

    def as_tuple(self) -> tuple[float, float, float, float]:
        """Координаты как обычные float: (x, y, z, w)."""
        return (self.x.value, self.y.value, self.z.value, self.W)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.x.value!r}, {self.y.value!r}, {self.z.value!r})"

    __hash__ = None  # type: ignore[assignment]

    def __eq__(self, other) -> bool:
        # Сравнение только внутри одного варианта
        if type(other) is not type(self):
            return NotImplemented
        return self.x == other.x and self.y == other.y and self.z == other.z

    def __neg__(self):
        return type(self)(-self.x, -self.y, -self.z)

    def __mul__(self, factor):
        if not _is_scalar_like(factor):
            return NotImplemented
        return type(self)(self.x * factor, self.y * factor, self.z * factor)

    def __rmul__(self, factor):
        return self.__mul__(factor)

    def __truediv__(self, divisor):
        if not _is_scalar_like(divisor):
            return NotImplemented
        return type(self)(self.x / divisor, self.y / divisor, self.z / divisor)


# =============================================================================
# VARIANTS
# =============================================================================


class Point(_Tuple3):
    """Позиция в пространстве (w = 1)."""

    W: ClassVar[float] = 1.0

    def __add__(self, other):
        if isinstance(other, Vector):
            return Point(self.x + other.x, self.y + other.y, self.z + other.z)
        if isinstance(other, Point):
            raise InvalidTupleCombination("point + point has no geometric meaning")
        return NotImplemented

    def __sub__(self, other):
        if isinstance(other, Point):
            return Vector(self.x - other.x, self.y - other.y, self.z - other.z)
        if isinstance(other, Vector):
            return Point(self.x - other.x, self.y - other.y, self.z - other.z)
        return NotImplemented


class Vector(_Tuple3):
    """Направление в пространстве (w = 0)."""

    W: ClassVar[float] = 0.0

    def __add__(self, other):
        if isinstance(other, Vector):
            return Vector(self.x + other.x, self.y + other.y, self.z + other.z)
        if isinstance(other, Point):
            return Point(self.x + other.x, self.y + other.y, self.z + other.z)
        return NotImplemented

    def __sub__(self, other):
        if isinstance(other, Vector):
            return Vector(self.x - other.x, self.y - other.y, self.z - other.z)
        if isinstance(other, Point):
            raise InvalidTupleCombination("vector - point has no geometric meaning")
        return NotImplemented


# =============================================================================
# FACTORIES
# =============================================================================


def point(x: float, y: float, z: float) -> Point:
    """Короткий конструктор Point."""
    return Point(x, y, z)


def vector(x: float, y: float, z: float) -> Vector:
    """Короткий конструктор Vector."""
    return Vector(x, y, z)


def tuple_from_w(x: float, y: float, z: float, w: float) -> Point | Vector:
    """
    Построение варианта по однородной компоненте w.

    Args:
        x, y, z: Координаты
        w: 1.0 → Point, 0.0 → Vector (с учётом толерантности)

    Returns:
        Point или Vector

    Raises:
        ValueError: Если w не равен ни 0, ни 1
    """
    if approx_equal(w, Point.W):
        return Point(x, y, z)
    if approx_equal(w, Vector.W):
        return Vector(x, y, z)
    raise ValueError(f"Unknown w component: {w} (expected 0.0 or 1.0)")
