"""
Color — Трёхканальный цвет (red, green, blue) поверх толерантного скаляра

Операции:
- c1 + c2, c1 - c2   — поканально
- c1 * c2            — произведение Адамара (смешение света и материала)
- c * s, s * c       — равномерное масштабирование

Каналы НЕ ограничиваются на этом уровне: при смешении значения могут
временно выходить за [0, 1]. Ограничение диапазона выполняется только
при кодировании (см. raytracer.core.graphics.ppm).
"""

import numbers
from dataclasses import dataclass
from typing import Final

from raytracer.core.math.scalar import Scalar


@dataclass(frozen=True, eq=False)
class Color:
    """Immutable цвет; равенство — толерантное по каждому каналу."""

    red: Scalar
    green: Scalar
    blue: Scalar

    def __post_init__(self) -> None:
        object.__setattr__(self, "red", Scalar.of(self.red))
        object.__setattr__(self, "green", Scalar.of(self.green))
        object.__setattr__(self, "blue", Scalar.of(self.blue))

    def as_tuple(self) -> tuple[float, float, float]:
        """Каналы как обычные float."""
        return (self.red.value, self.green.value, self.blue.value)

    def __repr__(self) -> str:
        return f"Color({self.red.value!r}, {self.green.value!r}, {self.blue.value!r})"

    __hash__ = None  # type: ignore[assignment]

    def __eq__(self, other) -> bool:
        if not isinstance(other, Color):
            return NotImplemented
        return (
            self.red == other.red
            and self.green == other.green
            and self.blue == other.blue
        )

    def __add__(self, other: "Color") -> "Color":
        if not isinstance(other, Color):
            return NotImplemented
        return Color(self.red + other.red, self.green + other.green, self.blue + other.blue)

    def __sub__(self, other: "Color") -> "Color":
        if not isinstance(other, Color):
            return NotImplemented
        return Color(self.red - other.red, self.green - other.green, self.blue - other.blue)

    def __mul__(self, other) -> "Color":
        if isinstance(other, Color):
            return Color(
                self.red * other.red,
                self.green * other.green,
                self.blue * other.blue,
            )
        if isinstance(other, (Scalar, numbers.Real)):
            return Color(self.red * other, self.green * other, self.blue * other)
        return NotImplemented

    def __rmul__(self, other) -> "Color":
        if isinstance(other, (Scalar, numbers.Real)):
            return self.__mul__(other)
        return NotImplemented


def color(red: float, green: float, blue: float) -> Color:
    """Короткий конструктор Color."""
    return Color(red, green, blue)


# Цвет по умолчанию для нового canvas
BLACK: Final[Color] = Color(0.0, 0.0, 0.0)
