"""
Scalar — Вещественное число с толерантным сравнением

Обёртка над float (64-bit), на которой построены все координаты и каналы цвета.
Арифметика выполняется как у обычного float; сравнения используют EPSILON.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Scalar(a) == b  ⇔  |a - b| < EPSILON (b — Scalar или вещественное число)
2. Значения immutable: любая операция создаёт новый Scalar
3. Ошибок нет: sqrt отрицательного числа даёт NaN, деление на ноль даёт ±inf/NaN
   по IEEE-754; NaN распространяется дальше без обработки
4. Scalar не хешируется: толерантное равенство несовместимо с hash
"""

import math
import numbers
from dataclasses import dataclass

from raytracer.core.math.tolerance import EPSILON, approx_equal


def _raw(other) -> float | None:
    """Извлечение float из Scalar или вещественного числа (None для прочих типов)."""
    if isinstance(other, Scalar):
        return other.value
    if isinstance(other, numbers.Real):
        return float(other)
    return None


def _divide(a: float, b: float) -> float:
    # IEEE-754 вместо ZeroDivisionError
    if b == 0.0:
        if a == 0.0 or math.isnan(a):
            return math.nan
        return math.copysign(math.inf, a) * math.copysign(1.0, b)
    return a / b


@dataclass(frozen=True, eq=False)
class Scalar:
    """
    Толерантный скаляр.

    Сравнение (==, <, <=, >, >=) работает и со Scalar, и с int/float.
    Упорядочивание согласовано с равенством: значения в пределах EPSILON
    не считаются ни меньше, ни больше друг друга.
    """

    value: float

    def __post_init__(self) -> None:
        object.__setattr__(self, "value", float(self.value))

    @classmethod
    def of(cls, value: "Scalar | float") -> "Scalar":
        """Приведение к Scalar без лишней копии."""
        if isinstance(value, Scalar):
            return value
        raw = _raw(value)
        if raw is None:
            raise TypeError(f"Expected a real number, got {type(value).__name__}")
        return cls(raw)

    # -------------------------------------------------------------------------
    # Конверсии
    # -------------------------------------------------------------------------

    def __float__(self) -> float:
        return self.value

    def to_number(self) -> float:
        return self.value

    def __abs__(self) -> "Scalar":
        return Scalar(abs(self.value))

    def is_nan(self) -> bool:
        return math.isnan(self.value)

    # -------------------------------------------------------------------------
    # Сравнения
    # -------------------------------------------------------------------------

    __hash__ = None  # type: ignore[assignment]

    def __eq__(self, other) -> bool:
        raw = _raw(other)
        if raw is None:
            return NotImplemented
        return approx_equal(self.value, raw, EPSILON)

    def __ne__(self, other) -> bool:
        raw = _raw(other)
        if raw is None:
            return NotImplemented
        return not approx_equal(self.value, raw, EPSILON)

    def __lt__(self, other) -> bool:
        raw = _raw(other)
        if raw is None:
            return NotImplemented
        return self.value < raw and not approx_equal(self.value, raw, EPSILON)

    def __le__(self, other) -> bool:
        raw = _raw(other)
        if raw is None:
            return NotImplemented
        return self.value < raw or approx_equal(self.value, raw, EPSILON)

    def __gt__(self, other) -> bool:
        raw = _raw(other)
        if raw is None:
            return NotImplemented
        return self.value > raw and not approx_equal(self.value, raw, EPSILON)

    def __ge__(self, other) -> bool:
        raw = _raw(other)
        if raw is None:
            return NotImplemented
        return self.value > raw or approx_equal(self.value, raw, EPSILON)

    # -------------------------------------------------------------------------
    # Арифметика
    # -------------------------------------------------------------------------

    def __neg__(self) -> "Scalar":
        return Scalar(-self.value)

    def __add__(self, other) -> "Scalar":
        raw = _raw(other)
        if raw is None:
            return NotImplemented
        return Scalar(self.value + raw)

    def __radd__(self, other) -> "Scalar":
        raw = _raw(other)
        if raw is None:
            return NotImplemented
        return Scalar(raw + self.value)

    def __sub__(self, other) -> "Scalar":
        raw = _raw(other)
        if raw is None:
            return NotImplemented
        return Scalar(self.value - raw)

    def __rsub__(self, other) -> "Scalar":
        raw = _raw(other)
        if raw is None:
            return NotImplemented
        return Scalar(raw - self.value)

    def __mul__(self, other) -> "Scalar":
        raw = _raw(other)
        if raw is None:
            return NotImplemented
        return Scalar(self.value * raw)

    def __rmul__(self, other) -> "Scalar":
        raw = _raw(other)
        if raw is None:
            return NotImplemented
        return Scalar(raw * self.value)

    def __truediv__(self, other) -> "Scalar":
        raw = _raw(other)
        if raw is None:
            return NotImplemented
        return Scalar(_divide(self.value, raw))

    def __rtruediv__(self, other) -> "Scalar":
        raw = _raw(other)
        if raw is None:
            return NotImplemented
        return Scalar(_divide(raw, self.value))

    def pow(self, exponent: int) -> "Scalar":
        """
        Возведение в целую степень.

        Raises:
            TypeError: Если exponent не int
        """
        if isinstance(exponent, bool) or not isinstance(exponent, int):
            raise TypeError(f"exponent must be an integer, got {type(exponent).__name__}")
        odd = exponent % 2 == 1
        try:
            return Scalar(self.value**exponent)
        except ZeroDivisionError:
            # 0 в отрицательной степени
            sign = math.copysign(1.0, self.value) if odd else 1.0
            return Scalar(sign * math.inf)
        except OverflowError:
            sign = -1.0 if self.value < 0 and odd else 1.0
            return Scalar(sign * math.inf)

    def __pow__(self, exponent: int) -> "Scalar":
        if isinstance(exponent, bool) or not isinstance(exponent, int):
            return NotImplemented
        return self.pow(exponent)

    def sqrt(self) -> "Scalar":
        """
        Квадратный корень. Для отрицательных значений — NaN.

        Examples:
            >>> Scalar(9.0).sqrt() == 3.0
            True
            >>> Scalar(-1.0).sqrt().is_nan()
            True
        """
        if self.value < 0:
            return Scalar(math.nan)
        return Scalar(math.sqrt(self.value))
