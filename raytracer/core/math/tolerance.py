"""
Tolerance — Epsilon-сравнения и валидация целых

Модуль задаёт единственную толерантность сравнения для всей геометрии и цвета
и набор примитивов поверх неё:
- Epsilon-сравнения float (абсолютная толерантность)
- Валидация целочисленных размеров и координат

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. a ≈ b тогда и только тогда, когда |a - b| < EPSILON (строгое неравенство)
2. Epsilon-равенство НЕ транзитивно вблизи границы толерантности.
   Это принятое приближение: вызывающий код на него полагается.
3. Размеры canvas и координаты пикселей подчиняются одному правилу целых
"""

import numbers
from typing import Final

# =============================================================================
# EPSILON-ПАРАМЕТРЫ
# =============================================================================

# Абсолютная толерантность для всех сравнений координат и каналов.
# Точности достаточно для ray tracer.
EPSILON: Final[float] = 1e-5


# =============================================================================
# EPSILON-СРАВНЕНИЯ FLOAT
# =============================================================================


def _check_eps(eps: float) -> None:
    if eps <= 0:
        raise ValueError(f"eps must be positive, got {eps}")


def approx_equal(a: float, b: float, eps: float = EPSILON) -> bool:
    """
    Сравнение float с абсолютной толерантностью.

    Алгоритм:
        abs(a - b) < eps

    Args:
        a: Первое значение
        b: Второе значение
        eps: Абсолютная толерантность (default: EPSILON)

    Returns:
        True если значения отличаются меньше чем на eps

    Examples:
        >>> approx_equal(1.0, 1.000001)
        True
        >>> approx_equal(1.0, 1.00001)
        False
        >>> approx_equal(float("nan"), float("nan"))
        False
    """
    _check_eps(eps)
    return abs(a - b) < eps


def is_zero(value: float, eps: float = EPSILON) -> bool:
    """
    Проверка, близко ли значение к нулю с учётом толерантности.

    Returns:
        True если abs(value) < eps
    """
    _check_eps(eps)
    return abs(value) < eps


# =============================================================================
# ВАЛИДАЦИЯ
# =============================================================================


def require_integer(value: int, name: str) -> int:
    """
    Проверка, что значение целое (int или numbers.Integral, например numpy.int64).

    bool отвергается, хотя формально является подклассом int.

    Returns:
        Значение, приведённое к int

    Raises:
        TypeError: Если value не целое
    """
    if isinstance(value, bool) or not isinstance(value, numbers.Integral):
        raise TypeError(f"{name} must be an integer, got {type(value).__name__}")
    return int(value)


def validate_non_negative_int(value: int, name: str) -> int:
    """
    Валидация, что значение является неотрицательным целым.

    Returns:
        Значение, приведённое к int

    Raises:
        TypeError: Если value не целое
        ValueError: Если value < 0
    """
    result = require_integer(value, name)

    if result < 0:
        raise ValueError(f"{name} must be non-negative, got {result}")

    return result
