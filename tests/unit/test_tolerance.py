"""
Тесты для модуля Tolerance

Проверяет:
1. Epsilon-сравнения float (строгая граница |a - b| < EPSILON)
2. Валидацию целых размеров и координат (int и numpy-целые, без bool)
"""

import math

import numpy as np
import pytest

from raytracer.core.math.tolerance import (
    EPSILON,
    approx_equal,
    is_zero,
    require_integer,
    validate_non_negative_int,
)


# =============================================================================
# ТЕСТЫ EPSILON-СРАВНЕНИЙ
# =============================================================================


class TestApproxEqual:
    """Тесты для approx_equal"""

    def test_epsilon_value(self) -> None:
        """Толерантность зафиксирована на 1e-5"""
        assert EPSILON == 1e-5

    def test_within_tolerance(self) -> None:
        """Разница меньше EPSILON — равны"""
        assert approx_equal(1.0, 1.000009)
        assert approx_equal(-3.5, -3.500001)
        assert approx_equal(0.0, 9e-6)

    def test_at_or_beyond_tolerance(self) -> None:
        """Разница ≥ EPSILON — не равны"""
        assert not approx_equal(0.0, 1e-5)
        assert not approx_equal(1.0, 1.00002)
        assert not approx_equal(-1.0, 1.0)

    def test_nan_never_equal(self) -> None:
        """NaN не равен ничему, включая NaN"""
        assert not approx_equal(math.nan, math.nan)
        assert not approx_equal(math.nan, 0.0)

    def test_custom_eps(self) -> None:
        """Пользовательская толерантность"""
        assert approx_equal(1.0, 1.05, eps=0.1)
        assert not approx_equal(1.0, 1.05, eps=0.01)

    def test_invalid_eps_raises(self) -> None:
        """Невалидный eps вызывает ошибку"""
        with pytest.raises(ValueError, match="eps must be positive"):
            approx_equal(1.0, 1.0, eps=0.0)

        with pytest.raises(ValueError, match="eps must be positive"):
            is_zero(1.0, eps=-1e-6)

    def test_not_transitive(self) -> None:
        """Epsilon-равенство не транзитивно вблизи границы (принятое приближение)"""
        a, b, c = 0.0, 0.6e-5, 1.2e-5
        assert approx_equal(a, b)
        assert approx_equal(b, c)
        assert not approx_equal(a, c)


class TestIsZero:
    """Тесты для is_zero"""

    def test_zero_and_tiny_values(self) -> None:
        assert is_zero(0.0)
        assert is_zero(-0.0)
        assert is_zero(5e-6)
        assert is_zero(-5e-6)

    def test_non_zero_values(self) -> None:
        assert not is_zero(1e-5)
        assert not is_zero(-0.1)


# =============================================================================
# ТЕСТЫ ВАЛИДАЦИИ
# =============================================================================


class TestValidateNonNegativeInt:
    """Тесты для validate_non_negative_int"""

    def test_valid_values(self) -> None:
        assert validate_non_negative_int(0, "width") == 0
        assert validate_non_negative_int(900, "width") == 900

    def test_negative_raises(self) -> None:
        with pytest.raises(ValueError, match="width must be non-negative"):
            validate_non_negative_int(-1, "width")

    def test_non_integer_raises(self) -> None:
        with pytest.raises(TypeError, match="height must be an integer"):
            validate_non_negative_int(2.0, "height")  # type: ignore[arg-type]

        with pytest.raises(TypeError, match="height must be an integer"):
            validate_non_negative_int(True, "height")


class TestRequireInteger:
    """Тесты для require_integer"""

    def test_python_and_numpy_integers(self) -> None:
        assert require_integer(7, "x") == 7
        assert require_integer(-3, "x") == -3

        result = require_integer(np.int64(5), "x")
        assert result == 5
        assert type(result) is int

    def test_non_integers_rejected(self) -> None:
        for value in (1.0, "1", None, False, np.float64(1.0)):
            with pytest.raises(TypeError, match="x must be an integer"):
                require_integer(value, "x")  # type: ignore[arg-type]

    def test_dimensions_follow_same_rule(self) -> None:
        assert validate_non_negative_int(np.uint16(12), "width") == 12
        with pytest.raises(ValueError, match="width must be non-negative"):
            validate_non_negative_int(np.int32(-1), "width")
