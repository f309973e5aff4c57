"""
Тесты для модуля Numerical Safeguards

Проверяет:
1. Epsilon-константы
2. Сравнение с нулём (точное и с толерантностью)
3. Epsilon-сравнения float
4. Трёхзначное сравнение для ветвления по знаку
5. Валидацию толерантности
"""

import pytest

from calckernel.core.math.numerical_safeguards import (
    EPS_FLOAT_COMPARE_ABS,
    EPS_FLOAT_COMPARE_REL,
    EPS_SINGULAR_DEFAULT,
    EPS_ZERO_DEFAULT,
    compare_with_tolerance,
    is_close,
    is_valid_float,
    is_zero,
    validate_tolerance,
)


class TestConstants:
    """Тесты epsilon-констант"""

    def test_default_comparisons_are_exact(self):
        assert EPS_SINGULAR_DEFAULT == 0.0
        assert EPS_ZERO_DEFAULT == 0.0

    def test_float_compare_tolerances(self):
        assert EPS_FLOAT_COMPARE_REL == 1e-9
        assert EPS_FLOAT_COMPARE_ABS == 1e-12


class TestIsZero:
    """Тесты для is_zero"""

    def test_exact_by_default(self):
        assert is_zero(0.0)
        assert is_zero(-0.0)
        assert not is_zero(1e-300)
        assert not is_zero(-5e-324)

    def test_with_tolerance(self):
        assert is_zero(1e-13, tol=1e-12)
        assert is_zero(-1e-12, tol=1e-12)
        assert not is_zero(2e-12, tol=1e-12)

    def test_nan_is_not_zero(self):
        assert not is_zero(float("nan"))
        assert not is_zero(float("nan"), tol=1.0)


class TestIsClose:
    """Тесты для is_close"""

    def test_close_values(self):
        assert is_close(1.0, 1.0 + 1e-10)
        assert is_close(0.0, 1e-13)
        assert is_close(1e10, 1e10 + 1.0)

    def test_distant_values(self):
        assert not is_close(1.0, 1.1)
        assert not is_close(0.0, 1e-6)

    def test_custom_tolerance(self):
        assert is_close(1.0, 1.01, rel_tol=0.1)
        assert not is_close(1.0, 1.01, rel_tol=1e-3, abs_tol=0.0)


class TestCompareWithTolerance:
    """Тесты для compare_with_tolerance"""

    def test_ordering(self):
        assert compare_with_tolerance(1.0, 2.0) == -1
        assert compare_with_tolerance(2.0, 1.0) == 1
        assert compare_with_tolerance(3.0, 3.0) == 0

    def test_exact_by_default(self):
        assert compare_with_tolerance(1e-15, 0.0) == 1
        assert compare_with_tolerance(-1e-15, 0.0) == -1

    def test_with_tolerance(self):
        assert compare_with_tolerance(1.0, 1.0 + 1e-13, tol=1e-12) == 0
        assert compare_with_tolerance(-1e-13, 0.0, tol=1e-12) == 0

    def test_nan_is_positive_branch(self):
        assert compare_with_tolerance(float("nan"), 0.0) == 1


class TestValidation:
    """Тесты для is_valid_float и validate_tolerance"""

    def test_is_valid_float(self):
        assert is_valid_float(0.0)
        assert is_valid_float(-1e308)
        assert not is_valid_float(float("nan"))
        assert not is_valid_float(float("inf"))
        assert not is_valid_float(float("-inf"))

    def test_valid_tolerance(self):
        validate_tolerance(0.0, "eps")
        validate_tolerance(1e-9, "eps")

    def test_negative_tolerance(self):
        with pytest.raises(ValueError, match="eps must be non-negative"):
            validate_tolerance(-1e-9, "eps")

    def test_nan_inf_tolerance(self):
        with pytest.raises(ValueError, match="NaN/Inf"):
            validate_tolerance(float("nan"), "eps")
        with pytest.raises(ValueError, match="NaN/Inf"):
            validate_tolerance(float("inf"), "eps")
