"""
Тесты для модуля Numerical Safeguards

Проверяет:
1. NaN/Inf детекцию
2. Строгую проверку координат (bool, строки, Decimal)
3. Epsilon-сравнения float
4. Валидацию неотрицательных параметров
"""

from decimal import Decimal
from fractions import Fraction

import pytest

from geoenvelope.core.errors import InvalidArgument
from geoenvelope.core.math.numerical_safeguards import (
    EPS_FLOAT_COMPARE_ABS,
    EPS_FLOAT_COMPARE_REL,
    is_close,
    is_coordinate_number,
    is_valid_float,
    validate_non_negative,
)

# =============================================================================
# ТЕСТЫ NaN/Inf
# =============================================================================


class TestIsValidFloat:
    """Тесты для is_valid_float"""

    def test_finite_values(self) -> None:
        assert is_valid_float(0.0)
        assert is_valid_float(-1e300)
        assert is_valid_float(5)

    def test_non_finite_values(self) -> None:
        assert not is_valid_float(float("nan"))
        assert not is_valid_float(float("inf"))
        assert not is_valid_float(float("-inf"))


class TestIsCoordinateNumber:
    """Тесты для is_coordinate_number"""

    @pytest.mark.parametrize("value", [0, -2, 2.5, 1e-12, Fraction(1, 3)])
    def test_accepted(self, value) -> None:
        assert is_coordinate_number(value)

    @pytest.mark.parametrize(
        "value",
        [
            True,
            False,
            "1",
            b"1",
            None,
            Decimal("1.5"),
            1 + 2j,
            float("nan"),
            float("inf"),
            [1],
            10**400,
            Fraction(10**400, 3),
        ],
    )
    def test_rejected(self, value) -> None:
        assert not is_coordinate_number(value)


# =============================================================================
# ТЕСТЫ EPSILON-СРАВНЕНИЙ
# =============================================================================


class TestIsClose:
    """Тесты для is_close"""

    def test_default_tolerances(self) -> None:
        assert EPS_FLOAT_COMPARE_REL == 1e-9
        assert EPS_FLOAT_COMPARE_ABS == 1e-12

    def test_close_values(self) -> None:
        assert is_close(1.0, 1.0 + 1e-10)
        assert is_close(0.0, 1e-13)
        assert is_close(1e10, 1e10 + 1.0)

    def test_distinct_values(self) -> None:
        assert not is_close(1.0, 1.1)
        assert not is_close(0.0, 1e-6)


# =============================================================================
# ТЕСТЫ ВАЛИДАЦИИ
# =============================================================================


class TestValidateNonNegative:
    """Тесты для validate_non_negative"""

    @pytest.mark.parametrize("value", [0, 0.0, 3, 1e-300])
    def test_valid(self, value) -> None:
        validate_non_negative(value, "radius")

    def test_negative(self) -> None:
        with pytest.raises(InvalidArgument, match="radius must be non-negative"):
            validate_non_negative(-1, "radius")

    @pytest.mark.parametrize("value", [float("nan"), float("inf"), "3", None, True, 10**400])
    def test_not_a_finite_number(self, value) -> None:
        with pytest.raises(InvalidArgument, match="radius must be a finite real number"):
            validate_non_negative(value, "radius")

    def test_is_value_error(self) -> None:
        """InvalidArgument совместим с ValueError"""
        with pytest.raises(ValueError):
            validate_non_negative(-0.5, "radius")
