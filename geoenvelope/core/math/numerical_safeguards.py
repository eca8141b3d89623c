"""
Numerical Safeguards — Проверки чисел для координат и параметров

Модуль обеспечивает единые проверки числовых значений:
- NaN/Inf детекция для границ Envelope и координат
- Строгая проверка типа координаты (без приведения строк и bool)
- Валидация неотрицательных параметров (radius)
- Сравнение float с учётом машинной точности (для тестов и клиентов)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. NaN/Inf никогда не попадают в Envelope
2. bool не считается координатой, хотя bool является подклассом int
3. Строки никогда не приводятся к числам
"""

import math
import numbers
from typing import Any, Final

from geoenvelope.core.errors import InvalidArgument

# =============================================================================
# EPSILON-ПАРАМЕТРЫ
# =============================================================================

# Относительная толерантность для is_close
EPS_FLOAT_COMPARE_REL: Final[float] = 1e-9

# Абсолютная толерантность для is_close
EPS_FLOAT_COMPARE_ABS: Final[float] = 1e-12


# =============================================================================
# NaN/Inf ДЕТЕКЦИЯ
# =============================================================================


def is_valid_float(value: float) -> bool:
    """
    Проверка, является ли float валидным (не NaN, не Inf).

    Args:
        value: Проверяемое значение

    Returns:
        True если значение валидное (finite), False если NaN или Inf
    """
    return math.isfinite(value)


def is_coordinate_number(value: Any) -> bool:
    """
    Проверка, может ли значение быть координатой.

    Координата — это конечное вещественное число (int, float, Fraction,
    numpy scalar). bool и Decimal координатами не считаются.

    Args:
        value: Проверяемое значение

    Returns:
        True если value можно использовать как координату без приведения

    Examples:
        >>> is_coordinate_number(2)
        True
        >>> is_coordinate_number(-2.5)
        True
        >>> is_coordinate_number("2")
        False
        >>> is_coordinate_number(True)
        False
        >>> is_coordinate_number(float("nan"))
        False
        >>> is_coordinate_number(10**400)
        False
    """
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        return False
    try:
        return is_valid_float(value)
    except OverflowError:
        # int или Fraction вне диапазона float
        return False


# =============================================================================
# EPSILON-СРАВНЕНИЯ FLOAT
# =============================================================================


def is_close(
    a: float,
    b: float,
    rel_tol: float = EPS_FLOAT_COMPARE_REL,
    abs_tol: float = EPS_FLOAT_COMPARE_ABS,
) -> bool:
    """
    Сравнение float с учётом машинной точности.

    Алгоритм:
        abs(a - b) <= max(rel_tol * max(abs(a), abs(b)), abs_tol)

    Args:
        a: Первое значение
        b: Второе значение
        rel_tol: Относительная толерантность (default: 1e-9)
        abs_tol: Абсолютная толерантность (default: 1e-12)

    Returns:
        True если значения близки с учётом толерантности
    """
    return math.isclose(a, b, rel_tol=rel_tol, abs_tol=abs_tol)


# =============================================================================
# ВАЛИДАЦИЯ ПАРАМЕТРОВ
# =============================================================================


def validate_non_negative(value: Any, name: str) -> None:
    """
    Валидация, что параметр — конечное неотрицательное число.

    Ноль допустим.

    Args:
        value: Проверяемое значение
        name: Имя параметра (для сообщения об ошибке)

    Raises:
        InvalidArgument: Если value не число, NaN/Inf или value < 0
    """
    if not is_coordinate_number(value):
        raise InvalidArgument(f"{name} must be a finite real number, got {value!r}")

    if value < 0:
        raise InvalidArgument(f"{name} must be non-negative, got {value}")
