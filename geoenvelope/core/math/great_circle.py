"""
Great Circle — Расстояние по большому кругу

Сферическая модель Земли, формула haversine.
Точки задаются как (longitude, latitude) в градусах, результат в метрах.

ФОРМУЛА:
    a = sin²(Δφ/2) + cos(φ1) × cos(φ2) × sin²(Δλ/2)
    d = 2 × R × asin(√a)

Это приближение: эллипсоид, высоты и проекции не учитываются.
"""

import math
from typing import Final, Sequence

from geoenvelope.core.errors import InvalidArgument, InvalidInput
from geoenvelope.core.math.numerical_safeguards import is_coordinate_number

# =============================================================================
# КОНСТАНТЫ
# =============================================================================

# Средний радиус Земли (IUGG), метры
EARTH_MEAN_RADIUS_M: Final[float] = 6_371_008.8


# =============================================================================
# DISTANCE
# =============================================================================


def _lon_lat(point: Sequence[float], name: str) -> tuple[float, float]:
    try:
        lon, lat = point
    except (TypeError, ValueError):
        raise InvalidInput(f"{name} must be a (longitude, latitude) pair, got {point!r}")

    if not (is_coordinate_number(lon) and is_coordinate_number(lat)):
        raise InvalidInput(f"{name} must contain finite numbers, got {point!r}")

    return float(lon), float(lat)


def distance(
    a: Sequence[float],
    b: Sequence[float],
    radius_m: float = EARTH_MEAN_RADIUS_M,
) -> float:
    """
    Расстояние по большому кругу между двумя точками.

    Args:
        a: Первая точка (longitude, latitude) в градусах
        b: Вторая точка (longitude, latitude) в градусах
        radius_m: Радиус сферы в метрах (default: EARTH_MEAN_RADIUS_M)

    Returns:
        Расстояние в метрах (>= 0)

    Raises:
        InvalidInput: Если точка не пара конечных чисел
        InvalidArgument: Если radius_m не положительное конечное число

    Examples:
        >>> round(distance((2, -2), (2, 11)))
        1445536
        >>> distance((10, 10), (10, 10))
        0.0
    """
    if not is_coordinate_number(radius_m) or radius_m <= 0:
        raise InvalidArgument(f"radius_m must be a positive finite number, got {radius_m!r}")

    lon1, lat1 = _lon_lat(a, "a")
    lon2, lat2 = _lon_lat(b, "b")

    phi1 = math.radians(lat1)
    phi2 = math.radians(lat2)
    d_phi = math.radians(lat2 - lat1)
    d_lambda = math.radians(lon2 - lon1)

    h = math.sin(d_phi / 2.0) ** 2 + math.cos(phi1) * math.cos(phi2) * math.sin(d_lambda / 2.0) ** 2
    # Ошибки округления могут дать h чуть больше 1 для антиподов
    h = min(1.0, h)

    return 2.0 * radius_m * math.asin(math.sqrt(h))
