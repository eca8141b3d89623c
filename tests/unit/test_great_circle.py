"""
Тесты для Great Circle distance

Проверяет:
1. Эталонные расстояния (меридиан, экватор, антиподы)
2. Симметрию и нулевое расстояние
3. Масштабирование радиусом
4. Валидацию входа
"""

import math

import pytest

from geoenvelope.core.errors import InvalidArgument, InvalidInput
from geoenvelope.core.math.great_circle import EARTH_MEAN_RADIUS_M, distance


class TestDistance:
    """Тесты distance"""

    def test_meridian_arc(self) -> None:
        """13 градусов широты по меридиану"""
        assert round(distance((2, -2), (2, 11))) == 1445536

    def test_one_degree_on_equator(self) -> None:
        expected = EARTH_MEAN_RADIUS_M * math.pi / 180.0
        assert distance((0, 0), (1, 0)) == pytest.approx(expected, rel=1e-12)

    def test_antipodes(self) -> None:
        """Половина окружности"""
        assert distance((0, 0), (180, 0)) == pytest.approx(math.pi * EARTH_MEAN_RADIUS_M)

    def test_zero_distance(self) -> None:
        assert distance((10, 10), (10, 10)) == 0.0

    def test_symmetric(self) -> None:
        a, b = (2, -2), (20, 11)
        assert distance(a, b) == pytest.approx(distance(b, a))

    def test_longitude_converges_at_pole(self) -> None:
        """На полюсе разница долгот не даёт расстояния"""
        assert distance((0, 90), (120, 90)) == pytest.approx(0.0, abs=1e-6)

    def test_custom_radius_scales_linearly(self) -> None:
        base = distance((2, -2), (20, -2))
        assert distance((2, -2), (20, -2), radius_m=1.0) == pytest.approx(base / EARTH_MEAN_RADIUS_M)

    @pytest.mark.parametrize("radius", [0, -1, float("nan"), "6371000"])
    def test_invalid_radius(self, radius) -> None:
        with pytest.raises(InvalidArgument):
            distance((0, 0), (1, 1), radius_m=radius)

    @pytest.mark.parametrize("point", [(0,), (0, 0, 0), ("0", 0), (0, float("inf")), None])
    def test_invalid_point(self, point) -> None:
        with pytest.raises(InvalidInput):
            distance(point, (1, 1))
