"""
Тесты алгебраических свойств Envelope

Проверяемые инварианты:
1. empty() — нейтральный элемент expand
2. expand коммутативен и ассоциативен
3. from_geo совпадает со свёрткой expand по позициям
4. contains ⇒ intersects для непустых операндов
5. within(a, b) == contains(b, a) для любых входов
"""

import itertools
from functools import reduce

import pytest

from geoenvelope import Envelope, contains, intersects, within

# =============================================================================
# ВЫБОРКА
# =============================================================================

ENVELOPES = [
    Envelope.empty(),
    Envelope(min_x=0, min_y=0, max_x=0, max_y=0),
    Envelope(min_x=2, min_y=-2, max_x=20, max_y=11),
    Envelope(min_x=-1, min_y=-5, max_x=23, max_y=14),
    Envelope(min_x=0, min_y=3, max_x=7, max_y=4),
    Envelope(min_x=-100.5, min_y=40.25, max_x=-99.75, max_y=41),
    Envelope(min_x=30, min_y=30, max_x=31, max_y=31),
]

NON_EMPTY = [env for env in ENVELOPES if not env.is_empty()]

POINT_SETS = [
    [(2, -2), (20, -2), (11, 11), (2, -2)],
    [(1, 3), (2, -1), (0, -1), (1, 3)],
    [(0, 0)],
    [(-180, -90), (180, 90), (0.5, 0.25)],
    [(5, 5), (5, 5), (5, 5)],
]


# =============================================================================
# ТЕСТЫ: expand
# =============================================================================


class TestExpandAlgebra:
    """Нейтральный элемент, коммутативность и ассоциативность expand"""

    @pytest.mark.parametrize("env", ENVELOPES)
    def test_empty_is_identity(self, env: Envelope) -> None:
        assert Envelope.empty().expand(env) == env
        assert env.expand(Envelope.empty()) == env

    @pytest.mark.parametrize("a, b", list(itertools.product(ENVELOPES, repeat=2)))
    def test_commutative(self, a: Envelope, b: Envelope) -> None:
        assert a.expand(b) == b.expand(a)

    @pytest.mark.parametrize("a, b, c", list(itertools.combinations(ENVELOPES, 3)))
    def test_associative(self, a: Envelope, b: Envelope, c: Envelope) -> None:
        assert a.expand(b).expand(c) == a.expand(b.expand(c))

    @pytest.mark.parametrize("a, b", list(itertools.product(NON_EMPTY, repeat=2)))
    def test_expand_contains_both(self, a: Envelope, b: Envelope) -> None:
        """Результат expand содержит оба операнда"""
        merged = a.expand(b)
        assert merged.contains(a)
        assert merged.contains(b)


class TestFromGeoFold:
    """from_geo эквивалентен свёртке expand по позициям"""

    @pytest.mark.parametrize("points", POINT_SETS)
    def test_fold_matches_from_geo(self, points) -> None:
        folded = reduce(lambda env, p: env.expand(p), points, Envelope.empty())
        assert Envelope.from_geo(points) == folded

    @pytest.mark.parametrize("points", POINT_SETS)
    def test_fold_order_irrelevant(self, points) -> None:
        assert Envelope.from_geo(points) == Envelope.from_geo(list(reversed(points)))

    def test_partitioned_fold(self) -> None:
        """Свёртка по частям даёт тот же результат"""
        points = [p for group in POINT_SETS for p in group]
        left = Envelope.from_geo(points[:5])
        right = Envelope.from_geo(points[5:])
        assert left.expand(right) == Envelope.from_geo(points)

    def test_single_point_is_not_empty(self) -> None:
        assert Envelope.empty().is_empty()
        assert not Envelope.from_geo((7, -7)).is_empty()


# =============================================================================
# ТЕСТЫ: предикаты
# =============================================================================


class TestPredicateLaws:
    """Связи между contains, within и intersects"""

    @pytest.mark.parametrize("a, b", list(itertools.product(NON_EMPTY, repeat=2)))
    def test_contains_implies_intersects(self, a: Envelope, b: Envelope) -> None:
        if contains(a, b):
            assert intersects(a, b)

    @pytest.mark.parametrize("a, b", list(itertools.product(ENVELOPES, repeat=2)))
    def test_within_is_inverse_of_contains(self, a: Envelope, b: Envelope) -> None:
        assert within(a, b) == contains(b, a)
        assert a.within(b) == b.contains(a)

    @pytest.mark.parametrize("a, b", list(itertools.product(ENVELOPES, repeat=2)))
    def test_intersects_symmetric(self, a: Envelope, b: Envelope) -> None:
        assert a.intersects(b) == b.intersects(a)

    @pytest.mark.parametrize("env", NON_EMPTY)
    def test_contains_itself(self, env: Envelope) -> None:
        assert env.contains(env)
        assert env.intersects(env)

    @pytest.mark.parametrize("env", NON_EMPTY)
    def test_expand_by_contains_input(self, env: Envelope) -> None:
        assert env.expand_by(1.5).contains(env)
