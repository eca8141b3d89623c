"""
Envelope — Ограничивающий прямоугольник геометрии

Immutable Pydantic модель axis-aligned bounding box и операции над ней:
- Построение из произвольной геометрии (from_geo) и пустой Envelope (empty)
- Расширение геометрией, другим Envelope или радиусом (expand, expand_by)
- Метрики: width, height, area, center и их great-circle варианты
- Предикаты: contains, within, intersects

Envelope — дешёвое приближение пространственных отношений, фильтр перед
точными (и дорогими) геометрическими алгоритмами.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Пустой Envelope: все четыре границы None одновременно
2. Непустой Envelope: все границы конечные числа, min_x <= max_x, min_y <= max_y
3. Частично пустой Envelope невозможен (ValidationError)
4. Ноль — валидная координата, пустота выражается только через None
5. Каждая операция возвращает новый Envelope, вход не изменяется

ПОЛИТИКА ДЛЯ ПУСТОГО ENVELOPE:
- expand: пустой Envelope — нейтральный элемент
- expand_by: пустой Envelope возвращается без изменений
- метрики (width, area, center, *_gc): EmptyEnvelopeError
- intersects: False, если хотя бы один операнд пустой
- contains(a, empty): True для любого a; contains(empty, b): False для непустого b
"""

from typing import Any, Optional, Sequence, Tuple

from pydantic import BaseModel, Field, model_validator

from geoenvelope.core.contracts import validate_envelope
from geoenvelope.core.domain.geometry import iter_positions
from geoenvelope.core.errors import EmptyEnvelopeError, InvalidArgument, InvalidInput
from geoenvelope.core.math import great_circle
from geoenvelope.core.math.numerical_safeguards import (
    is_coordinate_number,
    is_valid_float,
    validate_non_negative,
)


# =============================================================================
# ENVELOPE MODEL
# =============================================================================


class Envelope(BaseModel):
    """
    Axis-aligned bounding box.

    Immutable модель (frozen=True): все операции создают новый экземпляр.
    strict=True: строки и bool не приводятся к числам.

    Examples:
        >>> Envelope.from_geo({"coordinates": [[(2, -2), (20, -2), (11, 11), (2, -2)]]})
        Envelope(min_x=2.0, min_y=-2.0, max_x=20.0, max_y=11.0)
        >>> Envelope.empty().is_empty()
        True
    """

    min_x: Optional[float] = Field(None, description="Левая граница (None для пустого)")
    min_y: Optional[float] = Field(None, description="Нижняя граница (None для пустого)")
    max_x: Optional[float] = Field(None, description="Правая граница (None для пустого)")
    max_y: Optional[float] = Field(None, description="Верхняя граница (None для пустого)")

    model_config = {"frozen": True, "strict": True}

    @model_validator(mode="after")
    def validate_bounds(self) -> "Envelope":
        """
        Проверка инвариантов границ.

        Все границы None (пустой) либо все конечные и упорядоченные.
        """
        bounds = (self.min_x, self.min_y, self.max_x, self.max_y)
        absent = [b is None for b in bounds]

        if all(absent):
            return self

        if any(absent):
            raise ValueError(
                f"Envelope bounds must be all present or all absent, got {bounds}"
            )

        if not all(is_valid_float(b) for b in bounds):
            raise ValueError(f"Envelope bounds must be finite, got {bounds}")

        if self.min_x > self.max_x:
            raise ValueError(f"min_x {self.min_x} exceeds max_x {self.max_x}")

        if self.min_y > self.max_y:
            raise ValueError(f"min_y {self.min_y} exceeds max_y {self.max_y}")

        return self

    # -------------------------------------------------------------------------
    # Построение
    # -------------------------------------------------------------------------

    @classmethod
    def empty(cls) -> "Envelope":
        """
        Envelope без протяжённости.

        Отличается от Envelope вокруг одной точки: у точки границы — числа
        (площадь нулевая), у пустого — None.
        """
        return cls()

    @classmethod
    def from_geo(cls, geo: Any) -> "Envelope":
        """
        Envelope, покрывающий все позиции геометрии.

        Эквивалентно свёртке expand по каждой позиции начиная с empty();
        порядок свёртки не важен (min/max коммутативны и ассоциативны).

        Args:
            geo: Envelope, позиция, последовательность позиций или геометрия
                 с coordinates / __geo_interface__

        Returns:
            Envelope (пустой, если у геометрии нет позиций)

        Raises:
            InvalidInput: Нечисловая координата или неподдерживаемый вход

        Examples:
            >>> Envelope.from_geo((1, 3))
            Envelope(min_x=1.0, min_y=3.0, max_x=1.0, max_y=3.0)
            >>> Envelope.from_geo([]).is_empty()
            True
        """
        if isinstance(geo, Envelope):
            return geo

        min_x = min_y = max_x = max_y = None
        for x, y in iter_positions(geo):
            if min_x is None:
                min_x, min_y, max_x, max_y = x, y, x, y
                continue
            min_x = min(min_x, x)
            min_y = min(min_y, y)
            max_x = max(max_x, x)
            max_y = max(max_y, y)

        if min_x is None:
            return cls.empty()

        return cls(min_x=float(min_x), min_y=float(min_y), max_x=float(max_x), max_y=float(max_y))

    @classmethod
    def from_point_radius(cls, point: Any, radius: float) -> "Envelope":
        """
        Квадрат со стороной 2 * radius вокруг точки.

        Raises:
            InvalidInput: Если point не пара конечных чисел
            InvalidArgument: Если radius < 0, NaN/Inf или не число
        """
        return cls.from_geo(point).expand_by(radius)

    @classmethod
    def from_bbox(cls, bbox: Optional[Sequence[float]]) -> "Envelope":
        """
        Envelope из GeoJSON bbox [min_x, min_y, max_x, max_y].

        None или пустой bbox дают пустой Envelope.

        Raises:
            InvalidInput: Неверная длина или нечисловой элемент
        """
        if bbox is None or len(bbox) == 0:
            return cls.empty()

        if len(bbox) != 4:
            raise InvalidInput(f"bbox must have 4 items, got {len(bbox)}: {bbox!r}")

        if not all(is_coordinate_number(v) for v in bbox):
            raise InvalidInput(f"bbox must contain finite numbers, got {bbox!r}")

        min_x, min_y, max_x, max_y = bbox
        if min_x > max_x or min_y > max_y:
            raise InvalidInput(f"bbox bounds are inverted: {bbox!r}")

        return cls(min_x=float(min_x), min_y=float(min_y), max_x=float(max_x), max_y=float(max_y))

    @classmethod
    def from_dict(cls, data: dict) -> "Envelope":
        """
        Envelope из JSON данных после проверки контрактом envelope.json.

        Raises:
            jsonschema.ValidationError: Данные не соответствуют контракту
        """
        validate_envelope(data)
        return cls(**data)

    # -------------------------------------------------------------------------
    # Представления
    # -------------------------------------------------------------------------

    def to_bbox(self) -> Optional[list]:
        """GeoJSON bbox [min_x, min_y, max_x, max_y] или None для пустого."""
        if self.is_empty():
            return None
        return [self.min_x, self.min_y, self.max_x, self.max_y]

    def to_dict(self) -> dict:
        """JSON-совместимое представление (контракт envelope.json)."""
        return self.model_dump()

    @property
    def __geo_interface__(self) -> dict:
        """
        Envelope как GeoJSON Polygon из углов.

        Пустой Envelope — Polygon без колец. Позволяет вкладывать
        Envelope в любую геометрию, принимаемую from_geo.
        """
        if self.is_empty():
            return {"type": "Polygon", "coordinates": []}
        ring = [
            (self.min_x, self.min_y),
            (self.max_x, self.min_y),
            (self.max_x, self.max_y),
            (self.min_x, self.max_y),
            (self.min_x, self.min_y),
        ]
        return {"type": "Polygon", "coordinates": [ring]}

    # -------------------------------------------------------------------------
    # Пустота и расширение
    # -------------------------------------------------------------------------

    def is_empty(self) -> bool:
        """True если у Envelope нет протяжённости (все границы None)."""
        return (
            self.min_x is None
            and self.min_y is None
            and self.max_x is None
            and self.max_y is None
        )

    def expand(self, other: Any) -> "Envelope":
        """
        Новый Envelope, дополнительно покрывающий other.

        other может быть позицией, Envelope или любой геометрией.
        Пустой Envelope — нейтральный элемент: expand(empty, X) == X.

        Examples:
            >>> a = Envelope(min_x=0, min_y=-2, max_x=20, max_y=11)
            >>> a.expand(Envelope(min_x=2, min_y=-3, max_x=12, max_y=-2))
            Envelope(min_x=0.0, min_y=-3.0, max_x=20.0, max_y=11.0)
        """
        other_env = _coerce(other)

        if self.is_empty():
            return other_env
        if other_env.is_empty():
            return self

        return Envelope(
            min_x=min(self.min_x, other_env.min_x),
            min_y=min(self.min_y, other_env.min_y),
            max_x=max(self.max_x, other_env.max_x),
            max_y=max(self.max_y, other_env.max_y),
        )

    def expand_by(self, radius: float) -> "Envelope":
        """
        Новый Envelope, расширенный на radius в обе стороны по каждой оси.

        radius == 0 допустим (результат равен исходному).

        Raises:
            InvalidArgument: Если radius < 0, NaN/Inf, не число или
                             расширенные границы выходят за диапазон float
        """
        validate_non_negative(radius, "radius")

        if self.is_empty():
            return self

        bounds = (
            self.min_x - radius,
            self.min_y - radius,
            self.max_x + radius,
            self.max_y + radius,
        )
        if not all(is_valid_float(b) for b in bounds):
            raise InvalidArgument(f"radius {radius} overflows Envelope bounds: {bounds}")

        min_x, min_y, max_x, max_y = bounds
        return Envelope(min_x=min_x, min_y=min_y, max_x=max_x, max_y=max_y)

    # -------------------------------------------------------------------------
    # Метрики
    # -------------------------------------------------------------------------

    def _require_extent(self, metric: str) -> None:
        if self.is_empty():
            raise EmptyEnvelopeError(f"{metric} is undefined for an empty Envelope")

    def width(self) -> float:
        """Расстояние от левой границы до правой."""
        self._require_extent("width")
        return self.max_x - self.min_x

    def height(self) -> float:
        """Расстояние от нижней границы до верхней."""
        self._require_extent("height")
        return self.max_y - self.min_y

    def area(self) -> float:
        """Площадь: width * height."""
        self._require_extent("area")
        return self.width() * self.height()

    def center(self) -> Tuple[float, float]:
        """Середина каждой оси: ((min_x + max_x) / 2, (min_y + max_y) / 2)."""
        self._require_extent("center")
        return (
            (self.min_x + self.max_x) / 2.0,
            (self.min_y + self.max_y) / 2.0,
        )

    def width_gc(self) -> float:
        """
        Ширина в метрах для границ в градусах (longitude, latitude).

        Среднее great-circle расстояний по нижней и верхней границам:
        вне экватора они различаются из-за схождения меридианов.
        """
        self._require_extent("width_gc")
        bottom = great_circle.distance((self.min_x, self.min_y), (self.max_x, self.min_y))
        top = great_circle.distance((self.min_x, self.max_y), (self.max_x, self.max_y))
        return (bottom + top) / 2.0

    def height_gc(self) -> float:
        """
        Высота в метрах для границ в градусах (longitude, latitude).

        На сфере длина дуги меридиана не зависит от долготы,
        поэтому считается одна (западная) граница.
        """
        self._require_extent("height_gc")
        return great_circle.distance((self.min_x, self.min_y), (self.min_x, self.max_y))

    def area_gc(self) -> float:
        """
        Оценка площади в квадратных метрах: width_gc * height_gc.

        Это приближение, а не площадь сферического многоугольника.
        """
        self._require_extent("area_gc")
        return self.width_gc() * self.height_gc()

    # -------------------------------------------------------------------------
    # Предикаты
    # -------------------------------------------------------------------------

    def contains(self, other: Any) -> bool:
        """
        True если other целиком лежит внутри Envelope (границы включительно).

        Для точки — проверка point-in-box.
        Пустой other содержится в любом Envelope; пустой Envelope
        не содержит ничего, кроме пустого.
        """
        other_env = _coerce(other)

        if other_env.is_empty():
            return True
        if self.is_empty():
            return False

        return (
            self.min_x <= other_env.min_x
            and self.min_y <= other_env.min_y
            and self.max_x >= other_env.max_x
            and self.max_y >= other_env.max_y
        )

    def within(self, other: Any) -> bool:
        """Обратное отношение к contains: a.within(b) == contains(b, a)."""
        return _coerce(other).contains(self)

    def intersects(self, other: Any) -> bool:
        """
        True если Envelope пересекаются или касаются.

        Пустой Envelope не пересекается ни с чем.
        """
        other_env = _coerce(other)

        if self.is_empty() or other_env.is_empty():
            return False

        if self.min_x > other_env.max_x:
            return False
        if self.max_x < other_env.min_x:
            return False
        if self.min_y > other_env.max_y:
            return False
        if self.max_y < other_env.min_y:
            return False

        return True


def _coerce(geo: Any) -> Envelope:
    """Envelope как есть, любая другая геометрия — через from_geo."""
    if isinstance(geo, Envelope):
        return geo
    return Envelope.from_geo(geo)


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def empty() -> Envelope:
    """Пустой Envelope."""
    return Envelope.empty()


def from_geo(geo: Any) -> Envelope:
    """Envelope произвольной геометрии (см. Envelope.from_geo)."""
    return Envelope.from_geo(geo)


def expand(geo: Any, other: Any) -> Envelope:
    """Envelope, покрывающий обе геометрии."""
    return _coerce(geo).expand(other)


def expand_by(geo: Any, radius: float) -> Envelope:
    """Envelope геометрии, расширенный на radius."""
    return _coerce(geo).expand_by(radius)


def contains(a: Any, b: Any) -> bool:
    """
    True если Envelope геометрии a содержит Envelope геометрии b.

    Examples:
        >>> contains([(-1, 3), (-3, -1), (5, -3), (4, 12), (-2, 11), (-1, 3)], (0, 11))
        True
    """
    return _coerce(a).contains(b)


def within(a: Any, b: Any) -> bool:
    """Обратное отношение к contains: within(a, b) == contains(b, a)."""
    return contains(b, a)


def intersects(a: Any, b: Any) -> bool:
    """True если Envelope геометрий a и b пересекаются или касаются."""
    return _coerce(a).intersects(b)
