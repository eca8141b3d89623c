"""
Geometry — Модели геометрий и нормализация входа

Два слоя:
1. Immutable Pydantic модели GeoJSON геометрий (Point, LineString, Polygon, ...)
2. Нормализация произвольного входа в поток позиций (x, y)

Нормализация — единственная точка, где разбирается форма входа.
Envelope работает только с потоком позиций и не проверяет типы сам.

Поддерживаемые формы (GeometryKind):
- ENVELOPE:    объект с to_bbox() (Envelope), даёт два угла; пустой ничего
- POSITION:    пара чисел (x, y), допускается третий компонент (игнорируется)
- SEQUENCE:    плоская или вложенная последовательность позиций/геометрий
- COORDINATES: объект с полем coordinates, mapping с ключом "coordinates"
               или объект с протоколом __geo_interface__
- COLLECTION:  GeometryCollection, Feature, FeatureCollection

Новое представление геометрии = новый случай в classify/iter_positions.
"""

import logging
import numbers
from collections.abc import Mapping, Sequence
from enum import Enum
from typing import Annotated, Any, Iterator, List, Literal, Tuple, Union

from pydantic import BaseModel, Field, StrictFloat, TypeAdapter

from geoenvelope.core.contracts import validate_geometry
from geoenvelope.core.errors import InvalidInput
from geoenvelope.core.math.numerical_safeguards import is_coordinate_number

logger = logging.getLogger(__name__)


# =============================================================================
# ENUMS
# =============================================================================


class GeometryKind(str, Enum):
    """Форма геометрического входа"""

    ENVELOPE = "envelope"
    POSITION = "position"
    SEQUENCE = "sequence"
    COORDINATES = "coordinates"
    COLLECTION = "collection"


# =============================================================================
# GEOMETRY MODELS
# =============================================================================

Position = Union[Tuple[StrictFloat, StrictFloat], Tuple[StrictFloat, StrictFloat, StrictFloat]]


class _Geometry(BaseModel):
    """Базовая модель GeoJSON геометрии с протоколом __geo_interface__."""

    model_config = {"frozen": True}

    @property
    def __geo_interface__(self) -> dict:
        return {"type": self.type, "coordinates": self.coordinates}


class Point(_Geometry):
    """Точка: одна позиция."""

    type: Literal["Point"] = "Point"
    coordinates: Position = Field(..., description="Позиция (x, y)")


class MultiPoint(_Geometry):
    """Набор точек."""

    type: Literal["MultiPoint"] = "MultiPoint"
    coordinates: List[Position] = Field(default_factory=list, description="Позиции точек")


class LineString(_Geometry):
    """Ломаная линия."""

    type: Literal["LineString"] = "LineString"
    coordinates: List[Position] = Field(default_factory=list, description="Вершины линии")


class MultiLineString(_Geometry):
    """Набор ломаных."""

    type: Literal["MultiLineString"] = "MultiLineString"
    coordinates: List[List[Position]] = Field(
        default_factory=list, description="Вершины каждой линии"
    )


class Polygon(_Geometry):
    """
    Полигон: внешнее кольцо и опциональные внутренние кольца (дыры).

    Для Envelope значимо только внешнее кольцо, но дыры лежат внутри него
    и на результат не влияют.
    """

    type: Literal["Polygon"] = "Polygon"
    coordinates: List[List[Position]] = Field(
        default_factory=list, description="Кольца полигона (первое — внешнее)"
    )


class MultiPolygon(_Geometry):
    """Набор полигонов."""

    type: Literal["MultiPolygon"] = "MultiPolygon"
    coordinates: List[List[List[Position]]] = Field(
        default_factory=list, description="Кольца каждого полигона"
    )


class GeometryCollection(BaseModel):
    """Разнородный набор геометрий."""

    type: Literal["GeometryCollection"] = "GeometryCollection"
    geometries: List["Geometry"] = Field(default_factory=list, description="Геометрии набора")

    model_config = {"frozen": True}

    @property
    def __geo_interface__(self) -> dict:
        return {
            "type": self.type,
            "geometries": [g.__geo_interface__ for g in self.geometries],
        }


Geometry = Annotated[
    Union[
        Point,
        MultiPoint,
        LineString,
        MultiLineString,
        Polygon,
        MultiPolygon,
        GeometryCollection,
    ],
    Field(discriminator="type"),
]

GeometryCollection.model_rebuild()

_GEOMETRY_ADAPTER: TypeAdapter = TypeAdapter(Geometry)


def parse_geometry(data: Mapping[str, Any]):
    """
    Построение модели геометрии из GeoJSON mapping.

    Данные сначала проверяются контрактом geometry.json, затем
    превращаются в соответствующую модель по полю "type".

    Args:
        data: GeoJSON geometry object (dict)

    Returns:
        Point | MultiPoint | LineString | MultiLineString | Polygon |
        MultiPolygon | GeometryCollection

    Raises:
        jsonschema.ValidationError: Если данные не соответствуют контракту
    """
    validate_geometry(dict(data))
    return _GEOMETRY_ADAPTER.validate_python(data)


# =============================================================================
# НОРМАЛИЗАЦИЯ
# =============================================================================

# Ключи контейнеров GeoJSON, содержащих вложенные геометрии
_COLLECTION_KEYS = ("geometries", "features", "geometry")


def _invalid(message: str) -> InvalidInput:
    logger.debug("Rejected geometry input: %s", message)
    return InvalidInput(message)


def _is_scalar(value: Any) -> bool:
    return value is None or isinstance(value, (numbers.Number, str, bytes))


def _is_sequence(value: Any) -> bool:
    if isinstance(value, (str, bytes)):
        return False
    if isinstance(value, Sequence):
        return True
    # numpy ndarray и подобные массивы (0-d массив считается скаляром)
    return hasattr(value, "__array__") and getattr(value, "ndim", 0) >= 1


def classify(geo: Any) -> GeometryKind:
    """
    Определение формы геометрического входа.

    Args:
        geo: Произвольный вход

    Returns:
        GeometryKind

    Raises:
        InvalidInput: Если вход не сводится к позициям
    """
    if callable(getattr(geo, "to_bbox", None)):
        return GeometryKind.ENVELOPE

    if hasattr(geo, "__geo_interface__"):
        return GeometryKind.COORDINATES

    if isinstance(geo, Mapping):
        if "coordinates" in geo:
            return GeometryKind.COORDINATES
        if any(key in geo for key in _COLLECTION_KEYS):
            return GeometryKind.COLLECTION
        raise _invalid(f"Mapping has no coordinates, geometries or features: {sorted(geo)!r}")

    if hasattr(geo, "coordinates"):
        return GeometryKind.COORDINATES

    if _is_sequence(geo):
        if len(geo) > 0 and _is_scalar(geo[0]):
            return GeometryKind.POSITION
        return GeometryKind.SEQUENCE

    raise _invalid(f"Unsupported geometry input: {type(geo).__name__}")


def to_position(value: Sequence[Any]) -> Tuple[float, float]:
    """
    Проверка и нормализация одной позиции.

    Допустимы 2 или 3 компонента. Третий (высота) проверяется так же,
    как x и y, но в результат не попадает.
    Компоненты возвращаются без приведения типа (int остаётся int).

    Raises:
        InvalidInput: Если длина неверна или компонент не конечное число
    """
    if not 2 <= len(value) <= 3:
        raise _invalid(f"Position must have 2 or 3 components, got {len(value)}: {value!r}")

    if not all(is_coordinate_number(c) for c in value):
        raise _invalid(f"Position must contain finite numbers, got {value!r}")

    return value[0], value[1]


def iter_positions(geo: Any) -> Iterator[Tuple[float, float]]:
    """
    Поток позиций (x, y) произвольного геометрического входа.

    Вложенность любой глубины разворачивается рекурсивно. Пустые
    геометрии дают пустой поток.

    Args:
        geo: Позиция, последовательность, объект/mapping с coordinates,
             объект с __geo_interface__ или GeoJSON контейнер

    Yields:
        Пары (x, y)

    Raises:
        InvalidInput: Если встречена нечисловая координата или
                      неподдерживаемый тип

    Examples:
        >>> list(iter_positions({"coordinates": [(1, 3), (2, -1)]}))
        [(1, 3), (2, -1)]
    """
    kind = classify(geo)

    if kind is GeometryKind.ENVELOPE:
        bbox = geo.to_bbox()
        if bbox is not None:
            yield bbox[0], bbox[1]
            yield bbox[2], bbox[3]

    elif kind is GeometryKind.POSITION:
        yield to_position(geo)

    elif kind is GeometryKind.SEQUENCE:
        for item in geo:
            yield from iter_positions(item)

    elif kind is GeometryKind.COORDINATES:
        if hasattr(geo, "__geo_interface__"):
            yield from iter_positions(geo.__geo_interface__)
        elif isinstance(geo, Mapping):
            yield from iter_positions(geo["coordinates"])
        else:
            yield from iter_positions(geo.coordinates)

    elif kind is GeometryKind.COLLECTION:
        for key in _COLLECTION_KEYS:
            if key not in geo:
                continue
            nested = geo[key]
            # Feature с geometry: null не имеет протяжённости
            if nested is None:
                continue
            if key == "geometry":
                yield from iter_positions(nested)
            else:
                for item in nested:
                    yield from iter_positions(item)
