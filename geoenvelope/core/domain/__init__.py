"""
Domain models and value objects.

Contains the Envelope value object and the geometry models it is built from.
"""

from geoenvelope.core.domain.envelope import (
    Envelope,
    contains,
    empty,
    expand,
    expand_by,
    from_geo,
    intersects,
    within,
)
from geoenvelope.core.domain.geometry import (
    GeometryCollection,
    GeometryKind,
    LineString,
    MultiLineString,
    MultiPoint,
    MultiPolygon,
    Point,
    Polygon,
    classify,
    iter_positions,
    parse_geometry,
    to_position,
)

__all__ = [
    # Envelope
    "Envelope",
    "empty",
    "from_geo",
    "expand",
    "expand_by",
    "contains",
    "within",
    "intersects",
    # Geometry models
    "Point",
    "MultiPoint",
    "LineString",
    "MultiLineString",
    "Polygon",
    "MultiPolygon",
    "GeometryCollection",
    "parse_geometry",
    # Normalization
    "GeometryKind",
    "classify",
    "iter_positions",
    "to_position",
]
