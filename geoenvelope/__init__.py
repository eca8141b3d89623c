"""
geoenvelope — Envelopes of geometries and tools to compare them.

Envelope (axis-aligned bounding box) is a cheap approximation of spatial
relationships between more complicated geometries.

    from geoenvelope import Envelope, Polygon

    env = Envelope.from_geo(Polygon(coordinates=[[(2, -2), (20, -2), (11, 11), (2, -2)]]))
    env.expand_by(3).intersects(Envelope(min_x=0, min_y=3, max_x=7, max_y=4))
"""

import logging

from geoenvelope.core.domain import (
    Envelope,
    GeometryCollection,
    LineString,
    MultiLineString,
    MultiPoint,
    MultiPolygon,
    Point,
    Polygon,
    contains,
    empty,
    expand,
    expand_by,
    from_geo,
    intersects,
    parse_geometry,
    within,
)
from geoenvelope.core.errors import (
    EmptyEnvelopeError,
    EnvelopeError,
    InvalidArgument,
    InvalidInput,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

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
    # Errors
    "EnvelopeError",
    "InvalidArgument",
    "InvalidInput",
    "EmptyEnvelopeError",
]

__version__ = "0.1.0"
