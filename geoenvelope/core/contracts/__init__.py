"""
Contract Validation Module

Модуль для валидации JSON контрактов geoenvelope.
"""

from .validators import (
    ContractValidator,
    EnvelopeValidator,
    GeometryValidator,
    SchemaLoader,
    validate_envelope,
    validate_geometry,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "EnvelopeValidator",
    "GeometryValidator",
    # Functions
    "validate_envelope",
    "validate_geometry",
]
