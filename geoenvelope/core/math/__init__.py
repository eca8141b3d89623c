"""
Core math modules для geoenvelope

Численные проверки и сферическое расстояние.
"""

# Numerical Safeguards
from geoenvelope.core.math.numerical_safeguards import (
    EPS_FLOAT_COMPARE_ABS,
    EPS_FLOAT_COMPARE_REL,
    is_close,
    is_coordinate_number,
    is_valid_float,
    validate_non_negative,
)

# Great Circle
from geoenvelope.core.math.great_circle import (
    EARTH_MEAN_RADIUS_M,
    distance,
)

__all__ = [
    # Numerical Safeguards: Epsilon constants
    "EPS_FLOAT_COMPARE_ABS",
    "EPS_FLOAT_COMPARE_REL",
    # Numerical Safeguards: Checks
    "is_close",
    "is_coordinate_number",
    "is_valid_float",
    "validate_non_negative",
    # Great Circle
    "EARTH_MEAN_RADIUS_M",
    "distance",
]
