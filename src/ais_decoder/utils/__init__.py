"""
Utility functions and helpers.
"""

from .conversions import (
    degrees_to_radians,
    knots_to_ms,
    latitude_to_str,
    longitude_to_str,
    ms_to_knots,
    optional_to_str,
    radians_to_degrees,
)

__all__ = [
    "knots_to_ms",
    "ms_to_knots",
    "degrees_to_radians",
    "radians_to_degrees",
    "latitude_to_str",
    "longitude_to_str",
    "optional_to_str",
]
