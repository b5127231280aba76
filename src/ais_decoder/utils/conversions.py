"""
Unit conversion utilities for AIS data.
"""

import numpy as np
from typing import Optional, Union

# Type alias for numeric types
Numeric = Union[float, int, np.ndarray]

# 1 knot in m/s
KNOTS_TO_MS = 0.514444


def knots_to_ms(knots: Numeric) -> Numeric:
    """
    Convert knots to meters per second.

    Args:
        knots: Speed in knots

    Returns:
        Speed in m/s
    """
    return knots * KNOTS_TO_MS


def ms_to_knots(ms: Numeric) -> Numeric:
    """
    Convert meters per second to knots.

    Args:
        ms: Speed in m/s

    Returns:
        Speed in knots
    """
    return ms / KNOTS_TO_MS


def degrees_to_radians(degrees: Numeric) -> Numeric:
    """
    Convert degrees to radians.

    Args:
        degrees: Angle in degrees

    Returns:
        Angle in radians
    """
    return degrees * np.pi / 180


def radians_to_degrees(radians: Numeric) -> Numeric:
    """Convert radians to degrees."""
    return radians * 180 / np.pi


def _format_angle(value: float, positive: str, negative: str, width: int) -> str:
    hemisphere = positive if value >= 0 else negative
    value = abs(value)
    degrees = int(value)
    minutes = (value - degrees) * 60
    return f"{degrees:0{width}d}°{minutes:06.3f}'{hemisphere}"


def latitude_to_str(latitude: float) -> str:
    """
    Format latitude as degrees and decimal minutes.

    Args:
        latitude: Latitude in degrees (north positive)

    Returns:
        Formatted string (e.g., "37°48.336'N")
    """
    return _format_angle(latitude, "N", "S", 2)


def longitude_to_str(longitude: float) -> str:
    """
    Format longitude as degrees and decimal minutes.

    Args:
        longitude: Longitude in degrees (east positive)

    Returns:
        Formatted string (e.g., "122°23.916'W")
    """
    return _format_angle(longitude, "E", "W", 3)


def optional_to_str(value: Optional[float], unit: str = "", precision: int = 1) -> str:
    """Format an optional value, rendering None as n/a."""
    if value is None:
        return "n/a"
    return f"{value:.{precision}f}{unit}"
