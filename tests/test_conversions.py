"""Tests for conversion utilities."""

import math

import numpy as np
import pytest

from ais_decoder.utils.conversions import (
    degrees_to_radians,
    knots_to_ms,
    latitude_to_str,
    longitude_to_str,
    ms_to_knots,
    optional_to_str,
    radians_to_degrees,
)


class TestSpeedConversions:
    """Test speed conversion functions."""

    def test_knots_to_ms(self):
        """Test knots to m/s conversion."""
        assert knots_to_ms(0) == 0
        assert knots_to_ms(1) == pytest.approx(0.514444)
        assert knots_to_ms(10.0) == pytest.approx(5.14444)

    def test_knots_roundtrip(self):
        """Test roundtrip conversion knots <-> m/s."""
        for val in [0.1, 1, 10, 102.2]:
            assert ms_to_knots(knots_to_ms(val)) == pytest.approx(val)

    def test_array_conversions(self):
        """Test conversions work with numpy arrays."""
        arr = np.array([0.0, 10.0, 20.0])
        result = knots_to_ms(arr)
        assert isinstance(result, np.ndarray)
        assert result[1] == pytest.approx(5.14444)


class TestAngleConversions:
    """Test angle conversion functions."""

    def test_degrees_to_radians(self):
        """Test degrees to radians conversion."""
        assert degrees_to_radians(0) == 0
        assert degrees_to_radians(90) == pytest.approx(math.pi / 2)
        assert degrees_to_radians(180) == pytest.approx(math.pi)
        assert degrees_to_radians(359.9) == pytest.approx(math.radians(359.9))

    def test_radians_roundtrip(self):
        """Test roundtrip conversion degrees <-> radians."""
        for val in [0, 45, 219.3, 360]:
            assert radians_to_degrees(degrees_to_radians(val)) == pytest.approx(val)


class TestFormatting:
    """Test coordinate and value formatting."""

    def test_latitude_to_str(self):
        """Test latitude formatting."""
        assert latitude_to_str(37.80211833) == "37°48.127'N"
        assert latitude_to_str(-34.5) == "34°30.000'S"

    def test_longitude_to_str(self):
        """Test longitude formatting."""
        assert longitude_to_str(-122.34161833) == "122°20.497'W"
        assert longitude_to_str(5.25) == "005°15.000'E"

    def test_optional_to_str(self):
        """Test n/a rendering."""
        assert optional_to_str(None) == "n/a"
        assert optional_to_str(10.0, "kn") == "10.0kn"
        assert optional_to_str(1, "°", 0) == "1°"
