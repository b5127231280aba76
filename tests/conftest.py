"""Shared fixtures: build AIS messages from explicit field values."""

import pytest

from ais_decoder.protocols.bitstream import SixBitStream

# Highest 6-bit value the '0'..'W' armor alphabet can carry
MAX_ARMOR_VALUE = 38


class BitWriter:
    """Accumulates AIS fields MSB-first."""

    def __init__(self):
        self._bits = []

    def uint(self, value, width):
        self._bits.append(format(value & ((1 << width) - 1), f"0{width}b"))
        return self

    def sint(self, value, width):
        # Masking gives the two's complement bit pattern
        return self.uint(value, width)

    def text(self, value, width):
        groups = []
        for char in value:
            code = ord(char)
            groups.append(code - 64 if code >= 64 else code)
        groups += [0] * (width // 6 - len(groups))
        for group in groups:
            self.uint(group, 6)
        return self

    @property
    def bit_length(self):
        return len("".join(self._bits))

    def bits(self):
        return [int(bit) for bit in "".join(self._bits)]

    def stream(self):
        """Unarmored stream over the written bits."""
        return SixBitStream.from_bits(self.bits())

    def payload(self):
        """Armor the bits, zero-padding the last character."""
        bits = "".join(self._bits)
        bits += "0" * (-len(bits) % 6)
        chars = []
        for i in range(0, len(bits), 6):
            value = int(bits[i : i + 6], 2)
            if value > MAX_ARMOR_VALUE:
                raise ValueError(f"6-bit group {value} at bit {i} cannot be armored")
            chars.append(chr(value + 48))
        return "".join(chars)


def position_report(
    message_type=1,
    mmsi=123456789,
    status=0,
    rot=-128,
    sog=1023,
    accuracy=0,
    lon=0x6791AC0,
    lat=0x3412140,
    cog=3600,
    heading=511,
    second=15,
):
    """168-bit position report; defaults are the 'not available' codes."""
    writer = BitWriter()
    writer.uint(message_type, 6).uint(0, 2).uint(mmsi, 30)
    writer.uint(status, 4).sint(rot, 8).uint(sog, 10).uint(accuracy, 1)
    writer.sint(lon, 28).sint(lat, 27).uint(cog, 12).uint(heading, 9)
    writer.uint(second, 6).uint(0, 2).uint(0, 3).uint(0, 1).uint(0, 19)
    return writer


def static_voyage(
    mmsi=123456789,
    callsign="",
    ship_name="",
    ship_type=0,
    to_bow=0,
    to_stern=0,
    to_port=0,
    to_starboard=0,
    destination="",
):
    """424-bit type 5 message."""
    writer = BitWriter()
    writer.uint(5, 6).uint(0, 2).uint(mmsi, 30)
    writer.uint(0, 2).uint(9876543, 30)
    writer.text(callsign, 42).text(ship_name, 120).uint(ship_type, 8)
    writer.uint(to_bow, 9).uint(to_stern, 9).uint(to_port, 6).uint(to_starboard, 6)
    writer.uint(1, 4).uint(6, 4).uint(15, 5).uint(12, 5).uint(30, 6).uint(55, 8)
    writer.text(destination, 120).uint(0, 1).uint(0, 1)
    return writer


def identity_message(message_type, mmsi=366053209, total_bits=168):
    """Message carrying only type and MMSI followed by zeros."""
    writer = BitWriter()
    writer.uint(message_type, 6).uint(0, 2).uint(mmsi, 30)
    writer.uint(0, total_bits - 38)
    return writer


# Class A reference report whose every 6-bit group lies in the armor alphabet
KNOWN_POSITION_FIELDS = dict(
    message_type=1,
    mmsi=366053209,
    status=3,
    rot=0,
    sog=102,
    lon=9699328,
    lat=33816576,
    cog=2193,
    heading=1,
)
KNOWN_POSITION_PAYLOAD = "15M67FC01V1:000P@008T@2N0000"
KNOWN_POSITION_SENTENCE = "!AIVDM,1,1,,B,15M67FC01V1:000P@008T@2N0000,0*44"


@pytest.fixture
def bit_writer():
    """Fresh BitWriter."""
    return BitWriter()


@pytest.fixture
def make_position_report():
    return position_report


@pytest.fixture
def make_static_voyage():
    return static_voyage


@pytest.fixture
def make_identity_message():
    return identity_message


@pytest.fixture
def known_payload():
    return KNOWN_POSITION_PAYLOAD


@pytest.fixture
def known_sentence():
    return KNOWN_POSITION_SENTENCE


@pytest.fixture
def known_fields():
    return dict(KNOWN_POSITION_FIELDS)
