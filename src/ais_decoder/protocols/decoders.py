"""
Per-type AIS field decoders.

Each decoder reads its fields from a SixBitStream into a MessageBuilder,
mapping "not available" codes to None and scaling raw integers to
engineering units. DECODERS maps message type to decoder.
"""

import logging
from typing import Callable, Dict

from .bitstream import SixBitStream
from .messages import Dimensions, MessageBuilder, Position

logger = logging.getLogger(__name__)

# Position report layout (types 1, 2, 3, 18, 19)
NAV_STATUS_OFFSET, NAV_STATUS_BITS = 38, 4
ROT_OFFSET, ROT_BITS = 42, 8
SOG_OFFSET, SOG_BITS = 50, 10
LON_OFFSET, LON_BITS = 61, 28
LAT_OFFSET, LAT_BITS = 89, 27
COG_OFFSET, COG_BITS = 116, 12
HEADING_OFFSET, HEADING_BITS = 128, 9

# Sentinels ("not available")
ROT_NOT_AVAILABLE = -128  # raw bit pattern 0x80
SOG_NOT_AVAILABLE = 1023
LON_NOT_AVAILABLE = 0x6791AC0  # 181 degrees
LAT_NOT_AVAILABLE = 0x3412140  # 91 degrees
COG_NOT_AVAILABLE = 3600
HEADING_NOT_AVAILABLE = 511

# Scales
ROT_SCALE = 4.733
SOG_SCALE = 10.0
COORDINATE_SCALE = 600000.0  # 1/10000 minute
COG_SCALE = 10.0

# Static and voyage data layout (type 5)
CALLSIGN_OFFSET, CALLSIGN_BITS = 70, 42
SHIP_NAME_OFFSET, SHIP_NAME_BITS = 112, 120
SHIP_TYPE_OFFSET, SHIP_TYPE_BITS = 232, 8
TO_BOW_OFFSET, TO_BOW_BITS = 240, 9
TO_STERN_OFFSET, TO_STERN_BITS = 249, 9
TO_PORT_OFFSET, TO_PORT_BITS = 258, 6
TO_STARBOARD_OFFSET, TO_STARBOARD_BITS = 264, 6

Decoder = Callable[[SixBitStream, MessageBuilder], None]


def decode_position_report(stream: SixBitStream, builder: MessageBuilder) -> None:
    """
    Decode a position report.

    Class B reports (18, 19) are read with the Class A layout. The
    position accuracy bit (60) is not surfaced.
    """
    builder.set("navigation_status", stream.unsigned(NAV_STATUS_OFFSET, NAV_STATUS_BITS))

    rot = stream.signed(ROT_OFFSET, ROT_BITS)
    if rot != ROT_NOT_AVAILABLE:
        builder.set("rate_of_turn", rot * ROT_SCALE)

    sog = stream.unsigned(SOG_OFFSET, SOG_BITS)
    if sog != SOG_NOT_AVAILABLE:
        builder.set("speed_over_ground", sog / SOG_SCALE)

    lon = stream.signed(LON_OFFSET, LON_BITS)
    lat = stream.signed(LAT_OFFSET, LAT_BITS)
    # Reported only as a complete coordinate
    if lon != LON_NOT_AVAILABLE and lat != LAT_NOT_AVAILABLE:
        builder.set(
            "position",
            Position(latitude=lat / COORDINATE_SCALE, longitude=lon / COORDINATE_SCALE),
        )

    cog = stream.unsigned(COG_OFFSET, COG_BITS)
    if cog != COG_NOT_AVAILABLE:
        builder.set("course_over_ground", cog / COG_SCALE)

    heading = stream.unsigned(HEADING_OFFSET, HEADING_BITS)
    if heading != HEADING_NOT_AVAILABLE:
        builder.set("true_heading", heading)


def decode_static_voyage_data(stream: SixBitStream, builder: MessageBuilder) -> None:
    """Decode static and voyage related data (type 5)."""
    builder.set("callsign", stream.six_bit_string(CALLSIGN_OFFSET, CALLSIGN_BITS))
    builder.set("ship_name", stream.six_bit_string(SHIP_NAME_OFFSET, SHIP_NAME_BITS))
    builder.set("ship_type", stream.unsigned(SHIP_TYPE_OFFSET, SHIP_TYPE_BITS))
    builder.set(
        "dimensions",
        Dimensions(
            to_bow=stream.unsigned(TO_BOW_OFFSET, TO_BOW_BITS),
            to_stern=stream.unsigned(TO_STERN_OFFSET, TO_STERN_BITS),
            to_port=stream.unsigned(TO_PORT_OFFSET, TO_PORT_BITS),
            to_starboard=stream.unsigned(TO_STARBOARD_OFFSET, TO_STARBOARD_BITS),
        ),
    )


def decode_identity_only(stream: SixBitStream, builder: MessageBuilder) -> None:
    """
    Types 4, 11 and 24 are classified but not field-decoded.

    The record carries only message_type and mmsi.
    """
    logger.debug(f"Type {builder.message_type} from {builder.mmsi}: identity only")


DECODERS: Dict[int, Decoder] = {
    1: decode_position_report,
    2: decode_position_report,
    3: decode_position_report,
    4: decode_identity_only,
    5: decode_static_voyage_data,
    11: decode_identity_only,
    18: decode_position_report,
    19: decode_position_report,
    24: decode_identity_only,
}
