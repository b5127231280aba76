"""
AIS Decoder - AIVDM/AIVDO payload decoding

Decodes six-bit-armored AIS payloads (ITU-R M.1371) into immutable,
typed records of navigation and identity fields.

Supported message types:
    - 1, 2, 3: Class A position report
    - 18, 19: Class B position report (Class A field layout)
    - 5: Static and voyage related data
    - 4, 11, 24: Recognized, identity only

Decoding never raises for bad input: classify() returns either a
DecodedMessage or a DecodeFailure. AISReceiver wraps the decoder for
NMEA sentence streams and produces Signal K deltas.
"""

__version__ = "0.1.0"
__author__ = "AIS Decoder Team"

from .core.config import AISConfig, ReceiverConfig
from .core.delta import create_delta
from .core.receiver import AISReceiver, ReceiverStatus
from .protocols import (
    SUPPORTED_MESSAGE_TYPES,
    DecodedMessage,
    DecodeFailure,
    Dimensions,
    FailureKind,
    Position,
    SixBitStream,
    classify,
    decode,
    parse_sentence,
)

__all__ = [
    # Decoding
    "classify",
    "decode",
    "SixBitStream",
    "SUPPORTED_MESSAGE_TYPES",
    "DecodedMessage",
    "DecodeFailure",
    "FailureKind",
    "Position",
    "Dimensions",
    "parse_sentence",
    # Session
    "AISReceiver",
    "ReceiverStatus",
    "AISConfig",
    "ReceiverConfig",
    "create_delta",
    # Version
    "__version__",
]
