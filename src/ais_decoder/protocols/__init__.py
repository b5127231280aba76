"""
AIS protocol decoding - six-bit armor, message classification and field decoders.
"""

from .bitstream import SixBitStream
from .classifier import (
    SUPPORTED_MESSAGE_TYPES,
    classify,
    classify_stream,
    decode,
    is_supported_type,
)
from .errors import (
    AISDecodeError,
    AISError,
    BitRangeError,
    DecodeFailure,
    FailureKind,
    MalformedPayloadError,
    NMEAParseError,
    TruncatedPayloadError,
    UnsupportedMessageTypeError,
)
from .messages import DecodedMessage, Dimensions, MessageBuilder, MessageFamily, Position
from .nmea import AISSentence, is_ais_sentence, parse_sentence

__all__ = [
    "SixBitStream",
    "classify",
    "classify_stream",
    "decode",
    "is_supported_type",
    "SUPPORTED_MESSAGE_TYPES",
    "DecodedMessage",
    "DecodeFailure",
    "FailureKind",
    "MessageBuilder",
    "MessageFamily",
    "Position",
    "Dimensions",
    "AISSentence",
    "parse_sentence",
    "is_ais_sentence",
    "AISError",
    "AISDecodeError",
    "BitRangeError",
    "MalformedPayloadError",
    "TruncatedPayloadError",
    "UnsupportedMessageTypeError",
    "NMEAParseError",
]
