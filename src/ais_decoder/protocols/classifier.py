"""
AIS message classifier and dispatcher.

classify() validates an armored payload. classify_stream() reads the
message type and MMSI once and dispatches to the decoder registered
for the type. Every failure is returned as a DecodeFailure; decode()
is the raising variant.
"""

import logging
from typing import FrozenSet, Union

from .bitstream import SixBitStream
from .decoders import DECODERS
from .errors import (
    BitRangeError,
    DecodeFailure,
    FailureKind,
    MalformedPayloadError,
    error_for_failure,
)
from .messages import DecodedMessage, MessageBuilder

logger = logging.getLogger(__name__)

MESSAGE_TYPE_OFFSET, MESSAGE_TYPE_BITS = 0, 6
MMSI_OFFSET, MMSI_BITS = 8, 30

SUPPORTED_MESSAGE_TYPES: FrozenSet[int] = frozenset(DECODERS)

DecodeResult = Union[DecodedMessage, DecodeFailure]


def is_supported_type(message_type: int) -> bool:
    """Check if a message type is recognized by the classifier."""
    return message_type in SUPPORTED_MESSAGE_TYPES


def classify(payload: str, fill_bits: int = 0) -> DecodeResult:
    """
    Decode an armored AIS payload.

    Args:
        payload: Six-bit armored payload from an AIVDM/AIVDO sentence
        fill_bits: Padding bits at the end of the payload (0-5)

    Returns:
        DecodedMessage on success, otherwise DecodeFailure. Failures
        raised after the identity fields were read carry message_type
        and mmsi.
    """
    try:
        stream = SixBitStream(payload, fill_bits)
    except MalformedPayloadError as e:
        return DecodeFailure(kind=FailureKind.MALFORMED_PAYLOAD, detail=str(e))

    return classify_stream(stream)


def classify_stream(stream: SixBitStream) -> DecodeResult:
    """
    Decode a message from an existing bit stream.

    Args:
        stream: Bits of one AIS message

    Returns:
        DecodedMessage on success, otherwise a truncated or
        unsupported DecodeFailure
    """
    try:
        message_type = stream.unsigned(MESSAGE_TYPE_OFFSET, MESSAGE_TYPE_BITS)
        mmsi = stream.unsigned(MMSI_OFFSET, MMSI_BITS)
    except BitRangeError as e:
        return DecodeFailure(kind=FailureKind.TRUNCATED_PAYLOAD, detail=str(e))

    decoder = DECODERS.get(message_type)
    if decoder is None:
        return DecodeFailure(
            kind=FailureKind.UNSUPPORTED_MESSAGE_TYPE,
            detail=f"Unsupported message type {message_type}",
            message_type=message_type,
            mmsi=mmsi,
        )

    builder = MessageBuilder(message_type, mmsi)
    try:
        decoder(stream, builder)
    except BitRangeError as e:
        return DecodeFailure(
            kind=FailureKind.TRUNCATED_PAYLOAD,
            detail=str(e),
            message_type=message_type,
            mmsi=mmsi,
        )

    logger.debug(f"Decoded type {message_type} from MMSI {mmsi}")
    return builder.build()


def decode(payload: str, fill_bits: int = 0) -> DecodedMessage:
    """
    Decode an armored AIS payload, raising on failure.

    Raises:
        MalformedPayloadError: Empty payload or invalid characters
        TruncatedPayloadError: Payload ends before a required field
        UnsupportedMessageTypeError: Message type has no decoder
    """
    result = classify(payload, fill_bits)
    if isinstance(result, DecodeFailure):
        raise error_for_failure(result)
    return result
