"""
Exception hierarchy and failure records for AIS decoding.

The decoder core raises these internally; the classifier converts them
into DecodeFailure records so no exception escapes for bad input.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class FailureKind(Enum):
    """Kinds of decode failure."""

    MALFORMED_PAYLOAD = "malformed_payload"
    TRUNCATED_PAYLOAD = "truncated_payload"
    UNSUPPORTED_MESSAGE_TYPE = "unsupported_message_type"


@dataclass(frozen=True)
class DecodeFailure:
    """
    A payload that could not be decoded.

    message_type and mmsi are filled in whenever the identity fields were
    read before the failure occurred.
    """

    kind: FailureKind
    detail: str = ""
    message_type: Optional[int] = None
    mmsi: Optional[int] = None

    @property
    def has_identity(self) -> bool:
        """True if the failure still carries type and MMSI."""
        return self.message_type is not None and self.mmsi is not None


class AISError(Exception):
    """Base class for all AIS decoder errors."""

    pass


class BitRangeError(AISError, IndexError):
    """Raised when a bit range lies outside the available payload bits."""

    def __init__(self, offset: int, length: int, available: int):
        self.offset = offset
        self.length = length
        self.available = available
        super().__init__(
            f"Bit range [{offset}:{offset + length}] exceeds payload length "
            f"({available} bits)"
        )


class NMEAParseError(AISError, ValueError):
    """Raised when an NMEA sentence cannot be split into AIS fields."""

    pass


class AISDecodeError(AISError):
    """Raised by decode() for a payload that could not be decoded."""

    kind = FailureKind.MALFORMED_PAYLOAD

    def __init__(self, message: str, message_type: Optional[int] = None,
                 mmsi: Optional[int] = None):
        super().__init__(message)
        self.message_type = message_type
        self.mmsi = mmsi

    @property
    def failure(self) -> DecodeFailure:
        """Failure record equivalent to this exception."""
        return DecodeFailure(
            kind=self.kind,
            detail=str(self),
            message_type=self.message_type,
            mmsi=self.mmsi,
        )


class MalformedPayloadError(AISDecodeError, ValueError):
    """Payload is empty or contains characters outside the armor alphabet."""

    kind = FailureKind.MALFORMED_PAYLOAD


class TruncatedPayloadError(AISDecodeError):
    """Payload ends before a required field."""

    kind = FailureKind.TRUNCATED_PAYLOAD


class UnsupportedMessageTypeError(AISDecodeError):
    """Message type has no decoder."""

    kind = FailureKind.UNSUPPORTED_MESSAGE_TYPE


_ERRORS_BY_KIND = {
    FailureKind.MALFORMED_PAYLOAD: MalformedPayloadError,
    FailureKind.TRUNCATED_PAYLOAD: TruncatedPayloadError,
    FailureKind.UNSUPPORTED_MESSAGE_TYPE: UnsupportedMessageTypeError,
}


def error_for_failure(failure: DecodeFailure) -> AISDecodeError:
    """Build the exception matching a failure record."""
    error_class = _ERRORS_BY_KIND[failure.kind]
    return error_class(
        failure.detail or failure.kind.value,
        message_type=failure.message_type,
        mmsi=failure.mmsi,
    )
