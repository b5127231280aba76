"""
Six-bit ASCII armor bit stream.

AIS payloads carry six bits per character. The stream expands the
armored characters once into a fixed-size bit buffer and provides
bounds-checked field extraction:

- unsigned(offset, length): MSB-first unsigned integer
- signed(offset, length): two's complement integer
- six_bit_string(offset, max_length): six-bit ASCII text

Armor alphabet is '0'..'W' (48-87):
    '0'..'V' (48-86) -> 0..38  (code - 48)
    'W'      (87)    -> 0      (code - 87)
"""

from typing import Optional

import numpy as np

from .errors import BitRangeError, MalformedPayloadError

# Armor character range
ARMOR_START = 48
ARMOR_END = 87
ARMOR_WRAP = 87

BITS_PER_CHAR = 6
MAX_FILL_BITS = 5


def armor_value(char: str) -> int:
    """
    Convert one armor character to its 6-bit value.

    Args:
        char: Single armored character

    Returns:
        6-bit value

    Raises:
        MalformedPayloadError: If char is outside the armor alphabet
    """
    code = ord(char)
    if not ARMOR_START <= code <= ARMOR_END:
        raise MalformedPayloadError(f"Invalid armor character: {char!r}")
    if code < ARMOR_WRAP:
        return code - ARMOR_START
    return code - ARMOR_WRAP


def six_bit_char(value: int) -> str:
    """Map a 6-bit value to its six-bit ASCII character."""
    if value < 32:
        return chr(value + 64)
    return chr(value)


def _armor_values(payload: str) -> np.ndarray:
    """Validate payload and return its 6-bit values as uint8 array."""
    if not payload:
        raise MalformedPayloadError("Empty payload")

    try:
        raw = payload.encode("ascii")
    except UnicodeEncodeError:
        raise MalformedPayloadError("Payload contains non-ASCII characters")

    codes = np.frombuffer(raw, dtype=np.uint8)
    invalid = (codes < ARMOR_START) | (codes > ARMOR_END)
    if invalid.any():
        pos = int(np.argmax(invalid))
        raise MalformedPayloadError(
            f"Invalid armor character {payload[pos]!r} at position {pos}"
        )

    return np.where(codes < ARMOR_WRAP, codes - ARMOR_START, codes - ARMOR_WRAP).astype(
        np.uint8
    )


class SixBitStream:
    """
    Read-only bit buffer over an armored AIS payload.

    The buffer is built once in the constructor and never modified,
    so one stream can be shared between threads.

    Example:
        >>> stream = SixBitStream("15M67FC01V1:000P@008T@2N0000")
        >>> stream.unsigned(0, 6)
        1
    """

    def __init__(self, payload: str, fill_bits: int = 0):
        """
        Initialize stream.

        Args:
            payload: Armored payload characters
            fill_bits: Padding bits to drop from the end (0-5)

        Raises:
            MalformedPayloadError: Empty payload, bad characters or fill bits
        """
        if not 0 <= fill_bits <= MAX_FILL_BITS:
            raise MalformedPayloadError(
                f"fill_bits must be between 0 and {MAX_FILL_BITS}, got {fill_bits}"
            )

        values = _armor_values(payload)
        # Each value occupies the low 6 bits of a byte
        bits = np.unpackbits(values[:, np.newaxis], axis=1)[:, 8 - BITS_PER_CHAR:]
        bits = bits.ravel()
        if fill_bits:
            bits = bits[: bits.size - fill_bits]

        bits.flags.writeable = False
        self._payload = payload
        self._bits = bits

    @classmethod
    def from_bits(cls, bits) -> "SixBitStream":
        """
        Create a stream over already unpacked bits.

        Used for demodulator output, which carries message bits
        without six-bit armor.

        Args:
            bits: Sequence of 0/1 values, most significant bit first

        Raises:
            MalformedPayloadError: If bits is not a flat 0/1 sequence
        """
        array = np.array(bits, dtype=np.uint8)
        if array.ndim != 1 or (array > 1).any():
            raise MalformedPayloadError("Bits must be a flat sequence of 0 and 1")

        array.flags.writeable = False
        stream = cls.__new__(cls)
        stream._payload = None
        stream._bits = array
        return stream

    @property
    def payload(self) -> Optional[str]:
        """Armored payload this stream was built from (None for raw bits)."""
        return self._payload

    @property
    def bit_length(self) -> int:
        """Number of available bits."""
        return int(self._bits.size)

    def __len__(self) -> int:
        return self.bit_length

    def __repr__(self) -> str:
        return f"SixBitStream({self._payload!r}, bits={self.bit_length})"

    def _check_range(self, offset: int, length: int) -> None:
        if offset < 0 or length <= 0 or offset + length > self._bits.size:
            raise BitRangeError(offset, length, self.bit_length)

    def has_bits(self, offset: int, length: int) -> bool:
        """Check if bits [offset, offset+length) are available."""
        return offset >= 0 and length > 0 and offset + length <= self._bits.size

    def unsigned(self, offset: int, length: int) -> int:
        """
        Extract an unsigned integer.

        Args:
            offset: Starting bit position (0-indexed)
            length: Number of bits

        Returns:
            Unsigned integer, most significant bit first

        Raises:
            BitRangeError: If the range exceeds the available bits
        """
        self._check_range(offset, length)
        value = 0
        for bit in self._bits[offset : offset + length]:
            value = (value << 1) | int(bit)
        return value

    def signed(self, offset: int, length: int) -> int:
        """
        Extract a two's complement signed integer.

        Args:
            offset: Starting bit position (0-indexed)
            length: Number of bits

        Returns:
            Signed integer

        Raises:
            BitRangeError: If the range exceeds the available bits
        """
        value = self.unsigned(offset, length)
        if value & (1 << (length - 1)):
            value -= 1 << length
        return value

    def six_bit_string(self, offset: int, max_length: int) -> str:
        """
        Extract six-bit ASCII text.

        Reads 6-bit groups until a zero group or max_length bits,
        then strips trailing padding spaces.

        Args:
            offset: Starting bit position
            max_length: Maximum number of bits to consume

        Returns:
            Decoded text

        Raises:
            BitRangeError: If a group lies outside the available bits
        """
        chars = []
        for start in range(offset, offset + max_length - BITS_PER_CHAR + 1, BITS_PER_CHAR):
            value = self.unsigned(start, BITS_PER_CHAR)
            if value == 0:
                break
            chars.append(six_bit_char(value))
        return "".join(chars).rstrip()


__all__ = [
    "SixBitStream",
    "armor_value",
    "six_bit_char",
    "BITS_PER_CHAR",
]
