"""
Minimal AIVDM/AIVDO sentence splitting.

Extracts the armored payload and fragment fields from an NMEA0183 AIS
sentence using pyais. Checksums are not verified and fragments are not
reassembled.
"""

from dataclasses import dataclass
from typing import Optional

from pyais.exceptions import InvalidNMEAMessageException
from pyais.messages import NMEAMessage

from .errors import NMEAParseError

AIS_SENTENCE_TYPES = ("VDM", "VDO")


@dataclass(frozen=True)
class AISSentence:
    """Fields of one AIVDM/AIVDO sentence."""

    talker: str  # e.g. "AI", "AB", "BS"
    sentence_type: str  # "VDM" or "VDO"
    fragment_count: int
    fragment_number: int
    message_id: Optional[int]  # sequential message id of multipart messages
    channel: str
    payload: str
    fill_bits: int

    @property
    def is_own_ship(self) -> bool:
        """VDO sentences report the receiving station itself."""
        return self.sentence_type == "VDO"

    @property
    def is_multipart(self) -> bool:
        return self.fragment_count > 1

    @property
    def is_first_fragment(self) -> bool:
        return self.fragment_number == 1


def is_ais_sentence(line: str) -> bool:
    """Check if line is an AIVDM/AIVDO sentence."""
    line = line.strip()
    if len(line) < 7 or line[0] not in "!$":
        return False
    return line[3:6] in AIS_SENTENCE_TYPES and line[6] == ","


def parse_sentence(line: str) -> AISSentence:
    """
    Split an AIS sentence into its fields.

    Args:
        line: Sentence such as "!AIVDM,1,1,,B,15M67FC01V1:000P@008T@2N0000,0*44"

    Returns:
        Parsed sentence fields

    Raises:
        NMEAParseError: If the line is not a well-formed AIS sentence
    """
    line = line.strip()
    if not is_ais_sentence(line):
        raise NMEAParseError(f"Not an AIS sentence: {line!r}")

    try:
        nmea = NMEAMessage(line.encode("ascii"))
    except UnicodeEncodeError as e:
        raise NMEAParseError(f"Non-ASCII characters in {line!r}") from e
    except (InvalidNMEAMessageException, ValueError) as e:
        raise NMEAParseError(f"Invalid AIS sentence {line!r}: {e}") from e

    if nmea.frag_cnt < 1 or not 1 <= nmea.frag_num <= nmea.frag_cnt:
        raise NMEAParseError(
            f"Invalid fragment {nmea.frag_num} of {nmea.frag_cnt}: {line!r}"
        )
    if not nmea.payload:
        raise NMEAParseError(f"Empty payload: {line!r}")

    return AISSentence(
        talker=line[1:3],
        sentence_type=line[3:6],
        fragment_count=nmea.frag_cnt,
        fragment_number=nmea.frag_num,
        message_id=nmea.seq_id,
        channel=nmea.channel,
        payload=nmea.payload.decode("ascii"),
        fill_bits=nmea.fill_bits,
    )
