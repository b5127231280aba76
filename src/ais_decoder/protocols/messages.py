"""
Decoded AIS message records.

DecodedMessage is immutable. Decoders fill a MessageBuilder, which
only accepts the fields defined for the message's family, and call
build() once to produce the record.
"""

from dataclasses import asdict, dataclass, fields
from enum import Enum
from typing import Any, Dict, FrozenSet, Optional


class MessageFamily(Enum):
    """Message layouts known to the decoder."""

    POSITION_REPORT = "position_report"
    STATIC_VOYAGE = "static_voyage"
    BASE_STATION = "base_station"
    STATIC_DATA_REPORT = "static_data_report"


MESSAGE_FAMILIES: Dict[int, MessageFamily] = {
    1: MessageFamily.POSITION_REPORT,
    2: MessageFamily.POSITION_REPORT,
    3: MessageFamily.POSITION_REPORT,
    4: MessageFamily.BASE_STATION,
    5: MessageFamily.STATIC_VOYAGE,
    11: MessageFamily.BASE_STATION,
    18: MessageFamily.POSITION_REPORT,
    19: MessageFamily.POSITION_REPORT,
    24: MessageFamily.STATIC_DATA_REPORT,
}

NAVIGATION_STATUS_LEGENDS = (
    "Under way using engine",
    "At anchor",
    "Not under command",
    "Restricted manoeuverability",
    "Constrained by her draught",
    "Moored",
    "Aground",
    "Engaged in fishing",
    "Under way sailing",
    "Reserved for HSC",
    "Reserved for WIG",
    "Reserved",
    "Reserved",
    "Reserved",
    "AIS-SART active",
    "Not defined",
)


@dataclass(frozen=True)
class Position:
    """Geographic position in degrees."""

    latitude: float
    longitude: float


@dataclass(frozen=True)
class Dimensions:
    """Ship dimensions from the reference point, in meters."""

    to_bow: int
    to_stern: int
    to_port: int
    to_starboard: int

    @property
    def length(self) -> int:
        """Overall length in meters."""
        return self.to_bow + self.to_stern

    @property
    def beam(self) -> int:
        """Overall beam in meters."""
        return self.to_port + self.to_starboard


@dataclass(frozen=True)
class DecodedMessage:
    """One decoded AIS message."""

    message_type: int
    mmsi: int
    navigation_status: Optional[int] = None
    rate_of_turn: Optional[float] = None  # degrees/minute
    speed_over_ground: Optional[float] = None  # knots
    position: Optional[Position] = None
    course_over_ground: Optional[float] = None  # degrees
    true_heading: Optional[int] = None  # degrees
    ship_name: Optional[str] = None
    callsign: Optional[str] = None
    ship_type: Optional[int] = None
    dimensions: Optional[Dimensions] = None

    @property
    def family(self) -> MessageFamily:
        """Layout family of this message type."""
        return MESSAGE_FAMILIES[self.message_type]

    @property
    def latitude(self) -> Optional[float]:
        return self.position.latitude if self.position else None

    @property
    def longitude(self) -> Optional[float]:
        return self.position.longitude if self.position else None

    @property
    def navigation_status_text(self) -> Optional[str]:
        """Human-readable navigation status."""
        if self.navigation_status is None:
            return None
        return NAVIGATION_STATUS_LEGENDS[self.navigation_status]

    def to_dict(self, include_absent: bool = False) -> Dict[str, Any]:
        """
        Convert to a plain dictionary.

        Args:
            include_absent: Keep fields whose value is None

        Returns:
            Dictionary with nested position/dimensions dictionaries
        """
        data = asdict(self)
        if include_absent:
            return data
        return {key: value for key, value in data.items() if value is not None}


# Fields each family may populate beyond message_type and mmsi
_POSITION_FIELDS = frozenset({
    "navigation_status",
    "rate_of_turn",
    "speed_over_ground",
    "position",
    "course_over_ground",
    "true_heading",
})

_STATIC_VOYAGE_FIELDS = frozenset({
    "ship_name",
    "callsign",
    "ship_type",
    "dimensions",
})

FAMILY_FIELDS: Dict[MessageFamily, FrozenSet[str]] = {
    MessageFamily.POSITION_REPORT: _POSITION_FIELDS,
    MessageFamily.STATIC_VOYAGE: _STATIC_VOYAGE_FIELDS,
    MessageFamily.BASE_STATION: frozenset(),
    MessageFamily.STATIC_DATA_REPORT: frozenset(),
}

_RECORD_FIELDS = frozenset(f.name for f in fields(DecodedMessage))


class MessageBuilder:
    """
    Accumulates optional fields for one DecodedMessage.

    Values left as None stay absent in the built record.
    """

    def __init__(self, message_type: int, mmsi: int):
        if message_type not in MESSAGE_FAMILIES:
            raise ValueError(f"No message family for type {message_type}")
        self._message_type = message_type
        self._mmsi = mmsi
        self._allowed = FAMILY_FIELDS[MESSAGE_FAMILIES[message_type]]
        self._values: Dict[str, Any] = {}

    @property
    def message_type(self) -> int:
        return self._message_type

    @property
    def mmsi(self) -> int:
        return self._mmsi

    def set(self, name: str, value: Any) -> "MessageBuilder":
        """
        Set one field.

        Raises:
            ValueError: If the field is not defined for this message type
        """
        if name not in _RECORD_FIELDS:
            raise ValueError(f"Unknown field: {name}")
        if name not in self._allowed:
            raise ValueError(
                f"Field {name} is not defined for message type {self._message_type}"
            )
        self._values[name] = value
        return self

    def build(self) -> DecodedMessage:
        """Finalize into an immutable record."""
        return DecodedMessage(
            message_type=self._message_type,
            mmsi=self._mmsi,
            **self._values,
        )
