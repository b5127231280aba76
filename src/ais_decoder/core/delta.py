"""
Translation of decoded messages into Signal K update deltas.

Speeds are converted from knots to m/s and angles from degrees to
radians, as Signal K expects SI units.
"""

from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from ..protocols.messages import DecodedMessage
from ..utils.conversions import degrees_to_radians, knots_to_ms

SELF_CONTEXT = "vessels.self"
MMSI_CONTEXT_PREFIX = "vessels.urn:mrn:imo:mmsi:"
SOURCE_TYPE = "NMEA0183"


def is_own_vessel(mmsi: int, own_mmsi: Optional[int]) -> bool:
    """Check if a message originated from the local station."""
    return own_mmsi is not None and mmsi == own_mmsi


def context_for(mmsi: int, own_mmsi: Optional[int] = None) -> str:
    """Signal K context for a vessel."""
    if is_own_vessel(mmsi, own_mmsi):
        return SELF_CONTEXT
    return f"{MMSI_CONTEXT_PREFIX}{mmsi}"


def delta_values(message: DecodedMessage) -> List[Dict[str, Any]]:
    """
    Build the path/value list for a message.

    Absent fields produce no entry.
    """
    values: List[Dict[str, Any]] = []

    if message.position is not None:
        values.append({
            "path": "navigation.position",
            "value": {
                "latitude": message.position.latitude,
                "longitude": message.position.longitude,
                "source": "AIS",
            },
        })

    if message.speed_over_ground is not None:
        values.append({
            "path": "navigation.speedOverGround",
            "value": float(knots_to_ms(message.speed_over_ground)),
        })

    if message.course_over_ground is not None:
        values.append({
            "path": "navigation.courseOverGroundTrue",
            "value": float(degrees_to_radians(message.course_over_ground)),
        })

    if message.true_heading is not None:
        values.append({
            "path": "navigation.headingTrue",
            "value": float(degrees_to_radians(message.true_heading)),
        })

    if message.ship_name:
        values.append({"path": "name", "value": message.ship_name})

    if message.callsign:
        values.append({"path": "communication.callsignRadio", "value": message.callsign})

    return values


def create_delta(
    message: DecodedMessage,
    own_mmsi: Optional[int] = None,
    source_label: str = "AIS",
    timestamp: Optional[datetime] = None,
) -> Dict[str, Any]:
    """
    Create a Signal K delta for a decoded message.

    Args:
        message: Decoded AIS message
        own_mmsi: Local station MMSI, mapped to "vessels.self"
        source_label: Label reported as the update source
        timestamp: Update time (defaults to now, UTC)

    Returns:
        Delta dictionary with context and one update
    """
    if timestamp is None:
        timestamp = datetime.now(timezone.utc)

    return {
        "context": context_for(message.mmsi, own_mmsi),
        "updates": [
            {
                "source": {
                    "label": source_label,
                    "type": SOURCE_TYPE,
                },
                "timestamp": timestamp.isoformat(),
                "values": delta_values(message),
            }
        ],
    }
