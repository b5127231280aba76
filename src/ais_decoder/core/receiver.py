"""
AIS receiving session.

Takes NMEA sentences or armored payloads, decodes them, translates
decoded messages to Signal K deltas and keeps status counters.
Failures are logged and counted here; the decoder itself never logs
them.
"""

import logging
import time
from dataclasses import dataclass, field
from threading import Lock
from typing import Any, Callable, Dict, Iterable, List, Optional

from ..protocols.classifier import classify
from ..protocols.errors import DecodeFailure, FailureKind, NMEAParseError
from ..protocols.messages import DecodedMessage
from ..protocols.nmea import is_ais_sentence, parse_sentence
from .config import ReceiverConfig
from .delta import create_delta

logger = logging.getLogger(__name__)

Delta = Dict[str, Any]
MessageCallback = Callable[[DecodedMessage, Delta], None]
FailureCallback = Callable[[DecodeFailure], None]


@dataclass
class ReceiverStatus:
    """
    Snapshot of receiver counters.

    messages_received counts every AIS sentence and payload handled,
    including invalid sentences and skipped continuation fragments.
    """

    messages_received: int = 0
    messages_decoded: int = 0
    fragments_skipped: int = 0
    unsupported: int = 0
    errors: int = 0
    last_message: Optional[float] = None  # time.time() of last decode
    type_counts: Dict[int, int] = field(default_factory=dict)


class AISReceiver:
    """
    Decodes a stream of AIS sentences into Signal K deltas.

    Thread-safe: counters are guarded by a lock, the configuration is
    frozen for the lifetime of the receiver.
    """

    def __init__(self, config: Optional[ReceiverConfig] = None):
        """
        Initialize receiver.

        Args:
            config: Receiver configuration (own MMSI, source label)
        """
        self._config = config or ReceiverConfig()
        self._status = ReceiverStatus()
        self._callbacks: List[MessageCallback] = []
        self._failure_callbacks: List[FailureCallback] = []
        self._lock = Lock()

    @property
    def config(self) -> ReceiverConfig:
        return self._config

    @property
    def status(self) -> ReceiverStatus:
        """Copy of the current counters."""
        with self._lock:
            return ReceiverStatus(
                messages_received=self._status.messages_received,
                messages_decoded=self._status.messages_decoded,
                fragments_skipped=self._status.fragments_skipped,
                unsupported=self._status.unsupported,
                errors=self._status.errors,
                last_message=self._status.last_message,
                type_counts=dict(self._status.type_counts),
            )

    def add_callback(self, callback: MessageCallback) -> None:
        """Add callback for decoded messages."""
        self._callbacks.append(callback)

    def remove_callback(self, callback: MessageCallback) -> None:
        """Remove callback."""
        if callback in self._callbacks:
            self._callbacks.remove(callback)

    def add_failure_callback(self, callback: FailureCallback) -> None:
        """Add callback for payloads that could not be decoded."""
        self._failure_callbacks.append(callback)

    def remove_failure_callback(self, callback: FailureCallback) -> None:
        """Remove failure callback."""
        if callback in self._failure_callbacks:
            self._failure_callbacks.remove(callback)

    def _notify_callbacks(self, message: DecodedMessage, delta: Delta) -> None:
        """Notify all registered callbacks."""
        for callback in list(self._callbacks):
            try:
                callback(message, delta)
            except Exception:
                logger.exception(f"Callback failed for MMSI {message.mmsi}")

    def _notify_failure_callbacks(self, failure: DecodeFailure) -> None:
        """Notify all registered failure callbacks."""
        for callback in list(self._failure_callbacks):
            try:
                callback(failure)
            except Exception:
                logger.exception(f"Failure callback failed for {failure.kind.value}")

    def process_sentence(self, line: str) -> Optional[Delta]:
        """
        Process one NMEA line.

        Args:
            line: NMEA0183 sentence

        Returns:
            Delta for a decoded message, otherwise None
        """
        if not is_ais_sentence(line):
            return None

        try:
            sentence = parse_sentence(line)
        except NMEAParseError as e:
            with self._lock:
                self._status.messages_received += 1
                self._status.errors += 1
            logger.warning(f"Invalid AIS sentence: {e}")
            return None

        # Only the first fragment is decoded; it holds every field we read
        if self._config.skip_continuation_fragments and not sentence.is_first_fragment:
            with self._lock:
                self._status.messages_received += 1
                self._status.fragments_skipped += 1
            logger.debug(
                f"Skipping fragment {sentence.fragment_number}/{sentence.fragment_count}"
            )
            return None

        return self.process_payload(sentence.payload, sentence.fill_bits)

    def process_payload(self, payload: str, fill_bits: int = 0) -> Optional[Delta]:
        """
        Process one armored payload.

        Args:
            payload: Six-bit armored payload
            fill_bits: Padding bits at the end of the payload

        Returns:
            Delta for a decoded message, otherwise None
        """
        result = classify(payload, fill_bits)

        if isinstance(result, DecodeFailure):
            self._record_failure(result)
            return None

        delta = create_delta(
            result,
            own_mmsi=self._config.own_mmsi,
            source_label=self._config.source_label,
        )

        with self._lock:
            self._status.messages_received += 1
            self._status.messages_decoded += 1
            self._status.last_message = time.time()
            counts = self._status.type_counts
            counts[result.message_type] = counts.get(result.message_type, 0) + 1

        logger.debug(f"AIS message processed: mmsi={result.mmsi} type={result.message_type}")
        self._notify_callbacks(result, delta)
        return delta

    def process_lines(self, lines: Iterable[str]) -> List[Delta]:
        """Process lines and collect the resulting deltas."""
        deltas = []
        for line in lines:
            delta = self.process_sentence(line)
            if delta is not None:
                deltas.append(delta)
        return deltas

    def _record_failure(self, failure: DecodeFailure) -> None:
        with self._lock:
            self._status.messages_received += 1
            if failure.kind == FailureKind.UNSUPPORTED_MESSAGE_TYPE:
                self._status.unsupported += 1
            else:
                self._status.errors += 1

        if failure.kind == FailureKind.UNSUPPORTED_MESSAGE_TYPE:
            logger.debug(
                f"Unsupported message type {failure.message_type} from MMSI {failure.mmsi}"
            )
        elif failure.has_identity:
            logger.warning(
                f"Failed to decode type {failure.message_type} from MMSI "
                f"{failure.mmsi}: {failure.detail}"
            )
        else:
            logger.warning(f"Failed to decode payload ({failure.kind.value}): {failure.detail}")

        self._notify_failure_callbacks(failure)

    def reset(self) -> None:
        """Reset status counters."""
        with self._lock:
            self._status = ReceiverStatus()
