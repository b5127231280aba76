"""Tests for the AIS receiving session."""

import logging

import pytest

from ais_decoder.core.config import ReceiverConfig
from ais_decoder.core.receiver import AISReceiver, ReceiverStatus
from ais_decoder.protocols.errors import FailureKind
from ais_decoder.protocols.messages import DecodedMessage


def _sentence(payload, fragment_count=1, fragment_number=1, fill_bits=0):
    return f"!AIVDM,{fragment_count},{fragment_number},,A,{payload},{fill_bits}*00"


class TestAISReceiver:
    """Tests for AISReceiver."""

    @pytest.fixture
    def receiver(self):
        """Create receiver with an own MMSI."""
        return AISReceiver(ReceiverConfig(own_mmsi=123456789, source_label="MAIANA AIS"))

    def test_initial_status(self, receiver):
        """Test counters start at zero."""
        assert receiver.status == ReceiverStatus()

    def test_process_sentence(self, receiver, known_sentence):
        """Test a sentence yields a delta."""
        delta = receiver.process_sentence(known_sentence)
        assert delta["context"] == "vessels.urn:mrn:imo:mmsi:366053209"
        assert delta["updates"][0]["source"]["label"] == "MAIANA AIS"

        status = receiver.status
        assert status.messages_received == 1
        assert status.messages_decoded == 1
        assert status.type_counts == {1: 1}
        assert status.last_message is not None

    def test_own_vessel(self, known_payload):
        """Test own MMSI maps to vessels.self."""
        receiver = AISReceiver(ReceiverConfig(own_mmsi=366053209))
        delta = receiver.process_payload(known_payload)
        assert delta["context"] == "vessels.self"

    def test_ignores_non_ais_lines(self, receiver):
        """Test other NMEA sentences are ignored without counting."""
        assert receiver.process_sentence("$GPGGA,123519,4807.038,N,01131.000,E,1,08,0.9,545.4,M,46.9,M,,*47") is None
        assert receiver.process_sentence("") is None
        assert receiver.status.messages_received == 0

    def test_invalid_sentence_counted(self, receiver, caplog):
        """Test malformed sentences are logged and counted."""
        with caplog.at_level(logging.WARNING):
            assert receiver.process_sentence("!AIVDM,1,1,,A*00") is None
        assert receiver.status.errors == 1
        assert receiver.status.messages_received == 1
        assert "Invalid AIS sentence" in caplog.text

    def test_malformed_payload_counted(self, receiver, caplog):
        """Test decode failures are logged and counted."""
        with caplog.at_level(logging.WARNING):
            assert receiver.process_sentence(_sentence("15M6~FC")) is None
        status = receiver.status
        assert status.messages_received == 1
        assert status.errors == 1
        assert status.messages_decoded == 0
        assert "malformed_payload" in caplog.text

    def test_truncated_payload_logs_identity(self, receiver, known_payload, caplog):
        """Test truncated payload warnings name the MMSI."""
        with caplog.at_level(logging.WARNING):
            receiver.process_payload(known_payload[:10])
        assert "366053209" in caplog.text
        assert receiver.status.errors == 1

    def test_unsupported_counted(self, receiver, make_identity_message):
        """Test unsupported types are counted separately."""
        assert receiver.process_payload(make_identity_message(8).payload()) is None
        status = receiver.status
        assert status.unsupported == 1
        assert status.errors == 0

    def test_continuation_fragments_skipped(self, receiver, known_payload):
        """Test only first fragments are decoded."""
        lines = [
            _sentence(known_payload, fragment_count=2, fragment_number=1),
            _sentence("0000", fragment_count=2, fragment_number=2, fill_bits=2),
        ]
        deltas = receiver.process_lines(lines)
        assert len(deltas) == 1
        assert deltas[0]["context"] == "vessels.urn:mrn:imo:mmsi:366053209"
        status = receiver.status
        assert status.fragments_skipped == 1
        assert status.type_counts == {1: 1}

    def test_skipped_fragments_are_received(self, receiver, known_payload):
        """Test every AIS sentence counts as received."""
        receiver.process_sentence(_sentence(known_payload, fragment_count=2, fragment_number=1))
        receiver.process_sentence(_sentence("0000", fragment_count=2, fragment_number=2))
        status = receiver.status
        assert status.messages_received == 2
        assert status.messages_decoded == 1
        assert status.fragments_skipped == 1

    def test_continuation_fragments_decoded_when_enabled(self, known_payload):
        """Test fragment skipping can be disabled."""
        receiver = AISReceiver(ReceiverConfig(skip_continuation_fragments=False))
        line = _sentence(known_payload, fragment_count=2, fragment_number=2)
        assert receiver.process_sentence(line) is not None
        assert receiver.status.fragments_skipped == 0

    def test_callbacks(self, receiver, known_sentence):
        """Test callbacks receive message and delta."""
        received = []
        receiver.add_callback(lambda message, delta: received.append((message, delta)))
        delta = receiver.process_sentence(known_sentence)
        assert len(received) == 1
        message, callback_delta = received[0]
        assert isinstance(message, DecodedMessage)
        assert message.mmsi == 366053209
        assert callback_delta is delta

    def test_remove_callback(self, receiver, known_sentence):
        """Test removed callbacks are not called."""
        received = []

        def callback(message, delta):
            received.append(message)

        receiver.add_callback(callback)
        receiver.remove_callback(callback)
        receiver.remove_callback(callback)
        receiver.process_sentence(known_sentence)
        assert received == []

    def test_failing_callback_logged(self, receiver, known_sentence, caplog):
        """Test a raising callback does not stop the others."""
        received = []

        def broken(message, delta):
            raise RuntimeError("boom")

        receiver.add_callback(broken)
        receiver.add_callback(lambda message, delta: received.append(message))
        with caplog.at_level(logging.ERROR):
            assert receiver.process_sentence(known_sentence) is not None
        assert len(received) == 1
        assert "Callback failed" in caplog.text

    def test_failure_callbacks(self, receiver, known_payload):
        """Test failure callbacks receive decode failures."""
        failures = []
        receiver.add_failure_callback(failures.append)
        receiver.process_payload(known_payload[:10])
        receiver.process_sentence(_sentence("15Ma"))
        assert [f.kind for f in failures] == [
            FailureKind.TRUNCATED_PAYLOAD,
            FailureKind.MALFORMED_PAYLOAD,
        ]
        assert failures[0].mmsi == 366053209

    def test_failure_callbacks_skip_decoded(self, receiver, known_sentence):
        """Test decoded messages do not reach failure callbacks."""
        failures = []
        receiver.add_failure_callback(failures.append)
        receiver.process_sentence(known_sentence)
        assert failures == []

    def test_remove_failure_callback(self, receiver):
        """Test removed failure callbacks are not called."""
        failures = []
        receiver.add_failure_callback(failures.append)
        receiver.remove_failure_callback(failures.append)
        receiver.process_payload("")
        assert failures == []
        assert receiver.status.errors == 1

    def test_failing_failure_callback_logged(self, receiver, caplog):
        """Test a raising failure callback is logged."""

        def broken(failure):
            raise RuntimeError("boom")

        receiver.add_failure_callback(broken)
        with caplog.at_level(logging.ERROR):
            assert receiver.process_payload("") is None
        assert "Failure callback failed" in caplog.text

    def test_status_is_snapshot(self, receiver, known_sentence):
        """Test status copies do not change afterwards."""
        snapshot = receiver.status
        receiver.process_sentence(known_sentence)
        assert snapshot.messages_received == 0
        assert receiver.status.messages_received == 1

    def test_reset(self, receiver, known_sentence):
        """Test reset clears counters."""
        receiver.process_sentence(known_sentence)
        receiver.reset()
        assert receiver.status == ReceiverStatus()

    def test_default_config(self, known_sentence):
        """Test receiver without configuration."""
        receiver = AISReceiver()
        assert receiver.config == ReceiverConfig()
        delta = receiver.process_sentence(known_sentence)
        assert delta["updates"][0]["source"]["label"] == "AIS"
