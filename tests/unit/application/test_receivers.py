"""Unit tests for guarded receivers."""

from __future__ import annotations

from unittest.mock import MagicMock

from structlog.testing import capture_logs

from labelbus.application.receivers import guarded
from labelbus.kernel.messaging import Message
from labelbus.streams import Stream
from labelbus.testing import RecordingReceiver


def _explode(message: Message) -> None:
    raise RuntimeError("consumer failed")


class TestGuarded:
    def test_isolates_failure_from_siblings(self, root_stream: Stream, recording_receiver: RecordingReceiver) -> None:
        root_stream.add_receiver(guarded(_explode))
        root_stream.add_receiver(recording_receiver)
        with capture_logs():
            root_stream.send(Message(log_level=10))
        assert recording_receiver.call_count == 1

    def test_logs_failure(self) -> None:
        with capture_logs() as logs:
            guarded(_explode)(Message(log_level=50, labels={"app": "a"}))
        (event,) = logs
        assert event["event"] == "stream.receiver.failed"
        assert event["log_level"] == "error"
        assert event["labels"] == {"app": "a"}
        assert "_explode" in event["receiver"]

    def test_custom_logger(self) -> None:
        log = MagicMock()
        guarded(_explode, logger=log)(Message(log_level=10))
        log.exception.assert_called_once()
        assert log.exception.call_args.args == ("stream.receiver.failed",)

    def test_passes_message_through(self, recording_receiver: RecordingReceiver) -> None:
        m = Message(log_level=10)
        guarded(recording_receiver)(m)
        assert recording_receiver.last is m

    def test_wrapper_is_the_registration(self, root_stream: Stream, recording_receiver: RecordingReceiver) -> None:
        wrapper = guarded(recording_receiver)
        root_stream.add_receiver(wrapper)
        root_stream.remove_receiver(recording_receiver)
        assert root_stream.receivers == (wrapper,)
        root_stream.remove_receiver(wrapper)
        assert root_stream.receivers == ()

    def test_keeps_function_metadata(self) -> None:
        assert guarded(_explode).__name__ == "_explode"
