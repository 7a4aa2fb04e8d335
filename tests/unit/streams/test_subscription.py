"""Unit tests for Subscription handles."""

from __future__ import annotations

from labelbus.kernel.messaging import Message
from labelbus.streams import Stream
from labelbus.testing import RecordingReceiver


class TestSubscription:
    def test_call_unsubscribes(self, root_stream: Stream, recording_receiver: RecordingReceiver) -> None:
        sub = root_stream.add_receiver(recording_receiver)
        assert sub.active
        sub()
        assert not sub.active
        root_stream.send(Message(log_level=10))
        assert recording_receiver.call_count == 0

    def test_unsubscribe_is_idempotent(self, root_stream: Stream, recording_receiver: RecordingReceiver) -> None:
        other = RecordingReceiver()
        sub = root_stream.add_receiver(recording_receiver)
        root_stream.add_receiver(other)
        sub.unsubscribe()
        sub.unsubscribe()
        sub()
        assert root_stream.receivers == (other,)

    def test_removes_exactly_its_own_registration(self, root_stream: Stream, recording_receiver: RecordingReceiver) -> None:
        first = root_stream.add_receiver(recording_receiver)
        second = root_stream.add_receiver(recording_receiver)
        first()
        assert not first.active
        assert second.active
        root_stream.send(Message(log_level=10))
        assert recording_receiver.call_count == 1

    def test_handle_inactive_after_remove_by_callback(self, root_stream: Stream, recording_receiver: RecordingReceiver) -> None:
        sub = root_stream.add_receiver(recording_receiver)
        root_stream.remove_receiver(recording_receiver)
        assert not sub.active
        sub()
        assert root_stream.receivers == ()

    def test_stale_handle_does_not_remove_new_registration(self, root_stream: Stream, recording_receiver: RecordingReceiver) -> None:
        stale = root_stream.add_receiver(recording_receiver)
        root_stream.remove_receiver(recording_receiver)
        fresh = root_stream.add_receiver(recording_receiver)
        stale()
        assert fresh.active
        assert root_stream.receivers == (recording_receiver,)

    def test_interceptor_subscription_kind(self, root_stream: Stream) -> None:
        sub = root_stream.add_interceptor(lambda m: m)
        assert sub.kind == "interceptor"
        sub()
        assert root_stream.interceptors == ()

    def test_repr(self, root_stream: Stream, recording_receiver: RecordingReceiver) -> None:
        sub = root_stream.add_receiver(recording_receiver)
        assert "active" in repr(sub)
        sub()
        assert "removed" in repr(sub)
