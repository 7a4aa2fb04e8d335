"""Testing fakes – in-memory doubles."""
from labelbus.testing.fakes.clock import FakeClock
from labelbus.testing.fakes.receiver import RecordingReceiver

__all__ = ["FakeClock", "RecordingReceiver"]
