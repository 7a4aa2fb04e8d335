"""Application hub – MessageHub."""
from __future__ import annotations

from labelbus.kernel.messaging import Message
from labelbus.kernel.time import Clock, SystemClock
from labelbus.streams import Stream


class MessageHub:
    """Entry point producers send to; consumers subscribe on :attr:`messages`.

    The hub stamps messages that arrive without a timestamp, then hands them
    to its root stream.  It holds no other state: create one per application
    (see :func:`~labelbus.application.hub.context.create_context`) and pass
    it to whatever needs it.
    """

    def __init__(self, root: Stream | None = None, *, clock: Clock | None = None) -> None:
        self._stream = root if root is not None else Stream()
        self._clock: Clock = clock or SystemClock()

    @property
    def messages(self) -> Stream:
        return self._stream

    def send(self, message: Message) -> None:
        if message.timestamp is None:
            message.timestamp = self._clock.now()
        self._stream.send(message)


__all__ = ["MessageHub"]
