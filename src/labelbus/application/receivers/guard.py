"""Application receivers – guarded (per-receiver fault isolation)."""
from __future__ import annotations

import functools
from typing import Any

from labelbus.kernel.messaging import Message, Receiver
from labelbus.observability.logging import get_logger


def guarded(receiver: Receiver, *, logger: Any = None) -> Receiver:
    """Wrap *receiver* so that its exceptions are logged instead of raised.

    Streams let receiver errors propagate, which stops delivery to every
    receiver registered after the failing one.  Register the wrapper instead
    of the receiver where one consumer must not starve its siblings::

        stream.add_receiver(guarded(flaky_consumer))

    Keep a reference to the returned wrapper to remove it later; the original
    receiver is not registered and cannot be used for removal.
    """
    log = logger or get_logger(__name__)

    @functools.wraps(receiver)
    def _guarded(message: Message) -> None:
        try:
            receiver(message)
        except Exception:
            log.exception(
                "stream.receiver.failed",
                receiver=getattr(receiver, "__qualname__", repr(receiver)),
                log_level=message.log_level,
                labels=message.labels,
            )

    return _guarded


__all__ = ["guarded"]
