"""Kernel messaging – message primitives and producer/consumer ports."""
from __future__ import annotations

import dataclasses
from datetime import datetime
from typing import Any, Callable, Protocol, TypeAlias

from labelbus.kernel.messaging.levels import DEFAULT_LOG_LEVELS
from labelbus.kernel.time import Clock, SystemClock

Labels: TypeAlias = dict[str, Any]


@dataclasses.dataclass
class Message:
    """Unit of data flowing through a stream tree.

    Deliberately not frozen: interceptors may mutate the instance in place,
    and every receiver of one ``send`` call sees that same object.  Use
    :meth:`with_changes` when a stage should not affect other consumers.
    """

    log_level: int
    labels: Labels = dataclasses.field(default_factory=dict)
    value: Any = None
    timestamp: datetime | None = None

    def with_changes(self, **changes: Any) -> "Message":
        """Return a copy with *changes* applied; the labels dict is never shared."""
        if "labels" not in changes:
            changes["labels"] = dict(self.labels)
        return dataclasses.replace(self, **changes)

    def to_dict(self) -> dict[str, Any]:
        return {
            "log_level": self.log_level,
            "labels": dict(self.labels),
            "value": self.value,
            "timestamp": self.timestamp.isoformat() if self.timestamp is not None else None,
        }


Receiver: TypeAlias = Callable[[Message], None]
Interceptor: TypeAlias = Callable[[Message], Message | None]


class Sender(Protocol):
    """Port: anything a producer can hand a message to."""

    def send(self, message: Message) -> None: ...


def create_message(
    log_level: int = DEFAULT_LOG_LEVELS["log"],
    labels: Labels | None = None,
    value: Any = None,
    *,
    clock: Clock | None = None,
) -> Message:
    """Build a timestamped message (the streams themselves never stamp)."""
    return Message(
        log_level=log_level,
        labels=dict(labels or {}),
        value=value,
        timestamp=(clock or SystemClock()).now(),
    )


__all__ = [
    "Interceptor",
    "Labels",
    "Message",
    "Receiver",
    "Sender",
    "create_message",
]
