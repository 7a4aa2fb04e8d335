"""Application interceptors – LabelEnricher and drop_below."""
from __future__ import annotations

from typing import Any

from labelbus.kernel.messaging import Interceptor, Message


class LabelEnricher:
    """Add default labels to messages that do not already carry them (copy-on-write)."""

    def __init__(self, **labels: Any) -> None:
        self._labels = labels

    def __call__(self, message: Message) -> Message:
        missing = {k: v for k, v in self._labels.items() if k not in message.labels}
        if not missing:
            return message
        return message.with_changes(labels={**message.labels, **missing})


def drop_below(log_level: int) -> Interceptor:
    """Interceptor that drops messages under *log_level*.

    Unlike a stream floor it sits at a chosen position of the pipeline, so
    earlier interceptors still see every message.
    """

    def _gate(message: Message) -> Message | None:
        return message if message.log_level >= log_level else None

    return _gate


__all__ = ["LabelEnricher", "drop_below"]
