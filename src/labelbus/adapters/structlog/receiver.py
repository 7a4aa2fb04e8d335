"""structlog adapter – StructlogReceiver."""
from __future__ import annotations

import bisect
from typing import Any, Mapping

from labelbus.kernel.messaging import Message
from labelbus.observability.logging import get_logger

DEFAULT_LEVEL_METHODS: Mapping[int, str] = {
    10: "debug",
    30: "info",
    40: "warning",
    50: "error",
}


class StructlogReceiver:
    """Receiver that renders each message as a structlog event.

    The numeric level picks the logger method with the highest threshold not
    above it; anything below the lowest threshold uses that lowest method.

    Usage::

        root.match_condition("env", "IN", ["prod"]).add_receiver(StructlogReceiver())
    """

    def __init__(
        self,
        logger: Any = None,
        level_methods: Mapping[int, str] | None = None,
    ) -> None:
        self._logger = logger or get_logger("labelbus.messages")
        methods = dict(level_methods or DEFAULT_LEVEL_METHODS)
        if not methods:
            raise ValueError("level_methods must not be empty")
        self._thresholds = sorted(methods)
        self._methods = [methods[t] for t in self._thresholds]

    def method_for(self, log_level: int) -> str:
        index = bisect.bisect_right(self._thresholds, log_level) - 1
        return self._methods[max(index, 0)]

    def __call__(self, message: Message) -> None:
        emit = getattr(self._logger, self.method_for(message.log_level))
        fields: dict[str, Any] = {"log_level": message.log_level, "labels": dict(message.labels)}
        if message.timestamp is not None:
            fields["message_timestamp"] = message.timestamp.isoformat()
        emit(str(message.value), **fields)


__all__ = ["DEFAULT_LEVEL_METHODS", "StructlogReceiver"]
