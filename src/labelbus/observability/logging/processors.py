"""Observability – structlog processors and get_logger helper."""
from __future__ import annotations

from typing import Any

import structlog


class StreamContextProcessor:
    """structlog processor that flattens a bound ``stream`` object to its repr.

    Stream nodes are bound as live objects so that ``repr`` is evaluated only
    when an event is actually rendered.
    """

    def __call__(
        self,
        logger: Any,           # noqa: ARG002
        method_name: str,      # noqa: ARG002
        event_dict: dict[str, Any],
    ) -> dict[str, Any]:
        for key in ("stream", "parent"):
            node = event_dict.get(key)
            if node is not None and not isinstance(node, str):
                event_dict[key] = repr(node)
        return event_dict


def get_logger(name: str | None = None, **initial_values: Any) -> Any:
    """Return a bound structlog logger.

    Parameters
    ----------
    name:
        Logger name (typically ``__name__`` of the calling module).
    **initial_values:
        Key-value pairs to bind on the returned logger.
    """
    logger = structlog.get_logger(name)
    if initial_values:
        logger = logger.bind(**initial_values)
    return logger


__all__ = ["StreamContextProcessor", "get_logger"]
