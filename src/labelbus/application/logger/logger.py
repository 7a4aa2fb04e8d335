"""Application logger – turns named severity levels into stream messages."""
from __future__ import annotations

from typing import Any, Callable, Mapping, TypeAlias

from labelbus.kernel.errors import UnknownLogLevelError
from labelbus.kernel.messaging import DEFAULT_LOG_LEVELS, Labels, Sender, create_message
from labelbus.kernel.time import Clock, SystemClock

LogFunction: TypeAlias = Callable[..., None]


class Logger:
    """Producer that sends timestamped messages to a :class:`Sender`.

    Levels are looked up in an explicit ``name -> number`` mapping.  Besides
    :meth:`log`, every configured name is reachable as a shortcut::

        logger = Logger(hub)
        logger.info("started", labels={"app": "billing"})
        logger.log("warn", "disk almost full")

    Shortcuts are resolved against the current mapping on attribute lookup,
    so :meth:`set_log_levels` takes effect immediately.

    A level whose name is also a method of this class is not reachable as a
    shortcut.  The default vocabulary has one such level, ``log``; reach it
    with ``logger.level_function("log")`` or ``logger.log("log", value)``.

    Parameters
    ----------
    sender:
        Anything with ``send(message)`` – a stream or a hub.
    log_levels:
        Level vocabulary; defaults to :data:`DEFAULT_LOG_LEVELS`.
    labels:
        Default labels merged into every message sent through :meth:`log`.
    clock:
        Timestamp source (UTC system clock by default).
    """

    def __init__(
        self,
        sender: Sender,
        log_levels: Mapping[str, int] | None = None,
        labels: Labels | None = None,
        *,
        clock: Clock | None = None,
    ) -> None:
        self._sender = sender
        self._clock: Clock = clock or SystemClock()
        self._labels: Labels = dict(labels or {})
        self._log_levels: dict[str, int] = {}
        self.set_log_levels(log_levels if log_levels is not None else DEFAULT_LOG_LEVELS)

    # -- levels --------------------------------------------------------

    def set_log_levels(self, log_levels: Mapping[str, int]) -> None:
        """Replace the level vocabulary; shortcuts of removed names stop resolving."""
        self._log_levels = dict(log_levels)

    def get_log_levels(self) -> dict[str, int]:
        return dict(self._log_levels)

    # -- default labels -------------------------------------------------

    def set_labels(self, labels: Labels | None = None) -> None:
        self._labels = dict(labels or {})

    def get_labels(self) -> Labels:
        return dict(self._labels)

    # -- producing -----------------------------------------------------

    def log(self, level_name: str, value: Any, labels: Labels | None = None) -> None:
        """Send *value* at the level registered under *level_name*.

        Call *labels* override the logger's default labels key by key.

        Raises
        ------
        UnknownLogLevelError
            When *level_name* is not part of the current vocabulary.
        """
        try:
            log_level = self._log_levels[level_name]
        except KeyError:
            raise UnknownLogLevelError(level_name, list(self._log_levels)) from None
        applied = {**self._labels, **(labels or {})}
        self._sender.send(create_message(log_level, applied, value, clock=self._clock))

    def level_function(self, level_name: str) -> LogFunction:
        """Return ``fn(value, labels=None)`` bound to *level_name*."""
        if level_name not in self._log_levels:
            raise UnknownLogLevelError(level_name, list(self._log_levels))

        def _log(value: Any, labels: Labels | None = None) -> None:
            self.log(level_name, value, labels)

        _log.__name__ = level_name
        return _log

    def create_log_function(self, log_level: int, labels: Labels | None = None) -> Callable[[Any], None]:
        """Return ``fn(value)`` sending at a fixed numeric level with fixed labels.

        The logger's default labels are not applied.
        """
        fixed = dict(labels or {})

        def _log(value: Any) -> None:
            self._sender.send(create_message(log_level, fixed, value, clock=self._clock))

        return _log

    def __getattr__(self, name: str) -> LogFunction:
        # only reached for names that are not regular attributes
        if name.startswith("_"):
            raise AttributeError(name)
        if name in self.__dict__.get("_log_levels", {}):
            return self.level_function(name)
        raise AttributeError(f"{type(self).__name__!r} has no attribute or log level {name!r}")

    def __repr__(self) -> str:
        return f"Logger(levels={sorted(self._log_levels)!r}, labels={self._labels!r})"


__all__ = ["LogFunction", "Logger"]
