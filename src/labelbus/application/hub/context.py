"""Application hub – BusContext and create_context."""
from __future__ import annotations

import dataclasses
from typing import Mapping

from labelbus.application.hub.hub import MessageHub
from labelbus.application.interceptors import RedactionInterceptor
from labelbus.application.logger import Logger
from labelbus.config import BusSettings
from labelbus.kernel.time import Clock
from labelbus.observability.logging import get_logger
from labelbus.streams import Stream

_log = get_logger(__name__)


@dataclasses.dataclass(frozen=True)
class BusContext:
    """Hub, logger and the settings they were built from.

    Built once by the application entry point and handed to the code that
    produces or consumes messages.
    """

    hub: MessageHub
    logger: Logger
    settings: BusSettings

    @property
    def messages(self) -> Stream:
        return self.hub.messages


def create_context(
    settings: BusSettings | None = None,
    *,
    clock: Clock | None = None,
    log_levels: Mapping[str, int] | None = None,
) -> BusContext:
    """Wire a :class:`MessageHub` and a :class:`Logger` sending to it.

    ``settings.root_log_level`` becomes the root floor,
    ``settings.service_name`` a default ``service`` label of the logger, and
    ``settings.redact_sensitive`` installs a :class:`RedactionInterceptor`
    on the root stream.
    """
    settings = settings or BusSettings()
    hub = MessageHub(clock=clock)

    if settings.root_log_level is not None:
        hub.messages.set_log_level(settings.root_log_level)
    if settings.redact_sensitive:
        hub.messages.add_interceptor(RedactionInterceptor())

    labels = {"service": settings.service_name} if settings.service_name else None
    logger = Logger(hub, log_levels, labels, clock=clock)

    _log.debug(
        "bus.context.created",
        root_log_level=settings.root_log_level,
        service=settings.service_name,
        redact_sensitive=settings.redact_sensitive,
    )
    return BusContext(hub=hub, logger=logger, settings=settings)


__all__ = ["BusContext", "create_context"]
