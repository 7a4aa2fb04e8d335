"""Config – BusSettings."""
from __future__ import annotations

import dataclasses
from typing import ClassVar

from labelbus.config.settings.base import Settings
from labelbus.config.validation import InvalidSettingValueError


@dataclasses.dataclass
class BusSettings(Settings):
    """Settings applied by :func:`labelbus.application.hub.create_context`.

    Environment variables (via :class:`EnvSettingsLoader`)::

        LABELBUS_ROOT_LOG_LEVEL=30      # floor on the root stream
        LABELBUS_SERVICE_NAME=billing   # default "service" label of the logger
        LABELBUS_REDACT_SENSITIVE=true  # redaction interceptor on the root
    """

    _prefix: ClassVar[str] = "LABELBUS"

    root_log_level: int | None = None
    service_name: str | None = None
    redact_sensitive: bool = False

    def _validate(self) -> None:
        if self.root_log_level is not None and (
            isinstance(self.root_log_level, bool) or not isinstance(self.root_log_level, int)
        ):
            raise InvalidSettingValueError("root_log_level", self.root_log_level, "must be an integer")
        if self.service_name is not None and not self.service_name.strip():
            raise InvalidSettingValueError("service_name", self.service_name, "must not be blank")


__all__ = ["BusSettings"]
