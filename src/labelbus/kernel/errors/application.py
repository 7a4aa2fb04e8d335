"""Application-layer errors – misuse of the producer-facing API."""

from __future__ import annotations

from typing import Any

from labelbus.kernel.errors.base import BaseError


class ApplicationError(BaseError):
    """Cross-cutting application-layer concern."""

    default_code = "application_error"


class UnknownLogLevelError(ApplicationError):
    """A level name was used that the logger's level mapping does not define."""

    default_code = "unknown_log_level"

    def __init__(
        self,
        level_name: str,
        known_levels: list[str] | None = None,
        **kwargs: Any,
    ) -> None:
        known = sorted(known_levels or [])
        super().__init__(
            f"Unknown log level '{level_name}'",
            detail={"level_name": level_name, "known_levels": known},
            **kwargs,
        )
        self.level_name = level_name
        self.known_levels = known


__all__ = ["ApplicationError", "UnknownLogLevelError"]
