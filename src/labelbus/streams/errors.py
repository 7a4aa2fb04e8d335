"""Streams – filter construction errors."""
from __future__ import annotations

from typing import Any

from labelbus.config.validation import ConfigError


class InvalidFilterConfigError(ConfigError):
    """A filter stream was constructed with an unusable predicate.

    Raised synchronously by ``match_labels`` / ``match_condition``; nothing is
    attached to the parent when this is raised.
    """

    default_code = "invalid_filter_config"

    def __init__(self, message: str, *, filter_kind: str, **kwargs: Any) -> None:
        super().__init__(message, **kwargs)
        self.with_detail(filter_kind=filter_kind)
        self.filter_kind = filter_kind


__all__ = ["InvalidFilterConfigError"]
