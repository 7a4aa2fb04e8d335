"""Observability – structured logging for the library's own diagnostics."""
from labelbus.observability.logging import (
    JsonLoggerFactory,
    SensitiveFieldsFilter,
    get_logger,
)

__all__ = ["JsonLoggerFactory", "SensitiveFieldsFilter", "get_logger"]
