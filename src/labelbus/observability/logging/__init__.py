"""Observability – structured logging helpers."""
from labelbus.observability.logging.factory import JsonLoggerFactory
from labelbus.observability.logging.filters import DEFAULT_SENSITIVE_FIELDS, SensitiveFieldsFilter
from labelbus.observability.logging.processors import StreamContextProcessor, get_logger

__all__ = [
    "DEFAULT_SENSITIVE_FIELDS",
    "JsonLoggerFactory",
    "SensitiveFieldsFilter",
    "StreamContextProcessor",
    "get_logger",
]
