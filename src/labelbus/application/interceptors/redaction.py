"""Application interceptors – RedactionInterceptor."""
from __future__ import annotations

from labelbus.kernel.messaging import Message
from labelbus.observability.logging import SensitiveFieldsFilter


class RedactionInterceptor:
    """Replace sensitive label values with ``[REDACTED]``.

    Returns a new message rather than mutating the one it was given, so
    streams elsewhere in the tree that share the original instance are not
    affected.  Messages without sensitive labels pass through untouched.

    Usage::

        root.add_interceptor(RedactionInterceptor())
    """

    def __init__(self, sensitive_fields: frozenset[str] | None = None) -> None:
        self._filter = SensitiveFieldsFilter(sensitive_fields)

    def __call__(self, message: Message) -> Message:
        if not self._needs_redaction(message.labels):
            return message
        return message.with_changes(labels=self._filter.redact_deep(message.labels))

    def _needs_redaction(self, labels: dict) -> bool:
        for key, value in labels.items():
            if key.lower() in self._filter.fields:
                return True
            if isinstance(value, dict) and self._needs_redaction(value):
                return True
        return False


__all__ = ["RedactionInterceptor"]
