"""Kernel errors – BaseError."""

from __future__ import annotations

import json
from typing import Any


class BaseError(Exception):
    """Root of every error labelbus raises on purpose.

    Errors raised by receivers and interceptors during delivery are never
    wrapped in this hierarchy; only construction and configuration misuse is.

    Args:
        message: Human-readable description.
        code: Machine-readable slug, ``default_code`` when omitted.
        detail: Serialisable context; copied, never shared with the caller.
        cause: Underlying exception, also chained as ``__cause__``.
    """

    default_code: str = "base_error"

    def __init__(
        self,
        message: str,
        *,
        code: str | None = None,
        detail: dict[str, Any] | None = None,
        cause: BaseException | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code or self.default_code
        self.detail: dict[str, Any] = dict(detail) if detail else {}
        self.cause = cause
        if cause is not None:
            self.__cause__ = cause

    def with_detail(self, **extra: Any) -> BaseError:
        """Add context keys that are not set yet and return ``self``."""
        for key, value in extra.items():
            self.detail.setdefault(key, value)
        return self

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {
            "code": self.code,
            "message": self.message,
            "detail": self.detail,
        }
        if self.cause is not None:
            payload["cause"] = repr(self.cause)
        return payload

    def __str__(self) -> str:
        return json.dumps(self.to_dict(), ensure_ascii=False, default=str)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(code={self.code!r}, message={self.message!r})"


__all__ = ["BaseError"]
