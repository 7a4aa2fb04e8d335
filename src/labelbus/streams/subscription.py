"""Streams – Subscription handle returned by add_receiver / add_interceptor."""
from __future__ import annotations

from typing import TYPE_CHECKING, Any, Callable, Literal, TypeAlias

if TYPE_CHECKING:
    from labelbus.streams.stream import Stream

SubscriptionKind: TypeAlias = Literal["receiver", "interceptor"]


class Subscription:
    """One registration of a callback on one stream node.

    Calling the handle (or :meth:`unsubscribe`) removes exactly this
    registration, even when the same callback was registered more than once.
    Unsubscribing is idempotent.
    """

    __slots__ = ("_active", "_kind", "_stream", "callback")

    def __init__(self, stream: "Stream", callback: Callable[..., Any], kind: SubscriptionKind) -> None:
        self._stream = stream
        self._kind: SubscriptionKind = kind
        self._active = True
        self.callback = callback

    @property
    def kind(self) -> SubscriptionKind:
        return self._kind

    @property
    def stream(self) -> "Stream":
        return self._stream

    @property
    def active(self) -> bool:
        return self._active

    def unsubscribe(self) -> None:
        if self._active:
            self._stream._unregister(self)

    __call__ = unsubscribe

    def _deactivate(self) -> None:
        self._active = False

    def __repr__(self) -> str:
        state = "active" if self._active else "removed"
        return f"Subscription({self._kind}, {self.callback!r}, {state})"


__all__ = ["Subscription", "SubscriptionKind"]
