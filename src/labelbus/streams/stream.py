"""Streams – the base broadcast node.

A :class:`Stream` gates on an optional severity floor, runs its interceptor
pipeline, then fans the message out synchronously to its receivers.  Filter
streams (see :mod:`labelbus.streams.filters`) are receivers of their parent,
so sending at the root walks the whole tree depth-first before returning.

Ordering and mutation rules:

* interceptors and receivers run in registration order, per node;
* both lists are snapshotted before they are iterated, so a callback that
  subscribes or unsubscribes during a fan-out only affects later ``send``
  calls;
* exceptions from interceptors or receivers are **not** caught.  They abort
  the rest of the fan-out, including siblings registered after the failing
  receiver.  Wrap receivers with
  :func:`labelbus.application.receivers.guarded` when isolation is needed.

Streams hold no locks; callers sharing a tree across threads must serialise
``send`` and subscription changes themselves.
"""
from __future__ import annotations

from typing import TYPE_CHECKING, Any, Mapping

from labelbus.kernel.messaging import Interceptor, Message, Receiver
from labelbus.streams.subscription import Subscription, SubscriptionKind

if TYPE_CHECKING:
    from labelbus.streams.filters import (
        ConditionOperator,
        MatchAllStream,
        MatchConditionStream,
        MatchLabelsStream,
    )


class Stream:
    """Broadcast node of a stream tree."""

    def __init__(self, parent: "Stream | None" = None) -> None:
        self._parent = parent
        self._receivers: list[Subscription] = []
        self._interceptors: list[Subscription] = []
        self._log_level: int | None = None

    # ------------------------------------------------------------------
    # filter construction
    # ------------------------------------------------------------------

    def match_all(self) -> "MatchAllStream":
        """Return a child stream that receives every message of this one."""
        from labelbus.streams.filters import MatchAllStream

        return MatchAllStream(self)

    def match_labels(self, labels: Mapping[str, Any] | None) -> "MatchLabelsStream":
        """Return a child stream that receives messages carrying all *labels*.

        Raises :class:`~labelbus.streams.errors.InvalidFilterConfigError` when
        *labels* is empty or ``None``.
        """
        from labelbus.streams.filters import MatchLabelsStream

        return MatchLabelsStream(self, labels)

    def match_condition(
        self,
        key: str,
        operator: "str | ConditionOperator",
        value: Any,
    ) -> "MatchConditionStream":
        """Return a child stream filtered on one label.

        *operator* is ``IN``, ``NOT_IN`` or ``NOT`` (case-insensitive).
        """
        from labelbus.streams.filters import MatchConditionStream

        return MatchConditionStream(self, key, operator, value)

    # ------------------------------------------------------------------
    # configuration
    # ------------------------------------------------------------------

    @property
    def parent(self) -> "Stream | None":
        return self._parent

    @property
    def log_level(self) -> int | None:
        return self._log_level

    def set_log_level(self, log_level: int | None) -> "Stream":
        """Set (or clear with ``None``) the severity floor of this node only."""
        self._log_level = log_level
        return self

    # ------------------------------------------------------------------
    # receivers / interceptors
    # ------------------------------------------------------------------

    @property
    def receivers(self) -> tuple[Receiver, ...]:
        return tuple(s.callback for s in self._receivers)

    @property
    def interceptors(self) -> tuple[Interceptor, ...]:
        return tuple(s.callback for s in self._interceptors)

    def add_receiver(self, receiver: Receiver) -> Subscription:
        subscription = Subscription(self, receiver, "receiver")
        self._receivers.append(subscription)
        return subscription

    def remove_receiver(self, receiver: Receiver) -> None:
        """Remove every registration of *receiver* (by identity)."""
        if self._remove_matching("receiver", receiver):
            self._receivers_removed()

    def add_interceptor(self, interceptor: Interceptor) -> Subscription:
        subscription = Subscription(self, interceptor, "interceptor")
        self._interceptors.append(subscription)
        return subscription

    def remove_interceptor(self, interceptor: Interceptor) -> None:
        """Remove every registration of *interceptor* (by identity)."""
        self._remove_matching("interceptor", interceptor)

    # ------------------------------------------------------------------
    # delivery
    # ------------------------------------------------------------------

    def send(self, message: Message) -> None:
        if self._log_level is not None and message.log_level < self._log_level:
            return

        current: Message | None = message
        for subscription in tuple(self._interceptors):
            current = subscription.callback(current)
            if not current:
                return

        for subscription in tuple(self._receivers):
            subscription.callback(current)

    # ------------------------------------------------------------------
    # internals
    # ------------------------------------------------------------------

    def _registry(self, kind: SubscriptionKind) -> list[Subscription]:
        return self._receivers if kind == "receiver" else self._interceptors

    def _set_registry(self, kind: SubscriptionKind, entries: list[Subscription]) -> None:
        if kind == "receiver":
            self._receivers = entries
        else:
            self._interceptors = entries

    def _remove_matching(self, kind: SubscriptionKind, callback: Any) -> bool:
        kept: list[Subscription] = []
        removed = False
        for subscription in self._registry(kind):
            if subscription.callback is callback:
                subscription._deactivate()
                removed = True
            else:
                kept.append(subscription)
        if removed:
            self._set_registry(kind, kept)
        return removed

    def _unregister(self, subscription: Subscription) -> None:
        entries = self._registry(subscription.kind)
        if not any(s is subscription for s in entries):
            subscription._deactivate()
            return
        self._set_registry(subscription.kind, [s for s in entries if s is not subscription])
        subscription._deactivate()
        if subscription.kind == "receiver":
            self._receivers_removed()

    def _receivers_removed(self) -> None:
        """Hook run after at least one receiver registration was removed."""

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(receivers={len(self._receivers)}, "
            f"interceptors={len(self._interceptors)}, log_level={self._log_level!r})"
        )


__all__ = ["Stream"]
