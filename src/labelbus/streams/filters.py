"""Streams – filter streams.

Every filter is a child :class:`~labelbus.streams.stream.Stream` whose
:meth:`FilterStream.rule` is registered as a receiver of its parent.  When
the predicate holds, the rule re-sends the message on the child, so the
child's own severity floor and interceptors still apply.

All variants share one lifecycle: a filter is *attached* from construction
until :meth:`FilterStream.dispose` is called, either explicitly or because
its last receiver was removed.  Detaching is terminal.
"""
from __future__ import annotations

import abc
from enum import Enum
from typing import Any, Mapping

from labelbus.kernel.messaging import Message, Receiver
from labelbus.observability.logging import get_logger
from labelbus.streams.errors import InvalidFilterConfigError
from labelbus.streams.stream import Stream
from labelbus.streams.subscription import Subscription

_log = get_logger(__name__)

# stands in for an absent label; never equal to a user value
_MISSING: Any = object()


def _same(actual: Any, expected: Any) -> bool:
    """Equality that keeps booleans apart from the numbers they compare equal to."""
    return isinstance(actual, bool) is isinstance(expected, bool) and actual == expected


class ConditionOperator(str, Enum):
    IN = "IN"
    NOT_IN = "NOT_IN"
    NOT = "NOT"


class FilterStream(Stream, abc.ABC):
    """Child stream that re-broadcasts the parent messages its predicate accepts.

    Subclasses set up their predicate state *before* calling
    ``super().__init__`` so that a configuration error never leaves a rule
    attached to the parent.
    """

    def __init__(self, parent: Stream) -> None:
        super().__init__(parent)
        self._disposed = False
        # one bound method for the life of the filter, so the parent can be
        # handed `child.rule` back for removal by identity
        self.rule = self.rule  # type: ignore[method-assign]
        self._rule_subscription: Subscription = parent.add_receiver(self.rule)
        _log.debug("stream.filter.attached", stream=self, parent=parent)

    @property
    def parent(self) -> Stream:
        return self._parent  # type: ignore[return-value]

    @property
    def attached(self) -> bool:
        return not self._disposed and self._rule_subscription.active

    @abc.abstractmethod
    def matches(self, message: Message) -> bool: ...

    def rule(self, message: Message) -> None:
        """Receiver registered on the parent."""
        if self.matches(message):
            self.send(message)

    def dispose(self) -> None:
        """Detach the rule from the parent.  Idempotent."""
        if self._disposed:
            return
        self._disposed = True
        self._rule_subscription.unsubscribe()
        _log.debug("stream.filter.detached", stream=self, parent=self._parent)

    def add_receiver(self, receiver: Receiver) -> Subscription:
        if not self.attached:
            _log.warning("stream.filter.add_to_detached", stream=self)
        return super().add_receiver(receiver)

    def _receivers_removed(self) -> None:
        if not self._receivers:
            self.dispose()

    def __enter__(self) -> "FilterStream":
        return self

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        self.dispose()


class MatchAllStream(FilterStream):
    """Pass-through filter: a sub-scope for its own floor and interceptors."""

    def matches(self, message: Message) -> bool:
        return True


class MatchLabelsStream(FilterStream):
    """Forward messages whose labels equal every label of the filter.

    Labels on the message that the filter does not name are ignored; a label
    the filter names but the message lacks never matches.
    """

    def __init__(self, parent: Stream, labels: Mapping[str, Any] | None = None) -> None:
        if not labels:
            raise InvalidFilterConfigError(
                "No labels were provided to the MatchLabelsStream",
                filter_kind="match_labels",
            )
        self._labels: dict[str, Any] = dict(labels)
        super().__init__(parent)

    @property
    def labels(self) -> dict[str, Any]:
        return dict(self._labels)

    def matches(self, message: Message) -> bool:
        labels = message.labels
        return all(_same(labels.get(key, _MISSING), value) for key, value in self._labels.items())

    def __repr__(self) -> str:
        return f"MatchLabelsStream(labels={self._labels!r}, receivers={len(self._receivers)})"


class MatchConditionStream(FilterStream):
    """Forward messages by testing one label against a set of values.

    ``IN`` / ``NOT_IN`` test membership.  ``NOT`` compares against the first
    configured value only, even when several were given.
    """

    def __init__(
        self,
        parent: Stream,
        key: str,
        operator: str | ConditionOperator,
        value: Any,
    ) -> None:
        if not isinstance(key, str) or not key:
            raise InvalidFilterConfigError(
                "MatchConditionStream requires a non-empty label key",
                filter_kind="match_condition",
                detail={"key": key},
            )
        self._key = key
        self._operator = self._parse_operator(operator)
        self._values = self._as_values(value)
        super().__init__(parent)

    @property
    def key(self) -> str:
        return self._key

    @property
    def operator(self) -> ConditionOperator:
        return self._operator

    @property
    def values(self) -> tuple[Any, ...]:
        return self._values

    @staticmethod
    def _parse_operator(operator: str | ConditionOperator) -> ConditionOperator:
        if isinstance(operator, ConditionOperator):
            return operator
        if isinstance(operator, str):
            try:
                return ConditionOperator(operator.upper())
            except ValueError:
                pass
        raise InvalidFilterConfigError(
            "Invalid operator for MatchConditionStream",
            filter_kind="match_condition",
            detail={
                "operator": operator,
                "allowed": [op.value for op in ConditionOperator],
            },
        )

    @staticmethod
    def _as_values(value: Any) -> tuple[Any, ...]:
        if isinstance(value, (list, tuple, set, frozenset)):
            return tuple(value)
        return (value,)

    def matches(self, message: Message) -> bool:
        actual = message.labels.get(self._key, _MISSING)
        match self._operator:
            case ConditionOperator.IN:
                return any(_same(actual, value) for value in self._values)
            case ConditionOperator.NOT_IN:
                return not any(_same(actual, value) for value in self._values)
            case ConditionOperator.NOT:
                expected = self._values[0] if self._values else _MISSING
                return not _same(actual, expected)

    def __repr__(self) -> str:
        return (
            f"MatchConditionStream(key={self._key!r}, operator={self._operator.value}, "
            f"values={self._values!r}, receivers={len(self._receivers)})"
        )


__all__ = [
    "ConditionOperator",
    "FilterStream",
    "MatchAllStream",
    "MatchConditionStream",
    "MatchLabelsStream",
]
