"""Streams – label-filtered broadcast trees.

Usage::

    root = Stream()
    errors = root.match_labels({"app": "billing"}).set_log_level(50)
    unsubscribe = errors.add_receiver(print)
    root.send(Message(log_level=50, labels={"app": "billing"}, value="boom"))
    unsubscribe()
"""
from labelbus.streams.errors import InvalidFilterConfigError
from labelbus.streams.filters import (
    ConditionOperator,
    FilterStream,
    MatchAllStream,
    MatchConditionStream,
    MatchLabelsStream,
)
from labelbus.streams.stream import Stream
from labelbus.streams.subscription import Subscription

__all__ = [
    "ConditionOperator",
    "FilterStream",
    "InvalidFilterConfigError",
    "MatchAllStream",
    "MatchConditionStream",
    "MatchLabelsStream",
    "Stream",
    "Subscription",
]
