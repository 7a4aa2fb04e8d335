"""Kernel messaging – default severity vocabulary.

The streams compare raw integers and never consult this mapping; it is the
convention the :class:`~labelbus.application.logger.Logger` starts from.
"""
from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

# names mirror the usual console methods; "log" and "debug" share a floor
DEFAULT_LOG_LEVELS: Mapping[str, int] = MappingProxyType({
    "debug": 10,
    "log": 10,
    "info": 30,
    "warn": 40,
    "error": 50,
})

__all__ = ["DEFAULT_LOG_LEVELS"]
