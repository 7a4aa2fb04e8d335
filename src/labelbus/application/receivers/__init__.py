"""Application receivers – consumer-side helpers."""
from labelbus.application.receivers.guard import guarded

__all__ = ["guarded"]
