"""structlog adapter – render stream messages through structlog."""
from labelbus.adapters.structlog.receiver import DEFAULT_LEVEL_METHODS, StructlogReceiver

__all__ = ["DEFAULT_LEVEL_METHODS", "StructlogReceiver"]
