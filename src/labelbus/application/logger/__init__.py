"""Application logger – named-level producer for stream trees."""
from labelbus.application.logger.logger import LogFunction, Logger
from labelbus.kernel.messaging import DEFAULT_LOG_LEVELS

__all__ = ["DEFAULT_LOG_LEVELS", "LogFunction", "Logger"]
