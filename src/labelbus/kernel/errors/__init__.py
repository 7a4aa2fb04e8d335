"""Kernel error hierarchy – public re-export surface.

Hierarchy::

    BaseError
    └── ApplicationError             (application.py)
        ├── UnknownLogLevelError
        └── ConfigError              (labelbus.config.validation)
            ├── MissingRequiredSettingError
            ├── InvalidSettingValueError
            └── InvalidFilterConfigError   (labelbus.streams)
"""

from labelbus.kernel.errors.application import ApplicationError, UnknownLogLevelError
from labelbus.kernel.errors.base import BaseError

__all__ = [
    "ApplicationError",
    "BaseError",
    "UnknownLogLevelError",
]
