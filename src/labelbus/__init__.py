"""
labelbus – label-routed structured message streams.

Import path convention::

    from labelbus.streams import Stream
    from labelbus.kernel.messaging import Message
    from labelbus.application.logger import Logger
    from labelbus.application.hub import create_context
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
