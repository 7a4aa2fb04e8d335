"""Application hub – explicit wiring of a root stream and a logger."""
from labelbus.application.hub.context import BusContext, create_context
from labelbus.application.hub.hub import MessageHub

__all__ = ["BusContext", "MessageHub", "create_context"]
