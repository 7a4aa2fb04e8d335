"""Kernel messaging – Message, receiver/interceptor types, Sender port."""
from labelbus.kernel.messaging.levels import DEFAULT_LOG_LEVELS
from labelbus.kernel.messaging.message import (
    Interceptor,
    Labels,
    Message,
    Receiver,
    Sender,
    create_message,
)

__all__ = [
    "DEFAULT_LOG_LEVELS",
    "Interceptor",
    "Labels",
    "Message",
    "Receiver",
    "Sender",
    "create_message",
]
