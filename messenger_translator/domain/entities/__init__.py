"""Domain entities - core business objects."""
from messenger_translator.domain.entities.user import UserPreference
from messenger_translator.domain.entities.event import (
    EventKind,
    SenderAction,
    MessageEvent,
    PostbackEvent,
)

__all__ = [
    "UserPreference",
    "EventKind",
    "SenderAction",
    "MessageEvent",
    "PostbackEvent",
]
