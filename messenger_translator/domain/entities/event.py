"""Inbound Messenger event entities."""
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, List, Dict, Any


class EventKind(str, Enum):
    """Kinds of messaging events this relay understands."""
    MESSAGE = "message"
    POSTBACK = "postback"
    UNKNOWN = "unknown"


class SenderAction(str, Enum):
    """Sender actions accepted by the Send API."""
    MARK_SEEN = "mark_seen"
    TYPING_ON = "typing_on"
    TYPING_OFF = "typing_off"


@dataclass
class MessageEvent:
    """Free-text (or media) message sent by a user."""

    sender_id: str
    text: Optional[str] = None
    attachments: List[Dict[str, Any]] = field(default_factory=list)
    message_id: Optional[str] = None

    kind = EventKind.MESSAGE

    @property
    def has_attachments(self) -> bool:
        return bool(self.attachments)


@dataclass
class PostbackEvent:
    """Button press (persistent menu, Get Started, ...)."""

    sender_id: str
    payload: str
    title: Optional[str] = None

    kind = EventKind.POSTBACK
