"""Utilities for parsing Messenger webhook payloads."""
from typing import Dict, Any, Optional, List, Union

from messenger_translator.domain.entities.event import EventKind, MessageEvent, PostbackEvent


class WebhookParser:
    """Utility class for parsing Messenger webhook payloads."""

    @staticmethod
    def is_page_object(webhook_body: Any) -> bool:
        """
        Check if webhook was sent for a page subscription.

        Args:
            webhook_body: Webhook payload

        Returns:
            True if the payload's object is "page"
        """
        return isinstance(webhook_body, dict) and webhook_body.get("object") == "page"

    @staticmethod
    def extract_events(webhook_body: Dict[str, Any]) -> Optional[List[Dict[str, Any]]]:
        """
        Flatten entry[].messaging[] into a single ordered list of events.

        Args:
            webhook_body: Webhook payload

        Returns:
            List of raw event dictionaries, or None if the payload is malformed
        """
        entries = webhook_body.get("entry")
        if not isinstance(entries, list):
            return None

        events: List[Dict[str, Any]] = []
        for entry in entries:
            if not isinstance(entry, dict) or not isinstance(entry.get("messaging"), list):
                return None
            events.extend(entry["messaging"])
        return events

    @staticmethod
    def classify(event: Any) -> EventKind:
        """
        Classify a raw messaging event.

        Args:
            event: Raw event dictionary

        Returns:
            EventKind.MESSAGE, EventKind.POSTBACK or EventKind.UNKNOWN
        """
        if not isinstance(event, dict):
            return EventKind.UNKNOWN
        if isinstance(event.get("message"), dict):
            return EventKind.MESSAGE
        if isinstance(event.get("postback"), dict):
            return EventKind.POSTBACK
        return EventKind.UNKNOWN

    @classmethod
    def parse_event(cls, event: Any) -> Optional[Union[MessageEvent, PostbackEvent]]:
        """
        Parse a raw messaging event into a domain entity.

        Args:
            event: Raw event dictionary

        Returns:
            MessageEvent or PostbackEvent, or None for unknown/malformed events
        """
        kind = cls.classify(event)
        if kind is EventKind.UNKNOWN:
            return None

        try:
            sender_id = str(event["sender"]["id"])
        except (KeyError, TypeError):
            return None

        if kind is EventKind.MESSAGE:
            message = event["message"]
            return MessageEvent(
                sender_id=sender_id,
                text=message.get("text"),
                attachments=message.get("attachments") or [],
                message_id=message.get("mid")
            )

        postback = event["postback"]
        return PostbackEvent(
            sender_id=sender_id,
            payload=postback.get("payload", ""),
            title=postback.get("title")
        )
