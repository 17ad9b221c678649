"""Use case for processing a single Messenger event (Use Case Pattern)."""
import logging
import time
from typing import Dict, Any, Optional

from messenger_translator.application.services.language_service import LanguageService
from messenger_translator.application.services.user_service import UserService
from messenger_translator.domain.entities.event import MessageEvent, PostbackEvent, SenderAction
from messenger_translator.domain.entities.user import UserPreference
from messenger_translator.domain.exceptions import RelayError
from messenger_translator.domain.interfaces.message_provider import IMessageProvider
from messenger_translator.locale import get_string
from messenger_translator.middleware.monitoring import track_event_processing
from messenger_translator.utils.command_parser import CommandName, parse_command
from messenger_translator.utils.webhook_parser import WebhookParser


logger = logging.getLogger(__name__)

HELP_PAYLOADS = ("get_started", "get_help")
CHANGE_LANGUAGE_PAYLOAD = "change_language"
LANGUAGE_TITLE_DELIMITER = "--language "


class ProcessEventUseCase:
    """
    Processes one messaging event end to end.

    Sends the seen/typing indicators, resolves the user, picks a response
    (help text, language change or translation) and delivers it. Each call is
    isolated: failures are logged here and never propagate to the caller, so
    sibling events of the same delivery are unaffected.
    """

    def __init__(
        self,
        message_provider: IMessageProvider,
        user_service: UserService,
        language_service: LanguageService,
        default_locale: str = "en"
    ):
        """
        Initialize use case with dependencies (Dependency Injection).

        Args:
            message_provider: Messenger Send API provider
            user_service: Resolves user preference records
            language_service: Translation and language changes
            default_locale: Locale for error replies when the user is unknown
        """
        self.message_provider = message_provider
        self.user_service = user_service
        self.language_service = language_service
        self.default_locale = default_locale

    def execute(self, raw_event: Dict[str, Any]) -> bool:
        """
        Process a raw messaging event.

        Args:
            raw_event: One element of entry[].messaging[]

        Returns:
            True if the event was handled, False otherwise
        """
        event = WebhookParser.parse_event(raw_event)
        if event is None:
            logger.warning(f"Unknown/unsupported event: {raw_event}")
            return False

        logger.debug(f"A new event was received: {raw_event}")
        start_time = time.time()
        user: Optional[UserPreference] = None

        try:
            self._send_indicators(event.sender_id)
            user = self.user_service.get_or_create(event.sender_id)
            logger.debug(f"User data: {user}")

            if isinstance(event, PostbackEvent):
                response = self._handle_postback(event, user)
            else:
                response = self._handle_message(event, user)

            if response:
                self._deliver(user.id, response)

        except RelayError as e:
            logger.error(
                f"Event from {event.sender_id} failed ({type(e).__name__}): {e}",
                exc_info=True
            )
            self._deliver(event.sender_id, get_string(self._locale_of(user), "error"))
            track_event_processing(False, time.time() - start_time)
            return False
        except Exception as e:
            logger.error(f"Unexpected error processing event from {event.sender_id}: {e}", exc_info=True)
            track_event_processing(False, time.time() - start_time)
            return False

        track_event_processing(True, time.time() - start_time)
        return True

    def _handle_postback(self, event: PostbackEvent, user: UserPreference) -> Optional[str]:
        """
        Pick the response for a button press.

        Returns:
            Response text, or None when nothing should be sent
        """
        logger.debug(f"Postback was called with payload: {event.payload}")

        if event.payload in HELP_PAYLOADS:
            return get_string(user.locale, "help")

        if event.payload == CHANGE_LANGUAGE_PAYLOAD:
            language = self._language_from_title(event.title)
            return self.language_service.change_language(user, language, user.locale)

        logger.warning(f"Unknown/unsupported payload {event.payload!r} from {event.sender_id}")
        return None

    def _handle_message(self, event: MessageEvent, user: UserPreference) -> Optional[str]:
        """
        Pick the response for a message.

        Returns:
            Response text, or None when nothing should be sent
        """
        if event.has_attachments:
            return get_string(user.locale, "attachments")

        if not event.text:
            logger.info(f"Message from {event.sender_id} has no text, ignoring")
            return None

        logger.debug(f"Message was received with text: {event.text}")

        command = parse_command(event.text)
        if command is None:
            return self.language_service.translate(event.text, user.language, user.locale)
        if command.name is CommandName.HELP:
            return get_string(user.locale, "help")
        return self.language_service.change_language(user, command.argument, user.locale)

    @staticmethod
    def _language_from_title(title: Optional[str]) -> Optional[str]:
        parts = (title or "").split(LANGUAGE_TITLE_DELIMITER)
        return parts[1] if len(parts) > 1 else None

    def _send_indicators(self, recipient: str) -> None:
        # Best-effort, never gates processing
        for action in (SenderAction.MARK_SEEN, SenderAction.TYPING_ON):
            try:
                self.message_provider.send_action(recipient, action.value)
            except Exception as e:
                logger.debug(f"Sender action {action.value} failed for {recipient}: {e}")

    def _deliver(self, recipient: str, text: str) -> None:
        result = self.message_provider.send_text_message(recipient=recipient, message=text)
        if not result or result.get("status") != "success":
            logger.error(f"Failed to send response to {recipient}: {result}")
        else:
            logger.info(f"Response sent to {recipient}")

    def _locale_of(self, user: Optional[UserPreference]) -> str:
        return user.locale if user is not None else self.default_locale
