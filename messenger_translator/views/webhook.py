"""Messenger webhook endpoints."""
import logging
from typing import Dict, Any, Tuple

from flask import Blueprint, request, current_app

from messenger_translator.decorators.security import signature_required
from messenger_translator.domain.entities.event import EventKind
from messenger_translator.middleware.monitoring import track_event_received, track_webhook_request
from messenger_translator.utils.responses import text_response
from messenger_translator.utils.webhook_parser import WebhookParser


webhook_blueprint = Blueprint("webhook", __name__)
_logger = logging.getLogger(__name__)


def verify() -> Tuple[str, int, Dict[str, str]]:
    """
    Verify webhook subscription (handshake sent by Messenger).

    Returns:
        Tuple of (challenge, status_code, headers) or an error text response
    """
    mode = request.args.get("hub.mode")
    token = request.args.get("hub.verify_token")
    challenge = request.args.get("hub.challenge")

    if mode == "subscribe" and token == current_app.config["VALIDATION_TOKEN"]:
        _logger.info("WEBHOOK_VERIFIED")
        return text_response(challenge or "", 200)

    _logger.warning("Mode/verification token doesn't match")
    _logger.warning(f"Parameters: mode={mode}, verify_token={token}, challenge={challenge}")
    return text_response("Mode/verification token doesn't match", 403)


def handle_events() -> Tuple[str, int, Dict[str, str]]:
    """
    Handle a webhook delivery.

    Every event of every entry is dispatched in order. The 200 acknowledges
    receipt of the delivery; in "celery" dispatch mode events are still being
    processed when it is sent.

    Returns:
        Tuple of (response, status_code, headers)
    """
    body = request.get_json(silent=True)

    if not WebhookParser.is_page_object(body):
        _logger.warning("Object is not a page")
        _logger.warning(f"Data: {body if body is not None else request.get_data(as_text=True)}")
        return text_response("An error has occurred", 403)

    events = WebhookParser.extract_events(body)
    if events is None:
        _logger.warning(f"Malformed entries: {body}")
        return text_response("An error has occurred", 403)

    for event in events:
        kind = WebhookParser.classify(event)
        track_event_received(kind.value)

        if kind is EventKind.UNKNOWN:
            _logger.warning("Unknown/unsupported event")
            _logger.warning(f"Event: {event}")
            return text_response("Unknown/unsupported event", 403)

        _dispatch(event)

    return text_response("Success", 200)


def _dispatch(event: Dict[str, Any]) -> None:
    """Hand one event to the background worker, or process it inline."""
    if current_app.config.get("EVENT_DISPATCH_MODE") == "celery":
        try:
            from messenger_translator.tasks.event_tasks import process_event_task
            task = process_event_task.delay(event)
            _logger.info(f"Event queued for async processing: task_id={task.id}")
            return
        except Exception as e:
            _logger.warning(f"Celery unavailable, processing synchronously: {e}")

    container = current_app.config["service_container"]
    container.get_process_event_use_case().execute(event)


@webhook_blueprint.route("/webhook", methods=["GET"])
@track_webhook_request("webhook_verify")
def webhook_get():
    """Handle webhook verification (GET request)."""
    return verify()


@webhook_blueprint.route("/webhook", methods=["POST"])
@track_webhook_request("webhook_events")
@signature_required
def webhook_post():
    """Handle incoming webhook events (POST request)."""
    return handle_events()
