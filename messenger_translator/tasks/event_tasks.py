"""Celery tasks for processing Messenger events asynchronously."""
import logging
from typing import Dict, Any, Optional
from celery import Task

from messenger_translator.infrastructure.celery_app import celery_app
from messenger_translator.infrastructure.service_container import ServiceContainer


logger = logging.getLogger(__name__)

_container: Optional[ServiceContainer] = None


def get_container() -> ServiceContainer:
    """Service container of the worker process, created on first use."""
    global _container
    if _container is None:
        _container = ServiceContainer()
    return _container


class CallbackTask(Task):
    """Task base class that logs failures instead of losing them."""

    def on_failure(self, exc, task_id, args, kwargs, einfo):
        """Handle task failure."""
        logger.error(f"Task {task_id} failed: {exc}", exc_info=einfo)


@celery_app.task(
    bind=True,
    base=CallbackTask,
    max_retries=0,
    name="messenger_translator.process_event"
)
def process_event_task(self, event: Dict[str, Any]) -> Dict[str, Any]:
    """
    Process one messaging event in the background.

    Events are handled in a single pass; a failed event is logged and
    reported, never retried.

    Args:
        self: Task instance (bound task)
        event: Raw element of entry[].messaging[]

    Returns:
        Processing result dictionary
    """
    sender_id = (event.get("sender") or {}).get("id", "unknown")
    logger.info(f"Processing event from {sender_id} (task_id={self.request.id})")

    handled = get_container().get_process_event_use_case().execute(event)

    return {"status": "success" if handled else "error", "sender_id": sender_id}
