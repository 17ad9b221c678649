"""Celery application factory following Factory Pattern."""
from celery import Celery

from messenger_translator.config.settings import get_config


def create_celery_app(config=None) -> Celery:
    """
    Create and configure Celery application.

    Args:
        config: Optional configuration class (defaults to get_config())

    Returns:
        Configured Celery instance
    """
    config = config or get_config()

    celery = Celery(
        "messenger_translator",
        broker=config.CELERY_BROKER_URL,
        backend=config.CELERY_RESULT_BACKEND,
        include=["messenger_translator.tasks.event_tasks"]
    )

    celery.conf.update(
        task_serializer="json",
        accept_content=["json"],
        result_serializer="json",
        timezone="UTC",
        enable_utc=True,
        task_track_started=True,
        task_time_limit=120,
        task_soft_time_limit=90,
        worker_prefetch_multiplier=1,
        worker_max_tasks_per_child=1000,
        task_acks_late=True,
        task_reject_on_worker_lost=True,

        # Results are never read; the webhook only acknowledges receipt
        task_ignore_result=True,

        # Fail fast when the broker is down so the webhook can process inline
        broker_connection_timeout=2,
        task_publish_retry=False,

        worker_log_format='[%(asctime)s: %(levelname)s/%(processName)s] %(message)s',
        worker_task_log_format='[%(asctime)s: %(levelname)s/%(processName)s][%(task_name)s(%(task_id)s)] %(message)s',
        worker_hijack_root_logger=False,
    )

    return celery


# Create default Celery instance
celery_app = create_celery_app()
