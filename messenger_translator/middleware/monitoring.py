"""Monitoring and metrics middleware using Prometheus."""
import logging
import time
from functools import wraps
from typing import Callable
from flask import request
from prometheus_client import Counter, Histogram, make_wsgi_app
from werkzeug.middleware.dispatcher import DispatcherMiddleware

logger = logging.getLogger(__name__)

# Prometheus metrics
events_received_total = Counter(
    'messenger_events_received_total',
    'Total number of Messenger events received',
    ['kind']
)

events_processed_total = Counter(
    'messenger_events_processed_total',
    'Total number of Messenger events processed',
    ['status']
)

events_processed_duration = Histogram(
    'messenger_events_processed_duration_seconds',
    'Time spent processing Messenger events',
    buckets=[0.1, 0.5, 1.0, 2.0, 5.0, 10.0, 30.0]
)

translation_calls_total = Counter(
    'translation_api_calls_total',
    'Total number of translation backend calls',
    ['status']
)

webhook_requests_total = Counter(
    'messenger_webhook_requests_total',
    'Total number of webhook requests',
    ['method', 'endpoint', 'status']
)

webhook_request_duration = Histogram(
    'messenger_webhook_request_duration_seconds',
    'Time spent processing webhook requests',
    ['endpoint']
)


def register_metrics_middleware(app) -> None:
    """
    Expose Prometheus metrics at /metrics.

    Args:
        app: Flask application instance
    """
    if not app.config.get("ENABLE_METRICS"):
        return

    app.wsgi_app = DispatcherMiddleware(app.wsgi_app, {
        '/metrics': make_wsgi_app()
    })

    logger.info("Prometheus metrics enabled at /metrics")


def track_webhook_request(endpoint: str):
    """
    Decorator to track webhook request metrics.

    Args:
        endpoint: Endpoint name for metrics
    """
    def decorator(f: Callable) -> Callable:
        @wraps(f)
        def wrapper(*args, **kwargs):
            start_time = time.time()

            try:
                response = f(*args, **kwargs)
            except Exception:
                webhook_requests_total.labels(
                    method=request.method,
                    endpoint=endpoint,
                    status=500
                ).inc()
                raise

            status_code = response[1] if isinstance(response, tuple) else 200
            webhook_requests_total.labels(
                method=request.method,
                endpoint=endpoint,
                status=status_code
            ).inc()
            webhook_request_duration.labels(endpoint=endpoint).observe(
                time.time() - start_time
            )
            return response

        return wrapper
    return decorator


def track_event_received(kind: str) -> None:
    """
    Track an inbound event by kind.

    Args:
        kind: "message", "postback" or "unknown"
    """
    try:
        events_received_total.labels(kind=kind).inc()
    except Exception as e:
        # Don't fail if metrics tracking fails
        logger.debug(f"Failed to track event metrics: {e}")


def track_event_processing(success: bool, duration: float) -> None:
    """
    Track event processing metrics.

    Args:
        success: Whether processing was successful
        duration: Processing time in seconds
    """
    try:
        status = "success" if success else "error"
        events_processed_total.labels(status=status).inc()
        events_processed_duration.observe(duration)
    except Exception as e:
        logger.debug(f"Failed to track event processing metrics: {e}")


def track_translation(success: bool) -> None:
    """
    Track translation backend call metrics.

    Args:
        success: Whether call was successful
    """
    try:
        status = "success" if success else "error"
        translation_calls_total.labels(status=status).inc()
    except Exception as e:
        logger.debug(f"Failed to track translation metrics: {e}")
