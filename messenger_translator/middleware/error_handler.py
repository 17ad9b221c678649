"""Error handling middleware with Sentry integration."""
import logging
from typing import Any, Dict, Optional

from flask import jsonify

from messenger_translator.domain.exceptions import RelayError

logger = logging.getLogger(__name__)

# Request data that must never leave the process
SCRUBBED_HEADERS = ("x-hub-signature", "x-hub-signature-256", "x-apikey")
SCRUBBED_PARAMS = ("access_token", "appsecret_proof", "key", "hub.verify_token")
FILTERED = "[Filtered]"


def scrub_event(event: Dict[str, Any], hint: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    """
    Sentry before_send hook: drop webhook signatures and API credentials.

    Args:
        event: Sentry event payload
        hint: Sentry hint (unused)

    Returns:
        The event with credentials filtered
    """
    request_data = event.get("request") or {}

    headers = request_data.get("headers") or {}
    for name in list(headers):
        if name.lower() in SCRUBBED_HEADERS:
            headers[name] = FILTERED

    query = request_data.get("query_string")
    if isinstance(query, str) and query:
        pairs = [pair.partition("=") for pair in query.split("&")]
        request_data["query_string"] = "&".join(
            f"{name}={FILTERED}" if name in SCRUBBED_PARAMS else f"{name}{sep}{value}"
            for name, sep, value in pairs
        )

    return event


def init_error_handlers(app) -> None:
    """
    Initialize error handlers for the application.

    Args:
        app: Flask application instance
    """
    sentry_dsn = app.config.get("SENTRY_DSN")
    if sentry_dsn:
        import sentry_sdk
        from sentry_sdk.integrations.flask import FlaskIntegration
        from sentry_sdk.integrations.celery import CeleryIntegration

        sentry_sdk.init(
            dsn=sentry_dsn,
            integrations=[
                FlaskIntegration(),
                CeleryIntegration(),
            ],
            traces_sample_rate=0.1,
            send_default_pii=False,
            before_send=scrub_event,
            environment=app.config.get("FLASK_ENV", "production"),
        )
        logger.info("Sentry error tracking initialized")

    @app.errorhandler(RelayError)
    def relay_error(error):
        """Collaborator failure that escaped a view (health checks, maintenance routes)."""
        logger.error(f"{type(error).__name__}: {error}")
        return jsonify({"status": "error", "message": "Upstream service unavailable"}), 502

    @app.errorhandler(404)
    def not_found(error):
        """Handle 404 errors."""
        return jsonify({"status": "error", "message": "Resource not found"}), 404

    @app.errorhandler(500)
    def internal_error(error):
        """Handle 500 errors."""
        logger.error(f"Internal server error: {error}", exc_info=True)
        return jsonify({"status": "error", "message": "Internal server error"}), 500

    @app.errorhandler(429)
    def rate_limit_error(error):
        """Too many deliveries for one sender."""
        return jsonify({
            "status": "error",
            "message": "Rate limit exceeded. Please try again later."
        }), 429
