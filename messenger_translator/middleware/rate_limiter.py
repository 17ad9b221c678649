"""Rate limiting middleware using Flask-Limiter."""
import logging
from flask import request
from flask_limiter import Limiter
from flask_limiter.util import get_remote_address


def get_limiter_key() -> str:
    """
    Get rate limit key based on the Messenger sender id or IP address.

    Returns:
        String key for rate limiting
    """
    body = request.get_json(silent=True) if request.is_json else None
    if isinstance(body, dict):
        try:
            sender_id = body["entry"][0]["messaging"][0]["sender"]["id"]
            if sender_id:
                return f"rate_limit:psid:{sender_id}"
        except (KeyError, IndexError, TypeError):
            pass

    # Fallback to IP address
    return get_remote_address()


def create_rate_limiter(app) -> Limiter:
    """
    Create and configure Flask-Limiter instance.

    Args:
        app: Flask application instance

    Returns:
        Configured Limiter instance
    """
    if not app.config.get("RATELIMIT_ENABLED"):
        return Limiter(
            key_func=get_remote_address,
            app=app,
            default_limits=[],
            storage_uri="memory://",
            enabled=False
        )

    try:
        return Limiter(
            key_func=get_limiter_key,
            app=app,
            default_limits=["1000 per hour", "100 per minute"],
            storage_uri=app.config["RATELIMIT_STORAGE_URL"],
            strategy="fixed-window",
            headers_enabled=True
        )
    except Exception as e:
        logging.warning(f"Failed to initialize rate limiter: {e}, using memory storage")
        return Limiter(
            key_func=get_limiter_key,
            app=app,
            default_limits=["1000 per hour", "100 per minute"],
            storage_uri="memory://"
        )
