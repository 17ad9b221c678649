"""Webhook payload signature verification."""
import hmac
import logging
from functools import wraps
from typing import Optional

from flask import current_app, request

from messenger_translator.utils.responses import text_response


_logger = logging.getLogger(__name__)


def compute_signature(body: bytes, app_secret: str, algorithm: str = "sha1") -> str:
    """
    Compute the header value Messenger sends for a payload.

    Args:
        body: Raw request body
        app_secret: Application secret
        algorithm: hashlib algorithm name

    Returns:
        "<algorithm>=<hex digest>"
    """
    digest = hmac.new(app_secret.encode("utf-8"), body, algorithm).hexdigest()
    return f"{algorithm}={digest}"


def verify_signature(body: bytes, signature: Optional[str], app_secret: str) -> bool:
    """
    Check a "<algorithm>=<hex digest>" signature against the raw body.

    The comparison is exact: the digest must be lowercase hex as produced by
    hexdigest().

    Args:
        body: Raw, unparsed request body
        signature: Header value, or None if absent
        app_secret: Application secret

    Returns:
        True if the signature matches
    """
    if not signature:
        return False

    algorithm, separator, provided = signature.partition("=")
    if not separator or not algorithm:
        return False

    try:
        expected = hmac.new(app_secret.encode("utf-8"), body, algorithm).hexdigest()
    except (ValueError, TypeError):
        _logger.warning(f"Unsupported signature algorithm: {algorithm}")
        return False

    return hmac.compare_digest(provided.encode("utf-8"), expected.encode("utf-8"))


def signature_required(f):
    """
    Reject requests whose body is not signed with the app secret.

    Runs on the raw body before the view parses any JSON.
    """
    @wraps(f)
    def decorated_function(*args, **kwargs):
        header = current_app.config.get("SIGNATURE_HEADER", "X-Hub-Signature")
        signature = request.headers.get(header)
        body = request.get_data(cache=True)

        if not signature:
            _logger.warning("No signature")
            _logger.warning(f"Body: {body.decode('utf-8', errors='replace')}")
            return text_response("No signature", 403)

        if not verify_signature(body, signature, current_app.config["APP_SECRET"]):
            _logger.warning("Invalid signature")
            _logger.warning(f"Signature: {signature}")
            _logger.warning(f"Body: {body.decode('utf-8', errors='replace')}")
            return text_response("Invalid signature", 403)

        return f(*args, **kwargs)

    return decorated_function
