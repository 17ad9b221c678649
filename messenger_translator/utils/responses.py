"""Plain-text responses for the webhook endpoints."""
from typing import Dict, Tuple

TEXT_HEADERS = {
    "Content-Type": "text/plain; charset=utf-8",
    "Content-Language": "en",
}


def text_response(body: str, status: int) -> Tuple[str, int, Dict[str, str]]:
    """Build a Flask (body, status, headers) tuple with a text/plain body."""
    return body, status, dict(TEXT_HEADERS)
