"""HTTP clients for outbound collaborators."""

from messenger_translator.infrastructure.clients.http_client import HttpClient, HttpResponse

__all__ = [
    "HttpClient",
    "HttpResponse",
]
