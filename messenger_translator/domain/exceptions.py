"""Domain exceptions raised by adapters at the integration boundary."""


class RelayError(Exception):
    """Base class for failures of an outbound collaborator."""


class RequestClientError(RelayError):
    """Transport-level failure of an outbound HTTP call (connection, timeout)."""


class UserStoreError(RelayError):
    """The user preference store rejected or failed an operation."""


class TranslationError(RelayError):
    """The translation backend rejected or failed a request."""
