"""Error taxonomy shared by the store and the HTTP layer."""


class SubscriptionServiceError(Exception):
    """Base error for the service."""

    status_code = 500


class DecodeError(SubscriptionServiceError):
    """Request body or path parameter could not be decoded."""

    status_code = 400


class StorageError(SubscriptionServiceError):
    """Any failure reported by the persistence layer."""

    status_code = 500


class NotFoundError(StorageError):
    """Read or update target does not exist."""

    status_code = 404
