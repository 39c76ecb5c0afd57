"""Error taxonomy shared by services and the HTTP layer.

Services raise these; ``app.main`` turns them into ``{"error": message}``
responses carrying ``status_code``.
"""


class POSError(Exception):
    """Base class for every error the API reports to its callers."""

    status_code = 500
    default_message = "Internal server error"

    def __init__(self, message=None):
        self.message = message or self.default_message
        super().__init__(self.message)


class InvalidInput(POSError):
    """A request field is missing or out of range."""

    status_code = 400
    default_message = "Invalid input"


class NotFound(POSError):
    """The referenced entity does not exist."""

    status_code = 404
    default_message = "Not found"


class Conflict(POSError):
    """A unique constraint was violated, e.g. a duplicate drink name."""

    status_code = 400
    default_message = "Conflict"


class Unauthorized(POSError):
    status_code = 401
    default_message = "Unauthorized"


class StorageFailure(POSError):
    """The database failed; the message never carries driver details."""

    status_code = 500
    default_message = "Database operation failed"


class StorageUnavailable(StorageFailure):
    """No connection could be acquired in time. Safe to retry."""

    status_code = 503
    default_message = "Database is busy, please retry"


__all__ = [
    "Conflict",
    "InvalidInput",
    "NotFound",
    "POSError",
    "StorageFailure",
    "StorageUnavailable",
    "Unauthorized",
]
