"""Error kinds raised by the user directory.

Every error carries the HTTP status it maps to, so the request boundary can
turn it into ``{"msg": ...}`` without knowing which operation failed.
"""

from __future__ import annotations

MISSING_USER_MSG = "`user` key is not present..."
USER_EXISTS_MSG = "user already exists..."
STORAGE_FAILURE_MSG = "user store is unavailable"
NOT_A_STRING_MSG = "`user` must be a string"
LINE_BREAK_MSG = "`user` must not contain line breaks"
INTERNAL_ERROR_MSG = "internal server error"


class UserDirectoryError(Exception):
    status_code: int = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(UserDirectoryError):
    """The request is missing a usable ``user`` value."""

    status_code = 422


class ConflictError(UserDirectoryError):
    """The submitted user is already in the store.

    Clients of the original service expect 500 here; 409 is the correct code.
    """

    status_code = 500


class StorageError(UserDirectoryError):
    """Reading or appending to the store failed."""

    status_code = 500

    def __init__(self, message: str = STORAGE_FAILURE_MSG):
        super().__init__(message)
