"""Error kinds raised by the user directory."""

from enum import Enum
from typing import ClassVar


class ErrorKind(Enum):
    """Closed set of failure kinds, valued by their default message."""

    DUPLICATE_EMAIL = "user already exists"
    NOT_FOUND = "user not found"
    FORBIDDEN = "forbidden"
    VALIDATION_FAILURE = "validation failure"
    INVALID_PAYLOAD = "invalid request payload"


INSUFFICIENT_PERMISSIONS_MESSAGE = "insufficient permissions to assign role"


class UserDirectoryError(Exception):
    """Base class for every failure the directory reports to callers.

    :param message: Human readable message, defaults to the kind's message
    """

    kind: ClassVar[ErrorKind]

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.kind.value
        super().__init__(self.message)


class DuplicateEmailError(UserDirectoryError):
    """Raised when a user with the same email already exists."""

    kind = ErrorKind.DUPLICATE_EMAIL


class UserNotFoundError(UserDirectoryError):
    """Raised when no user is stored under the requested id."""

    kind = ErrorKind.NOT_FOUND


class ForbiddenError(UserDirectoryError):
    """Raised when the requester's role is unknown or lacks permission."""

    kind = ErrorKind.FORBIDDEN


class ValidationFailureError(UserDirectoryError):
    """Raised when required fields are missing or an unknown role is assigned."""

    kind = ErrorKind.VALIDATION_FAILURE


class InvalidPayloadError(UserDirectoryError):
    """Raised when a request body cannot be decoded."""

    kind = ErrorKind.INVALID_PAYLOAD
