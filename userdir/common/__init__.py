"""Common data models and utilities for the application."""

from .errors import (
    INSUFFICIENT_PERMISSIONS_MESSAGE,
    DuplicateEmailError,
    ErrorKind,
    ForbiddenError,
    InvalidPayloadError,
    UserDirectoryError,
    UserNotFoundError,
    ValidationFailureError,
)
from .roles import Role, can_act, can_act_on_all, role_exists
from .user import User

__all__ = [
    "INSUFFICIENT_PERMISSIONS_MESSAGE",
    "DuplicateEmailError",
    "ErrorKind",
    "ForbiddenError",
    "InvalidPayloadError",
    "Role",
    "User",
    "UserDirectoryError",
    "UserNotFoundError",
    "ValidationFailureError",
    "can_act",
    "can_act_on_all",
    "role_exists",
]
