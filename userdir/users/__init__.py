"""User management routes, request models and error mapping."""

from .errors import register_error_handlers
from .routes import configure_user_router
from .validation import ROLE_HEADER, requester_role

__all__ = [
    "ROLE_HEADER",
    "configure_user_router",
    "register_error_handlers",
    "requester_role",
]
