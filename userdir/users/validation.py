"""FastAPI dependencies checking the requester's asserted role."""

import logging

from fastapi import Security
from fastapi.security import APIKeyHeader

from userdir.common import ForbiddenError, Role, role_exists

ROLE_HEADER = "X-User-Type"

role_header = APIKeyHeader(name=ROLE_HEADER, auto_error=False)

LOGGER = logging.getLogger(__name__)


def requester_role(role: str | None = Security(role_header)) -> Role:
    """Return the role asserted in the ``X-User-Type`` header.

    The role is trusted as given, only its existence is checked.

    :raises ForbiddenError: If the header is missing or names an unknown role
    """
    if not role_exists(role):
        LOGGER.info("Forbidden: UserType=%s is not a known role", role)
        raise ForbiddenError
    LOGGER.debug("Requester role validated: %s", role)
    return Role(role)
