"""Fundamental user data model for the directory."""

from __future__ import annotations

from dataclasses import dataclass, field, replace

from .errors import ValidationFailureError
from .roles import Role


@dataclass
class User:
    """A user record.

    The id is assigned by the store on creation. The first role is the
    user's primary role.
    """

    name: str
    email: str
    roles: list[Role] = field(default_factory=list)
    id: str = ""

    @property
    def primary_role(self) -> Role | None:
        """Return the first role of the user, if any."""
        return self.roles[0] if self.roles else None

    def validate(self) -> None:
        """Check that all required fields are filled out.

        :raises ValidationFailureError: If name, email or roles are missing
        """
        if not self.name:
            msg = "name is required"
            raise ValidationFailureError(msg)
        if not self.email:
            msg = "email is required"
            raise ValidationFailureError(msg)
        if not self.roles:
            msg = "roles are required"
            raise ValidationFailureError(msg)

    def copy(self) -> User:
        """Return a copy that shares no mutable state with this user."""
        return replace(self, roles=list(self.roles))
