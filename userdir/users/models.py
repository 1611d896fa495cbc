"""Request and response models for the user routes."""

from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import BaseModel, Field

if TYPE_CHECKING:
    from userdir.common import User


class UserCreateRequest(BaseModel):
    """Body of a create request.

    Fields default to empty so that missing fields are reported by
    ``User.validate`` with a specific message.

    :param name: Display name of the user
    :param email: Email address, unique across the directory
    :param roles: Role names, the first being the primary role
    """

    name: str = ""
    email: str = ""
    roles: list[str] = Field(default_factory=list)


class RoleUpdateRequest(BaseModel):
    """Body of a role update request.

    :param roles: Role names replacing the user's current roles
    """

    roles: list[str] = Field(default_factory=list)


class UserResponse(BaseModel):
    """A user as returned by the API."""

    id: str
    name: str
    email: str
    roles: list[str]

    @classmethod
    def from_user(cls, user: User) -> UserResponse:
        """Create UserResponse from a stored User.

        :param user: User instance
        :return: UserResponse instance
        """
        return cls(
            id=user.id,
            name=user.name,
            email=user.email,
            roles=[str(role) for role in user.roles],
        )


class UserCreatedResponse(BaseModel):
    """Response to a successful create request."""

    id: str
    message: str = "User created successfully"


class MessageResponse(BaseModel):
    """Plain message response, used for successes and errors alike."""

    message: str
