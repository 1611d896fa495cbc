"""User management routes for the FastAPI application.

Provides endpoints for creating, listing, fetching and deleting users and for
replacing a user's roles. Every route requires a known role in the
``X-User-Type`` header. Mutations additionally require that the requester's
role dominates the roles involved.

Create and role update check every role being assigned. Delete only checks
the target's primary role, and role update does not look at the target's
current roles at all.
"""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, Response, status
from fastapi.responses import JSONResponse

from userdir.common import (
    INSUFFICIENT_PERMISSIONS_MESSAGE,
    ForbiddenError,
    Role,
    User,
    UserNotFoundError,
    ValidationFailureError,
    can_act,
    can_act_on_all,
    role_exists,
)
from userdir.store import UserStore

from .models import (
    MessageResponse,
    RoleUpdateRequest,
    UserCreatedResponse,
    UserCreateRequest,
    UserResponse,
)
from .validation import requester_role

LOGGER = logging.getLogger(__name__)

Requester = Annotated[Role, Depends(requester_role)]


def _parse_roles(names: list[str]) -> list[Role]:
    """Convert role names to roles, dropping repeats but keeping order.

    :raises ValidationFailureError: If a name is not a known role
    """
    for name in names:
        if not role_exists(name):
            msg = f"invalid role: {name}"
            raise ValidationFailureError(msg)
    return list(dict.fromkeys(Role(name) for name in names))


def _check_assignable(requester: Role, roles: list[Role]) -> None:
    if not can_act_on_all(requester, roles):
        LOGGER.warning(
            "Forbidden: UserType=%s attempted to assign roles %s",
            requester,
            [str(role) for role in roles],
        )
        raise ForbiddenError(INSUFFICIENT_PERMISSIONS_MESSAGE)


def _create_user(
    store: UserStore,
    payload: UserCreateRequest,
    requester: Role,
) -> UserCreatedResponse:
    user = User(
        name=payload.name,
        email=payload.email,
        roles=_parse_roles(payload.roles),
    )
    user.validate()
    _check_assignable(requester, user.roles)

    store.create(user)

    LOGGER.info("User created: id=%s by UserType=%s", user.id, requester)
    return UserCreatedResponse(id=user.id)


def _list_users(store: UserStore) -> list[UserResponse]:
    users = [UserResponse.from_user(user) for user in store.list()]
    LOGGER.info("Users listed: %d users", len(users))
    return users


def _get_user(store: UserStore, user_id: str) -> list[UserResponse] | JSONResponse:
    """Fetch one user, falling back to the full listing when it does not exist.

    An unknown id on an empty directory yields 404 with an empty array.
    """
    try:
        user = store.get(user_id)
    except UserNotFoundError:
        users = _list_users(store)
        if users:
            LOGGER.info("User %s not found, returning list of all users", user_id)
            return users
        LOGGER.info("User %s not found, no users in the directory", user_id)
        return JSONResponse(status_code=status.HTTP_404_NOT_FOUND, content=[])

    LOGGER.info("User retrieved: id=%s", user.id)
    return [UserResponse.from_user(user)]


def _delete_user(store: UserStore, user_id: str, requester: Role) -> None:
    def guard(target: User) -> None:
        if not can_act(requester, target.primary_role):
            LOGGER.warning(
                "Forbidden: UserType=%s attempted to delete a user with role %s",
                requester,
                target.primary_role,
            )
            raise ForbiddenError

    store.delete(user_id, guard)
    LOGGER.info("User deleted: id=%s by UserType=%s", user_id, requester)


def _update_user_roles(
    store: UserStore,
    user_id: str,
    payload: RoleUpdateRequest,
    requester: Role,
) -> MessageResponse:
    roles = _parse_roles(payload.roles)
    if not roles:
        msg = "roles are required"
        raise ValidationFailureError(msg)
    _check_assignable(requester, roles)

    store.update_roles(user_id, roles)

    LOGGER.info("User roles updated: id=%s by UserType=%s", user_id, requester)
    return MessageResponse(message="User roles updated successfully")


def configure_user_router(router: APIRouter, store: UserStore) -> APIRouter:
    """Configure the user management router.

    :param router: The APIRouter to configure
    :param store: The UserStore backing every route
    :return: The configured APIRouter
    """

    @router.post(
        "/users",
        status_code=status.HTTP_201_CREATED,
        response_model=UserCreatedResponse,
    )
    def create_user(
        payload: UserCreateRequest,
        requester: Requester,
    ) -> UserCreatedResponse:
        return _create_user(store, payload, requester)

    @router.get("/users", response_model=list[UserResponse])
    @router.get("/users/", response_model=list[UserResponse], include_in_schema=False)
    def list_users(requester: Requester) -> list[UserResponse]:
        LOGGER.debug("Listing users for UserType=%s", requester)
        return _list_users(store)

    @router.get("/users/{user_id}", response_model=list[UserResponse])
    def get_user(
        user_id: str,
        requester: Requester,
    ) -> list[UserResponse] | JSONResponse:
        LOGGER.debug("Fetching user %s for UserType=%s", user_id, requester)
        return _get_user(store, user_id)

    @router.delete(
        "/users/{user_id}",
        status_code=status.HTTP_204_NO_CONTENT,
        response_class=Response,
    )
    def delete_user(user_id: str, requester: Requester) -> Response:
        _delete_user(store, user_id, requester)
        return Response(status_code=status.HTTP_204_NO_CONTENT)

    @router.put("/users/roles/{user_id}", response_model=MessageResponse)
    def update_user_roles(
        user_id: str,
        payload: RoleUpdateRequest,
        requester: Requester,
    ) -> MessageResponse:
        return _update_user_roles(store, user_id, payload, requester)

    return router
