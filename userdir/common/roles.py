"""Role hierarchy and permission evaluation.

Roles form a strict hierarchy. A principal may create, delete or assign roles
to a target only when its role dominates the target role:

* ``Admin`` dominates every role, other admins included
* ``Modifier`` dominates ``Watcher``
* ``Watcher`` dominates nothing

Read operations only require that the requester's role exists.
"""

from __future__ import annotations

from enum import StrEnum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable


class Role(StrEnum):
    """User roles of the directory."""

    ADMIN = "Admin"
    MODIFIER = "Modifier"
    WATCHER = "Watcher"

    def can_act(self, target_role: Role) -> bool:
        """Check if this role may act on a target holding ``target_role``.

        :param target_role: Role of the target user
        :return: True if this role dominates the target role, False otherwise
        """
        if self is Role.ADMIN:
            return True
        return target_role in _SUBORDINATES[self]


_SUBORDINATES: dict[Role, frozenset[Role]] = {
    Role.ADMIN: frozenset({Role.MODIFIER, Role.WATCHER}),
    Role.MODIFIER: frozenset({Role.WATCHER}),
    Role.WATCHER: frozenset(),
}

ROLE_NAMES: frozenset[str] = frozenset(role.value for role in Role)


def role_exists(role: str | None) -> bool:
    """Return True if ``role`` names one of the known roles."""
    return role in ROLE_NAMES


def can_act(acting_role: str | None, target_role: str | None) -> bool:
    """Check if ``acting_role`` may act on a user whose role is ``target_role``.

    Unknown roles on either side are never permitted.

    :param acting_role: Role asserted by the requester
    :param target_role: Role of the target user, or a role being assigned
    :return: True if the action is permitted
    """
    if not role_exists(acting_role) or not role_exists(target_role):
        return False
    return Role(acting_role).can_act(Role(target_role))


def can_act_on_all(acting_role: str | None, target_roles: Iterable[str]) -> bool:
    """Check ``can_act`` against every role in ``target_roles``.

    Used when assigning a set of roles, where every assigned role must be
    individually permitted.
    """
    return all(can_act(acting_role, role) for role in target_roles)
