"""In-memory user store shared by all request handlers.

Every operation holds a single lock for its whole read-modify-write sequence,
so concurrent requests never observe a partially applied change. There is no
per-record locking.

Records passed in or handed out are copies. The only way to change stored
state is through the store's operations.

**Example Usage:**

.. code-block:: python

    store = UserStore()
    user = User("Ada", "ada@example.com", [Role.WATCHER])
    store.create(user)
    assert user.id == "1"
"""

from __future__ import annotations

import threading
from typing import TYPE_CHECKING

from userdir.common import DuplicateEmailError, UserNotFoundError

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable

    from userdir.common import Role, User


class UserStore:
    """Authoritative collection of users keyed by id."""

    def __init__(self) -> None:
        """Create an empty store with the id counter at zero."""
        self._lock = threading.Lock()
        self._users: dict[str, User] = {}
        self._id_counter = 0

    def initialize(self) -> None:
        """Wipe every stored user and reset the id counter.

        Ids handed out before the reset may be assigned again afterwards.
        """
        with self._lock:
            self._users = {}
            self._id_counter = 0

    def create(self, user: User) -> None:
        """Store a new user and assign its id.

        The assigned id is written onto ``user``; a copy is stored.

        :param user: The user to add
        :raises DuplicateEmailError: If a stored user has the same email
        """
        with self._lock:
            if any(stored.email == user.email for stored in self._users.values()):
                raise DuplicateEmailError

            self._id_counter += 1
            user.id = str(self._id_counter)
            self._users[user.id] = user.copy()

    def get(self, user_id: str) -> User:
        """Return a copy of the user stored under ``user_id``.

        :raises UserNotFoundError: If no such user exists
        """
        with self._lock:
            return self._lookup(user_id).copy()

    def list(self) -> list[User]:
        """Return copies of all users ordered by ascending numeric id."""
        with self._lock:
            users = [user.copy() for user in self._users.values()]

        return sorted(users, key=lambda user: int(user.id))

    def update_roles(self, user_id: str, roles: Iterable[Role]) -> None:
        """Replace the whole role set of a user.

        :param user_id: Id of the user to update
        :param roles: New roles, in order, the first being the primary role
        :raises UserNotFoundError: If no such user exists
        """
        with self._lock:
            self._lookup(user_id).roles = list(roles)

    def delete(
        self,
        user_id: str,
        guard: Callable[[User], None] | None = None,
    ) -> None:
        """Remove a user permanently.

        :param user_id: Id of the user to remove
        :param guard: Optional check run against a copy of the user inside the
            same critical section; if it raises, the user is kept and the
            exception propagates
        :raises UserNotFoundError: If no such user exists
        """
        with self._lock:
            user = self._lookup(user_id)
            if guard is not None:
                guard(user.copy())
            del self._users[user_id]

    def __len__(self) -> int:
        with self._lock:
            return len(self._users)

    def _lookup(self, user_id: str) -> User:
        # caller must hold the lock
        user = self._users.get(user_id)
        if user is None:
            raise UserNotFoundError
        return user
