"""In-memory, growable list of roster users."""

from __future__ import annotations

import logging
import sys
from typing import Iterator, List, Optional, TextIO

from .models import User

logger = logging.getLogger("roster.userlist")

DEFAULT_INITIAL_CAPACITY = 3


class UserListError(Exception):
    """Base class for failures raised by :class:`UserList`."""


class UserIndexError(UserListError, IndexError):
    """Raised when an operation references a position outside the list."""

    def __init__(self, index: Optional[int], length: int) -> None:
        self.index = index
        self.length = length
        if index is None:
            message = "Invalid index"
        else:
            message = f"Index {index} is out of bounds for a list of {length} user(s)"
        super().__init__(message)


class UserList:
    """Ordered collection of :class:`User` records with an explicit capacity.

    Capacity is bookkeeping only; storage is a native list. Whenever a push
    would take the length past the capacity, the capacity doubles. Removal
    shifts later entries one position to the left.
    """

    def __init__(self, initial_capacity: int = DEFAULT_INITIAL_CAPACITY) -> None:
        if isinstance(initial_capacity, bool) or not isinstance(initial_capacity, int):
            raise ValueError("Initial capacity must be an integer")
        if initial_capacity < 1:
            raise ValueError("Initial capacity must be at least 1")
        self._users: List[User] = []
        self._capacity = initial_capacity

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def length(self) -> int:
        return len(self._users)

    def __len__(self) -> int:
        return len(self._users)

    def __iter__(self) -> Iterator[User]:
        return iter(list(self._users))

    def __bool__(self) -> bool:
        return bool(self._users)

    def push(self, user: User) -> None:
        """Append ``user``, growing the capacity when it is exhausted."""

        if len(self._users) + 1 > self._capacity:
            new_capacity = self._capacity * 2
            logger.debug("Growing user list capacity from %s to %s", self._capacity, new_capacity)
            self._capacity = new_capacity

        self._users.append(user)
        logger.debug("Pushed user %s %s at index %s", user.name, user.last_name, len(self._users) - 1)

    def get(self, index: Optional[int]) -> User:
        return self._users[self._checked_index(index)]

    def remove(self, index: Optional[int]) -> User:
        """Remove and return the user at ``index``.

        Raises :class:`UserIndexError` without touching the list when the
        index does not reference a live entry.
        """

        removed = self._users.pop(self._checked_index(index))
        logger.debug("Removed user at index %s; %s user(s) remain", index, len(self._users))
        return removed

    def print_at(self, index: Optional[int], stream: TextIO | None = None) -> None:
        position = self._checked_index(index)
        (stream or sys.stdout).write(self._users[position].render(position))

    def print_all(self, stream: TextIO | None = None) -> None:
        output = stream or sys.stdout
        for index, user in enumerate(self._users):
            output.write(user.render(index))

    def _checked_index(self, index: Optional[int]) -> int:
        if index is None or index < 0 or index >= len(self._users):
            raise UserIndexError(index, len(self._users))
        return index


__all__ = [
    "DEFAULT_INITIAL_CAPACITY",
    "UserIndexError",
    "UserList",
    "UserListError",
]
