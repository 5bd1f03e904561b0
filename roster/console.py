"""Interactive menu for editing a :class:`~roster.userlist.UserList`."""

from __future__ import annotations

import logging
import sys
from typing import Optional

from .models import User
from .userlist import UserIndexError, UserList

logger = logging.getLogger("roster.console")

# Wide enough for any signed 64-bit value.
_MAX_INDEX_DIGITS = 19

MENU = (
    "===== Choose action by typing the number =====\n"
    "1: EXIT\n"
    "2: Add user\n"
    "3: Remove user\n"
    "4: Print user\n"
    "5: Print all users"
)

ACTION_EXIT = 1
ACTION_ADD = 2
ACTION_REMOVE = 3
ACTION_PRINT = 4
ACTION_PRINT_ALL = 5

EMPTY_LIST_MESSAGE = "User list is empty."


def read_digit(line: str) -> Optional[int]:
    """Return the last decimal digit in ``line`` or ``None`` if there is none."""

    digit = None
    for char in line:
        if "0" <= char <= "9":
            digit = int(char)
    return digit


def parse_index(line: str) -> Optional[int]:
    """Parse a list index, ignoring every non-digit character.

    Returns ``None`` when the line holds no digits or when the first digit
    is preceded by a minus sign.
    """

    digits = "".join(char for char in line if "0" <= char <= "9")[:_MAX_INDEX_DIGITS]
    if not digits:
        return None
    if line[: line.index(digits[0])].rstrip().endswith("-"):
        return None
    return int(digits)


def print_seed_users(users: UserList) -> None:
    print("===== Userlist has these initial users =====")
    users.print_all()


def run_console(users: UserList) -> int:
    """Run the menu loop until the operator exits. Returns the exit code."""

    logger.info("Console session started with %s user(s)", len(users))
    try:
        while True:
            print(MENU)
            try:
                choice = read_digit(input())
                if choice == ACTION_EXIT:
                    break
                if choice == ACTION_ADD:
                    _add_user(users)
                elif choice == ACTION_REMOVE:
                    _remove_user(users)
                elif choice == ACTION_PRINT:
                    _print_user(users)
                elif choice == ACTION_PRINT_ALL:
                    _print_all(users)
                else:
                    _error("Unknown action.")
            except EOFError:
                print()
                logger.info("Input closed; ending console session")
                break
    except KeyboardInterrupt:
        print("\nExiting roster console.")
        return 0

    print("Users:")
    _print_all(users)
    logger.info("Console session finished with %s user(s)", len(users))
    return 0


def _add_user(users: UserList) -> None:
    print("Enter the following information for the new user:")
    name = input("Name: ")
    last_name = input("Last name: ")
    email = input("Email: ")

    users.push(User(name=name, last_name=last_name, email=email))
    print("User was added.")


def _remove_user(users: UserList) -> None:
    if not users:
        print("The list is empty. Please add a user first.")
        return

    print(f"Which user should be deleted? (index from 0 to {len(users) - 1})")
    index = parse_index(input())
    try:
        users.remove(index)
    except UserIndexError as exc:
        logger.debug("Rejected removal: %s", exc)
        _error("Error: Index out of bounds.")
        return

    print("User was removed.")


def _print_user(users: UserList) -> None:
    if not users:
        print("The list is empty. Please add a user first.")
        return

    print(f"Which user should be printed? (index from 0 to {len(users) - 1})")
    index = parse_index(input())
    try:
        users.print_at(index)
    except UserIndexError as exc:
        logger.debug("Rejected print: %s", exc)
        _error("Error: Index out of bounds.")


def _print_all(users: UserList) -> None:
    if not users:
        print(EMPTY_LIST_MESSAGE)
        return
    users.print_all()


def _error(message: str) -> None:
    print(message, file=sys.stderr)


__all__ = [
    "EMPTY_LIST_MESSAGE",
    "MENU",
    "parse_index",
    "print_seed_users",
    "read_digit",
    "run_console",
]
