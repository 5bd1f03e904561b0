"""Core utilities for the roster console."""

from __future__ import annotations

from .config import Settings, load_settings, resolve_config_path
from .console import run_console
from .models import User
from .userlist import UserIndexError, UserList, UserListError

__all__ = [
    "Settings",
    "User",
    "UserIndexError",
    "UserList",
    "UserListError",
    "load_settings",
    "resolve_config_path",
    "run_console",
]
