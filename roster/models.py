"""Domain models for the roster console."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping


@dataclass(frozen=True)
class User:
    """A single roster entry. Identified only by its position in a list."""

    name: str
    last_name: str
    email: str

    @staticmethod
    def from_dict(data: Mapping[str, object]) -> "User":
        """Create a :class:`User` from raw mapping data."""
        required_fields = {"name", "last_name", "email"}
        missing = required_fields - data.keys()
        if missing:
            raise ValueError(f"Missing required user fields: {', '.join(sorted(missing))}")

        return User(
            name=str(data["name"]),
            last_name=str(data["last_name"]),
            email=str(data["email"]),
        )

    def render(self, index: int) -> str:
        return (
            f"User[{index}]\n"
            f"\tName: {self.name}\n"
            f"\tLast name: {self.last_name}\n"
            f"\tEmail: {self.email}\n"
        )


__all__ = ["User"]
