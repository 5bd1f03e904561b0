from __future__ import annotations

import dataclasses

import pytest

from roster.models import User


def test_user_is_immutable() -> None:
    user = User("Ada", "Lovelace", "ada@example.com")
    with pytest.raises(dataclasses.FrozenInstanceError):
        user.name = "Grace"  # type: ignore[misc]


def test_from_dict_builds_user() -> None:
    user = User.from_dict({"name": "Ada", "last_name": "Lovelace", "email": "ada@example.com"})
    assert user == User("Ada", "Lovelace", "ada@example.com")


def test_from_dict_reports_missing_fields() -> None:
    with pytest.raises(ValueError, match="email, last_name"):
        User.from_dict({"name": "Ada"})


def test_render_keeps_fields_verbatim() -> None:
    user = User("  Ada ", "", "not-an-email")
    assert user.render(7) == "User[7]\n\tName:   Ada \n\tLast name: \n\tEmail: not-an-email\n"
