"""Configuration management for the roster console."""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Optional, Tuple

import yaml

from .models import User
from .userlist import DEFAULT_INITIAL_CAPACITY

_LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


@dataclass(frozen=True)
class Settings:
    """Start-up options for a console session."""

    initial_capacity: int = DEFAULT_INITIAL_CAPACITY
    seed_users: Tuple[User, ...] = field(default_factory=tuple)
    log_level: str = "WARNING"

    @staticmethod
    def from_dict(data: Dict[str, object]) -> "Settings":
        """Create :class:`Settings` from raw dictionary data."""
        unknown = set(data.keys()) - {"initial_capacity", "seed_users", "log_level"}
        if unknown:
            raise ValueError(f"Unknown configuration fields: {', '.join(sorted(unknown))}")

        raw_capacity = data.get("initial_capacity", DEFAULT_INITIAL_CAPACITY)
        if isinstance(raw_capacity, bool) or not isinstance(raw_capacity, int) or raw_capacity < 1:
            raise ValueError("initial_capacity must be a positive integer")

        raw_seed = data.get("seed_users")
        if raw_seed is None:
            raw_seed = []
        if not isinstance(raw_seed, list):
            raise ValueError("seed_users must be a list of user entries")
        seed_users = []
        for position, item in enumerate(raw_seed):
            if not isinstance(item, dict):
                raise ValueError(f"seed_users[{position}] must be a mapping")
            for key in ("name", "last_name", "email"):
                if key in item and not isinstance(item[key], str):
                    raise ValueError(f"seed_users[{position}].{key} must be a string")
            seed_users.append(User.from_dict(item))

        log_level = str(data.get("log_level", "WARNING")).upper()
        if log_level not in _LOG_LEVELS:
            raise ValueError(f"log_level must be one of: {', '.join(_LOG_LEVELS)}")

        return Settings(
            initial_capacity=raw_capacity,
            seed_users=tuple(seed_users),
            log_level=log_level,
        )

    @property
    def log_level_value(self) -> int:
        return logging.getLevelName(self.log_level)


def load_settings(config_path: Path) -> Settings:
    """Load console settings from a YAML file."""
    with config_path.open("r", encoding="utf-8") as handle:
        raw = yaml.safe_load(handle) or {}

    if not isinstance(raw, dict):
        raise ValueError("Configuration file must contain a mapping at the top level")

    return Settings.from_dict(raw)


def default_config_path() -> Path:
    return (Path(__file__).resolve().parent.parent / "config" / "roster.yaml").resolve(strict=False)


def resolve_config_path(env_value: Optional[str]) -> Path:
    """Resolve the path to the configuration file."""
    if env_value:
        return Path(env_value).expanduser().resolve(strict=False)
    return default_config_path()


__all__ = ["Settings", "default_config_path", "load_settings", "resolve_config_path"]
