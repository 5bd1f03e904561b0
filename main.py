"""Command-line interface for the roster console."""

from __future__ import annotations
import argparse
import logging
import os
import sys
from dataclasses import replace
from pathlib import Path
from typing import Sequence

import yaml

from roster.config import Settings, load_settings, resolve_config_path
from roster.console import print_seed_users, run_console
from roster.userlist import UserList

logger = logging.getLogger("roster.main")

CONFIG_ENV_VAR = "ROSTER_CONFIG"


def _parse_args(argv: Sequence[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Interactive in-memory user roster")
    parser.add_argument(
        "--config",
        default=None,
        help=f"Path to a YAML settings file (defaults to {CONFIG_ENV_VAR} or config/roster.yaml)",
    )
    parser.add_argument(
        "--initial-capacity",
        type=int,
        default=None,
        help="Initial capacity of the user list (default: 3)",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        type=str.upper,
        choices=["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"],
        help="Logging verbosity (default: WARNING)",
    )
    return parser.parse_args(list(argv) if argv is not None else sys.argv[1:])


def _load_settings(config_arg: str | None) -> tuple[Settings, Path | None]:
    explicit = config_arg or os.getenv(CONFIG_ENV_VAR)
    config_path = resolve_config_path(explicit)

    if not explicit and not config_path.exists():
        return Settings(), None

    if not config_path.is_file():
        raise ValueError(f"Configuration file not found: {config_path}")

    return load_settings(config_path), config_path


def _build_settings(args: argparse.Namespace) -> tuple[Settings, Path | None]:
    settings, source = _load_settings(args.config)

    if args.initial_capacity is not None:
        if args.initial_capacity < 1:
            raise ValueError("--initial-capacity must be at least 1")
        settings = replace(settings, initial_capacity=args.initial_capacity)
    if args.log_level is not None:
        settings = replace(settings, log_level=args.log_level)

    return settings, source


def main(argv: Sequence[str] | None = None) -> int:
    """Entry point for CLI usage."""

    args = _parse_args(argv)

    try:
        settings, source = _build_settings(args)
    except (OSError, ValueError, yaml.YAMLError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    logging.basicConfig(
        level=settings.log_level_value,
        format="%(asctime)s [%(levelname)s] %(message)s",
    )
    if source is not None:
        logger.info("Loaded settings from %s", source)
    else:
        logger.info("Using built-in settings")

    users = UserList(settings.initial_capacity)
    if settings.seed_users:
        for user in settings.seed_users:
            users.push(user)
        print_seed_users(users)

    return run_console(users)


if __name__ == "__main__":
    raise SystemExit(main())
