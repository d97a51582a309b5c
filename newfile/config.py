"""Typed runtime settings and CLI override merging."""

from __future__ import annotations

import logging
from dataclasses import asdict, dataclass, replace
from typing import Any, Mapping

from newfile.errors import format_user_error
from newfile.templating import TEMPLATE_PREFIX, TEMPLATES_DIR

_ALLOWED_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR"}


@dataclass(frozen=True, slots=True)
class Settings:
    """Runtime settings; there is no settings file, only defaults and CLI flags."""

    templates_dir: str = TEMPLATES_DIR
    template_prefix: str = TEMPLATE_PREFIX
    validate_long_form: bool = False
    log_level: str = "WARNING"

    @property
    def logging_level(self) -> int:
        return getattr(logging, self.log_level)


def default_settings() -> Settings:
    """Build the default settings."""
    return Settings()


def merge_settings(*, defaults: Settings, cli_args: Mapping[str, Any]) -> Settings:
    """Overlay non-None CLI values on ``defaults``.

    Precedence order is defaults < cli_args.
    """
    known = set(asdict(defaults))
    unknown_keys = [key for key in cli_args if key not in known]
    if unknown_keys:
        key = unknown_keys[0]
        raise ValueError(
            format_user_error(
                what=f"unknown setting '{key}'.",
                why="settings accept only known fields",
                how_to_fix=f"use only: {', '.join(sorted(known))}",
            )
        )

    overrides = {key: value for key, value in cli_args.items() if value is not None}
    merged = replace(defaults, **overrides)
    validate_settings(merged)
    return merged


def validate_settings(settings: Settings) -> None:
    """Validate enum-like settings values."""
    if settings.log_level not in _ALLOWED_LOG_LEVELS:
        options = ", ".join(sorted(_ALLOWED_LOG_LEVELS))
        raise ValueError(
            format_user_error(
                what=f"log_level must be one of: {options}.",
                why=f"unsupported log level '{settings.log_level}' was provided",
                how_to_fix=f"choose one of {options}",
            )
        )
    if not settings.templates_dir:
        raise ValueError(
            format_user_error(
                what="templates_dir cannot be empty.",
                why="templates are looked up under this directory",
                how_to_fix="set templates_dir to a directory name such as 'templates'",
            )
        )


def log_level_from_flags(*, verbose: bool, debug: bool) -> str | None:
    """Translate verbosity flags into a log level name, or None when unset."""
    if debug:
        return "DEBUG"
    if verbose:
        return "INFO"
    return None
