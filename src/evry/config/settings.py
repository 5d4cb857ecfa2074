"""Unified settings — environment variables and explicit overrides.

Priority chain (highest to lowest):
  1. Init kwargs  — overrides passed by the CLI or tests
  2. Env vars     — ``EVRY_*`` prefix
  3. Code defaults

Flag variables follow the usual shell convention: setting
``EVRY_DEBUG`` at all (even to an empty string) turns debug output on.
Only the explicit negatives ``0``, ``false``, ``no`` and ``off`` keep it off.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path
from typing import Any

import click
from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings

_FALSE_VALUES = frozenset({"0", "false", "no", "off"})


def user_data_dir(app_name: str) -> Path:
    """Return the per-user data directory for *app_name*.

    POSIX systems use ``$XDG_DATA_HOME/<app>`` (``~/.local/share/<app>``
    when unset). macOS and Windows defer to :func:`click.get_app_dir`.
    """
    if sys.platform.startswith(("win", "darwin")):
        return Path(click.get_app_dir(app_name, roaming=False))
    xdg = os.environ.get("XDG_DATA_HOME")
    base = Path(xdg) if xdg else Path.home() / ".local" / "share"
    return base / app_name


class EvrySettings(BaseSettings):
    """Settings for a single evry invocation.

    Attributes:
        app_name: Directory name used under the user data directory.
        dir: Explicit data root (``EVRY_DIR``); overrides *app_name* lookup.
        debug: Print debug messages to stderr.
        json_output: Buffer debug messages and print them as one JSON array.
        parse_error_log: File that collects durations which failed to parse.
        verbose: Enable DEBUG-level structured logs.
        log_json: Render structured logs as JSON lines.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "EVRY_",
    }

    app_name: str = "evry"
    dir: Path | None = None
    debug: bool = False
    json_output: bool = Field(
        default=False,
        validation_alias=AliasChoices("json_output", "evry_json"),
    )
    parse_error_log: Path | None = None
    verbose: bool = False
    log_json: bool = False

    @field_validator("debug", "json_output", "verbose", "log_json", mode="before")
    @classmethod
    def _presence_flag(cls, value: Any) -> Any:
        if isinstance(value, str):
            return value.strip().lower() not in _FALSE_VALUES
        return value

    @field_validator("dir", "parse_error_log", mode="before")
    @classmethod
    def _blank_path_is_unset(cls, value: Any) -> Any:
        if isinstance(value, str) and not value.strip():
            return None
        return value

    @property
    def data_root(self) -> Path:
        """Root directory holding the ``data/`` (and ``rollback/``) directories."""
        if self.dir is not None:
            return self.dir.expanduser()
        return user_data_dir(self.app_name)

    @property
    def show_debug(self) -> bool:
        """JSON mode implies debug; evry is otherwise silent."""
        return self.debug or self.json_output

    @classmethod
    def from_env(cls, **overrides: Any) -> EvrySettings:
        """Construct settings from the environment, with *overrides* on top.

        ``None`` overrides are dropped so they never mask an env var.
        """
        return cls(**{k: v for k, v in overrides.items() if v is not None})
