"""bobcat settings.

Every knob is a `BOBCAT_*` environment variable, optionally set in a `.env`
file in the working directory or in the per-user config directory. The CLI
builds `AppSettings` once per run and passes it to the pipeline.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


DEFAULT_CHUNK_SIZE = 4096


def get_user_config_dir() -> Path:
    """Where a per-user `.env` for bobcat is looked up."""

    if sys.platform.startswith("win"):
        root = Path(os.environ.get("APPDATA") or Path.home())
    elif sys.platform == "darwin":
        root = Path.home() / "Library" / "Application Support"
    else:
        root = Path(os.environ.get("XDG_CONFIG_HOME") or Path.home() / ".config")
    return root / "bobcat"


def get_user_env_file() -> Path:
    return get_user_config_dir() / ".env"


class AppSettings(BaseSettings):
    """Validated bobcat settings.

    Bad values (e.g. `BOBCAT_CHUNK_SIZE=0`) raise `ValidationError` here,
    before any operand is touched.
    """

    model_config = SettingsConfigDict(
        env_prefix="BOBCAT_",
        extra="ignore",
        case_sensitive=False,
        # Later files win: the user-level .env overrides ./.env.
        env_file=(".env", str(get_user_env_file())),
        env_file_encoding="utf-8",
    )

    chunk_size: int = Field(
        default=DEFAULT_CHUNK_SIZE,
        ge=1,
        description="Bytes read per chunk (size of the reusable buffer).",
    )
    stdin_name: str = Field(
        default="stdin",
        min_length=1,
        description="Display name used in diagnostics for standard input.",
    )
    program_name: str | None = Field(
        default=None,
        description="Diagnostic prefix; defaults to the basename of argv[0].",
    )
