"""Shared settings loaded from environment / .env file."""

from __future__ import annotations

from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Host-facing configuration for ghosttyconf.

    Values are read from ``GHOSTTYCONF_*`` environment variables and from a
    ``.env`` file in the working directory.  The diagnostic fields mirror the
    editor settings of the same name.
    """

    model_config = SettingsConfigDict(
        env_prefix="GHOSTTYCONF_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Schema artifact; the bundled schema is used when unset.
    schema_path: Path | None = None

    # Diagnostics
    enable_diagnostics: bool = True
    show_platform_hints: bool = True
    diagnostic_severity: str = "Warning"  # Error | Warning | Information | Hint
