"""Runtime settings for the issue tracker CLI.

Settings are loaded from:
- environment variables
- and a local `.env` file (if present)

Credentials (token and user name) are *not* settings: they live in the
per-user credential file managed by `issue_tracker.credentials.store`.
"""

from __future__ import annotations

from pathlib import Path

import click
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

APP_NAME = "issue-tracker"
CONFIG_FILE_NAME = "default-config.json"


def default_config_dir() -> Path:
    """Return the OS-standard per-user directory for this application."""

    return Path(click.get_app_dir(APP_NAME))


class IssueTrackerSettings(BaseSettings):
    """Settings for the issue tracker.

    Environment variables:
    - ISSUE_TRACKER_API_URL     (optional)
    - ISSUE_TRACKER_TIMEOUT     (optional)
    - ISSUE_TRACKER_CONFIG_DIR  (optional)
    - ISSUE_TRACKER_LOG_LEVEL   (optional)

    Notes:
        Pydantic-settings supports overriding the env file in tests via:
        `IssueTrackerSettings(_env_file=path_to_env)`.
    """

    api_base_url: str = Field(
        default="https://api.github.com",
        validation_alias="ISSUE_TRACKER_API_URL",
        description="GitHub API base URL (useful for GitHub Enterprise)",
    )

    request_timeout: float = Field(
        default=30.0,
        gt=0,
        validation_alias="ISSUE_TRACKER_TIMEOUT",
        description="Timeout in seconds for the issues request",
    )

    config_dir: Path | None = Field(
        default=None,
        validation_alias="ISSUE_TRACKER_CONFIG_DIR",
        description="Directory holding the credential file (defaults to the per-user app dir)",
    )

    log_level: str = Field(
        default="WARNING",
        validation_alias="ISSUE_TRACKER_LOG_LEVEL",
        description="Root logging level",
    )

    model_config = SettingsConfigDict(
        env_prefix="",
        env_file=".env",
        extra="ignore",
    )

    @field_validator("api_base_url")
    @classmethod
    def _strip_trailing_slash(cls, value: str) -> str:
        value = value.strip().rstrip("/")
        if not value:
            raise ValueError("ISSUE_TRACKER_API_URL must not be empty")
        return value

    @field_validator("log_level")
    @classmethod
    def _normalise_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Unknown log level: {value!r}")
        return level

    @property
    def config_file(self) -> Path:
        """Path of the persisted credential file."""

        return (self.config_dir or default_config_dir()) / CONFIG_FILE_NAME
