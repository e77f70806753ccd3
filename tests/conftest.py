"""Test configuration and fixtures."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from pathlib import Path

import pytest

from issue_tracker.config import IssueTrackerSettings
from issue_tracker.credentials import CredentialRecord, CredentialStore

_SETTINGS_ENV_VARS = (
    "ISSUE_TRACKER_API_URL",
    "ISSUE_TRACKER_TIMEOUT",
    "ISSUE_TRACKER_CONFIG_DIR",
    "ISSUE_TRACKER_LOG_LEVEL",
)


@pytest.fixture(autouse=True)
def isolated_environment(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run every test in an empty working directory with no settings in the environment."""
    for name in _SETTINGS_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    workdir = tmp_path / "cwd"
    workdir.mkdir()
    monkeypatch.chdir(workdir)
    return workdir


@pytest.fixture
def config_dir(tmp_path: Path) -> Path:
    """Provide a directory for the credential file (not created yet)."""
    return tmp_path / "config" / "issue-tracker"


@pytest.fixture
def settings(config_dir: Path) -> IssueTrackerSettings:
    """Provide test settings pointing at the temporary config directory."""
    return IssueTrackerSettings(ISSUE_TRACKER_CONFIG_DIR=config_dir)


@pytest.fixture
def store(settings: IssueTrackerSettings) -> CredentialStore:
    """Provide a credential store backed by the temporary config file."""
    return CredentialStore(settings.config_file)


@pytest.fixture
def complete_record() -> CredentialRecord:
    return CredentialRecord(github_access_token="abc", user_name="bob")


@pytest.fixture
def restore_root_logger() -> Iterator[None]:
    """Undo `configure_logging` changes to the root logger."""
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    for handler in list(root.handlers):
        root.removeHandler(handler)
    for handler in handlers:
        root.addHandler(handler)
    root.setLevel(level)
