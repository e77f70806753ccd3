"""Failures surfaced to the top-level CLI boundary.

Components raise these and never print or exit on their own; `main` turns
them into a labelled message on stderr and an exit code.
"""

from __future__ import annotations

from pathlib import Path


class IssueTrackerError(Exception):
    """Base class for every fatal failure of a run."""

    label = "error"


class ConfigIOError(IssueTrackerError):
    """The credential file could not be read or written."""

    label = "config"

    def __init__(self, message: str, *, path: Path) -> None:
        super().__init__(message)
        self.path = path


class MissingCredential(IssueTrackerError):
    """A credential field is still empty after merging overrides."""

    label = "missing credential"

    def __init__(self, message: str, *, field: str, flag: str) -> None:
        super().__init__(message)
        self.field = field
        self.flag = flag


class NetworkError(IssueTrackerError):
    label = "network"


class DecodeError(IssueTrackerError):
    label = "decode"


class InteractionError(IssueTrackerError):
    label = "interaction"


class LaunchError(IssueTrackerError):
    label = "browser"

    def __init__(self, message: str, *, url: str) -> None:
        super().__init__(message)
        self.url = url


class ConfigPathRequested(IssueTrackerError):
    """Raised instead of resolving when only the config path was asked for."""

    label = "config path"

    def __init__(self, path: Path) -> None:
        super().__init__(str(path))
        self.path = path
