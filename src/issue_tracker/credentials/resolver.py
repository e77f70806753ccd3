"""Merge command-line overrides into the stored credential record."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from issue_tracker.credentials.store import CredentialRecord, CredentialStore
from issue_tracker.errors import ConfigPathRequested

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class OverrideInput:
    """Values supplied on the command line for this run only."""

    token: str | None = None
    user_name: str | None = None
    show_path_only: bool = False


def merge_overrides(record: CredentialRecord, overrides: OverrideInput) -> CredentialRecord:
    """Return `record` with every non-empty, differing override applied."""

    update: dict[str, str] = {}
    if overrides.token and overrides.token != record.github_access_token:
        update["github_access_token"] = overrides.token
    if overrides.user_name and overrides.user_name != record.user_name:
        update["user_name"] = overrides.user_name

    if not update:
        return record

    logger.info("Applying credential overrides", extra={"fields": sorted(update)})
    return record.model_copy(update=update)


def resolve(store: CredentialStore, overrides: OverrideInput) -> CredentialRecord:
    """Produce the effective configuration for this run.

    The merged record is always written back, even when no override changed it.

    Raises:
        ConfigPathRequested: `show_path_only` was set; nothing is read or written.
        ConfigIOError: The credential file could not be read or written.
    """

    if overrides.show_path_only:
        raise ConfigPathRequested(store.path)

    record = merge_overrides(store.load(), overrides)
    store.store(record)
    return record
