"""Credential storage, override merging and the precondition gate."""

from issue_tracker.credentials.gate import check_credentials
from issue_tracker.credentials.resolver import OverrideInput, merge_overrides, resolve
from issue_tracker.credentials.store import CredentialRecord, CredentialStore

__all__ = [
    "CredentialRecord",
    "CredentialStore",
    "OverrideInput",
    "check_credentials",
    "merge_overrides",
    "resolve",
]
