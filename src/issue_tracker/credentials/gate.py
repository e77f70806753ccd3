"""Refuse to contact GitHub until both credentials are configured."""

from __future__ import annotations

from issue_tracker.credentials.store import CredentialRecord
from issue_tracker.errors import MissingCredential


def check_credentials(record: CredentialRecord) -> None:
    """Raise `MissingCredential` for the first empty field, token first."""

    if not record.github_access_token:
        raise MissingCredential(
            "No GitHub access token set. Please set one with the --token (-t) flag.",
            field="github_access_token",
            flag="--token",
        )

    if not record.user_name:
        raise MissingCredential(
            "No GitHub user name set. Please set one with the --user-name (-u) flag.",
            field="user_name",
            flag="--user-name",
        )
