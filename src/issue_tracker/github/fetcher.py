"""Fetch the issue snapshot for a run behind a progress spinner."""

from __future__ import annotations

from rich.console import Console

from issue_tracker.config import IssueTrackerSettings
from issue_tracker.credentials.store import CredentialRecord
from issue_tracker.github.client import GitHubClient, Issue
from issue_tracker.ui.progress import spinner

FETCHING_MESSAGE = "Fetching issues..."
DONE_MESSAGE = "Found issues! Press <C-c> to quit"


def fetch_issues(
    record: CredentialRecord,
    *,
    settings: IssueTrackerSettings,
    console: Console,
    client: GitHubClient | None = None,
) -> list[Issue]:
    """Run the single `/issues` request for `record`.

    A client passed in is left open; one created here is closed afterwards.
    """

    owned = client is None
    github = client or GitHubClient(
        token=record.github_access_token,
        user_name=record.user_name,
        base_url=settings.api_base_url,
        timeout=settings.request_timeout,
    )
    try:
        with spinner(console, FETCHING_MESSAGE, DONE_MESSAGE):
            return github.list_issues()
    finally:
        if owned:
            github.close()
