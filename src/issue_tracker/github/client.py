"""GitHub REST client for the single endpoint this tool needs.

Keeps HTTP details out of CLI code and takes an injectable session so tests
never touch the network.
"""

from __future__ import annotations

import logging
from typing import Any

import requests
from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, ValidationError

from issue_tracker.errors import DecodeError, NetworkError

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://api.github.com"
API_VERSION = "2022-11-28"


class Issue(BaseModel):
    """An issue as listed by `GET /issues`; unknown response fields are dropped."""

    html_url: str
    number: int = Field(ge=0, strict=True)
    title: str = Field(strict=True)

    model_config = ConfigDict(frozen=True, extra="ignore")

    def __str__(self) -> str:
        return f"(Issue {self.number}: {self.title})"


_ISSUE_LIST = TypeAdapter(list[Issue])


def parse_issues(payload: Any) -> list[Issue]:
    """Validate a decoded `/issues` response as a whole.

    One bad element fails the entire list; no partial result is returned.
    """

    if not isinstance(payload, list):
        raise DecodeError(f"Expected a JSON array of issues, got {type(payload).__name__}")

    try:
        return _ISSUE_LIST.validate_python(payload)
    except ValidationError as e:
        raise DecodeError(f"Invalid issues response: {e}") from e


class GitHubClient:
    """Authenticated access to the caller's issue list."""

    def __init__(
        self,
        *,
        token: str,
        user_name: str,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = 30.0,
        session: requests.Session | None = None,
    ) -> None:
        if not token:
            raise ValueError("GitHub token is required")
        if not user_name:
            raise ValueError("GitHub user name is required")

        self._rest_base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._session = session or requests.Session()
        self._session.headers.update(
            {
                "Authorization": f"Bearer {token}",
                "Accept": "application/vnd.github+json",
                "X-GitHub-Api-Version": API_VERSION,
                "User-Agent": user_name,
            }
        )

    @property
    def issues_url(self) -> str:
        return f"{self._rest_base_url}/issues"

    def list_issues(self) -> list[Issue]:
        """Fetch the issues assigned to the authenticated user, in server order."""

        url = self.issues_url
        logger.debug(
            "Requesting issues", extra={"url": url, "headers": dict(self._session.headers)}
        )
        try:
            resp = self._session.get(url, timeout=self._timeout)
            resp.raise_for_status()
        except requests.RequestException as e:
            raise NetworkError(f"Request to {url} failed: {e}") from e

        try:
            data: Any = resp.json()
        except ValueError as e:
            raise DecodeError(f"Response from {url} is not valid JSON: {e}") from e

        issues = parse_issues(data)
        logger.info("Issues fetched", extra={"count": len(issues)})
        return issues

    def close(self) -> None:
        self._session.close()
