from issue_tracker.github.client import GitHubClient, Issue, parse_issues
from issue_tracker.github.fetcher import fetch_issues

__all__ = ["GitHubClient", "Issue", "fetch_issues", "parse_issues"]
