"""Issue Tracker.

A small interactive CLI that:
- keeps a GitHub token and user name in a per-user config file
- fetches the issues assigned to you
- opens the ones you pick in a browser
"""

__version__ = "0.1.0"

from issue_tracker.config import IssueTrackerSettings

__all__ = ["__version__", "IssueTrackerSettings"]
