"""CLI entrypoint for the issue tracker.

Resolves credentials, checks them, fetches the issue snapshot once, then
loops over "pick an issue, open it in the browser" until Ctrl-C.
"""

from __future__ import annotations

import argparse
import logging
import sys

from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape

from issue_tracker import __version__
from issue_tracker.config import IssueTrackerSettings
from issue_tracker.credentials import CredentialStore, OverrideInput, check_credentials, resolve
from issue_tracker.errors import ConfigPathRequested, IssueTrackerError
from issue_tracker.github.fetcher import fetch_issues
from issue_tracker.logging import configure_logging
from issue_tracker.ui.selection import RichChooser, SelectionLoop, WebBrowserOpener

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="issue-tracker",
        description="Browse the GitHub issues assigned to you and open them in a browser",
    )
    parser.add_argument("--version", action="version", version=f"issue-tracker {__version__}")
    parser.add_argument(
        "-t",
        "--token",
        default=None,
        help="GitHub access token to store and use",
    )
    parser.add_argument(
        "-u",
        "--user-name",
        dest="user_name",
        default=None,
        help="GitHub user name to store and send as User-Agent",
    )
    parser.add_argument(
        "--file-path",
        dest="file_path",
        action="store_true",
        help="Print the location of the config file and exit",
    )
    return parser


def _report(console: Console, error: IssueTrackerError) -> None:
    console.print(
        f"[bold red]Error[/bold red] ({escape(error.label)}): {escape(str(error))}",
        highlight=False,
        soft_wrap=True,
    )


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        settings = IssueTrackerSettings()
    except ValidationError as e:
        # Logging isn't configured yet; keep it simple and actionable.
        print("Configuration error (check your environment or .env):", file=sys.stderr)
        print(e, file=sys.stderr)
        return 2

    configure_logging(settings.log_level)

    console = Console()
    err_console = Console(stderr=True)

    overrides = OverrideInput(
        token=args.token,
        user_name=args.user_name,
        show_path_only=args.file_path,
    )
    store = CredentialStore(settings.config_file)

    try:
        record = resolve(store, overrides)
        check_credentials(record)
        issues = fetch_issues(record, settings=settings, console=console)

        loop = SelectionLoop(issues, chooser=RichChooser(console), opener=WebBrowserOpener())
        loop.run()
        return 0

    except ConfigPathRequested as e:
        print(e.path, file=sys.stderr)
        return 1

    except IssueTrackerError as e:
        logger.info("Run failed", extra={"kind": type(e).__name__})
        _report(err_console, e)
        return 1

    except KeyboardInterrupt:
        logger.info("Interrupted by user")
        return 0


if __name__ == "__main__":
    raise SystemExit(main())
