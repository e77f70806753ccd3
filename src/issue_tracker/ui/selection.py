"""Pick-an-issue loop and its terminal and browser collaborators."""

from __future__ import annotations

import logging
import webbrowser
from collections.abc import Sequence
from enum import Enum
from typing import Protocol

from rich.console import Console
from rich.markup import escape
from rich.prompt import IntPrompt

from issue_tracker.errors import InteractionError, LaunchError
from issue_tracker.github.client import Issue

logger = logging.getLogger(__name__)

PROMPT = "Select an issue:"


class LoopState(str, Enum):
    AWAITING_SELECTION = "awaiting_selection"
    TERMINATED = "terminated"


ALLOWED_TRANSITIONS: dict[LoopState, set[LoopState]] = {
    LoopState.AWAITING_SELECTION: {LoopState.AWAITING_SELECTION, LoopState.TERMINATED},
    LoopState.TERMINATED: set(),
}


class IllegalTransitionError(ValueError):
    pass


def transition(*, current: LoopState, to: LoopState) -> LoopState:
    allowed = ALLOWED_TRANSITIONS.get(current, set())
    if to not in allowed:
        raise IllegalTransitionError(f"Illegal transition: {current.value} -> {to.value}")
    return to


class Chooser(Protocol):
    def choose(self, prompt: str, items: Sequence[str], default: int = 0) -> int:
        """Return the zero-based index of the picked item."""


class Opener(Protocol):
    def open(self, url: str) -> None: ...


class RichChooser:
    """Numbered list plus an integer prompt on the given console."""

    def __init__(self, console: Console) -> None:
        self._console = console

    def choose(self, prompt: str, items: Sequence[str], default: int = 0) -> int:
        if not items:
            raise InteractionError("Nothing to select: no open issues were returned")

        width = len(str(len(items)))
        for position, item in enumerate(items, 1):
            self._console.print(
                f"  [cyan]{position:>{width}}[/cyan]  {escape(item)}", highlight=False
            )

        try:
            picked = IntPrompt.ask(
                f"[bold]{escape(prompt)}[/bold]",
                console=self._console,
                choices=[str(n) for n in range(1, len(items) + 1)],
                show_choices=False,
                default=default + 1,
            )
        except EOFError as e:
            raise InteractionError("Input stream closed while waiting for a selection") from e

        return picked - 1


class WebBrowserOpener:
    """Open URLs in a new tab of the user's default browser."""

    def open(self, url: str) -> None:
        try:
            opened = webbrowser.open(url, new=2)
        except webbrowser.Error as e:
            raise LaunchError(f"Could not open {url}: {e}", url=url) from e
        if not opened:
            raise LaunchError(f"No usable browser found to open {url}", url=url)


class SelectionLoop:
    """Repeatedly offer the same issue snapshot until interrupted or failed.

    There is no quit entry; the loop ends only when the chooser or the opener
    raises (Ctrl-C included), at which point it moves to TERMINATED and the
    exception propagates.
    """

    def __init__(self, issues: Sequence[Issue], *, chooser: Chooser, opener: Opener) -> None:
        self._issues = tuple(issues)
        self._labels = [str(issue) for issue in self._issues]
        self._chooser = chooser
        self._opener = opener
        self._state = LoopState.AWAITING_SELECTION

    @property
    def state(self) -> LoopState:
        return self._state

    @property
    def issues(self) -> tuple[Issue, ...]:
        return self._issues

    def step(self) -> Issue:
        """Run one selection and open the chosen issue."""

        if self._state is LoopState.TERMINATED:
            raise IllegalTransitionError("Selection loop has already terminated")

        try:
            index = self._chooser.choose(PROMPT, self._labels, default=0)
            if not 0 <= index < len(self._issues):
                raise InteractionError(f"Selection {index} is out of range")
            issue = self._issues[index]
            logger.debug("Issue selected", extra={"issue_number": issue.number})
            self._opener.open(issue.html_url)
        except BaseException:
            self._state = transition(current=self._state, to=LoopState.TERMINATED)
            raise

        self._state = transition(current=self._state, to=LoopState.AWAITING_SELECTION)
        return issue

    def run(self) -> None:
        while True:
            self.step()
