"""Unit tests for the selection loop state machine and its collaborators."""

from __future__ import annotations

import io
import webbrowser
from unittest.mock import Mock

import pytest
from rich.console import Console

from issue_tracker.errors import InteractionError, LaunchError
from issue_tracker.github.client import Issue
from issue_tracker.ui import selection
from issue_tracker.ui.selection import (
    IllegalTransitionError,
    LoopState,
    RichChooser,
    SelectionLoop,
    WebBrowserOpener,
    transition,
)

ISSUES = [
    Issue(html_url="https://github.com/o/r/issues/3", number=3, title="Third"),
    Issue(html_url="https://github.com/o/r/issues/9", number=9, title="Ninth"),
]


def test_transitions() -> None:
    assert (
        transition(current=LoopState.AWAITING_SELECTION, to=LoopState.AWAITING_SELECTION)
        is LoopState.AWAITING_SELECTION
    )
    assert (
        transition(current=LoopState.AWAITING_SELECTION, to=LoopState.TERMINATED)
        is LoopState.TERMINATED
    )
    with pytest.raises(IllegalTransitionError):
        transition(current=LoopState.TERMINATED, to=LoopState.AWAITING_SELECTION)


def test_step_opens_chosen_issue_and_stays_awaiting() -> None:
    chooser = Mock()
    chooser.choose.return_value = 1
    opener = Mock()
    loop = SelectionLoop(ISSUES, chooser=chooser, opener=opener)

    picked = loop.step()

    assert picked is ISSUES[1]
    opener.open.assert_called_once_with("https://github.com/o/r/issues/9")
    chooser.choose.assert_called_once_with(
        "Select an issue:", ["(Issue 3: Third)", "(Issue 9: Ninth)"], default=0
    )
    assert loop.state is LoopState.AWAITING_SELECTION


def test_run_repeats_until_interrupted_without_refetching() -> None:
    chooser = Mock()
    chooser.choose.side_effect = [0, 1, 0, KeyboardInterrupt()]
    opener = Mock()
    loop = SelectionLoop(ISSUES, chooser=chooser, opener=opener)

    with pytest.raises(KeyboardInterrupt):
        loop.run()

    assert [c.args[0] for c in opener.open.call_args_list] == [
        ISSUES[0].html_url,
        ISSUES[1].html_url,
        ISSUES[0].html_url,
    ]
    assert loop.state is LoopState.TERMINATED
    # Every prompt shows the same snapshot.
    assert all(c.args[1] == [str(i) for i in ISSUES] for c in chooser.choose.call_args_list)


def test_chooser_failure_terminates_loop() -> None:
    chooser = Mock()
    chooser.choose.side_effect = InteractionError("no terminal")
    opener = Mock()
    loop = SelectionLoop(ISSUES, chooser=chooser, opener=opener)

    with pytest.raises(InteractionError):
        loop.run()

    opener.open.assert_not_called()
    assert loop.state is LoopState.TERMINATED


def test_opener_failure_terminates_loop() -> None:
    chooser = Mock()
    chooser.choose.return_value = 0
    opener = Mock()
    opener.open.side_effect = LaunchError("no browser", url=ISSUES[0].html_url)
    loop = SelectionLoop(ISSUES, chooser=chooser, opener=opener)

    with pytest.raises(LaunchError):
        loop.run()

    assert loop.state is LoopState.TERMINATED
    with pytest.raises(IllegalTransitionError):
        loop.step()


def test_out_of_range_selection_is_an_interaction_error() -> None:
    chooser = Mock()
    chooser.choose.return_value = 5
    loop = SelectionLoop(ISSUES, chooser=chooser, opener=Mock())

    with pytest.raises(InteractionError):
        loop.step()

    assert loop.state is LoopState.TERMINATED


def test_rich_chooser_returns_zero_based_index(monkeypatch: pytest.MonkeyPatch) -> None:
    buffer = io.StringIO()
    console = Console(file=buffer, force_terminal=False, width=120)
    ask = Mock(return_value=2)
    monkeypatch.setattr(selection.IntPrompt, "ask", ask)

    index = RichChooser(console).choose("Select an issue:", [str(i) for i in ISSUES])

    assert index == 1
    assert "(Issue 3: Third)" in buffer.getvalue()
    assert "(Issue 9: Ninth)" in buffer.getvalue()
    assert ask.call_args.kwargs["choices"] == ["1", "2"]
    assert ask.call_args.kwargs["default"] == 1


def test_rich_chooser_end_of_input_is_interaction_error(monkeypatch: pytest.MonkeyPatch) -> None:
    console = Console(file=io.StringIO(), force_terminal=False)
    monkeypatch.setattr(selection.IntPrompt, "ask", Mock(side_effect=EOFError()))

    with pytest.raises(InteractionError):
        RichChooser(console).choose("Select an issue:", ["(Issue 1: One)"])


def test_rich_chooser_rejects_empty_list() -> None:
    console = Console(file=io.StringIO(), force_terminal=False)

    with pytest.raises(InteractionError):
        RichChooser(console).choose("Select an issue:", [])


def test_web_browser_opener_opens_new_tab(monkeypatch: pytest.MonkeyPatch) -> None:
    open_ = Mock(return_value=True)
    monkeypatch.setattr(selection.webbrowser, "open", open_)

    WebBrowserOpener().open("https://github.com/o/r/issues/3")

    open_.assert_called_once_with("https://github.com/o/r/issues/3", new=2)


def test_web_browser_opener_without_browser_fails(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(selection.webbrowser, "open", Mock(return_value=False))

    with pytest.raises(LaunchError) as excinfo:
        WebBrowserOpener().open("https://github.com/o/r/issues/3")

    assert excinfo.value.url == "https://github.com/o/r/issues/3"


def test_web_browser_opener_wraps_browser_errors(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(
        selection.webbrowser, "open", Mock(side_effect=webbrowser.Error("could not locate"))
    )

    with pytest.raises(LaunchError, match="could not locate"):
        WebBrowserOpener().open("https://github.com/o/r/issues/3")
