"""Spinner shown while the issue request is in flight."""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager

from rich.console import Console
from rich.markup import escape

SPINNER = "dots"


@contextmanager
def spinner(console: Console, message: str, done_message: str) -> Iterator[None]:
    """Animate `message` for the duration of the block.

    The spinner is stopped exactly once whatever the outcome; `done_message`
    is printed only when the block finished without raising.
    """

    status = console.status(message, spinner=SPINNER)
    status.start()
    try:
        yield
    finally:
        status.stop()
    console.print(f"[green]✔[/green] {escape(done_message)}", highlight=False)
