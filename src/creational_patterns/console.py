"""
Shared Rich console and the scoped display style used by every demo.

All terminal output goes through one `Console` instance. Entry points wrap
their run in `display_style(...)`, which names the terminal window and pushes
the demo theme; the theme is popped again however the block exits, so an
aborted demo never leaves the styles behind.

Usage:
    from creational_patterns.console import console, display_style

    with display_style("Builder Design Pattern Demo") as out:
        out.print("=== Demo ===", style="demo")
"""

import logging
from collections.abc import Iterator
from contextlib import contextmanager

from rich.console import Console
from rich.theme import Theme

logger = logging.getLogger(__name__)

THEME = Theme(
    {
        "demo": "cyan",
        "success": "green",
        "error": "red",
        "notice": "dim",
    }
)

console = Console()


@contextmanager
def display_style(title: str, out: Console | None = None) -> Iterator[Console]:
    """Set the window title and push THEME for the duration of the block."""
    out = out or console
    # No-op on a non-terminal (pipes, StringIO in tests).
    out.set_window_title(title)
    out.push_theme(THEME)
    logger.debug("Display style pushed for %r", title)
    try:
        yield out
    finally:
        out.pop_theme()
        # The previous title can't be read back from the terminal, so clear it.
        out.set_window_title("")
        logger.debug("Display style restored for %r", title)


def read_selection(out: Console, prompt: str) -> str | None:
    """Prompt for one line; None when stdin closes before a line arrives.

    None flows into dispatch like any other unknown token, so each demo
    keeps its own failure behaviour for a closed input stream.
    """
    try:
        return out.input(prompt)
    except EOFError:
        out.print()
        logger.info("No input received for %r", prompt)
        return None


def emit(out: Console, text: str, style: str | None = None) -> None:
    """Print one line exactly as written: no markup, emoji codes or highlighting."""
    out.print(text, style=style, markup=False, highlight=False, emoji=False)
