"""
Coffee machine demo — pick a drink, the matching machine makes it.

Usage:
    python -m creational_patterns.coffee.cli
    python -m creational_patterns.coffee.cli latte

Like the notification demo, an unknown drink is reported and the process
exits normally.
"""

import argparse
import logging

from rich.console import Console

from creational_patterns.coffee.machines import brew, get_machine
from creational_patterns.console import console, display_style, emit, read_selection

TITLE = "Coffee Machine Demo"
PROMPT = "Enter coffee type (espresso / latte): "


def run(kind: str | None = None, out: Console = console) -> bool:
    with display_style(TITLE, out) as out:
        emit(out, "=== ☕ Coffee Machine Demo ===", style="demo")
        out.print()
        if kind is None:
            kind = read_selection(out, PROMPT)

        # Reported like the notification demo; no exception leaves run().
        selection = get_machine(kind)
        if not selection.ok:
            out.print()
            emit(out, f"❌ Error: {selection.error}", style="error")
            return False

        brew(selection.creator, out)
        out.print()
        emit(out, "✅ Enjoy your coffee!", style="success")
        return True


def main() -> None:
    parser = argparse.ArgumentParser(description=TITLE)
    parser.add_argument("kind", nargs="?", help="espresso or latte (prompted when omitted)")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        type=str.upper,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: WARNING)",
    )
    args = parser.parse_args()
    logging.basicConfig(level=args.log_level, format="%(asctime)s [%(levelname)s] %(name)s: %(message)s")
    run(args.kind)


if __name__ == "__main__":
    main()
