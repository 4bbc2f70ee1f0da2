"""
Abstract Factory demo — renders a platform-consistent UI.

Usage:
    # Prompt for the platform:
    python -m creational_patterns.abstract_factory.cli

    # Or pass it directly:
    python -m creational_patterns.abstract_factory.cli mac

An unknown platform is fatal: UnsupportedSelection propagates and the
process exits with a traceback.
"""

import argparse
import logging

from rich.console import Console

from creational_patterns.abstract_factory.application import Application
from creational_patterns.abstract_factory.factories import get_factory
from creational_patterns.console import console, display_style, emit, read_selection

TITLE = "Abstract Factory Pattern Demo"
PROMPT = "Enter platform (windows / mac): "


def run(platform: str | None = None, out: Console = console) -> None:
    with display_style(TITLE, out) as out:
        emit(out, "=== 🏭 Abstract Factory Pattern Demo ===", style="demo")
        out.print()
        if platform is None:
            platform = read_selection(out, PROMPT)

        # unwrap() raises UnsupportedSelection: an unknown platform aborts the demo.
        factory = get_factory(platform).unwrap()
        out.print()
        emit(out, f"➡️ Selected {factory.label}", style="demo")

        app = Application(factory)
        app.render_ui(out)

        emit(out, "🎉 Demo complete — all components created through Abstract Factory.", style="success")


def main() -> None:
    parser = argparse.ArgumentParser(description=TITLE)
    parser.add_argument("platform", nargs="?", help="windows or mac (prompted when omitted)")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        type=str.upper,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: WARNING)",
    )
    args = parser.parse_args()
    logging.basicConfig(level=args.log_level, format="%(asctime)s [%(levelname)s] %(name)s: %(message)s")
    run(args.platform)


if __name__ == "__main__":
    main()
