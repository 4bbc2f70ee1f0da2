"""
Factory Method demo — sends one notification through the chosen channel.

Usage:
    python -m creational_patterns.factory_method.cli
    python -m creational_patterns.factory_method.cli whatsapp

An unknown type is reported on the console and the process still exits
normally (status 0).
"""

import argparse
import logging

from rich.console import Console

from creational_patterns.console import console, display_style, emit, read_selection
from creational_patterns.factory_method.factories import get_factory, send

TITLE = "Factory Method Pattern Demo"
PROMPT = "Enter notification type (email / sms / whatsapp): "
MESSAGE = "Message sent using Factory Method Pattern!"


def run(channel: str | None = None, out: Console = console) -> bool:
    """Run the demo; returns False when the selection was rejected."""
    with display_style(TITLE, out) as out:
        emit(out, "=== Factory Method Pattern Demo ===", style="demo")
        out.print()
        if channel is None:
            channel = read_selection(out, PROMPT)

        # A rejected type is reported, not raised: the demo still exits with status 0.
        selection = get_factory(channel)
        if not selection.ok:
            out.print()
            emit(out, f"❌ Error: {selection.error}", style="error")
            return False

        send(selection.creator, MESSAGE, out)
        out.print()
        emit(out, "✅ Operation successful.", style="success")
        return True


def main() -> None:
    parser = argparse.ArgumentParser(description=TITLE)
    parser.add_argument("channel", nargs="?", help="email, sms or whatsapp (prompted when omitted)")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        type=str.upper,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: WARNING)",
    )
    args = parser.parse_args()
    logging.basicConfig(level=args.log_level, format="%(asctime)s [%(levelname)s] %(name)s: %(message)s")
    run(args.channel)


if __name__ == "__main__":
    main()
