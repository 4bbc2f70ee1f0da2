"""
Builder demo — assembles a computer step by step and prints its parts.

Usage:
    python -m creational_patterns.builder.cli
    python -m creational_patterns.builder.cli gaming

An unknown computer type is fatal: UnsupportedSelection propagates.
"""

import argparse
import logging

from rich.console import Console

from creational_patterns.builder.builders import get_builder
from creational_patterns.builder.director import ComputerDirector
from creational_patterns.console import console, display_style, emit, read_selection
from creational_patterns.domain.models import FinishedComputer

TITLE = "Builder Design Pattern Demo"
PROMPT = "Enter computer type (gaming / office): "


def run(computer_type: str | None = None, out: Console = console) -> FinishedComputer:
    with display_style(TITLE, out) as out:
        emit(out, "=== 🧱 Builder Design Pattern Demo ===", style="demo")
        out.print()
        if computer_type is None:
            computer_type = read_selection(out, PROMPT)

        # Fatal on an unknown type, same as the abstract factory demo.
        builder = get_builder(computer_type).unwrap()
        out.print()
        emit(out, f"➡️ Selected {builder.label}", style="demo")

        director = ComputerDirector(builder)
        director.construct_computer(out)

        computer = director.get_computer()
        computer.display(out)

        out.print()
        emit(out, "🎉 Demo complete — object built step-by-step using Builder Pattern.", style="success")
        return computer


def main() -> None:
    parser = argparse.ArgumentParser(description=TITLE)
    parser.add_argument("computer_type", nargs="?", help="gaming or office (prompted when omitted)")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        type=str.upper,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: WARNING)",
    )
    args = parser.parse_args()
    logging.basicConfig(level=args.log_level, format="%(asctime)s [%(levelname)s] %(name)s: %(message)s")
    run(args.computer_type)


if __name__ == "__main__":
    main()
