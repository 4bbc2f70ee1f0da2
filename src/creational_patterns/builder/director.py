"""
Director — owns the one construction sequence every builder goes through.

The order lives in BUILD_STEPS and is not configurable at runtime. Running
the sequence on two fresh builders of the same kind yields equal computers.
"""

import logging

from rich.console import Console

from creational_patterns.builder.builders import ComputerBuilder
from creational_patterns.console import emit
from creational_patterns.domain.models import FinishedComputer

logger = logging.getLogger(__name__)

# Builder method names, applied in this order.
BUILD_STEPS: tuple[str, ...] = ("set_cpu", "set_gpu", "set_ram", "set_storage", "set_power_supply")


class ComputerDirector:
    def __init__(self, builder: ComputerBuilder) -> None:
        self._builder = builder

    def construct_computer(self, console: Console) -> None:
        emit(console, "🛠️ Starting computer construction...")
        for step in BUILD_STEPS:
            logger.debug("%s: %s", self._builder.label, step)
            getattr(self._builder, step)()
        emit(console, "✅ Computer successfully built!")
        console.print()

    def get_computer(self) -> FinishedComputer:
        return self._builder.get_computer()
