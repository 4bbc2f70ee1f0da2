"""
Coffee machines (Factory Method pattern, coffee-shop edition).

The customer presses a button (`brew`) and never names a drink class: the
machine's `create_coffee()` decides what ends up in the cup.
"""

import logging
from collections.abc import Callable, Mapping
from typing import Protocol

from rich.console import Console

from creational_patterns.coffee.drinks import Coffee, Espresso, Latte
from creational_patterns.dispatch import Selection, select
from creational_patterns.domain.models import CoffeeKind

logger = logging.getLogger(__name__)


class CoffeeMachine(Protocol):
    def create_coffee(self) -> Coffee: ...


class EspressoMachine:
    def create_coffee(self) -> Coffee:
        return Espresso()


class LatteMachine:
    def create_coffee(self) -> Coffee:
        return Latte()


# One machine per drink, like one button per drink on the real thing.
COFFEE_MACHINES: Mapping[CoffeeKind, Callable[[], CoffeeMachine]] = {
    CoffeeKind.ESPRESSO: EspressoMachine,
    CoffeeKind.LATTE: LatteMachine,
}


def get_machine(kind: str | None) -> Selection[CoffeeMachine]:
    return select(kind, COFFEE_MACHINES, "Coffee type")


def brew(machine: CoffeeMachine, console: Console) -> Coffee:
    coffee = machine.create_coffee()
    logger.info("Brewing %s", coffee.kind.value)
    coffee.serve(console)
    return coffee
