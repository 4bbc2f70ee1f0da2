"""
Domain models shared by the creational pattern demos.

Discriminator enums inherit from (str, Enum) so a member compares and hashes
exactly like its lowercase token. Registries keyed by these enums can
therefore be looked up with the plain, normalized string read from the
console (e.g. "windows" finds Platform.WINDOWS).

The only data record is `Computer`, the product of the Builder demo. It is
a Pydantic v2 BaseModel: builders fill it in one field at a time and hand
out a frozen copy once construction is finished.
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict
from rich.console import Console

from creational_patterns.console import emit


class Platform(str, Enum):
    """UI families available to the Abstract Factory demo."""

    WINDOWS = "windows"
    MAC = "mac"


class NotificationChannel(str, Enum):
    """Notification types available to the Factory Method demo."""

    EMAIL = "email"
    SMS = "sms"
    WHATSAPP = "whatsapp"


class ComputerType(str, Enum):
    """Computer variants available to the Builder demo."""

    GAMING = "gaming"
    OFFICE = "office"


class CoffeeKind(str, Enum):
    """Drinks the coffee machines know how to make."""

    ESPRESSO = "espresso"
    LATTE = "latte"


# ── Builder product ──────────────────────────────────────────────────


class Computer(BaseModel):
    """A computer configuration assembled step by step.

    Every part starts out empty. A step the director skips leaves its
    field at "", which is the only form of partial construction.
    """

    # Builders assign one field per step; validate each assignment as it happens.
    model_config = ConfigDict(validate_assignment=True)

    cpu: str = ""           # Processor model, e.g. "Intel Core i9 13900K"
    gpu: str = ""           # Discrete card or integrated graphics
    ram: str = ""
    storage: str = ""
    power_supply: str = ""  # Wattage and efficiency rating

    def is_complete(self) -> bool:
        return all(self.model_dump().values())

    def part_lines(self) -> list[str]:
        """Labelled lines in display order."""
        return [
            f"CPU: {self.cpu}",
            f"GPU: {self.gpu}",
            f"RAM: {self.ram}",
            f"Storage: {self.storage}",
            f"Power Supply: {self.power_supply}",
        ]

    def snapshot(self) -> "FinishedComputer":
        return FinishedComputer(**self.model_dump())

    def display(self, console: Console) -> None:
        emit(console, "💻 Computer Configuration:")
        for line in self.part_lines():
            emit(console, f"   {line}")


class FinishedComputer(Computer):
    """Read-only snapshot handed out once the build is over."""

    # Assignment raises a ValidationError instead of mutating.
    model_config = ConfigDict(frozen=True)
