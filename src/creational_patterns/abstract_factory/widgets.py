"""
UI widgets (abstract products and their concrete families).

`Button` and `Checkbox` are Protocols: any class with a matching
`render(console)` method satisfies them, no inheritance needed. Each concrete
widget belongs to exactly one family and always prints that family's line.
"""

from typing import Protocol

from rich.console import Console

from creational_patterns.console import emit


class Button(Protocol):
    family: str

    def render(self, console: Console) -> None: ...


class Checkbox(Protocol):
    family: str

    def render(self, console: Console) -> None: ...


# ── Windows family ───────────────────────────────────────────────────


class WindowsButton:
    family = "windows"

    def render(self, console: Console) -> None:
        emit(console, "🪟 [WindowsButton] Rendered a Windows-style button")


class WindowsCheckbox:
    family = "windows"

    def render(self, console: Console) -> None:
        emit(console, "🪟 [WindowsCheckbox] Rendered a Windows-style checkbox")


# ── Mac family ───────────────────────────────────────────────────────


class MacButton:
    family = "mac"

    def render(self, console: Console) -> None:
        emit(console, "🍎 [MacButton] Rendered a Mac-style button")


class MacCheckbox:
    family = "mac"

    def render(self, console: Console) -> None:
        emit(console, "🍎 [MacCheckbox] Rendered a Mac-style checkbox")
