"""
GUI factories (Abstract Factory pattern).

A `GUIFactory` creates one product of every widget type, all from the same
family, so an application built from a single factory can never mix Windows
and Mac widgets. Which factory to use is decided once, through the static
`GUI_FACTORIES` registry.
"""

from collections.abc import Callable, Mapping
from typing import Protocol

from creational_patterns.abstract_factory.widgets import (
    Button,
    Checkbox,
    MacButton,
    MacCheckbox,
    WindowsButton,
    WindowsCheckbox,
)
from creational_patterns.dispatch import Selection, select
from creational_patterns.domain.models import Platform


class GUIFactory(Protocol):
    """Interface for creating a matching family of widgets."""

    family: Platform
    label: str

    def create_button(self) -> Button: ...

    def create_checkbox(self) -> Checkbox: ...


class WindowsFactory:
    family = Platform.WINDOWS
    label = "Windows UI Factory"

    def create_button(self) -> Button:
        return WindowsButton()

    def create_checkbox(self) -> Checkbox:
        return WindowsCheckbox()


class MacFactory:
    family = Platform.MAC
    label = "Mac UI Factory"

    def create_button(self) -> Button:
        return MacButton()

    def create_checkbox(self) -> Checkbox:
        return MacCheckbox()


# Keyed by the Platform enum so adding a family means one new entry here
# plus one enum member; values are constructors, called once per selection.
GUI_FACTORIES: Mapping[Platform, Callable[[], GUIFactory]] = {
    Platform.WINDOWS: WindowsFactory,
    Platform.MAC: MacFactory,
}


def get_factory(platform: str | None) -> Selection[GUIFactory]:
    return select(platform, GUI_FACTORIES, "Platform")
