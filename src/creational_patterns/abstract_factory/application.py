"""
Client of the abstract factory.

`Application` HAS a factory rather than being one: the factory is injected,
used once to create the widgets, and the application never names a concrete
widget class.
"""

import logging

from rich.console import Console

from creational_patterns.abstract_factory.factories import GUIFactory
from creational_patterns.console import emit

logger = logging.getLogger(__name__)


class Application:
    def __init__(self, factory: GUIFactory) -> None:
        self.button = factory.create_button()
        self.checkbox = factory.create_checkbox()
        logger.debug("Application composed from %s", factory.label)

    def render_ui(self, console: Console) -> None:
        console.print()
        emit(console, "🧭 [Application] Rendering cross-platform UI...")
        self.button.render(console)
        self.checkbox.render(console)
        emit(console, "✅ [Application] UI rendered successfully!")
        console.print()
