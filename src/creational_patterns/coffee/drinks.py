"""Coffee products served by the machines."""

from typing import Protocol

from rich.console import Console

from creational_patterns.console import emit
from creational_patterns.domain.models import CoffeeKind


class Coffee(Protocol):
    kind: CoffeeKind

    def serve(self, console: Console) -> None: ...


class Espresso:
    kind = CoffeeKind.ESPRESSO

    def serve(self, console: Console) -> None:
        emit(console, "☕ [Espresso] Served a rich, concentrated espresso shot")


class Latte:
    kind = CoffeeKind.LATTE

    def serve(self, console: Console) -> None:
        emit(console, "🥛 [Latte] Served a creamy latte with steamed milk")
