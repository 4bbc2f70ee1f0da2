"""
Computer builders (Builder pattern).

A builder knows how to fill in each part of a `Computer`; it does not know
in which order the parts are requested, that belongs to the director.
Each builder owns a fresh, empty record and hands out a frozen snapshot
from `get_computer()`.
"""

from collections.abc import Callable, Mapping
from typing import Protocol

from creational_patterns.dispatch import Selection, select
from creational_patterns.domain.models import Computer, ComputerType, FinishedComputer


class ComputerBuilder(Protocol):
    label: str

    def set_cpu(self) -> None: ...

    def set_gpu(self) -> None: ...

    def set_ram(self) -> None: ...

    def set_storage(self) -> None: ...

    def set_power_supply(self) -> None: ...

    def get_computer(self) -> FinishedComputer: ...


class GamingComputerBuilder:
    label = "Gaming Computer Builder"

    def __init__(self) -> None:
        # Working record, mutated by the set_* steps; never handed out directly.
        self._computer = Computer()

    def set_cpu(self) -> None:
        self._computer.cpu = "Intel Core i9 13900K"

    def set_gpu(self) -> None:
        self._computer.gpu = "NVIDIA RTX 4090"

    def set_ram(self) -> None:
        self._computer.ram = "32GB DDR5"

    def set_storage(self) -> None:
        self._computer.storage = "2TB NVMe SSD"

    def set_power_supply(self) -> None:
        self._computer.power_supply = "1000W Gold PSU"

    def get_computer(self) -> FinishedComputer:
        # Frozen copy: callers can't alter the parts after the build, and
        # further steps on this builder don't leak into a computer already handed out.
        return self._computer.snapshot()


class OfficeComputerBuilder:
    label = "Office Computer Builder"

    def __init__(self) -> None:
        self._computer = Computer()

    def set_cpu(self) -> None:
        self._computer.cpu = "Intel Core i5 12400"

    def set_gpu(self) -> None:
        self._computer.gpu = "Integrated Intel UHD Graphics"

    def set_ram(self) -> None:
        self._computer.ram = "16GB DDR4"

    def set_storage(self) -> None:
        self._computer.storage = "512GB SSD"

    def set_power_supply(self) -> None:
        self._computer.power_supply = "500W Bronze PSU"

    def get_computer(self) -> FinishedComputer:
        return self._computer.snapshot()


# Builders are stateful, so the registry holds classes and every selection
# gets a fresh, empty builder.
COMPUTER_BUILDERS: Mapping[ComputerType, Callable[[], ComputerBuilder]] = {
    ComputerType.GAMING: GamingComputerBuilder,
    ComputerType.OFFICE: OfficeComputerBuilder,
}


def get_builder(computer_type: str | None) -> Selection[ComputerBuilder]:
    return select(computer_type, COMPUTER_BUILDERS, "Computer type")
