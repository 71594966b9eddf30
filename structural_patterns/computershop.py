"""Decorator pattern: computer upgrades by subclassing and by wrapping."""

from abc import ABC, abstractmethod

UPGRADE_PRICE = 500.0


class Computer(ABC):
    """A computer that can be described and priced."""

    @abstractmethod
    def description(self) -> str:
        """Describe the computer and its upgrades."""

    @abstractmethod
    def price(self) -> float:
        """Total cost in dollars."""


class Desktop(Computer):
    def description(self) -> str:
        return "Desktop"

    def price(self) -> float:
        return 1000.0


class Laptop(Computer):
    def description(self) -> str:
        return "Laptop"

    def price(self) -> float:
        return 1500.0


class DesktopWithMemoryUpgrade(Desktop):
    def description(self) -> str:
        return "Desktop with memory upgrade"

    def price(self) -> float:
        return 1700.0


class LaptopWithMemoryUpgrade(Laptop):
    def description(self) -> str:
        return "Laptop with memory upgrade"

    def price(self) -> float:
        return 2000.0


class DesktopWithGraphicsUpgrade(Desktop):
    def description(self) -> str:
        return "Desktop with graphics upgrade"

    def price(self) -> float:
        return 2000.0


class LaptopWithGraphicsUpgrade(Laptop):
    def description(self) -> str:
        return "Laptop with graphics upgrade"

    def price(self) -> float:
        return 2700.0


class ComputerDecorator(Computer):
    """Wraps a computer and forwards to it unchanged."""

    def __init__(self, computer: Computer) -> None:
        self._computer = computer

    def description(self) -> str:
        return self._computer.description()

    def price(self) -> float:
        return self._computer.price()


class MemoryUpgradeDecorator(ComputerDecorator):
    def description(self) -> str:
        return super().description() + " with memory upgrade"

    def price(self) -> float:
        return super().price() + UPGRADE_PRICE


class GraphicsUpgradeDecorator(ComputerDecorator):
    def description(self) -> str:
        return f"{super().description()} with graphics upgrade"

    def price(self) -> float:
        return UPGRADE_PRICE + super().price()


def main(argv: list[str] | None = None) -> int:
    """Print the description and price of some computers and upgrades."""
    desktop = Desktop()
    laptop = Laptop()
    for computer in (
        desktop,
        laptop,
        MemoryUpgradeDecorator(desktop),
        GraphicsUpgradeDecorator(laptop),
    ):
        print(f"{computer.description()} costs ${computer.price():g}")
    return 0