"""Decorator pattern: pizzas with toppings added by wrapping."""

from abc import ABC, abstractmethod


class Pizza(ABC):
    """A pizza on the menu."""

    @abstractmethod
    def description(self) -> str:
        """Name of the pizza with its toppings."""

    @abstractmethod
    def price(self) -> float:
        """Cost of the pizza in dollars."""


class MargheritaPizza(Pizza):
    def description(self) -> str:
        return "Margherita Pizza"

    def price(self) -> float:
        return 9.99


class HawaiianPizza(Pizza):
    def description(self) -> str:
        return "Hawaiian Pizza"

    def price(self) -> float:
        return 11.99


class PepperoniPizza(Pizza):
    def description(self) -> str:
        return "Pepperoni Pizza"

    def price(self) -> float:
        return 12.99


class ToppingDecorator(Pizza):
    """Wraps a pizza; subclasses add their topping."""

    def __init__(self, pizza: Pizza) -> None:
        self._pizza = pizza

    def description(self) -> str:
        return self._pizza.description()

    def price(self) -> float:
        return self._pizza.price()


class MushroomDecorator(ToppingDecorator):
    def description(self) -> str:
        return super().description() + " with mushrooms"

    def price(self) -> float:
        return super().price() + 0.99


class ExtraCheeseDecorator(ToppingDecorator):
    def description(self) -> str:
        return super().description() + ", plus extra cheese"

    def price(self) -> float:
        return super().price() + 1.99


class TomatoDecorator(ToppingDecorator):
    def description(self) -> str:
        return super().description() + ", plus tomatoes"

    def price(self) -> float:
        return super().price() + 0.79


def main(argv: list[str] | None = None) -> int:
    """Print two pizzas with stacked toppings."""
    for pizza in (
        ExtraCheeseDecorator(MushroomDecorator(MargheritaPizza())),
        ExtraCheeseDecorator(TomatoDecorator(MushroomDecorator(PepperoniPizza()))),
    ):
        print(f"{pizza.description()} costs ${pizza.price():g}")
    return 0