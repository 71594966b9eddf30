"""Composite pattern: boxes holding products and other boxes."""

from abc import ABC, abstractmethod


class Product(ABC):
    """Anything with a price, including boxes of products."""

    @abstractmethod
    def price(self) -> float:
        """Return the price."""


class _Item(Product, ABC):
    """A single priced article that reports when its price is read."""

    kind = "item"

    def __init__(self, label: str, price: float) -> None:
        self._label = label
        self._price = price

    def _reported_price(self) -> float:
        print(f'Getting "{self._label}" {self.kind} price')
        return self._price


class Book(_Item):
    kind = "book"

    def __init__(self, title: str, price: float) -> None:
        super().__init__(title, price)
        self.title = title

    def price(self) -> float:
        return self._reported_price()


class Toy(_Item):
    kind = "toy"

    def __init__(self, name: str, price: float) -> None:
        super().__init__(name, price)
        self.name = name

    def price(self) -> float:
        return self._reported_price()


class Box(Product):
    """A named container whose price is the total of its contents."""

    def __init__(self, name: str) -> None:
        self.name = name
        self._products: list[Product] = []

    def add_product(self, product: Product) -> None:
        """Put a product (or another box) into this box."""
        self._products.append(product)

    def price(self) -> float:
        print(f"Opening {self.name}")
        return sum((product.price() for product in self._products), 0.0)


def main(argv: list[str] | None = None) -> int:
    """Build nested boxes and print the total price."""
    small_box = Box("Small Box")
    small_box.add_product(Book("Robinson Crusoe", 4.99))
    small_box.add_product(Toy("Star Trooper", 39.99))

    big_box = Box("Big Box")
    big_box.add_product(Toy("Barbie Dreamhouse", 59.99))
    big_box.add_product(small_box)

    print("Calculating total price. ")
    print(f"{big_box.price():g}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())