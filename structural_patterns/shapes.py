"""Composite pattern: drawing simple shapes and groups of shapes."""

from abc import ABC, abstractmethod


def _draw_line(line: str) -> str:
    print(line)
    return line


def _numbers(*values: float) -> list[str]:
    return [f"{value:g}" for value in values]


class Shape(ABC):
    """Anything that can be drawn."""

    @abstractmethod
    def draw(self) -> str:
        """Draw the shape and return what was drawn."""


class Circle(Shape):
    def __init__(self, radius: float) -> None:
        self.radius = radius

    def draw(self) -> str:
        (radius,) = _numbers(self.radius)
        return _draw_line(f"Drawing a circle with radius {radius}")


class Rectangle(Shape):
    def __init__(self, width: float, height: float) -> None:
        self.width = width
        self.height = height

    def draw(self) -> str:
        width, height = _numbers(self.width, self.height)
        return _draw_line(f"Drawing a rectangle with width {width} and height {height}")


class Triangle(Shape):
    def __init__(self, side1: float, side2: float, side3: float) -> None:
        self.side1 = side1
        self.side2 = side2
        self.side3 = side3

    def draw(self) -> str:
        a, b, c = _numbers(self.side1, self.side2, self.side3)
        return _draw_line(f"Drawing a triangle with sides {a}, {b}, and {c}")


class CompositeShape(Shape):
    """A shape made of other shapes, drawn in the order they were added."""

    def __init__(self) -> None:
        self._shapes: list[Shape] = []

    def add_shape(self, shape: Shape) -> None:
        """Append a shape to the group."""
        self._shapes.append(shape)

    def remove_shape(self, shape: Shape) -> None:
        """Remove the first occurrence of this very shape; do nothing if absent."""
        index = next((i for i, member in enumerate(self._shapes) if member is shape), None)
        if index is not None:
            del self._shapes[index]

    def __len__(self) -> int:
        return len(self._shapes)

    def draw(self) -> str:
        lines = [_draw_line("Drawing a composite shape:")]
        lines.extend(shape.draw() for shape in self._shapes)
        return "\n".join(lines)


def main(argv: list[str] | None = None) -> int:
    """Draw a composite shape, remove one member and draw it again."""
    rectangle = Rectangle(10, 20)
    composite = CompositeShape()
    for shape in (Circle(5), rectangle, Triangle(3, 4, 5)):
        composite.add_shape(shape)

    composite.draw()
    composite.remove_shape(rectangle)
    composite.draw()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())