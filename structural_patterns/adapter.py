"""Adapter pattern: fitting a legacy component into a common interface."""

from abc import ABC, abstractmethod


def _say(line: str) -> str:
    print(line)
    return line


def _executing(name: str) -> str:
    return _say(f"Executing {name}")


def _delegating(adapter: str) -> None:
    _say(f"{adapter}::run() -> Calling LegacyComponent::go()")


class Component(ABC):
    """Interface that clients run uniformly."""

    @abstractmethod
    def run(self) -> str:
        """Execute the component and return the last line it reported."""


class ConcreteComponentA(Component):
    def run(self) -> str:
        return _executing("ConcreteComponentA::run()")


class ConcreteComponentB(Component):
    def run(self) -> str:
        return _executing("ConcreteComponentB::run()")


class LegacyComponent:
    """A class whose interface does not match Component."""

    def go(self) -> str:
        """Do the legacy work and return the line it reported."""
        return _executing("LegacyComponent::go()")


class LegacyAdapter(Component):
    """Object adapter: wraps a LegacyComponent and forwards run() to go()."""

    def __init__(self, adaptee: LegacyComponent | None = None) -> None:
        self._adaptee = adaptee if adaptee is not None else LegacyComponent()

    def run(self) -> str:
        _delegating("LegacyAdapter")
        return self._adaptee.go()


class LegacyClassAdapter(Component, LegacyComponent):
    """Class adapter: inherits the legacy behaviour and exposes it as run()."""

    def run(self) -> str:
        _delegating("LegacyClassAdapter")
        return self.go()


def main(argv: list[str] | None = None) -> int:
    """Run a set of components, including adapted legacy ones."""
    components: list[Component] = [
        ConcreteComponentA(),
        ConcreteComponentB(),
        LegacyAdapter(),
        LegacyClassAdapter(),
    ]
    for component in components:
        component.run()
    return 0