"""Bridge pattern: vehicles driven by interchangeable engines."""

from abc import ABC, abstractmethod


def _say(line: str) -> str:
    print(line)
    return line


class Engine(ABC):
    """An engine that can be started."""

    @abstractmethod
    def start(self) -> str:
        """Start the engine and return what was reported."""


class GasEngine(Engine):
    def start(self) -> str:
        return _say("Starting gas engine.")


class ElectricEngine(Engine):
    def start(self) -> str:
        return _say("Starting electric engine.")


class HybridEngine(Engine):
    def start(self) -> str:
        return _say("Starting hybrid engine.")


class Vehicle(ABC):
    """A vehicle that starts its engine before driving."""

    def __init__(self, engine: Engine) -> None:
        self._engine = engine

    def drive(self) -> list[str]:
        """Start the engine, then drive; return the reported lines in order."""
        return [self._engine.start(), self._drive_vehicle()]

    @abstractmethod
    def _drive_vehicle(self) -> str:
        """Drive the particular vehicle."""


class Car(Vehicle):
    def _drive_vehicle(self) -> str:
        return _say("Driving a car.")


class Truck(Vehicle):
    def _drive_vehicle(self) -> str:
        return _say("Driving a truck.")


class Bike(Vehicle):
    def _drive_vehicle(self) -> str:
        return _say("Riding a bike.")


def main(argv: list[str] | None = None) -> int:
    """Drive a car, a truck and a bike with different engines."""
    for vehicle in (Car(GasEngine()), Truck(ElectricEngine()), Bike(HybridEngine())):
        vehicle.drive()
        print()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())