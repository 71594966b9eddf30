"""Adapter pattern: presenting a third-party drive as a cloud storage service."""

from __future__ import annotations

import random
import time
from abc import ABC, abstractmethod
from collections.abc import Callable, Sequence
from typing import Protocol


class RandomSource(Protocol):
    def randrange(self, stop: int) -> int: ...


def _random_source(rng: RandomSource | None) -> RandomSource:
    return rng if rng is not None else random.Random()


class CloudStorage(ABC):
    """Common interface of cloud storage services."""

    @abstractmethod
    def upload_contents(self, content: str) -> bool:
        """Upload content; return True on success."""

    @abstractmethod
    def free_space(self) -> int:
        """Return the available storage in GB."""


class _SimulatedStorage(CloudStorage):
    """Storage service whose free space is simulated with random numbers."""

    def __init__(self, rng: RandomSource | None) -> None:
        self._rng = _random_source(rng)

    @staticmethod
    def _report_upload(service: str, content: str) -> bool:
        print(f"Uploading {len(content.encode())} bytes to {service}: ")
        return True

    def _report_free(self, service: str, limit: int) -> int:
        size = self._rng.randrange(limit)
        print(f"Available {service} storage: {size}GB")
        return size


class CloudDrive(_SimulatedStorage):
    def __init__(self, rng: RandomSource | None = None) -> None:
        super().__init__(rng)

    def upload_contents(self, content: str) -> bool:
        return self._report_upload("CloudDrive", content)

    def free_space(self) -> int:
        return self._report_free("CloudDrive", 20)


class FastShare(_SimulatedStorage):
    def __init__(self, rng: RandomSource | None = None) -> None:
        super().__init__(rng)

    def upload_contents(self, content: str) -> bool:
        return self._report_upload("FastShare", content)

    def free_space(self) -> int:
        return self._report_free("FastShare", 10)


class VirtualDrive:
    """Third-party service with its own interface."""

    TOTAL_SPACE = 15

    def __init__(self, rng: RandomSource | None = None) -> None:
        self._rng = _random_source(rng)

    def upload_data(self, data: str, unique_id: int) -> bool:
        print(f'Uploading to VirtualDrive: "{data}" ID: {unique_id}')
        return True

    def used_space(self) -> int:
        return self._rng.randrange(10)


class VirtualDriveAdapter(CloudStorage):
    """Exposes a VirtualDrive through the CloudStorage interface."""

    def __init__(
        self,
        drive: VirtualDrive | None = None,
        clock: Callable[[], float] | None = None,
    ) -> None:
        self._drive = drive if drive is not None else VirtualDrive()
        self._clock = clock if clock is not None else time.time

    def _generate_uid(self) -> int:
        # Seconds since the epoch.
        return int(self._clock())

    def upload_contents(self, content: str) -> bool:
        unique_id = self._generate_uid()
        print("VirtualDriveAdapter::uploadContents() -> Calling VirtualDrive::uploadData()")
        return self._drive.upload_data(content, unique_id)

    def free_space(self) -> int:
        print(
            "VirtualDriveAdapter::getFreeSpace() -> "
            "Calling VirtualDrive::getAvailableStorage()"
        )
        available = self._drive.TOTAL_SPACE - self._drive.used_space()
        print(f"Available VirtualDrive storage: {available} GB")
        return available


def main(argv: Sequence[str] | None = None) -> int:
    """Upload a message to every service and report free space."""
    services: list[CloudStorage] = [CloudDrive(), FastShare(), VirtualDriveAdapter()]
    content = "Beam me up, Scotty!"
    for service in services:
        service.upload_contents(content)
        service.free_space()
        print()
    return 0