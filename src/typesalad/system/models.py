"""System models: package lifecycle states, registry entries, and event names."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, StrEnum, auto
from typing import Any


class PackageState(Enum):
    """Lifecycle of a package name. Transitions only move forward, except a
    failed registration which returns to UNREGISTERED."""

    UNREGISTERED = auto()  # Entry exists, nothing loaded
    REGISTERING = auto()  # use_package in flight
    ENABLED = auto()  # Instance live for the rest of the process


class SystemEvent(StrEnum):
    """Notifications emitted by the System."""

    PACKAGE_USED = "package_used"  # args: (name,)
    PRINT_CALLED = "print_called"  # args: (value,)


@dataclass(slots=True)
class PackageEntry:
    """Registry entry for one package name."""

    name: str
    state: PackageState = PackageState.UNREGISTERED
    instance: Any = None

    @property
    def enabled(self) -> bool:
        return self.state is PackageState.ENABLED
