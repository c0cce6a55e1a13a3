"""Stateful services: the package registry, typed storage, and events."""

from typesalad.system.events import EventEmitter
from typesalad.system.models import PackageEntry, PackageState, SystemEvent
from typesalad.system.sync_runner import SyncRunner
from typesalad.system.system import BUILTIN_PACKAGES, System, get_system

__all__ = [
    "System",
    "get_system",
    "BUILTIN_PACKAGES",
    "EventEmitter",
    "SystemEvent",
    "PackageEntry",
    "PackageState",
    "SyncRunner",
]
