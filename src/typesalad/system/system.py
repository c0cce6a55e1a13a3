"""System: package registry, typed key/value storage, and typed printing.

Usage:
    system = get_system()   # or System() for an isolated instance

    # Enable packages
    await system.use_package("SaladMath", "typesalad.packages.math")
    await system.use_package("Greeter", Greeter)           # factory supplied directly
    system.use_package_sync("SaladLinq", "typesalad.packages.linq", "SaladLinqPackage")

    total = system.math.add(SaladInt(1), SaladInt(2))

    # Typed storage
    system.store("name", SaladString("salad"))
    system.store("name", SaladInt(1))   # raises TypeMismatchError
    system.retrieve("name")             # "salad"

    # Notifications
    system.on(SystemEvent.PRINT_CALLED, lambda value: ...)
    system.print(SaladString("hello"))
"""

from __future__ import annotations

import asyncio
import importlib
import logging
import sys
import warnings
from collections.abc import Callable, Mapping
from types import MappingProxyType, ModuleType
from typing import TYPE_CHECKING, Any, TextIO, TypeAlias

from typesalad.config import SystemSettings
from typesalad.core.errors import (
    AlreadyEnabledError,
    ExportNotFoundError,
    NotEnabledError,
    TypeMismatchError,
    UntypedError,
)
from typesalad.core.types import TypeTag
from typesalad.core.value import SaladString, TypeSalad, concat, raw_of, tag_of
from typesalad.system.events import EventEmitter
from typesalad.system.models import PackageEntry, PackageState, SystemEvent
from typesalad.system.sync_runner import SyncRunner

if TYPE_CHECKING:
    from typesalad.packages.files import SaladFilesPackage
    from typesalad.packages.linq import SaladLinqPackage
    from typesalad.packages.math import SaladMath

logger = logging.getLogger(__name__)

Locator: TypeAlias = str | ModuleType | Callable[[], Any] | object
"""Where a package comes from: a dotted module path, a module-like object, or a factory."""

BUILTIN_PACKAGES: dict[str, tuple[str, str]] = {
    "SaladMath": ("typesalad.packages.math", "SaladMath"),
    "SaladLinq": ("typesalad.packages.linq", "SaladLinqPackage"),
    "SaladFiles": ("typesalad.packages.files", "SaladFilesPackage"),
}
"""Package name -> (module path, export name) for the packages shipped with TypeSalad."""


def _describe(locator: Locator) -> str:
    if isinstance(locator, str):
        return locator
    if isinstance(locator, ModuleType):
        return locator.__name__
    return getattr(locator, "__qualname__", type(locator).__qualname__)


async def _resolve_factory(locator: Locator, export_name: str) -> Callable[[], Any]:
    """Turn a locator into a zero-argument factory.

    Dotted paths are imported off the event loop thread. Classes and other
    callables that are not modules are the factory themselves; anything else
    is treated as module-like and searched for ``export_name``.
    """
    if isinstance(locator, str):
        logger.debug("Importing package module '%s'", locator)
        module: Any = await asyncio.to_thread(importlib.import_module, locator)
    elif callable(locator) and not isinstance(locator, ModuleType):
        return locator
    else:
        module = locator

    factory = getattr(module, export_name, None)
    if factory is None:
        raise ExportNotFoundError(f"Export '{export_name}' not found in '{_describe(locator)}'.")
    if not callable(factory):
        raise ExportNotFoundError(
            f"Export '{export_name}' in '{_describe(locator)}' is not a class or factory."
        )
    return factory


class System(EventEmitter):
    """Process-wide registry of packages and typed storage.

    One instance per process is obtained through ``get_system()``; tests and
    embedding applications can construct their own and pass it around.

    Args:
        settings: Behaviour flags. Defaults to ``SystemSettings()`` (environment-driven).
        stdout: Stream ``print`` writes to. Defaults to ``sys.stdout`` at call time.
    """

    def __init__(
        self,
        settings: SystemSettings | None = None,
        stdout: TextIO | None = None,
    ) -> None:
        super().__init__()
        self._settings = settings or SystemSettings()
        self._stdout = stdout
        self._packages: dict[str, PackageEntry] = {}
        self._storage: dict[str, Any] = {}

    @property
    def settings(self) -> SystemSettings:
        return self._settings

    # Packages

    @property
    def packages(self) -> Mapping[str, PackageEntry]:
        """Read-only view of all package entries, including unfinished ones."""
        return MappingProxyType(self._packages)

    async def use_package(
        self,
        name: str,
        locator: Locator,
        export_name: str | None = None,
    ) -> Any:
        """Load, instantiate, and enable a package.

        The entry moves to REGISTERING before the first suspension point, so a
        second call for the same name fails instead of instantiating twice.
        If loading or instantiation fails the entry returns to UNREGISTERED and
        the call can be retried.

        Args:
            name: Name the package is fetched by.
            locator: Dotted module path, module-like object, or zero-argument factory.
            export_name: Attribute to instantiate from the module. Defaults to ``name``.
                Ignored when ``locator`` is a factory.

        Returns:
            The package instance.

        Raises:
            AlreadyEnabledError: If the package is enabled or being registered.
            ExportNotFoundError: If the module does not expose the export.
        """
        entry = self._packages.setdefault(name, PackageEntry(name=name))
        if entry.state is PackageState.ENABLED:
            raise AlreadyEnabledError(f"{name} is already enabled.")
        if entry.state is PackageState.REGISTERING:
            raise AlreadyEnabledError(f"{name} is already being registered.")

        entry.state = PackageState.REGISTERING
        try:
            factory = await _resolve_factory(locator, export_name or name)
            instance = factory()
        except BaseException:
            entry.state = PackageState.UNREGISTERED
            raise

        entry.instance = instance
        entry.state = PackageState.ENABLED
        logger.info("Enabled package '%s' from '%s'", name, _describe(locator))
        self.emit(SystemEvent.PACKAGE_USED, name)
        return instance

    def use_package_sync(
        self,
        name: str,
        locator: Locator,
        export_name: str | None = None,
    ) -> Any:
        """Sync wrapper for ``use_package``. Do not call from inside a running event loop."""
        return SyncRunner.get().run(self.use_package(name, locator, export_name))

    async def use_builtin(self, name: str) -> Any:
        """Enable one of the packages listed in ``BUILTIN_PACKAGES``.

        Raises:
            KeyError: If ``name`` is not a builtin package.
        """
        module_path, export_name = BUILTIN_PACKAGES[name]
        return await self.use_package(name, module_path, export_name)

    def fetch(self, name: str) -> Any:
        """Get an enabled package instance.

        Raises:
            NotEnabledError: If the package was never enabled or is still registering.
        """
        entry = self._packages.get(name)
        if entry is None or not entry.enabled:
            raise NotEnabledError(f"{name} is not enabled. Call use_package('{name}', ...) first.")
        return entry.instance

    def is_enabled(self, name: str) -> bool:
        entry = self._packages.get(name)
        return entry is not None and entry.enabled

    @property
    def math(self) -> SaladMath:
        """The enabled SaladMath package."""
        return self.fetch("SaladMath")  # type: ignore[no-any-return]

    @property
    def linq(self) -> SaladLinqPackage:
        """The enabled SaladLinq package."""
        return self.fetch("SaladLinq")  # type: ignore[no-any-return]

    @property
    def files(self) -> SaladFilesPackage:
        """The enabled SaladFiles package."""
        return self.fetch("SaladFiles")  # type: ignore[no-any-return]

    # Storage

    def store(self, key: str, value: Any) -> None:
        """Store a value, keeping the tag of a key fixed after its first write.

        Raises:
            UntypedError: If the key holds an untyped value, or ``value`` is untyped
                and untyped storage is disabled.
            TypeMismatchError: If ``value``'s tag differs from the stored value's tag.
        """
        if not self._settings.allow_untyped_storage and tag_of(value) is None:
            raise UntypedError(f"Cannot store untyped value under key {key}.")

        if key not in self._storage:
            if self._settings.warn_on_new_key:
                warnings.warn(f"Key {key} is undefined in System", stacklevel=2)
            self._storage[key] = value
            return

        expected = tag_of(self._storage[key])
        if expected is None:
            raise UntypedError(f"Key {key} contains an untyped variable.")
        received = tag_of(value)
        if received != expected:
            raise TypeMismatchError(f"Key {key} expected type {expected}, got {received}.")
        self._storage[key] = value

    def retrieve(self, key: str) -> Any:
        """Get the raw value stored under ``key``, or None if never written."""
        if key not in self._storage:
            return None
        return raw_of(self._storage[key])

    def keys(self) -> list[str]:
        return list(self._storage)

    # Typed helpers

    def print(self, value: TypeSalad) -> None:
        """Write a String value to stdout and emit PRINT_CALLED.

        Raises:
            TypeMismatchError: If ``value`` is not String-tagged.
        """
        tag = tag_of(value)
        if tag != TypeTag.STRING:
            raise TypeMismatchError(f"print expected 'String', got '{tag}'.")
        stream = self._stdout or sys.stdout
        stream.write(f"{value.render().raw_value()}\n")
        self.emit(SystemEvent.PRINT_CALLED, value)

    def concat(self, a: TypeSalad, b: TypeSalad) -> SaladString:
        """Concatenate two String or two Int values. See ``typesalad.core.value.concat``."""
        return concat(a, b)


_system: System | None = None


def get_system() -> System:
    """Access the process-wide System, creating it on first use.

    Returns:
        The single System instance for this process.
    """
    global _system
    if _system is None:
        _system = System()
    return _system
