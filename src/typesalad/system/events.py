"""Minimal synchronous event emitter.

Usage:
    emitter = EventEmitter()
    emitter.on("saved", lambda key: print(key))
    emitter.emit("saved", "config")
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any


class EventEmitter:
    """Named events with listeners called in registration order."""

    def __init__(self) -> None:
        self._listeners: dict[str, list[Callable[..., Any]]] = {}

    def on(self, event_name: str, listener: Callable[..., Any]) -> None:
        """Register ``listener`` for ``event_name``."""
        self._listeners.setdefault(event_name, []).append(listener)

    def off(self, event_name: str, listener: Callable[..., Any]) -> bool:
        """Remove one registration of ``listener``. Returns True if it was registered."""
        listeners = self._listeners.get(event_name, [])
        if listener in listeners:
            listeners.remove(listener)
            return True
        return False

    def emit(self, event_name: str, *args: Any) -> None:
        """Call every listener of ``event_name`` with ``args``.

        Listener exceptions propagate to the emitter's caller; later listeners
        do not run.
        """
        # Copy so listeners can unsubscribe while being notified
        for listener in list(self._listeners.get(event_name, ())):
            listener(*args)

    def listener_count(self, event_name: str) -> int:
        return len(self._listeners.get(event_name, ()))
