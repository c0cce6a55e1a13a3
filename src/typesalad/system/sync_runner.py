"""Background event loop that lets synchronous callers enable packages.

``System.use_package`` is a coroutine because package modules are imported off
the calling thread. ``System.use_package_sync`` hands that coroutine to the
process-wide runner below and blocks until the package is registered:

    system = System()
    math_pkg = system.use_package_sync("SaladMath", "typesalad.packages.math")

The runner owns one daemon thread with its own loop, so registration works from
plain scripts and from threads that have no loop of their own. Calling it from
the runner's loop thread raises instead of deadlocking.
"""

from __future__ import annotations

import asyncio
import threading
from collections.abc import Coroutine
from typing import Any, TypeVar

T = TypeVar("T")


class SyncRunner:
    """Background event loop for calling coroutines from sync code. Singleton per process."""

    _instance: SyncRunner | None = None
    _lock = threading.Lock()

    def __init__(self) -> None:
        self._loop: asyncio.AbstractEventLoop | None = None
        self._thread: threading.Thread | None = None

    @classmethod
    def get(cls) -> SyncRunner:
        """Get the singleton SyncRunner, starting its loop thread on first use."""
        if cls._instance is None:
            with cls._lock:
                if cls._instance is None:
                    inst = cls()
                    inst._start()
                    cls._instance = inst
        return cls._instance

    def _start(self) -> None:
        self._loop = asyncio.new_event_loop()
        self._thread = threading.Thread(
            target=self._loop.run_forever,
            daemon=True,
            name="typesalad-sync-runner",
        )
        self._thread.start()

    def run(self, coro: Coroutine[Any, Any, T]) -> T:
        """Run ``coro`` on the background loop, blocking until it completes.

        Raises:
            RuntimeError: If called from the runner's own loop thread, which would deadlock.
        """
        if self._loop is None:
            coro.close()
            raise RuntimeError("Runner not initialized")
        if threading.current_thread() is self._thread:
            coro.close()
            raise RuntimeError("SyncRunner.run() called from its own loop; await the coroutine")
        future = asyncio.run_coroutine_threadsafe(coro, self._loop)
        return future.result()
