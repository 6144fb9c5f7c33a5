from __future__ import annotations

import asyncio
import threading
from collections.abc import Callable
from concurrent.futures import Future
from typing import Any

from foldkit.config import get_settings


class TimerHandle:
    """Handle to a scheduled one-shot or recurring timer."""

    __slots__ = ("_future",)

    def __init__(self, future: Future[Any]) -> None:
        self._future = future

    def cancel(self) -> bool:
        """Stop the timer. Returns False if it already finished."""
        return self._future.cancel()

    def cancelled(self) -> bool:
        return self._future.cancelled()

    def done(self) -> bool:
        return self._future.done()

    def result(self, timeout: float | None = None) -> Any:
        """Block until a one-shot timer has fired and return its callback's result.

        Re-raises any exception the callback raised.
        """
        return self._future.result(timeout)


class TimerService:
    """Process-wide timer facility backed by an event loop thread. Singleton per process."""

    _instance: TimerService | None = None
    _lock = threading.Lock()

    def __init__(self) -> None:
        self._loop: asyncio.AbstractEventLoop | None = None
        self._thread: threading.Thread | None = None

    @classmethod
    def get(cls) -> TimerService:
        """Get the singleton TimerService instance, creating it if necessary."""
        if cls._instance is None:
            with cls._lock:
                if cls._instance is None:
                    inst = cls()
                    inst._start()
                    cls._instance = inst
        return cls._instance

    def _start(self) -> None:
        """Start the background event loop thread."""
        self._loop = asyncio.new_event_loop()
        self._thread = threading.Thread(
            target=self._loop.run_forever,
            daemon=True,
            name=get_settings().timer_thread_name,
        )
        self._thread.start()

    def _submit(self, coro: Any) -> TimerHandle:
        if self._loop is None:
            raise RuntimeError("Timer service not initialized")
        return TimerHandle(asyncio.run_coroutine_threadsafe(coro, self._loop))

    def call_later(self, delay: float, callback: Callable[[], Any]) -> TimerHandle:
        """Run callback once, delay seconds from now."""
        return self._submit(_after(delay, callback))

    def call_every(self, interval: float, callback: Callable[[], Any]) -> TimerHandle:
        """Run callback every interval seconds until the handle is cancelled.

        An exception from callback ends the recurrence and is kept on the handle.
        """
        if interval <= 0:
            raise ValueError(f"Recurring timer interval must be positive, got {interval}")
        return self._submit(_every(interval, callback))


async def _after(delay: float, callback: Callable[[], Any]) -> Any:
    await asyncio.sleep(delay)
    return callback()


async def _every(interval: float, callback: Callable[[], Any]) -> None:
    while True:
        await asyncio.sleep(interval)
        callback()
