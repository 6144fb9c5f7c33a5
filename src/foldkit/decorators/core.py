"""Function decorators with per-wrapper state.

Usage:
    @once
    def connect(url): ...

    @memoize
    def fib(n):
        return n if n < 2 else fib(n - 1) + fib(n - 2)

    # Run at most once every 200 ms; flush the latest skipped call on a timer
    refresh = throttle(redraw, 200, leading_edge=True)
    ...
    refresh.cancel()

    # Run later on the shared timer thread
    handle = delay(print, 500, "done")
"""

from __future__ import annotations

import functools
import time
import warnings
from collections.abc import Callable
from typing import Any

from foldkit.config import get_settings
from foldkit.core.membership import is_hashable, table_key
from foldkit.decorators.errors import NotCallableError, UnhashableArgumentError
from foldkit.decorators.models import MemoState, OnceState, ThrottleState
from foldkit.decorators.timer import TimerHandle, TimerService


def _require_callable(fn: Any, decorator: str) -> None:
    if not callable(fn):
        raise NotCallableError(f"{decorator}() expects a callable, got {type(fn).__name__}: {fn!r}")


def _describe(fn: Any) -> str:
    return getattr(fn, "__qualname__", None) or repr(fn)


def _monotonic_ms() -> float:
    return time.monotonic() * 1000.0


class OnceFunction:
    """Callable that runs the wrapped function at most once."""

    def __init__(self, fn: Callable[..., Any]) -> None:
        functools.update_wrapper(self, fn)
        self._fn = fn
        self._state = OnceState()

    def __call__(self, *args: Any, **kwargs: Any) -> Any:
        state = self._state
        if not state.called:
            state.result = self._fn(*args, **kwargs)
            state.called = True
        return state.result


class MemoizedFunction:
    """Callable caching results of a single-argument function by argument value."""

    def __init__(self, fn: Callable[[Any], Any]) -> None:
        functools.update_wrapper(self, fn)
        self._fn = fn
        self._state = MemoState()

    def __call__(self, arg: Any) -> Any:
        if not is_hashable(arg):
            raise UnhashableArgumentError(
                f"{_describe(self._fn)}() is memoized and needs a hashable argument, "
                f"got {type(arg).__name__}"
            )
        cache = self._state.cache
        key = table_key(arg)
        if key not in cache:
            cache[key] = self._fn(arg)
        return cache[key]


class ThrottledFunction:
    """Callable that runs the wrapped function at most once per interval.

    Calls arriving inside the window are not run; they return the previous
    result and leave one pending call behind (the latest arguments win). With a
    leading-edge timer the pending call is flushed once the window has passed.
    """

    def __init__(
        self,
        fn: Callable[..., Any],
        interval_ms: float,
        leading_edge: bool,
        clock: Callable[[], float],
    ) -> None:
        functools.update_wrapper(self, fn)
        self._fn = fn
        self._clock = clock
        self._state = ThrottleState(interval_ms=interval_ms)

        if leading_edge:
            if interval_ms <= 0:
                warnings.warn(
                    f"throttle() leading edge ignored for {_describe(fn)}: "
                    f"interval must be positive, got {interval_ms}",
                    stacklevel=3,
                )
            else:
                self._state.timer = TimerService.get().call_every(interval_ms / 1000.0, self._flush)

    def __call__(self, *args: Any, **kwargs: Any) -> Any:
        state = self._state
        with state.lock:
            if state.error is not None:
                error, state.error = state.error, None
                raise error

            now = self._clock()
            if state.elapsed(now):
                state.last_invoked_ms = now
                state.pending = False
                state.result = self._fn(*args, **kwargs)
            else:
                state.pending = True
                state.pending_args = args
                state.pending_kwargs = kwargs
            return state.result

    def _flush(self) -> None:
        """Run the pending call, if any and if the window has passed. Timer thread only.

        Never waits for the lock: while a caller is inside the wrapped function
        the tick is skipped, so the shared timer loop keeps running.
        """
        state = self._state
        if not state.lock.acquire(blocking=False):
            return
        try:
            now = self._clock()
            if not state.pending or not state.elapsed(now):
                return
            state.pending = False
            state.last_invoked_ms = now
            args, kwargs = state.pending_args, state.pending_kwargs
            state.pending_args, state.pending_kwargs = (), {}
            try:
                state.result = self._fn(*args, **kwargs)
            except Exception as e:
                # No caller on this thread; hand it to the next one
                state.error = e
        finally:
            state.lock.release()

    @property
    def flushing(self) -> bool:
        """Whether a leading-edge flush timer is installed and running."""
        timer = self._state.timer
        return timer is not None and not timer.done()

    def cancel(self) -> None:
        """Stop the leading-edge flush timer. Idempotent.

        The wrapper keeps throttling afterwards; pending calls are simply
        never flushed.
        """
        state = self._state
        with state.lock:
            if state.timer is not None:
                state.timer.cancel()
                state.timer = None


def once(fn: Callable[..., Any]) -> OnceFunction:
    """Wrap fn so it runs at most once.

    Every call returns the result of the first call, whatever its arguments.
    If the first call raises, nothing is recorded and the next call tries again.

    Raises:
        NotCallableError: If fn is not callable.
    """
    _require_callable(fn, "once")
    return OnceFunction(fn)


def memoize(fn: Callable[[Any], Any]) -> MemoizedFunction:
    """Wrap a single-argument function with a result cache.

    Arguments are compared strictly (1 and 1.0 are cached separately) and must
    be hashable.

    Raises:
        NotCallableError: If fn is not callable.
    """
    _require_callable(fn, "memoize")
    return MemoizedFunction(fn)


def throttle(
    fn: Callable[..., Any],
    interval_ms: float | None = None,
    leading_edge: bool = False,
    *,
    clock: Callable[[], float] | None = None,
) -> ThrottledFunction:
    """Wrap fn so it runs at most once every interval_ms milliseconds.

    The first call always runs. Later calls run immediately if interval_ms has
    passed since the last actual invocation; otherwise they return the last
    result and mark a pending call.

    Args:
        fn: Function to throttle.
        interval_ms: Window length. Defaults to the configured
            default_throttle_interval_ms.
        leading_edge: Install a recurring timer that flushes the pending call
            at most once per interval. Stop it with the wrapper's cancel().
            The timer ticks every interval_ms from the moment the wrapper is
            created, and a pending call is flushed on the first tick that falls
            at least interval_ms after the last actual invocation. A call made
            just after a tick is therefore flushed within about two intervals.
            Ticks that find a caller inside the wrapped function are skipped.
        clock: Millisecond clock, monotonic by default.

    Returns:
        ThrottledFunction with the same call signature as fn.

    Raises:
        NotCallableError: If fn is not callable.
        ValueError: If interval_ms is negative.
    """
    _require_callable(fn, "throttle")
    if interval_ms is None:
        interval_ms = get_settings().default_throttle_interval_ms
    if interval_ms < 0:
        raise ValueError(f"throttle() interval must be non-negative, got {interval_ms}")
    return ThrottledFunction(fn, interval_ms, leading_edge, clock or _monotonic_ms)


def delay(fn: Callable[..., Any], wait_ms: float, *args: Any, **kwargs: Any) -> TimerHandle:
    """Call fn(*args, **kwargs) on the timer thread after wait_ms milliseconds.

    Returns:
        Handle to cancel the call or wait for its result.

    Raises:
        NotCallableError: If fn is not callable.
    """
    _require_callable(fn, "delay")
    callback = functools.partial(fn, *args, **kwargs)
    return TimerService.get().call_later(max(wait_ms, 0) / 1000.0, callback)
