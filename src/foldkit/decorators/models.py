"""Decorator state records.

Each wrapped function owns exactly one of these. They are never shared
between wrappers or handed out to callers.
"""

from __future__ import annotations

import threading
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from foldkit.decorators.timer import TimerHandle


@dataclass(slots=True)
class OnceState:
    """State behind once()."""

    called: bool = False
    """Set after the wrapped function returned successfully."""

    result: Any = None
    """Return value of the first successful call."""


@dataclass(slots=True)
class MemoState:
    """State behind memoize()."""

    cache: dict[tuple[type, Any], Any] = field(default_factory=dict)
    """Strict argument key -> computed result."""


@dataclass(slots=True)
class ThrottleState:
    """State behind throttle().

    The lock serializes caller calls against timer flushes.
    """

    interval_ms: float
    """Minimum spacing between actual invocations."""

    last_invoked_ms: float | None = None
    """Clock reading at the last actual invocation. None before the first."""

    result: Any = None
    """Most recently computed result, returned to throttled callers."""

    pending: bool = False
    """A throttled call is waiting for the next flush."""

    pending_args: tuple[Any, ...] = ()
    pending_kwargs: dict[str, Any] = field(default_factory=dict)

    error: BaseException | None = None
    """Exception from a timer-driven flush, re-raised to the next caller."""

    timer: TimerHandle | None = None
    """Recurring flush timer (leading edge only)."""

    lock: threading.RLock = field(default_factory=threading.RLock)

    def elapsed(self, now_ms: float) -> bool:
        """Whether a full interval has passed since the last invocation."""
        return self.last_invoked_ms is None or now_ms - self.last_invoked_ms >= self.interval_ms
