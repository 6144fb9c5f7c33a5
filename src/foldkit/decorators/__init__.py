"""Function decorators: once, memoize, throttle, and delayed calls."""

from foldkit.decorators.core import (
    MemoizedFunction,
    OnceFunction,
    ThrottledFunction,
    delay,
    memoize,
    once,
    throttle,
)
from foldkit.decorators.errors import NotCallableError, UnhashableArgumentError
from foldkit.decorators.timer import TimerHandle, TimerService

__all__ = [
    # Decorators
    "once",
    "memoize",
    "throttle",
    "delay",
    # Wrappers
    "OnceFunction",
    "MemoizedFunction",
    "ThrottledFunction",
    # Timers
    "TimerService",
    "TimerHandle",
    # Errors
    "NotCallableError",
    "UnhashableArgumentError",
]
