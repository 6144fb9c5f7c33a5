"""Tests for once, memoize and throttle.

Critical Invariants:
- Wrapper state is private to one wrapper instance
- Misuse fails when wrapping, not on first call
- throttle runs the wrapped function at most once per window
"""

import pytest

from foldkit.decorators import (
    MemoizedFunction,
    NotCallableError,
    OnceFunction,
    ThrottledFunction,
    UnhashableArgumentError,
    memoize,
    once,
    throttle,
)


@pytest.mark.parametrize("decorator", [once, memoize, throttle])
def test_non_callable_fails_at_wrap_time(decorator):
    with pytest.raises(NotCallableError, match="expects a callable"):
        decorator("not a function")


def test_not_callable_error_is_type_error():
    assert issubclass(NotCallableError, TypeError)
    assert issubclass(UnhashableArgumentError, TypeError)


# once


def test_once_runs_exactly_once(counter):
    wrapped = once(counter)

    results = [wrapped(i) for i in range(5)]

    assert len(counter.calls) == 1
    assert counter.calls[0] == ((0,), {})
    assert results == [1, 1, 1, 1, 1]


def test_once_preserves_metadata():
    def connect():
        """Open the connection."""
        return "conn"

    wrapped = once(connect)
    assert isinstance(wrapped, OnceFunction)
    assert wrapped.__name__ == "connect"
    assert wrapped.__doc__ == "Open the connection."


def test_once_retries_after_failure():
    attempts = []

    def flaky():
        attempts.append(1)
        if len(attempts) == 1:
            raise ConnectionError("first try fails")
        return "ok"

    wrapped = once(flaky)
    with pytest.raises(ConnectionError):
        wrapped()
    assert wrapped() == "ok"
    assert wrapped() == "ok"
    assert len(attempts) == 2


def test_once_wrappers_do_not_share_state(counter):
    first = once(counter)
    second = once(counter)
    first()
    second()
    assert len(counter.calls) == 2


# memoize


def test_memoize_computes_once_per_argument(counter):
    wrapped = memoize(lambda n: counter(n) and n * n)

    assert [wrapped(5), wrapped(5), wrapped(5)] == [25, 25, 25]
    assert len(counter.calls) == 1

    assert wrapped(6) == 36
    assert len(counter.calls) == 2


def test_memoize_distinguishes_types(counter):
    wrapped = memoize(lambda v: counter(v))

    wrapped(1)
    wrapped(1.0)
    wrapped(True)
    wrapped("1")

    assert len(counter.calls) == 4


def test_memoize_caches_none_results(counter):
    def nothing(arg):
        counter(arg)
        return None

    wrapped = memoize(nothing)
    assert wrapped("a") is None
    assert wrapped("a") is None
    assert len(counter.calls) == 1


def test_memoize_rejects_unhashable_argument():
    wrapped = memoize(len)
    assert isinstance(wrapped, MemoizedFunction)
    with pytest.raises(UnhashableArgumentError, match="hashable argument"):
        wrapped([1, 2])


def test_memoize_recursive_function():
    calls = []

    @memoize
    def fib(n):
        calls.append(n)
        return n if n < 2 else fib(n - 1) + fib(n - 2)

    assert fib(30) == 832040
    assert sorted(calls) == list(range(31))


def test_memoize_does_not_cache_errors(counter):
    def fragile(n):
        counter(n)
        raise KeyError(n)

    wrapped = memoize(fragile)
    with pytest.raises(KeyError):
        wrapped(1)
    with pytest.raises(KeyError):
        wrapped(1)
    assert len(counter.calls) == 2


# throttle


def test_throttle_first_call_runs(counter, clock):
    wrapped = throttle(counter, 100, clock=clock)
    assert isinstance(wrapped, ThrottledFunction)
    assert wrapped("a") == 1
    assert counter.calls == [(("a",), {})]


def test_throttle_window(counter, clock):
    wrapped = throttle(counter, 100, False, clock=clock)

    wrapped()
    clock.advance(50)
    assert wrapped() == 1
    assert len(counter.calls) == 1

    clock.advance(100)
    assert wrapped() == 2
    assert len(counter.calls) == 2


def test_throttle_window_boundary_is_inclusive(counter, clock):
    wrapped = throttle(counter, 100, clock=clock)
    wrapped()
    clock.advance(99)
    wrapped()
    clock.advance(1)
    wrapped()
    assert len(counter.calls) == 2


def test_throttle_window_measured_from_last_actual_invocation(counter, clock):
    wrapped = throttle(counter, 100, clock=clock)
    wrapped()
    for _ in range(9):
        clock.advance(10)
        wrapped()
    assert len(counter.calls) == 1
    clock.advance(10)
    wrapped()
    assert len(counter.calls) == 2


def test_throttle_without_leading_edge_never_flushes(counter, clock):
    wrapped = throttle(counter, 100, clock=clock)
    wrapped()
    wrapped()
    assert wrapped.flushing is False
    clock.advance(500)
    assert len(counter.calls) == 1


def test_throttle_uses_configured_default_interval(monkeypatch, counter, clock, fresh_settings):
    monkeypatch.setenv("FOLDKIT_DEFAULT_THROTTLE_INTERVAL_MS", "250")
    wrapped = throttle(counter, clock=clock)
    wrapped()
    clock.advance(200)
    wrapped()
    assert len(counter.calls) == 1
    clock.advance(50)
    wrapped()
    assert len(counter.calls) == 2


def test_throttle_rejects_negative_interval(counter):
    with pytest.raises(ValueError, match="non-negative"):
        throttle(counter, -1)


def test_throttle_zero_interval_leading_edge_warns(counter):
    with pytest.warns(UserWarning, match="leading edge ignored"):
        wrapped = throttle(counter, 0, leading_edge=True)
    assert wrapped.flushing is False
    wrapped()
    wrapped()
    assert len(counter.calls) == 2


def test_throttle_error_propagates_to_caller(clock):
    def explode():
        raise RuntimeError("boom")

    wrapped = throttle(explode, 100, clock=clock)
    with pytest.raises(RuntimeError, match="boom"):
        wrapped()
    # The failed call still opened a window
    assert wrapped() is None


def test_throttle_cancel_is_idempotent(counter, clock):
    wrapped = throttle(counter, 100, clock=clock)
    wrapped.cancel()
    wrapped.cancel()
    assert wrapped() == 1
