"""Shared test fixtures."""

import sys

import pytest

# Ensure src is in path
sys.path.insert(0, "src")

from foldkit.config import reset_settings


@pytest.fixture
def fresh_settings():
    """Re-read settings around a test so monkeypatched env vars take effect."""
    reset_settings()
    yield
    reset_settings()


class FakeClock:
    """Millisecond clock advanced by hand."""

    def __init__(self, start: float = 1_000.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, ms: float) -> None:
        self.now += ms


@pytest.fixture
def clock():
    """Manually advanced millisecond clock."""
    return FakeClock()


@pytest.fixture
def counter():
    """Callable recording every call it receives."""

    class Counter:
        def __init__(self) -> None:
            self.calls: list[tuple[tuple, dict]] = []

        def __call__(self, *args, **kwargs):
            self.calls.append((args, kwargs))
            return len(self.calls)

    return Counter()
