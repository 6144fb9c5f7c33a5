"""Errors raised when a decorator is misused."""


class NotCallableError(TypeError):
    """A non-callable was passed where a function is required.

    Raised when the wrapper is built, never deferred to the first call.
    """


class UnhashableArgumentError(TypeError):
    """A memoized function was called with an argument that cannot be a cache key."""
