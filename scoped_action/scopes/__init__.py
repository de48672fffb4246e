"""Ready-made guards built on ScopedAction."""

from collections.abc import Callable

from .lock import lock_scope
from .log import logging_scope
from .timer import TimedScope

__all__ = ["logging_scope", "lock_scope", "TimedScope", "redis_lock_scope"]


def __getattr__(name: str) -> Callable:
    if name == "redis_lock_scope":
        from .redis import redis_lock_scope

        return redis_lock_scope
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
