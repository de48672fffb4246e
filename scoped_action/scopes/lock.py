"""Scope that holds a lock for its lifetime."""

from typing import Protocol

from ..scope import ScopedAction
from ..utils import ensure_timeout


class SupportsAcquire(Protocol):
    def acquire(self, blocking: bool = ..., timeout: float = ...) -> bool: ...

    def release(self) -> None: ...


def lock_scope(lock: SupportsAcquire, timeout: float = -1) -> ScopedAction:
    """Acquire ``lock`` now and release it on disposal.

    Args:
        lock: threading.Lock, threading.RLock or anything with the same
            acquire/release interface
        timeout: Seconds to wait for the lock (-1 waits forever)

    Raises:
        TimeoutError: If the lock could not be acquired within timeout.
            No guard is returned in that case, so nothing is released.
    """
    _timeout = ensure_timeout(timeout)

    def acquire() -> None:
        if not lock.acquire(timeout=_timeout):
            raise TimeoutError(f"Failed to acquire {lock!r} within {_timeout}s")

    return ScopedAction(on_open=acquire, on_close=lock.release)
