"""Scope that holds a Redis-backed distributed lock."""

import time
import uuid
from typing import TYPE_CHECKING

from ..scope import ScopedAction
from ..utils import ensure_timeout

if TYPE_CHECKING:
    from redis import Redis

# Delete the key only if it still holds our token
_RELEASE_SCRIPT = """
if redis.call("get", KEYS[1]) == ARGV[1] then
    return redis.call("del", KEYS[1])
end
return 0
"""


def redis_lock_scope(
    client: "Redis",
    name: str,
    timeout: float = 10.0,
    ttl: int | None = None,
    prefix: str = "scoped_action:lock:",
) -> ScopedAction:
    """Hold a distributed lock for the lifetime of the returned guard.

    Uses Redis SET with NX (set if not exists) and EX (expiration) for
    atomic acquisition, polling until the lock is free. The key holds a
    token unique to this guard, and disposal deletes it only while that
    token is still there, so a lock that expired and was taken by another
    holder is left alone.

    Args:
        client: Redis client instance
        name: Lock name, namespaced with prefix
        timeout: Maximum time to wait for the lock (seconds)
        ttl: Lock expiry in seconds, so a crashed holder cannot keep it
            forever (default: timeout + 60)
        prefix: Key prefix for namespacing

    Raises:
        TimeoutError: If the lock is still held elsewhere after timeout
    """
    _timeout = ensure_timeout(timeout)
    if _timeout < 0:
        raise ValueError("timeout must be non-negative for Redis locks")
    lock_key = f"{prefix}{name}"
    lock_ttl = ttl if ttl is not None else int(_timeout) + 60
    if lock_ttl <= 0:
        raise ValueError(f"ttl must be positive, got {lock_ttl}")
    token = uuid.uuid4().hex

    def acquire() -> None:
        start_time = time.time()
        while True:
            if client.set(lock_key, token, nx=True, ex=lock_ttl):
                return

            if time.time() - start_time >= _timeout:
                raise TimeoutError(
                    f"Failed to acquire lock '{lock_key}' within {_timeout}s"
                )

            # Wait a bit before retrying
            time.sleep(0.01)

    def release() -> None:
        client.eval(_RELEASE_SCRIPT, 1, lock_key, token)

    return ScopedAction(on_open=acquire, on_close=release)
