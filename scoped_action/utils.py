import math
from collections.abc import Callable


def ensure_callable(value: object, name: str) -> Callable[[], object] | None:
    """Return value if it is None or callable, raise TypeError otherwise."""
    if value is None or callable(value):
        return value  # type: ignore[return-value]
    raise TypeError(f"{name} must be callable or None, got {type(value).__name__}")


def ensure_timeout(value: float, name: str = "timeout") -> float:
    """Convert a timeout to float, allowing -1 as "wait forever"."""
    try:
        timeout = float(value)
    except (TypeError, ValueError):
        raise ValueError(f"{name} must be a number, got {value!r}") from None
    if not math.isfinite(timeout):
        raise ValueError(f"{name} must be finite (use -1 to wait forever), got {timeout}")
    if timeout < 0 and timeout != -1:
        raise ValueError(f"{name} must be non-negative or -1, got {timeout}")
    return timeout
