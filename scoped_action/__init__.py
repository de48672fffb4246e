"""Scoped Action - pair an open action with an exactly-once close action.

Binds cleanup to the lifetime of a value so that paired operations
(acquire/release, start/stop, enter/exit) cannot be forgotten, whether the
block exits normally or by exception.

Example:
    with ScopedAction(on_open=start_timer, on_close=stop_timer):
        do_work()
"""

from .scope import ScopedAction
from .scopes import TimedScope, lock_scope, logging_scope

__version__ = "0.1.0"

__all__ = [
    "ScopedAction",
    "TimedScope",
    "lock_scope",
    "logging_scope",
]
