"""Scope that logs entering and leaving an operation."""

import logging
from collections.abc import Callable

from ..scope import ScopedAction

logger = logging.getLogger(__name__)


def logging_scope(
    operation: str, emit: Callable[[str], object] | None = None
) -> ScopedAction:
    """Build a guard that emits "Entering: <operation>" now and
    "Exiting: <operation>" on disposal.

    Args:
        operation: Name of the operation being scoped
        emit: Sink for the messages (defaults to this module's logger at INFO)

    Example:
        with logging_scope("import users"):
            import_users()
    """
    _emit = emit or logger.info

    return ScopedAction(
        on_open=lambda: _emit(f"Entering: {operation}"),
        on_close=lambda: _emit(f"Exiting: {operation}"),
    )
