"""Scope that reports how long a block took."""

import logging
import time
from collections.abc import Callable

from ..scope import ScopedAction

logger = logging.getLogger(__name__)


class TimedScope(ScopedAction):
    """Measure the time between construction and disposal.

    Uses the deferred form of :class:`ScopedAction`: the start time and label
    are captured here, then the close slot is pointed at :meth:`_report`,
    which reads them back on disposal.

    Args:
        label: Name reported alongside the duration
        emit: Sink for the report (defaults to this module's logger at INFO)
        clock: Monotonic clock returning seconds
    """

    def __init__(
        self,
        label: str,
        emit: Callable[[str], object] | None = None,
        clock: Callable[[], float] = time.perf_counter,
    ) -> None:
        super().__init__()
        self.label = label
        self.elapsed: float | None = None
        self._emit = emit or logger.info
        self._clock = clock
        self._started_at = clock()
        self._on_close = self._report

    def _report(self) -> None:
        self.elapsed = self._clock() - self._started_at
        self._emit(f"{self.label} took {self.elapsed:.6f}s")
