"""ScopedAction: run an action on creation and another exactly once on disposal."""

import logging
import threading
import warnings
from collections.abc import Callable
from types import TracebackType

from .utils import ensure_callable

logger = logging.getLogger(__name__)


class ScopedAction:
    """Binds a pair of side effects to the lifetime of a value.

    ``on_open`` runs immediately, inside the constructor. ``on_close`` runs at
    most once, on the first call to :meth:`dispose` (or on leaving a ``with``
    block). Exceptions from either action propagate unmodified.

    Subclasses that need their own state before the close action can be
    chosen use the deferred form: call ``super().__init__()`` with no
    arguments, run their open logic themselves, and assign ``self._on_close``
    before returning. Nothing is invoked implicitly in that form.

    Args:
        on_open: Called once before the constructor returns
        on_close: Called once on first disposal

    Example:
        with ScopedAction(on_open=lock.acquire, on_close=lock.release):
            update_shared_state()
    """

    def __init__(
        self,
        on_open: Callable[[], object] | None = None,
        on_close: Callable[[], object] | None = None,
    ) -> None:
        on_open = ensure_callable(on_open, "on_open")
        self._on_close = ensure_callable(on_close, "on_close")
        self._lock = threading.RLock()
        self._disposed = False
        self._closing = False

        if on_open is not None:
            on_open()

        # Only guards that made it past on_open owe a disposal
        self._constructed = True

    @property
    def disposed(self) -> bool:
        """True once disposal has run, even if the close action raised."""
        return self._disposed

    def dispose(self) -> None:
        """Run the close action on the first call; later calls do nothing.

        The guard is marked disposed even when the close action raises, and
        that exception is re-raised to the caller. Safe to call from several
        threads: the close action still runs only once.
        """
        self._dispose(disposing=True)

    def close(self) -> None:
        """Alias of :meth:`dispose`, for ``contextlib.closing`` and friends."""
        self.dispose()

    def _dispose(self, disposing: bool) -> None:
        """Shared disposal path.

        Args:
            disposing: True for explicit disposal, False from the finalizer.
                The close action is only ever invoked when True.
        """
        with self._lock:
            if self._disposed or self._closing:
                return

            if not disposing:
                self._disposed = True
                return

            self._closing = True
            try:
                if self._on_close is not None:
                    self._on_close()
            except Exception:
                logger.debug("Close action of %r raised", self, exc_info=True)
                raise
            finally:
                self._disposed = True
                self._closing = False

    def __enter__(self) -> "ScopedAction":
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.dispose()

    def __del__(self) -> None:
        if not getattr(self, "_constructed", False) or self._disposed:
            return
        # Subclasses assign the close slot last, so None also covers a failed __init__
        if self._on_close is not None:
            warnings.warn(
                f"{self!r} was never disposed; its close action will not run",
                ResourceWarning,
                source=self,
            )
        self._dispose(disposing=False)

    def __repr__(self) -> str:
        state = "disposed" if getattr(self, "_disposed", False) else "live"
        return f"<{type(self).__name__} {state} at {id(self):#x}>"
