"""Basic usage examples for scoped actions."""

import logging
import threading

from scoped_action import ScopedAction, TimedScope, lock_scope, logging_scope


# Example 1: Custom scope built by composition
def banner_scope(title):
    """Print a banner before and after a block."""
    return ScopedAction(
        on_open=lambda: print(f"=== {title} ==="),
        on_close=lambda: print("=" * (len(title) + 8)),
    )


# Example 2: Custom scope using the deferred form
class IndentScope(ScopedAction):
    """Increase a shared indentation level for the lifetime of the scope."""

    level = 0

    def __init__(self):
        super().__init__()
        IndentScope.level += 1
        self._on_close = self._dedent

    def _dedent(self):
        IndentScope.level -= 1


def say(message):
    print("  " * IndentScope.level + message)


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format="%(message)s")

    with banner_scope("Example 1: Composition"):
        print("inside scope")

    print()

    with banner_scope("Example 2: Deferred form"):
        say("top level")
        with IndentScope():
            say("nested once")
            with IndentScope():
                say("nested twice")
        say("back to top level")

    print()

    with banner_scope("Example 3: Ready-made scopes"):
        with logging_scope("import users"), TimedScope("import users"):
            with lock_scope(threading.Lock()):
                say("importing...")

    print()

    with banner_scope("Example 4: Close runs even on error"):
        try:
            with ScopedAction(on_close=lambda: say("cleanup ran")):
                raise RuntimeError("something went wrong")
        except RuntimeError as e:
            say(f"caught: {e}")
