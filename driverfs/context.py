"""Context variables for driver routing.

Each FileSystem owns one DriverContext. Keeping the pending override and the
scoped driver in context variables means an override set in one task is never
consumed by a task that was already running. A task spawned while an
override is pending shares it with its parent, and only one call consumes it.
"""

import contextvars
import itertools
from contextlib import contextmanager
from typing import Any, Iterator

_counter = itertools.count()


class DriverContext:
    """Routing state for one FileSystem instance."""

    def __init__(self) -> None:
        n = next(_counter)
        # One-shot override set by FileSystem.with_driver()
        self._pending: contextvars.ContextVar[Any] = contextvars.ContextVar(
            f"driverfs_pending_{n}", default=None
        )
        # Driver for the enclosing FileSystem.using() block, if any
        self._scoped: contextvars.ContextVar[Any] = contextvars.ContextVar(
            f"driverfs_scoped_{n}", default=None
        )

    def set_pending(self, driver: Any) -> None:
        """Record driver as the override for the next call, replacing any other."""
        cell = self._pending.get()
        if cell:
            cell.clear()
        # Tasks spawned from here copy the context but share this cell, so
        # whichever call takes the driver first is the only one to get it.
        self._pending.set([driver])

    def peek(self) -> Any:
        """Return the pending override, or the scoped driver, without consuming."""
        cell = self._pending.get()
        if cell:
            return cell[0]
        return self._scoped.get()

    def take(self) -> Any:
        """Consume and return the pending override, else return the scoped driver."""
        cell = self._pending.get()
        if cell:
            return cell.pop()
        return self._scoped.get()

    @contextmanager
    def scope(self, driver: Any) -> Iterator[None]:
        """Route calls in the current context to driver until exit."""
        token = self._scoped.set(driver)
        try:
            yield
        finally:
            self._scoped.reset(token)
