"""Explicit result values for callers that branch on failure kind.

``capture()`` settles any driver or facade call into an ``Outcome`` instead
of raising, so callers can match on ``outcome.kind``::

    outcome = await capture(fs.read("notes.txt"))
    match outcome.kind:
        case None:
            print(outcome.value)
        case ErrorKind.NOT_FOUND:
            ...
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Awaitable, Generic, TypeVar

from .errors import ErrorKind, classify

T = TypeVar("T")


@dataclass(frozen=True)
class Outcome(Generic[T]):
    """Result of a settled filesystem call.

    Attributes:
        value: Return value on success, None on failure.
        error: The exception on failure, None on success.
        kind: ErrorKind of the failure, None on success.
        path: Offending path reported by the failure, if any.
    """

    value: T | None = None
    error: OSError | None = None
    kind: ErrorKind | None = None
    path: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> T:
        """Return the value, or re-raise the captured error."""
        if self.error is not None:
            raise self.error
        return self.value  # type: ignore[return-value]


async def capture(call: Awaitable[T]) -> Outcome[T]:
    """Await a filesystem call and wrap its result or OSError in an Outcome.

    Exceptions that aren't OSError propagate unchanged.
    """
    try:
        value = await call
    except OSError as exc:
        path: Any = getattr(exc, "path", None) or exc.filename
        return Outcome(
            error=exc,
            kind=classify(exc),
            path=str(path) if path is not None else None,
        )
    return Outcome(value=value)
