"""Error taxonomy shared by every driver.

Drivers raise these before attempting a native call. Once the native call
has been attempted, whatever ``OSError`` it raises propagates as-is.
"""

from __future__ import annotations

import os
from enum import Enum


class ErrorKind(Enum):
    """Classification of a failed filesystem operation."""

    NOT_FOUND = "not_found"
    ALREADY_EXISTS = "already_exists"
    INVALID_PATH = "invalid_path"
    UNCLASSIFIED = "unclassified"


class FileSystemError(OSError):
    """Base class for classified driver failures.

    Attributes:
        path: The offending path, as passed by the caller.
        kind: The ErrorKind this failure belongs to.
    """

    kind: ErrorKind = ErrorKind.UNCLASSIFIED

    def __init__(self, message: str, path: str | os.PathLike | None = None):
        super().__init__(message)
        self.path = os.fspath(path) if path is not None else None
        self.filename = self.path

    def __str__(self) -> str:
        return self.args[0] if self.args else ""

    def __reduce__(self):
        return (type(self), (str(self), self.path))


class FileDoesntExist(FileSystemError, FileNotFoundError):
    """The required path does not exist or isn't readable."""

    kind = ErrorKind.NOT_FOUND


class FileExists(FileSystemError, FileExistsError):
    """The target path must be absent but is present."""

    kind = ErrorKind.ALREADY_EXISTS


class InvalidPath(FileSystemError):
    """The path exists but is the wrong kind of entry for the operation."""

    kind = ErrorKind.INVALID_PATH


def classify(exc: BaseException) -> ErrorKind:
    """Return the ErrorKind of an exception raised by a driver call.

    Raises:
        TypeError: If exc isn't an OSError at all.
    """
    if isinstance(exc, FileSystemError):
        return exc.kind
    if isinstance(exc, OSError):
        return ErrorKind.UNCLASSIFIED
    raise TypeError(f"Not a filesystem error: {type(exc).__name__}")
