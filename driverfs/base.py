"""Driver interface.

Defines the capability set every backend (LocalDriver, and any future
cloud, FTP or in-memory driver) must implement.
"""

from __future__ import annotations

import os
from typing import Protocol, Union, runtime_checkable

PathLike = Union[str, os.PathLike]


@runtime_checkable
class Driver(Protocol):
    """Asynchronous filesystem operations a backend must provide.

    Every method is a coroutine. Failures are raised as the classified
    errors from ``driverfs.errors`` when a precondition fails, or as the
    backend's native ``OSError`` otherwise.

    FileSystem refuses drivers missing any of these methods.
    """

    async def read(self, path: PathLike) -> str:
        """Read a file as text."""
        ...

    async def write(self, path: PathLike, data: str) -> None:
        """Replace the contents of an existing file."""
        ...

    async def exists(self, path: PathLike) -> bool:
        """Check if path exists and is readable. Never raises."""
        ...

    async def is_directory(self, path: PathLike) -> bool:
        """Check if path is a directory."""
        ...

    async def is_file(self, path: PathLike) -> bool:
        """Check if path is a regular file."""
        ...

    async def is_symbolic_link(self, path: PathLike) -> bool:
        """Check if path is a symbolic link."""
        ...

    async def delete(self, path: PathLike) -> None:
        """Delete a file, symbolic link or empty directory."""
        ...

    async def delete_all(self, path: PathLike) -> None:
        """Delete a directory and everything below it."""
        ...

    async def append(self, path: PathLike, data: str) -> None:
        """Append text to a file."""
        ...

    async def chmod(self, path: PathLike, mode: int) -> None:
        """Change permission bits."""
        ...

    async def copy(
        self, source: PathLike, destination: PathLike, overwrite: bool = True
    ) -> None:
        """Copy a file."""
        ...

    async def create_dir(
        self, path: PathLike, mode: int = 0o777, recursively: bool = False
    ) -> None:
        """Create a directory."""
        ...

    async def read_dir(self, path: PathLike) -> list[str]:
        """List directory entry names (non-recursive)."""
        ...

    async def rename(self, old_path: PathLike, new_path: PathLike) -> None:
        """Rename/move a file or directory."""
        ...


def missing_methods(driver: object) -> list[str]:
    """Return the names of Driver methods that driver doesn't provide."""
    required = [
        name
        for name, value in vars(Driver).items()
        if not name.startswith("_") and callable(value)
    ]
    return [name for name in required if not callable(getattr(driver, name, None))]
