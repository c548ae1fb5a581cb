"""FileSystem facade.

The single object callers hold on to. Every operation is routed to the
active driver and its awaitable is returned unchanged; the facade never
validates arguments and never catches errors.

Example::

    fs = FileSystem(LocalDriver())
    await fs.create_dir("build/out", recursively=True)
    text = await fs.with_driver(other).read("notes.txt")  # one call on other
    await fs.read("notes.txt")                            # back on LocalDriver
"""

from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import TYPE_CHECKING, Awaitable, Iterator

from .base import Driver, PathLike, missing_methods
from .context import DriverContext

if TYPE_CHECKING:
    from .config import DriverConfig

logger = logging.getLogger(__name__)


def _check_driver(driver: object) -> Driver:
    if not isinstance(driver, Driver):
        raise TypeError(
            f"{type(driver).__name__} is not a Driver "
            f"(missing: {', '.join(missing_methods(driver))})"
        )
    return driver


class FileSystem:
    """Abstract filesystem dispatching to a swappable driver.

    Routing, in order of precedence:
    - the one-shot override set by with_driver(), consumed by the next call
    - the driver of the innermost using() block
    - the default driver given at construction
    """

    def __init__(self, driver: Driver):
        """Initialize the facade.

        Args:
            driver: Default driver, used for the lifetime of the facade.

        Raises:
            TypeError: If driver doesn't implement the Driver interface.
        """
        self._driver = _check_driver(driver)
        self._context = DriverContext()

    @classmethod
    def from_config(cls, config: DriverConfig) -> FileSystem:
        """Build a facade around the driver described by config."""
        from .config import create_driver

        return cls(create_driver(config))

    def __repr__(self) -> str:
        return f"FileSystem({self._driver!r})"

    # -------------------------------------------------------------------------
    # Driver routing
    # -------------------------------------------------------------------------

    @property
    def driver(self) -> Driver:
        """The default driver."""
        return self._driver

    @property
    def active_driver(self) -> Driver:
        """The driver the next call would use. Doesn't consume the override."""
        driver = self._context.peek()
        return self._driver if driver is None else driver

    def with_driver(self, driver: Driver) -> FileSystem:
        """Swap the driver for the next call only.

        Calling this again before an operation replaces the pending driver.
        A task spawned before the next call shares the override; only one
        call, in either task, consumes it.

        Returns:
            This same instance, for chaining.
        """
        self._context.set_pending(_check_driver(driver))
        return self

    @contextmanager
    def using(self, driver: Driver) -> Iterator[FileSystem]:
        """Route every call inside the block to driver.

        Example::

            with fs.using(backup):
                await fs.copy("a.txt", "b.txt")
        """
        with self._context.scope(_check_driver(driver)):
            yield self

    def bind(self, driver: Driver) -> FileSystem:
        """Return a new facade whose default is driver, sharing no state."""
        return type(self)(driver)

    def _resolve_driver(self) -> Driver:
        driver = self._context.take()
        if driver is None:
            return self._driver
        logger.debug("Dispatching to %r", driver)
        return driver

    # -------------------------------------------------------------------------
    # Operations
    # -------------------------------------------------------------------------

    def read(self, path: PathLike) -> Awaitable[str]:
        """Read a file. Resolves with the file contents."""
        return self._resolve_driver().read(path)

    def write(self, path: PathLike, data: str) -> Awaitable[None]:
        """Write to an existing file."""
        return self._resolve_driver().write(path, data)

    def exists(self, path: PathLike) -> Awaitable[bool]:
        """Check if a path exists."""
        return self._resolve_driver().exists(path)

    def is_directory(self, path: PathLike) -> Awaitable[bool]:
        """Check if a path is a directory."""
        return self._resolve_driver().is_directory(path)

    def is_file(self, path: PathLike) -> Awaitable[bool]:
        """Check if a path is a file."""
        return self._resolve_driver().is_file(path)

    def is_symbolic_link(self, path: PathLike) -> Awaitable[bool]:
        """Check if a path is a symbolic link."""
        return self._resolve_driver().is_symbolic_link(path)

    def delete(self, path: PathLike) -> Awaitable[None]:
        """Delete a file or an empty directory."""
        return self._resolve_driver().delete(path)

    def delete_all(self, path: PathLike) -> Awaitable[None]:
        """Delete a directory and its contents."""
        return self._resolve_driver().delete_all(path)

    def append(self, path: PathLike, data: str) -> Awaitable[None]:
        """Append data to a file."""
        return self._resolve_driver().append(path, data)

    def chmod(self, path: PathLike, mode: int) -> Awaitable[None]:
        """Change the permission bits of a path."""
        return self._resolve_driver().chmod(path, mode)

    def copy(
        self, source: PathLike, destination: PathLike, overwrite: bool = True
    ) -> Awaitable[None]:
        """Copy a source file into the destination."""
        return self._resolve_driver().copy(source, destination, overwrite)

    def create_dir(
        self, path: PathLike, mode: int = 0o777, recursively: bool = False
    ) -> Awaitable[None]:
        """Create a directory."""
        return self._resolve_driver().create_dir(path, mode, recursively)

    def read_dir(self, path: PathLike) -> Awaitable[list[str]]:
        """Read the entry names of a directory, non-recursively."""
        return self._resolve_driver().read_dir(path)

    def rename(self, old_path: PathLike, new_path: PathLike) -> Awaitable[None]:
        """Rename/move a file or directory."""
        return self._resolve_driver().rename(old_path, new_path)
