"""Local disk driver.

Maps the Driver operations onto the host filesystem. Each operation checks
its preconditions first, raising the classified errors from ``errors``,
then performs a single native call in a worker thread.
"""

from __future__ import annotations

import asyncio
import logging
import os
import shutil
import stat as stat_mod

from .base import PathLike
from .errors import FileDoesntExist, FileExists, InvalidPath

logger = logging.getLogger(__name__)


def _read_text(path: str, encoding: str) -> str:
    with open(path, "r", encoding=encoding) as f:
        return f.read()


def _write_text(path: str, data: str, encoding: str, mode: str) -> None:
    with open(path, mode, encoding=encoding) as f:
        f.write(data)


class LocalDriver:
    """Driver backed by the local disk.

    The driver keeps no state besides its settings: nothing is cached, and
    every call resolves its path and touches the disk again.
    """

    def __init__(self, root: PathLike | None = None, encoding: str = "utf-8"):
        """Initialize the local driver.

        Args:
            root: Directory that relative paths are resolved against.
                None means the process working directory at call time.
            encoding: Text encoding used by read, write and append.
        """
        self.root = os.path.abspath(root) if root is not None else None
        self.encoding = encoding

    def __repr__(self) -> str:
        return f"LocalDriver(root={self.root!r}, encoding={self.encoding!r})"

    def resolve(self, path: PathLike) -> str:
        """Resolve path to an absolute, normalized path.

        Purely syntactic: the path doesn't need to exist.
        """
        path = os.fspath(path)
        if self.root is not None and not os.path.isabs(path):
            path = os.path.join(self.root, path)
        return os.path.abspath(path)

    async def _lstat_mode(self, path: PathLike) -> int:
        st = await asyncio.to_thread(os.lstat, self.resolve(path))
        return st.st_mode

    async def _require(self, path: PathLike, what: str = "File") -> None:
        if not await self.exists(path):
            logger.debug("%s %s not found", what, path)
            raise FileDoesntExist(
                f'{what} "{os.fspath(path)}" doesn\'t exist or isn\'t readable.', path
            )

    # -------------------------------------------------------------------------
    # Reading
    # -------------------------------------------------------------------------

    async def read(self, path: PathLike) -> str:
        """Read a file.

        Returns:
            The file contents, decoded with the driver's encoding.

        Raises:
            FileDoesntExist: If path doesn't exist.
            InvalidPath: If path isn't a file or symbolic link.
        """
        await self._require(path)
        if not await self.is_file(path) and not await self.is_symbolic_link(path):
            raise InvalidPath(f'"{os.fspath(path)}" isn\'t a file.', path)

        return await asyncio.to_thread(_read_text, self.resolve(path), self.encoding)

    async def exists(self, path: PathLike) -> bool:
        """Check if path exists and is readable.

        Never raises: an unreadable path reports False, same as a missing one.
        """
        try:
            return await asyncio.to_thread(os.access, self.resolve(path), os.R_OK)
        except (OSError, ValueError):
            return False

    async def is_directory(self, path: PathLike) -> bool:
        """Check if path is a directory (symbolic links are not followed).

        Raises:
            FileDoesntExist: If path doesn't exist.
        """
        await self._require(path, "Directory")
        return stat_mod.S_ISDIR(await self._lstat_mode(path))

    async def is_file(self, path: PathLike) -> bool:
        """Check if path is a regular file (symbolic links are not followed).

        Raises:
            FileDoesntExist: If path doesn't exist.
        """
        await self._require(path)
        return stat_mod.S_ISREG(await self._lstat_mode(path))

    async def is_symbolic_link(self, path: PathLike) -> bool:
        """Check if path is a symbolic link.

        Raises:
            FileDoesntExist: If path doesn't exist.
        """
        await self._require(path)
        return stat_mod.S_ISLNK(await self._lstat_mode(path))

    async def read_dir(self, path: PathLike) -> list[str]:
        """List the entries of a directory, non-recursively.

        Returns:
            Sorted entry names (not full paths).

        Raises:
            FileDoesntExist: If path doesn't exist.
        """
        await self._require(path, "Directory")
        return sorted(await asyncio.to_thread(os.listdir, self.resolve(path)))

    # -------------------------------------------------------------------------
    # Writing
    # -------------------------------------------------------------------------

    async def write(self, path: PathLike, data: str) -> None:
        """Replace the contents of an existing file.

        Raises:
            InvalidPath: If path doesn't exist or isn't a regular file.
        """
        if not await self.exists(path) or not await self.is_file(path):
            logger.debug("Refusing to write %s: not a file", path)
            raise InvalidPath(f'"{os.fspath(path)}" isn\'t a file.', path)

        logger.debug("Writing %d chars to %s", len(data), path)
        await asyncio.to_thread(
            _write_text, self.resolve(path), data, self.encoding, "w"
        )

    async def append(self, path: PathLike, data: str) -> None:
        """Append data to a file, creating it if missing."""
        logger.debug("Appending %d chars to %s", len(data), path)
        await asyncio.to_thread(
            _write_text, self.resolve(path), data, self.encoding, "a"
        )

    async def chmod(self, path: PathLike, mode: int) -> None:
        """Change the permission bits of path.

        Raises:
            FileDoesntExist: If path doesn't exist.
        """
        await self._require(path)
        logger.debug("chmod %s to %o", path, mode)
        await asyncio.to_thread(os.chmod, self.resolve(path), mode)

    async def copy(
        self, source: PathLike, destination: PathLike, overwrite: bool = True
    ) -> None:
        """Copy the contents of a source file into destination.

        Raises:
            FileDoesntExist: If source doesn't exist.
            FileExists: If destination exists and overwrite is False.
        """
        await self._require(source)
        if not overwrite and await self.exists(destination):
            logger.debug("Refusing to copy onto existing %s", destination)
            raise FileExists(
                f'File "{os.fspath(destination)}" already exists.', destination
            )

        logger.debug("Copying %s to %s", source, destination)
        await asyncio.to_thread(
            shutil.copyfile, self.resolve(source), self.resolve(destination)
        )

    async def rename(self, old_path: PathLike, new_path: PathLike) -> None:
        """Rename/move a file or directory.

        Raises:
            FileDoesntExist: If old_path doesn't exist.
            FileExists: If new_path already exists.
        """
        await self._require(old_path)
        if await self.exists(new_path):
            logger.debug("Refusing to rename onto existing %s", new_path)
            raise FileExists(f'File "{os.fspath(new_path)}" already exists.', new_path)

        logger.debug("Renaming %s to %s", old_path, new_path)
        await asyncio.to_thread(os.rename, self.resolve(old_path), self.resolve(new_path))

    # -------------------------------------------------------------------------
    # Directories and deletion
    # -------------------------------------------------------------------------

    async def create_dir(
        self, path: PathLike, mode: int = 0o777, recursively: bool = False
    ) -> None:
        """Create a directory.

        With recursively=True every missing ancestor is created too, from the
        top down. Segments that already exist are skipped; the first other
        error aborts the walk.

        Raises:
            FileExists: If path exists and recursively is False.
        """
        if not recursively:
            if await self.exists(path):
                logger.debug("Directory %s already exists", path)
                raise FileExists(
                    f'Directory "{os.fspath(path)}" already exists.', path
                )
            logger.debug("Creating directory %s", path)
            await asyncio.to_thread(os.mkdir, self.resolve(path), mode)
            return

        resolved = self.resolve(path)
        segments = []
        current = resolved
        while True:
            segments.append(current)
            parent = os.path.dirname(current)
            if parent == current:
                break
            current = parent

        logger.debug("Creating directory tree %s", resolved)
        for segment in reversed(segments):
            try:
                await asyncio.to_thread(os.mkdir, segment, mode)
            except FileExistsError:
                continue

    async def delete(self, path: PathLike) -> None:
        """Delete a file, symbolic link or empty directory.

        Directories are not deleted recursively; see delete_all().

        Raises:
            FileDoesntExist: If path doesn't exist.
            InvalidPath: If path is neither a file, symbolic link nor directory.
        """
        await self._require(path, "File or directory")

        if await self.is_file(path) or await self.is_symbolic_link(path):
            logger.debug("Unlinking %s", path)
            await asyncio.to_thread(os.unlink, self.resolve(path))
        elif await self.is_directory(path):
            logger.debug("Removing directory %s", path)
            await asyncio.to_thread(os.rmdir, self.resolve(path))
        else:
            raise InvalidPath(
                f'"{os.fspath(path)}" isn\'t either a file, symbolic link, '
                "or directory.",
                path,
            )

    async def delete_all(self, path: PathLike) -> None:
        """Delete a directory recursively, then the directory itself.

        Symbolic links are deleted as leaves; their targets are left alone.
        This includes path itself.
        """
        if await asyncio.to_thread(os.path.islink, self.resolve(path)):
            logger.debug("Unlinking %s", path)
            await asyncio.to_thread(os.unlink, self.resolve(path))
            return

        for name in await self.read_dir(path):
            child = os.path.join(os.fspath(path), name)
            # Native call: an entry removed since read_dir raises FileNotFoundError as-is
            mode = await self._lstat_mode(child)
            if stat_mod.S_ISDIR(mode):
                await self.delete_all(child)
            elif stat_mod.S_ISLNK(mode):
                # Dangling links fail exists(), so unlink them directly
                logger.debug("Unlinking %s", child)
                await asyncio.to_thread(os.unlink, self.resolve(child))
            else:
                await self.delete(child)

        await self.delete(path)
