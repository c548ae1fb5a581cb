"""Shared fixtures for driverfs tests."""

import pytest

from driverfs import FileDoesntExist, LocalDriver


class RecordingDriver:
    """Driver double that records every call it receives."""

    def __init__(self, name: str):
        self.name = name
        self.calls: list[tuple] = []

    def __repr__(self) -> str:
        return f"RecordingDriver({self.name!r})"

    async def read(self, path):
        self.calls.append(("read", path))
        return f"{self.name}:{path}"

    async def write(self, path, data):
        self.calls.append(("write", path, data))

    async def exists(self, path):
        self.calls.append(("exists", path))
        return True

    async def is_directory(self, path):
        self.calls.append(("is_directory", path))
        return False

    async def is_file(self, path):
        self.calls.append(("is_file", path))
        return True

    async def is_symbolic_link(self, path):
        self.calls.append(("is_symbolic_link", path))
        return False

    async def delete(self, path):
        self.calls.append(("delete", path))

    async def delete_all(self, path):
        self.calls.append(("delete_all", path))

    async def append(self, path, data):
        self.calls.append(("append", path, data))

    async def chmod(self, path, mode):
        self.calls.append(("chmod", path, mode))

    async def copy(self, source, destination, overwrite=True):
        self.calls.append(("copy", source, destination, overwrite))

    async def create_dir(self, path, mode=0o777, recursively=False):
        self.calls.append(("create_dir", path, mode, recursively))

    async def read_dir(self, path):
        self.calls.append(("read_dir", path))
        return []

    async def rename(self, old_path, new_path):
        self.calls.append(("rename", old_path, new_path))


class FailingDriver(RecordingDriver):
    """Driver double whose read always fails with FileDoesntExist."""

    async def read(self, path):
        self.calls.append(("read", path))
        raise FileDoesntExist(f'File "{path}" doesn\'t exist or isn\'t readable.', path)


@pytest.fixture
def driver_a():
    return RecordingDriver("a")


@pytest.fixture
def driver_b():
    return RecordingDriver("b")


@pytest.fixture
def local(tmp_path):
    """LocalDriver rooted at a fresh temporary directory."""
    return LocalDriver(root=str(tmp_path))
