"""Tests for the error taxonomy and the Outcome result channel."""

import pickle

import pytest

from driverfs import (
    ErrorKind,
    FileDoesntExist,
    FileExists,
    FileSystem,
    FileSystemError,
    InvalidPath,
    LocalDriver,
    Outcome,
    capture,
)
from driverfs.errors import classify


class TestErrorTaxonomy:
    """Classified errors and their builtin bases."""

    def test_not_found_is_file_not_found_error(self):
        err = FileDoesntExist("gone", "a.txt")
        assert isinstance(err, FileNotFoundError)
        assert isinstance(err, FileSystemError)
        assert err.kind is ErrorKind.NOT_FOUND

    def test_already_exists_is_file_exists_error(self):
        err = FileExists("there", "a.txt")
        assert isinstance(err, FileExistsError)
        assert err.kind is ErrorKind.ALREADY_EXISTS

    def test_invalid_path(self):
        err = InvalidPath("wrong kind", "d")
        assert isinstance(err, OSError)
        assert not isinstance(err, FileNotFoundError)
        assert err.kind is ErrorKind.INVALID_PATH

    def test_message_and_path(self):
        err = FileDoesntExist('File "a.txt" doesn\'t exist.', "a.txt")
        assert str(err) == 'File "a.txt" doesn\'t exist.'
        assert err.path == "a.txt"
        assert err.filename == "a.txt"

    def test_path_optional(self):
        assert InvalidPath("bad").path is None

    def test_pickle_round_trip(self):
        err = pickle.loads(pickle.dumps(FileExists("there", "x")))
        assert isinstance(err, FileExists)
        assert err.path == "x"
        assert str(err) == "there"


class TestClassify:
    """classify() maps exceptions to kinds."""

    @pytest.mark.parametrize(
        "exc, kind",
        [
            (FileDoesntExist("x"), ErrorKind.NOT_FOUND),
            (FileExists("x"), ErrorKind.ALREADY_EXISTS),
            (InvalidPath("x"), ErrorKind.INVALID_PATH),
            (PermissionError("x"), ErrorKind.UNCLASSIFIED),
            (FileNotFoundError("raw"), ErrorKind.UNCLASSIFIED),
        ],
    )
    def test_kinds(self, exc, kind):
        assert classify(exc) is kind

    def test_non_os_error_raises(self):
        with pytest.raises(TypeError):
            classify(ValueError("nope"))


@pytest.mark.asyncio
class TestCapture:
    """capture() settles calls into Outcome values."""

    async def test_success(self, tmp_path):
        (tmp_path / "f.txt").write_text("hi")
        fs = FileSystem(LocalDriver(root=str(tmp_path)))

        outcome = await capture(fs.read("f.txt"))

        assert outcome.ok
        assert outcome.value == "hi"
        assert outcome.kind is None
        assert outcome.unwrap() == "hi"

    async def test_classified_failure(self, tmp_path):
        fs = FileSystem(LocalDriver(root=str(tmp_path)))

        outcome = await capture(fs.rename("missing", "other"))

        assert not outcome.ok
        assert outcome.kind is ErrorKind.NOT_FOUND
        assert outcome.path == "missing"
        with pytest.raises(FileDoesntExist):
            outcome.unwrap()

    async def test_unclassified_failure(self, tmp_path):
        (tmp_path / "d").mkdir()
        (tmp_path / "d" / "f").write_text("x")
        fs = FileSystem(LocalDriver(root=str(tmp_path)))

        outcome = await capture(fs.delete("d"))

        assert outcome.kind is ErrorKind.UNCLASSIFIED
        assert isinstance(outcome.error, OSError)
        assert outcome.path == str(tmp_path / "d")

    async def test_non_os_error_propagates(self):
        async def broken():
            raise RuntimeError("boom")

        with pytest.raises(RuntimeError):
            await capture(broken())

    async def test_none_value_is_still_ok(self):
        async def nothing():
            return None

        assert await capture(nothing()) == Outcome()
