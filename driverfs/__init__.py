"""driverfs: Asynchronous filesystem facade over swappable drivers."""

from .base import Driver
from .config import DriverConfig, LocalDriverConfig, connect_driver, create_driver
from .errors import ErrorKind, FileDoesntExist, FileExists, FileSystemError, InvalidPath
from .filesystem import FileSystem
from .local import LocalDriver
from .result import Outcome, capture

__all__ = [
    "capture",
    "connect_driver",
    "create_driver",
    "Driver",
    "DriverConfig",
    "ErrorKind",
    "FileDoesntExist",
    "FileExists",
    "FileSystem",
    "FileSystemError",
    "InvalidPath",
    "LocalDriver",
    "LocalDriverConfig",
    "Outcome",
]
