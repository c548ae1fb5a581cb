"""Configuration for drivers.

Provides configuration dataclasses and the connect_driver/create_driver
factory functions for building drivers without importing them directly.
"""

from dataclasses import dataclass
from typing import Literal

from .base import Driver
from .local import LocalDriver


@dataclass
class LocalDriverConfig:
    """Configuration for the local disk driver.

    Attributes:
        type: Always "local".
        root: Directory relative paths are resolved against.
            None means the process working directory.
        encoding: Text encoding for read, write and append.
    """

    type: Literal["local"] = "local"
    root: str | None = None
    encoding: str = "utf-8"


# Type alias for all driver configs
DriverConfig = LocalDriverConfig


def connect_driver(type: Literal["local"] = "local", **kwargs) -> DriverConfig:
    """Configure a driver.

    Args:
        type: Driver type.
            - "local": Host filesystem.
        **kwargs: Additional configuration for the driver type.
            For type="local":
                - root (str): Optional. Base directory for relative paths.
                - encoding (str): Optional. Text encoding (default: utf-8).

    Returns:
        DriverConfig for create_driver() or FileSystem.from_config().

    Examples:
        >>> connect_driver(type="local", root="/srv/data")
        LocalDriverConfig(type='local', root='/srv/data', encoding='utf-8')
    """
    if type == "local":
        root = kwargs.pop("root", None)
        encoding = kwargs.pop("encoding", "utf-8")

        if kwargs:
            raise ValueError(
                f"Unexpected arguments for local driver: {list(kwargs.keys())}"
            )

        return LocalDriverConfig(root=root, encoding=encoding)

    else:
        raise ValueError(f"Unsupported driver type: {type}. Use 'local'.")


def create_driver(config: DriverConfig) -> Driver:
    """Instantiate the driver described by config."""
    if config.type == "local":
        return LocalDriver(root=config.root, encoding=config.encoding)
    raise ValueError(f"Unsupported driver type: {config.type}")
