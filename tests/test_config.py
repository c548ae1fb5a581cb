"""Tests for driver configuration."""

import pytest

from driverfs import (
    FileSystem,
    LocalDriver,
    LocalDriverConfig,
    connect_driver,
    create_driver,
)


class TestConnectDriver:
    """Test connect_driver()."""

    def test_defaults(self):
        config = connect_driver()
        assert config == LocalDriverConfig(type="local", root=None, encoding="utf-8")

    def test_local_with_options(self):
        config = connect_driver(type="local", root="/srv/data", encoding="latin-1")
        assert config.root == "/srv/data"
        assert config.encoding == "latin-1"

    def test_unexpected_arguments(self):
        with pytest.raises(ValueError, match="Unexpected arguments"):
            connect_driver(type="local", tracking=True)

    def test_unsupported_type(self):
        with pytest.raises(ValueError, match="Unsupported driver type"):
            connect_driver(type="s3")


class TestCreateDriver:
    """Test create_driver() and FileSystem.from_config()."""

    def test_creates_local_driver(self, tmp_path):
        driver = create_driver(LocalDriverConfig(root=str(tmp_path), encoding="ascii"))
        assert isinstance(driver, LocalDriver)
        assert driver.root == str(tmp_path)
        assert driver.encoding == "ascii"

    def test_unsupported_type(self):
        config = LocalDriverConfig()
        config.type = "ftp"
        with pytest.raises(ValueError):
            create_driver(config)

    def test_from_config(self, tmp_path):
        fs = FileSystem.from_config(connect_driver(root=str(tmp_path)))
        assert isinstance(fs.driver, LocalDriver)
        assert fs.driver.root == str(tmp_path)
