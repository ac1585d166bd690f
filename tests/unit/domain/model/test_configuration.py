"""Tests for domain/model/configuration.py."""

from pathlib import Path

import pytest

from packcheck.domain.model.configuration import (
    DEFAULT_EXCLUDE,
    MANIFEST_FILENAME,
    Configuration,
)


class TestConfiguration:
    """Tests for Configuration defaults and derived values."""

    def test_defaults(self) -> None:
        config = Configuration(root_path=Path("/app"))

        assert config.package_paths is None
        assert config.exclude == DEFAULT_EXCLUDE
        assert dict(config.load_paths) == {}
        assert config.manifest_filename == MANIFEST_FILENAME
        assert config.source_extension == ".rb"
        assert config.parallel is False

    def test_package_glob_defaults_to_everything(self) -> None:
        assert Configuration(root_path=Path("/app")).package_glob == ("**",)

    def test_package_glob_uses_package_paths(self) -> None:
        config = Configuration(root_path=Path("/app"), package_paths=("components/*", "."))

        assert config.package_glob == ("components/*", ".")

    def test_root_manifest(self) -> None:
        assert Configuration(root_path=Path("/app")).root_manifest == Path("/app/package.yml")


class TestConfigurationFailFirst:
    """Tests for FAIL-FIRST validation in Configuration."""

    def test_relative_root_raises(self) -> None:
        with pytest.raises(ValueError, match="root_path must be absolute"):
            Configuration(root_path=Path("app"))

    def test_empty_package_paths_raises(self) -> None:
        with pytest.raises(ValueError, match="package_paths must not be empty"):
            Configuration(root_path=Path("/app"), package_paths=())

    def test_manifest_filename_with_slash_raises(self) -> None:
        with pytest.raises(ValueError, match="manifest_filename"):
            Configuration(root_path=Path("/app"), manifest_filename="config/package.yml")

    def test_extension_without_dot_raises(self) -> None:
        with pytest.raises(ValueError, match="source_extension"):
            Configuration(root_path=Path("/app"), source_extension="rb")

    def test_absolute_load_path_raises(self) -> None:
        with pytest.raises(ValueError, match="load path must be relative"):
            Configuration(root_path=Path("/app"), load_paths={"/lib": "Object"})
