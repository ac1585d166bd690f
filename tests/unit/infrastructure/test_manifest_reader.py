"""Tests for infrastructure/adapters/manifest_reader.py."""

from pathlib import Path

import pytest

from packcheck.domain.exceptions import ManifestReadError, ManifestSyntaxError
from packcheck.infrastructure.adapters.manifest_reader import read_manifest


class TestReadManifest:
    """Tests for read_manifest."""

    def test_reads_mapping(self, tmp_path: Path) -> None:
        path = tmp_path / "package.yml"
        path.write_text("enforce_dependencies: true\ndependencies:\n  - components/a\n")

        assert read_manifest(path) == {
            "enforce_dependencies": True,
            "dependencies": ["components/a"],
        }

    def test_empty_file_is_none(self, tmp_path: Path) -> None:
        path = tmp_path / "package.yml"
        path.write_text("")

        assert read_manifest(path) is None

    def test_comment_only_file_is_none(self, tmp_path: Path) -> None:
        path = tmp_path / "package.yml"
        path.write_text("# nothing here\n")

        assert read_manifest(path) is None

    def test_malformed_yaml_raises_syntax_error(self, tmp_path: Path) -> None:
        path = tmp_path / "package.yml"
        path.write_text("dependencies: [a, b\n")

        with pytest.raises(ManifestSyntaxError) as exc_info:
            read_manifest(path)

        assert exc_info.value.path == path

    def test_non_mapping_raises_syntax_error(self, tmp_path: Path) -> None:
        path = tmp_path / "package.yml"
        path.write_text("- a\n- b\n")

        with pytest.raises(ManifestSyntaxError, match="expected a mapping"):
            read_manifest(path)

    def test_missing_file_raises_read_error(self, tmp_path: Path) -> None:
        with pytest.raises(ManifestReadError):
            read_manifest(tmp_path / "package.yml")
