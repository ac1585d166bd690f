"""Tests for validators/manifest_syntax_check.py."""

from pathlib import Path

from packcheck.application.validators.manifest_syntax_check import ManifestSyntaxCheck
from tests.factories import make_context, write_manifest


class TestManifestSyntaxCheck:
    """Tests for ManifestSyntaxCheck.check."""

    def test_valid_manifests_pass(self, tmp_path: Path) -> None:
        write_manifest(tmp_path, ".")
        write_manifest(
            tmp_path,
            "components/sales",
            {"enforce_privacy": True, "enforce_dependencies": False, "dependencies": ["."], "metadata": {}},
        )

        assert ManifestSyntaxCheck().check(make_context(tmp_path)).ok

    def test_empty_manifest_passes(self, tmp_path: Path) -> None:
        write_manifest(tmp_path, ".")

        assert ManifestSyntaxCheck().check(make_context(tmp_path)).ok

    def test_unknown_key_names_file_and_key(self, tmp_path: Path) -> None:
        write_manifest(tmp_path, "components/sales", {"foo": 1})

        result = ManifestSyntaxCheck().check(make_context(tmp_path))

        assert not result.ok
        assert "components/sales/package.yml" in (result.error or "")
        assert "foo" in (result.error or "")

    def test_violations_of_all_files_aggregated(self, tmp_path: Path) -> None:
        write_manifest(tmp_path, "components/a", {"enforce_dependencies": "yes"})
        write_manifest(tmp_path, "components/b", {"dependencies": "components/a"})

        result = ManifestSyntaxCheck().check(make_context(tmp_path))
        sections = (result.error or "").split("\n---\n")

        assert len(sections) == 2
        assert "components/a/package.yml" in sections[0]
        assert "components/b/package.yml" in sections[1]

    def test_each_violation_separate_line(self, tmp_path: Path) -> None:
        write_manifest(tmp_path, "components/a", {"bar": 1, "public_path": 3})

        result = ManifestSyntaxCheck().check(make_context(tmp_path))

        assert len((result.error or "").split("\n---\n")) == 2

    def test_malformed_yaml_reported(self, tmp_path: Path) -> None:
        write_manifest(tmp_path, "components/a", text="dependencies: [a\n")
        write_manifest(tmp_path, "components/b", {"foo": 1})

        result = ManifestSyntaxCheck().check(make_context(tmp_path))

        assert "Invalid YAML in components/a/package.yml" in (result.error or "")
        assert "components/b/package.yml" in (result.error or "")

    def test_only_configured_package_paths_checked(self, tmp_path: Path) -> None:
        write_manifest(tmp_path, "components/a")
        write_manifest(tmp_path, "legacy/b", {"foo": 1})

        result = ManifestSyntaxCheck().check(make_context(tmp_path, package_paths=("components/*",)))

        assert result.ok
