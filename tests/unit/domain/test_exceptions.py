"""Tests for domain/exceptions.py."""

from pathlib import Path

import pytest

from packcheck.domain.exceptions import (
    ConfigurationError,
    ManifestReadError,
    ManifestSyntaxError,
    PackCheckError,
    StructuralError,
)


class TestExceptionHierarchy:
    """All library errors share one base; dual inheritance keeps stdlib semantics."""

    @pytest.mark.parametrize(
        "error",
        [
            ManifestReadError(path=Path("a/package.yml"), reason="denied"),
            ManifestSyntaxError(path=Path("a/package.yml"), reason="bad"),
            StructuralError("ambiguous"),
            ConfigurationError(path=Path("packcheck.yml"), reason="bad"),
        ],
    )
    def test_is_packcheck_error(self, error: Exception) -> None:
        assert isinstance(error, PackCheckError)

    def test_read_error_is_os_error(self) -> None:
        error = ManifestReadError(path=Path("a/package.yml"), reason="Permission denied")

        assert isinstance(error, OSError)
        assert error.path == Path("a/package.yml")
        assert "a/package.yml" in str(error)
        assert "Permission denied" in str(error)

    def test_syntax_error_is_value_error(self) -> None:
        error = ManifestSyntaxError(path=Path("a/package.yml"), reason="not a mapping")

        assert isinstance(error, ValueError)
        assert error.reason == "not a mapping"

    def test_configuration_error_message(self) -> None:
        error = ConfigurationError(path=Path("packcheck.yml"), reason="unknown key")

        assert str(error) == "Invalid configuration packcheck.yml: unknown key"
