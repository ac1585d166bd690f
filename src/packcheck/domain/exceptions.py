"""Domain exceptions: all public errors of packcheck.

Checks convert local failure modes into failed Results. Only exceptions
that make a validation run impossible escape to the caller.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pathlib import Path


class PackCheckError(Exception):
    """Base for all packcheck error exceptions.

    Allows: except PackCheckError to catch all library errors.
    """


class ManifestReadError(PackCheckError, OSError):
    """Manifest file exists but cannot be read.

    Fatal: no package set can be built, so the run aborts.
    Inherits OSError for semantic correctness.

    Attributes:
        path: Manifest that failed.
        reason: Error description.
    """

    def __init__(self, *, path: Path, reason: str) -> None:
        """Initialize with manifest path and error reason."""
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to read {path}: {reason}")


class ManifestSyntaxError(PackCheckError, ValueError):
    """Manifest is not a YAML mapping.

    Raised for YAML parse errors and for documents whose top level is
    not a mapping. The syntax check reports it as a failure.

    Attributes:
        path: Manifest that failed.
        reason: Error description.
    """

    def __init__(self, *, path: Path, reason: str) -> None:
        """Initialize with manifest path and error reason."""
        self.path = path
        self.reason = reason
        super().__init__(f"Invalid manifest {path}: {reason}")


class StructuralError(PackCheckError):
    """Constant resolver cannot index the application's load paths."""


class ConfigurationError(PackCheckError, ValueError):
    """Invalid packcheck configuration file.

    Attributes:
        path: Configuration file.
        reason: Error description.
    """

    def __init__(self, *, path: Path, reason: str) -> None:
        """Initialize with configuration path and error reason."""
        self.path = path
        self.reason = reason
        super().__init__(f"Invalid configuration {path}: {reason}")
