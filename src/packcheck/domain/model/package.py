"""Package entity."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Mapping

ROOT_PACKAGE_NAME = "."
DEFAULT_PUBLIC_PATH = "app/public/"


@dataclass(frozen=True, slots=True, eq=False)
class Package:
    """Path-identified unit of the codebase with its own manifest.

    Identity is the manifest path: two Package objects are equal iff
    their config_path is equal.

    Invariants:
        - name is non-empty ("." for the root package)
        - config_path is absolute

    Attributes:
        name: Directory relative to the application root
        config_path: Absolute, symlink-resolved manifest path
        dependencies: Declared dependency package names
        rejected_dependencies: Non-string dependency entries, as text
        enforce_privacy: True/False, or explicit fully-qualified constant names
        enforce_dependencies: Whether dependency rules apply
        public_path: Public folder relative to the package
        metadata: Free-form user data
    """

    name: str
    config_path: Path
    dependencies: tuple[str, ...] = ()
    rejected_dependencies: tuple[str, ...] = ()
    enforce_privacy: bool | tuple[str, ...] = False
    enforce_dependencies: bool = False
    public_path: str = DEFAULT_PUBLIC_PATH
    metadata: Mapping[str, object] = field(default_factory=lambda: MappingProxyType({}))

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.name:
            raise ValueError("name must not be empty")
        if not self.config_path.is_absolute():
            raise ValueError(f"config_path must be absolute, got {self.config_path}")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Package):
            return NotImplemented
        return self.config_path == other.config_path

    def __hash__(self) -> int:
        return hash(self.config_path)

    def __str__(self) -> str:
        return self.name

    @property
    def is_root(self) -> bool:
        """Check if this is the root package."""
        return self.name == ROOT_PACKAGE_NAME

    @property
    def privacy_constants(self) -> tuple[str, ...]:
        """Explicitly listed private constants (empty for boolean settings)."""
        if isinstance(self.enforce_privacy, tuple):
            return self.enforce_privacy
        return ()

    def owns(self, path: Path | str) -> bool:
        """Check if a root-relative path lies inside this package's directory."""
        if self.is_root:
            return True
        path_str = str(path)
        return path_str == self.name or path_str.startswith(f"{self.name}/")
