"""Validation run configuration."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType

DEFAULT_EXCLUDE = ("{bin,node_modules,script,tmp,vendor}/**/*",)
DEFAULT_PACKAGE_GLOB = "**"
MANIFEST_FILENAME = "package.yml"
TOP_LEVEL_NAMESPACE = "Object"


@dataclass(frozen=True, slots=True)
class Configuration:
    """Configuration of one validation run.

    Immutable configuration object with FAIL-FIRST validation.
    None = use the default.

    Attributes:
        root_path: Absolute application root
        package_paths: Globs (relative to root) of package directories.
            None = every directory ("**").
        exclude: Globs (relative to root) of paths never treated as packages
        load_paths: Root-relative source directory → default namespace.
            "Object" means constants in the directory are top-level.
        manifest_filename: Name of the per-package manifest
        source_extension: Extension of source files holding constants
        parallel: Run independent checks on a thread pool
    """

    root_path: Path
    package_paths: tuple[str, ...] | None = None
    exclude: tuple[str, ...] = DEFAULT_EXCLUDE
    load_paths: Mapping[str, str] = field(default_factory=lambda: MappingProxyType({}))
    manifest_filename: str = MANIFEST_FILENAME
    source_extension: str = ".rb"
    parallel: bool = False

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.root_path.is_absolute():
            raise ValueError(f"root_path must be absolute, got {self.root_path}")
        if self.package_paths is not None and not self.package_paths:
            raise ValueError("package_paths must not be empty (use None for all directories)")
        if not self.manifest_filename or "/" in self.manifest_filename:
            raise ValueError(f"manifest_filename must be a bare file name, got {self.manifest_filename!r}")
        if not self.source_extension.startswith("."):
            raise ValueError(f"source_extension must start with '.', got {self.source_extension!r}")
        for load_path in self.load_paths:
            if Path(load_path).is_absolute():
                raise ValueError(f"load path must be relative to root_path, got {load_path}")

    @property
    def package_glob(self) -> tuple[str, ...]:
        """Configured package globs, defaulting to every directory."""
        return self.package_paths or (DEFAULT_PACKAGE_GLOB,)

    @property
    def root_manifest(self) -> Path:
        """Path of the root package manifest."""
        return self.root_path / self.manifest_filename
