"""Shared state of one validation run."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

from packcheck.application.discovery.packages import package_paths

if TYPE_CHECKING:
    from collections.abc import Iterable

    from packcheck.application.discovery.packages import PackageSet
    from packcheck.domain.model.configuration import Configuration
    from packcheck.domain.ports.constant_resolver import (
        ConstantResolverProtocol,
        ResolverFactory,
    )


@dataclass(frozen=True, slots=True)
class ValidationContext:
    """Read-only inputs shared by all checks.

    Checks never mutate the context, so they may run concurrently.

    Attributes:
        configuration: Run configuration
        package_set: Packages loaded once at validator construction
        resolver_factory: Builds the constant resolver
    """

    configuration: Configuration
    package_set: PackageSet
    resolver_factory: ResolverFactory

    @property
    def root_path(self) -> Path:
        """Resolved application root."""
        return self.package_set.root_path

    def package_manifests(self, pathspec: str | Iterable[str] | None = None) -> tuple[Path, ...]:
        """Manifests matching pathspec (default: configured package globs)."""
        return package_paths(
            self.root_path,
            pathspec if pathspec is not None else self.configuration.package_glob,
            self.configuration.exclude,
            self.configuration.manifest_filename,
        )

    def relative_path(self, path: Path) -> Path:
        """Path relative to the application root."""
        return path.relative_to(self.root_path)

    def build_resolver(self) -> ConstantResolverProtocol:
        """Create a fresh constant resolver for the configured load paths."""
        return self.resolver_factory(self.root_path, self.configuration.load_paths)
