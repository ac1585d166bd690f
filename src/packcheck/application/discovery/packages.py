"""Package discovery: manifest globbing and the loaded package set."""

from __future__ import annotations

import glob
import logging
import os
import re
from fnmatch import fnmatchcase
from pathlib import Path
from types import MappingProxyType
from typing import TYPE_CHECKING

from packcheck.domain.exceptions import ManifestSyntaxError
from packcheck.domain.model.configuration import (
    DEFAULT_EXCLUDE,
    DEFAULT_PACKAGE_GLOB,
    MANIFEST_FILENAME,
)
from packcheck.domain.model.package import ROOT_PACKAGE_NAME, Package
from packcheck.infrastructure.adapters.manifest_reader import read_manifest
from packcheck.infrastructure.adapters.manifest_schema import validate_manifest

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

logger = logging.getLogger(__name__)

_BRACES = re.compile(r"\{([^{}]*)\}")


def expand_braces(pattern: str) -> tuple[str, ...]:
    """Expand `{a,b}` alternatives of a glob into plain globs.

    Example:
        >>> expand_braces("{bin,tmp}/**/*")
        ('bin/**/*', 'tmp/**/*')
    """
    match = _BRACES.search(pattern)
    if match is None:
        return (pattern,)
    head, tail = pattern[: match.start()], pattern[match.end() :]
    return tuple(
        expanded
        for option in match.group(1).split(",")
        for expanded in expand_braces(f"{head}{option}{tail}")
    )


def package_paths(
    root_path: Path,
    package_pathspec: str | Iterable[str],
    exclude_pathspec: Iterable[str] = (),
    manifest_filename: str = MANIFEST_FILENAME,
) -> tuple[Path, ...]:
    """Find manifests matching package globs.

    Args:
        root_path: Application root
        package_pathspec: Glob(s) of package directories, relative to root
        exclude_pathspec: Glob(s) of excluded paths, relative to root
        manifest_filename: Manifest file name

    Returns:
        Sorted, deduplicated, symlink-resolved absolute manifest paths
    """
    root = root_path.resolve()
    specs = (package_pathspec,) if isinstance(package_pathspec, str) else tuple(package_pathspec)
    excludes = tuple(pattern for spec in exclude_pathspec for pattern in expand_braces(spec))

    found: dict[Path, None] = {}
    for spec in specs:
        pattern = os.path.join(glob.escape(str(root)), spec, manifest_filename)
        for match in glob.glob(pattern, recursive=True):
            path = Path(match).resolve()
            if not path.is_relative_to(root):
                logger.warning(f"Skipping {match}: resolves outside of {root}")
                continue
            relative = path.relative_to(root).as_posix()
            if any(fnmatchcase(relative, exclude) for exclude in excludes):
                continue
            found[path] = None

    return tuple(sorted(found))


class PackageSet:
    """Loaded packages, indexed for name and ownership lookups.

    Invariants:
        - package names, hence manifest paths, are unique (FAIL-FIRST)
        - a root package is always present (synthesized if not declared)

    Ownership of a file is decided by the longest package name that is a
    directory prefix of the file's root-relative path; anything else is
    owned by the root package.
    """

    def __init__(self, root_path: Path, packages: Iterable[Package]) -> None:
        """Initialize set.

        Args:
            root_path: Application root (absolute)
            packages: Packages to index

        Raises:
            ValueError: If two packages share a manifest path
        """
        self._root_path = root_path.resolve()

        by_name: dict[str, Package] = {}
        for package in packages:
            if package.name in by_name:
                raise ValueError(f"duplicate package '{package.name}' ({package.config_path})")
            by_name[package.name] = package

        if ROOT_PACKAGE_NAME not in by_name:
            by_name[ROOT_PACKAGE_NAME] = Package(
                name=ROOT_PACKAGE_NAME,
                config_path=self._root_path / MANIFEST_FILENAME,
            )

        self._packages = tuple(by_name[name] for name in sorted(by_name))
        self._by_name = MappingProxyType(by_name)
        # Longest name first: the first owner found is the most specific one
        self._prefix_index = tuple(
            sorted(
                (package for package in self._packages if not package.is_root),
                key=lambda package: len(package.name),
                reverse=True,
            )
        )

    @classmethod
    def load_all_from(
        cls,
        root_path: Path,
        package_pathspec: str | Iterable[str] | None = None,
        exclude: Iterable[str] = DEFAULT_EXCLUDE,
        manifest_filename: str = MANIFEST_FILENAME,
    ) -> PackageSet:
        """Load every package under root_path.

        Manifests with invalid options load leniently (invalid options fall
        back to defaults); the syntax check reports them.

        Args:
            root_path: Application root
            package_pathspec: Glob(s) of package directories. None = "**".
            exclude: Glob(s) of excluded paths
            manifest_filename: Manifest file name

        Returns:
            PackageSet of all discovered packages

        Raises:
            ManifestReadError: If a manifest cannot be read
        """
        root = root_path.resolve()
        paths = package_paths(root, package_pathspec or DEFAULT_PACKAGE_GLOB, exclude, manifest_filename)
        packages = [_load_package(root, path) for path in paths]
        logger.debug(f"Loaded {len(packages)} packages from {root}")
        return cls(root, packages)

    @property
    def root_path(self) -> Path:
        return self._root_path

    @property
    def root_package(self) -> Package:
        return self._by_name[ROOT_PACKAGE_NAME]

    def fetch(self, name: str) -> Package | None:
        """Get package by exact name (normalized as a relative path). O(1)."""
        return self._by_name.get(Path(name).as_posix())

    def package_from_path(self, path: Path | str) -> Package:
        """Get the package owning a file.

        Args:
            path: Root-relative or absolute path

        Returns:
            Most specific package containing path, root package otherwise
        """
        candidate = Path(path)
        if candidate.is_absolute():
            if not candidate.is_relative_to(self._root_path):
                return self.root_package
            candidate = candidate.relative_to(self._root_path)

        relative = candidate.as_posix()
        for package in self._prefix_index:
            if package.owns(relative):
                return package
        return self.root_package

    def __iter__(self) -> Iterator[Package]:
        return iter(self._packages)

    def __len__(self) -> int:
        return len(self._packages)

    def __contains__(self, package: object) -> bool:
        return isinstance(package, Package) and self._by_name.get(package.name) == package


def _load_package(root: Path, config_path: Path) -> Package:
    try:
        document = read_manifest(config_path)
    except ManifestSyntaxError as e:
        logger.warning(f"Loading {config_path} with defaults: {e.reason}")
        document = None

    validation = validate_manifest(config_path, document)
    if not validation.valid:
        logger.warning(f"Loading {config_path} leniently: {len(validation.problems)} invalid option(s)")

    manifest = validation.manifest
    enforce_privacy = manifest.enforce_privacy
    metadata = manifest.metadata if isinstance(manifest.metadata, dict) else {}

    return Package(
        name=config_path.parent.relative_to(root).as_posix(),
        config_path=config_path,
        dependencies=tuple(manifest.dependencies),
        rejected_dependencies=tuple(str(entry) for entry in validation.rejected.get("dependencies", ())),
        enforce_privacy=tuple(enforce_privacy) if isinstance(enforce_privacy, list) else enforce_privacy,
        enforce_dependencies=manifest.enforce_dependencies,
        public_path=manifest.public_path,
        metadata=MappingProxyType(dict(metadata)),
    )
