"""Test factories for creating domain objects and application trees.

Centralized factory functions to avoid duplication across test modules.
"""

from collections.abc import Mapping, Sequence
from pathlib import Path

import yaml

from packcheck.application.discovery.packages import PackageSet
from packcheck.application.validators.context import ValidationContext
from packcheck.domain.exceptions import StructuralError
from packcheck.domain.model.configuration import Configuration
from packcheck.domain.model.constant import ConstantLocation
from packcheck.domain.model.package import ROOT_PACKAGE_NAME, Package

# Default application root for in-memory packages - never touched on disk
DEFAULT_ROOT = Path("/app")


def make_package(
    name: str,
    dependencies: Sequence[str] = (),
    enforce_privacy: bool | tuple[str, ...] = False,
    root: Path = DEFAULT_ROOT,
) -> Package:
    """Create a Package whose manifest lives under root.

    Args:
        name: Package name ("." for root)
        dependencies: Declared dependency names
        enforce_privacy: Privacy setting
        root: Application root

    Returns:
        Package instance
    """
    directory = root if name == ROOT_PACKAGE_NAME else root / name
    return Package(
        name=name,
        config_path=directory / "package.yml",
        dependencies=tuple(dependencies),
        enforce_privacy=enforce_privacy,
    )


def make_package_set(
    dependencies: Mapping[str, Sequence[str]],
    root: Path = DEFAULT_ROOT,
) -> PackageSet:
    """Create an in-memory PackageSet from name → dependencies."""
    return PackageSet(root, [make_package(name, deps, root=root) for name, deps in dependencies.items()])


def write_manifest(root: Path, package: str, document: object | None = None, *, text: str | None = None) -> Path:
    """Write a package.yml under root/package.

    Args:
        root: Application root
        package: Package directory ("." for root)
        document: YAML document to dump (None = empty file)
        text: Raw manifest text (overrides document)

    Returns:
        Path of the written manifest
    """
    directory = root if package == ROOT_PACKAGE_NAME else root / package
    directory.mkdir(parents=True, exist_ok=True)
    manifest = directory / "package.yml"
    if text is None:
        text = "" if document is None else yaml.safe_dump(document)
    manifest.write_text(text)
    return manifest


def write_source(root: Path, relative: str, text: str = "") -> Path:
    """Write a source file under root, creating parent directories."""
    path = root / relative
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text)
    return path


class StaticResolver:
    """Resolver double backed by a fixed constant table."""

    def __init__(self, table: Mapping[str, str | Path]) -> None:
        self._table = {name: Path(location) for name, location in table.items()}

    @property
    def file_map(self) -> Mapping[str, Path]:
        return self._table

    def resolve(self, name: str) -> ConstantLocation | None:
        const_name = name.removeprefix("::")
        location = self._table.get(const_name)
        if location is None:
            return None
        return ConstantLocation(name=f"::{const_name}", location=location)


class FailingResolver:
    """Resolver double whose indexing always fails."""

    def __init__(self, message: str = "Ambiguous constant definition") -> None:
        self._message = message

    @property
    def file_map(self) -> Mapping[str, Path]:
        raise StructuralError(self._message)

    def resolve(self, name: str) -> ConstantLocation | None:
        raise StructuralError(self._message)


def static_resolver_factory(table: Mapping[str, str | Path]):
    """Resolver factory ignoring its arguments and returning a StaticResolver."""

    def factory(root_path: Path, load_paths: Mapping[str, str]) -> StaticResolver:
        return StaticResolver(table)

    return factory


def make_context(
    root: Path,
    resolver_table: Mapping[str, str | Path] | None = None,
    **config_overrides: object,
) -> ValidationContext:
    """Build a ValidationContext over an on-disk tree.

    Args:
        root: Application root (tree must already be written)
        resolver_table: Constant table for StaticResolver (default: empty)
        **config_overrides: Extra Configuration fields

    Returns:
        ValidationContext with loaded package set
    """
    configuration = Configuration(root_path=root.resolve(), **config_overrides)  # type: ignore[arg-type]
    package_set = PackageSet.load_all_from(
        configuration.root_path,
        configuration.package_glob,
        configuration.exclude,
        configuration.manifest_filename,
    )
    return ValidationContext(
        configuration=configuration,
        package_set=package_set,
        resolver_factory=static_resolver_factory(resolver_table or {}),
    )
