"""Constant resolver backed by a file map of the load paths."""

from __future__ import annotations

import logging
from pathlib import Path
from types import MappingProxyType
from typing import TYPE_CHECKING

from packcheck.domain.exceptions import StructuralError
from packcheck.domain.model.configuration import TOP_LEVEL_NAMESPACE
from packcheck.domain.model.constant import ROOT_NAMESPACE, ConstantLocation
from packcheck.infrastructure.resolver.inflector import camelize

if TYPE_CHECKING:
    from collections.abc import Mapping

logger = logging.getLogger(__name__)


class FileMapResolver:
    """Resolves constants by naming convention over load paths.

    Every source file under a load path defines the constant named after
    its path (relative to the load path), prefixed with the load path's
    default namespace. The file map is built on first use.

    Example:
        resolver = FileMapResolver(Path("/app"), {"components/sales/app/models": "Object"})
        resolver.resolve("::Sales::Order")
        # ConstantLocation(name='::Sales::Order',
        #                  location=Path('components/sales/app/models/sales/order.rb'))
    """

    def __init__(
        self,
        root_path: Path,
        load_paths: Mapping[str, str],
        *,
        extension: str = ".rb",
    ) -> None:
        """Initialize resolver.

        Args:
            root_path: Application root
            load_paths: Root-relative directory → default namespace
            extension: Source file extension
        """
        self._root_path = root_path.resolve()
        self._load_paths = dict(load_paths)
        self._extension = extension
        self._file_map: Mapping[str, Path] | None = None

    @property
    def file_map(self) -> Mapping[str, Path]:
        """Constant name (without `::`) → root-relative defining file.

        Raises:
            StructuralError: If a load path is missing or outside the root,
                a constant is defined by two files, or load paths are
                configured but contain no source file
        """
        if self._file_map is None:
            self._file_map = self._build_file_map()
        return self._file_map

    def resolve(self, name: str) -> ConstantLocation | None:
        """Find the file defining a fully-qualified constant.

        A nested constant without its own file resolves to the file of the
        nearest enclosing namespace that has one.

        Args:
            name: Fully-qualified name, e.g. "::Sales::Order"

        Returns:
            ConstantLocation, or None if no enclosing namespace has a file
        """
        const_name = name.removeprefix(ROOT_NAMESPACE)
        while const_name:
            location = self.file_map.get(const_name)
            if location is not None:
                return ConstantLocation(name=f"{ROOT_NAMESPACE}{const_name}", location=location)
            const_name = const_name.rpartition("::")[0]
        return None

    def _build_file_map(self) -> Mapping[str, Path]:
        file_map: dict[str, Path] = {}
        duplicates: dict[str, list[Path]] = {}

        for load_path, namespace in self._load_paths.items():
            directory = self._load_path_directory(load_path)

            for source in sorted(directory.rglob(f"*{self._extension}")):
                relative = source.relative_to(self._root_path)
                const_name = camelize(source.relative_to(directory).with_suffix("").as_posix())
                if namespace != TOP_LEVEL_NAMESPACE:
                    const_name = f"{namespace}::{const_name}"

                if const_name in file_map:
                    duplicates.setdefault(const_name, [file_map[const_name]]).append(relative)
                file_map[const_name] = relative

        if duplicates:
            lines = [
                f"- {name} is defined by: {', '.join(str(path) for path in paths)}"
                for name, paths in duplicates.items()
            ]
            raise StructuralError("Ambiguous constant definition:\n" + "\n".join(lines))

        if self._load_paths and not file_map:
            searched = "\n".join(f"- {load_path}/**/*{self._extension}" for load_path in self._load_paths)
            raise StructuralError(f"Could not find any source files. Searched in:\n{searched}")

        logger.debug(f"Indexed {len(file_map)} constants from {len(self._load_paths)} load paths")
        return MappingProxyType(file_map)

    def _load_path_directory(self, load_path: str) -> Path:
        directory = (self._root_path / load_path).resolve()
        if not directory.is_relative_to(self._root_path):
            raise StructuralError(f"Load path {load_path} is outside of the application root {self._root_path}")
        if not directory.is_dir():
            raise StructuralError(f"Load path {load_path} does not exist in {self._root_path}")
        return directory
