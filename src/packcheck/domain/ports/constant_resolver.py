"""Constant resolver protocol.

The validation engine never inspects source code itself. It asks a
resolver where a fully-qualified constant is defined.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, TypeAlias

if TYPE_CHECKING:
    from collections.abc import Callable, Mapping
    from pathlib import Path

    from packcheck.domain.model.constant import ConstantLocation


class ConstantResolverProtocol(Protocol):
    """Contract for constant resolvers.

    Example:
        class StaticResolver:
            def __init__(self, table: dict[str, Path]) -> None:
                self._table = table

            @property
            def file_map(self) -> Mapping[str, Path]:
                return self._table

            def resolve(self, name: str) -> ConstantLocation | None:
                location = self._table.get(name.removeprefix("::"))
                if location is None:
                    return None
                return ConstantLocation(name, location)
    """

    @property
    def file_map(self) -> Mapping[str, Path]:
        """Constant name → defining file (root-relative).

        Built eagerly on first access. May raise on a misconfigured
        application structure.
        """
        ...

    def resolve(self, name: str) -> ConstantLocation | None:
        """Find the defining file of a fully-qualified constant.

        Args:
            name: Constant name, e.g. "::Sales::Order"

        Returns:
            ConstantLocation, or None if nothing defines the constant
        """
        ...


ResolverFactory: TypeAlias = "Callable[[Path, Mapping[str, str]], ConstantResolverProtocol]"
"""Builds a resolver from (root_path, load_paths)."""
