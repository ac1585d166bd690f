"""Dependency cycle check.

Builds the package dependency graph and lists every simple cycle.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from packcheck.application.validators._base import BaseCheck
from packcheck.domain.model.enums import ErrorKind
from packcheck.domain.model.graph import DiGraph, find_cycles
from packcheck.domain.model.result import Result, fail, ok

if TYPE_CHECKING:
    from collections.abc import Sequence

    from packcheck.application.discovery.packages import PackageSet
    from packcheck.application.validators.context import ValidationContext

logger = logging.getLogger(__name__)


class AcyclicGraphCheck(BaseCheck):
    """Fail if declared package dependencies form a cycle.

    Dependencies naming no loaded package add no edge; the dependency
    validity check reports them.
    """

    name = "acyclic_graph"
    title = "Acyclic dependency graph"
    kinds = frozenset({ErrorKind.CYCLE})

    def check(self, context: ValidationContext) -> Result:
        graph = build_dependency_graph(context.package_set)
        cycles = find_cycles(graph)

        if not cycles:
            return ok()

        lines = "\n".join(format_cycle(cycle) for cycle in cycles)
        return fail(
            "Expected the package dependency graph to be acyclic, "
            f"but it contains the following cycles:\n\n{lines}\n"
        )


def build_dependency_graph(package_set: PackageSet) -> DiGraph[str]:
    """Package name graph: one edge per resolvable declared dependency."""
    edges: list[tuple[str, str]] = []

    for package in package_set:
        for dependency in package.dependencies:
            target = package_set.fetch(dependency)
            if target is None:
                logger.debug(f"Skipping unknown dependency '{dependency}' of '{package}'")
                continue
            edges.append((package.name, target.name))

    return DiGraph.from_edges(edges, extra_nodes=(package.name for package in package_set))


def format_cycle(cycle: Sequence[object]) -> str:
    """Render a cycle as a report line.

    Example:
        >>> format_cycle(["a", "b"])
        '\\t- a → b → a'
    """
    names = [str(node) for node in cycle]
    names.append(names[0])
    return f"\t- {' → '.join(names)}"
