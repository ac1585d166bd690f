"""Immutable directed graph and enumeration of all its simple cycles."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Generic, TypeVar

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator, Mapping

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class DiGraph(Generic[T]):
    """Immutable directed graph.

    Invariants (FAIL-FIRST):
    - All nodes in edges must be in nodes set

    Attributes:
        forward: Node → set of successors (outgoing edges)
        nodes: All nodes in graph (including isolated)
    """

    forward: Mapping[T, frozenset[T]]
    nodes: frozenset[T]

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        for node, successors in self.forward.items():
            if node not in self.nodes:
                raise ValueError(f"forward key '{node}' not in nodes")
            for succ in successors:
                if succ not in self.nodes:
                    raise ValueError(f"successor '{succ}' of '{node}' not in nodes")

    def successors(self, node: T) -> frozenset[T]:
        """Get direct successors (outgoing edges). O(1)."""
        return self.forward.get(node, frozenset())

    @classmethod
    def from_edges(
        cls,
        edges: Iterable[tuple[T, T]],
        extra_nodes: Iterable[T] = (),
    ) -> DiGraph[T]:
        """Build graph from edge iterable.

        Duplicate edges collapse into one.

        Args:
            edges: Iterable of (from, to) tuples
            extra_nodes: Additional isolated nodes to include

        Returns:
            DiGraph with all edges and nodes
        """
        forward: dict[T, set[T]] = {}
        nodes: set[T] = set(extra_nodes)

        for from_node, to_node in edges:
            nodes.add(from_node)
            nodes.add(to_node)
            forward.setdefault(from_node, set()).add(to_node)

        return cls(
            forward={k: frozenset(v) for k, v in forward.items()},
            nodes=frozenset(nodes),
        )


# =============================================================================
# GRAPH ALGORITHMS
# =============================================================================


def find_cycles(graph: DiGraph[T]) -> tuple[tuple[T, ...], ...]:
    """Enumerate every simple cycle of the graph.

    Nodes must be orderable. For each start node (ascending) the search
    only walks nodes not smaller than the start, so every cycle is found
    exactly once and begins with its smallest node. Successors are visited
    in ascending order: output is deterministic for a fixed graph.

    Worst case is exponential in the number of nodes (a dense graph has
    exponentially many cycles).

    Args:
        graph: Directed graph to search

    Returns:
        Cycles in discovery order. A self-loop is a one-node cycle.
    """
    ordered = sorted(graph.nodes)  # type: ignore[type-var]
    cycles: list[tuple[T, ...]] = []

    for index, start in enumerate(ordered):
        allowed = frozenset(ordered[index:])
        cycles.extend(_cycles_through(graph, start, allowed))

    return tuple(cycles)


def is_acyclic(graph: DiGraph[T]) -> bool:
    """Check that the graph has no cycle (self-loops included)."""
    return not find_cycles(graph)


def _cycles_through(
    graph: DiGraph[T],
    start: T,
    allowed: frozenset[T],
) -> Iterator[tuple[T, ...]]:
    """Yield simple cycles starting and ending at start, within allowed."""

    def next_steps(node: T) -> Iterator[T]:
        return iter(sorted(graph.successors(node) & allowed))  # type: ignore[type-var]

    path: list[T] = [start]
    on_path: set[T] = {start}
    stack: list[Iterator[T]] = [next_steps(start)]

    while stack:
        for succ in stack[-1]:
            if succ == start:
                yield tuple(path)
            elif succ not in on_path:
                path.append(succ)
                on_path.add(succ)
                stack.append(next_steps(succ))
                break
        else:
            stack.pop()
            on_path.discard(path.pop())
