"""Immutable directed graph of module ids with cycle detection."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping


@dataclass(frozen=True, slots=True)
class DiGraph[T]:
    """Immutable directed graph.

    Invariants (FAIL-FIRST):
    - All forward keys and successors must be in nodes

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

    def has_edge(self, from_: T, to: T) -> bool:
        """Check if edge exists. O(1)."""
        return to in self.forward.get(from_, frozenset())

    @property
    def edge_count(self) -> int:
        """Get total number of distinct edges."""
        return sum(len(succs) for succs in self.forward.values())

    @classmethod
    def from_edges(
        cls,
        edges: Iterable[tuple[T, T]],
        extra_nodes: frozenset[T] | None = None,
    ) -> DiGraph[T]:
        """Build graph from edge iterable.

        Args:
            edges: Iterable of (from, to) tuples; duplicates collapse
            extra_nodes: Additional isolated nodes to include

        Returns:
            DiGraph with all edges and nodes

        Time: O(E) where E is number of edges
        """
        forward: dict[T, set[T]] = {}
        nodes: set[T] = set()

        for from_node, to_node in edges:
            nodes.add(from_node)
            nodes.add(to_node)
            forward.setdefault(from_node, set()).add(to_node)

        if extra_nodes is not None:
            nodes.update(extra_nodes)

        return cls(
            forward={k: frozenset(v) for k, v in forward.items()},
            nodes=frozenset(nodes),
        )

    @classmethod
    def empty(cls) -> DiGraph[T]:
        """Create empty graph with no nodes or edges."""
        return cls(forward={}, nodes=frozenset())


def detect_cycles(graph: DiGraph[str]) -> tuple[tuple[str, ...], ...]:
    """Find every import cycle in the graph.

    A cycle is a strongly connected component with more than one node,
    or a single node with an edge to itself. Uses Tarjan's algorithm
    with an explicit stack, so deep graphs do not hit the recursion limit.

    Args:
        graph: Directed graph to check

    Returns:
        Empty tuple if acyclic. Otherwise one sorted tuple of node ids per
        cycle, the cycles themselves sorted. Output is deterministic.
    """
    index_of: dict[str, int] = {}
    lowlink: dict[str, int] = {}
    on_stack: set[str] = set()
    stack: list[str] = []
    components: list[tuple[str, ...]] = []
    counter = 0

    for root in sorted(graph.nodes):
        if root in index_of:
            continue

        # (node, iterator over sorted successors)
        work = [(root, iter(sorted(graph.successors(root))))]
        index_of[root] = lowlink[root] = counter
        counter += 1
        stack.append(root)
        on_stack.add(root)

        while work:
            node, successors = work[-1]
            advanced = False
            for succ in successors:
                if succ not in index_of:
                    index_of[succ] = lowlink[succ] = counter
                    counter += 1
                    stack.append(succ)
                    on_stack.add(succ)
                    work.append((succ, iter(sorted(graph.successors(succ)))))
                    advanced = True
                    break
                if succ in on_stack:
                    lowlink[node] = min(lowlink[node], index_of[succ])
            if advanced:
                continue

            work.pop()
            if work:
                parent = work[-1][0]
                lowlink[parent] = min(lowlink[parent], lowlink[node])

            if lowlink[node] == index_of[node]:
                members: list[str] = []
                while True:
                    member = stack.pop()
                    on_stack.discard(member)
                    members.append(member)
                    if member == node:
                        break
                if len(members) > 1 or graph.has_edge(node, node):
                    components.append(tuple(sorted(members)))

    return tuple(sorted(components))
