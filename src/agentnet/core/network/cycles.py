"""Cycle detection over the delegation graph."""

from __future__ import annotations

from typing import TYPE_CHECKING

from agentnet.core.network.models import CompilerDiagnostic

if TYPE_CHECKING:
    from collections.abc import Iterator, Mapping, Sequence


def detect_cycles(delegation_graph: Mapping[str, Sequence[str]]) -> list[list[str]]:
    """Return every delegation cycle found by a depth-first traversal.

    Each cycle is a path that ends on the node it starts from, e.g.
    ``["a", "b", "c", "a"]``.  One cycle is reported per back edge
    encountered; cycles are not deduplicated by rotation.  Nodes are visited
    in the graph's iteration order and neighbours in declaration order.

    The traversal keeps its own stack, so arbitrarily long delegation chains
    are fine.
    """
    cycles: list[list[str]] = []
    visited: set[str] = set()
    on_stack: set[str] = set()

    for root in delegation_graph:
        if root in visited:
            continue

        visited.add(root)
        on_stack.add(root)
        path = [root]
        frames: list[tuple[str, Iterator[str]]] = [
            (root, iter(delegation_graph.get(root, ())))
        ]

        while frames:
            node, neighbours = frames[-1]
            for neighbour in neighbours:
                if neighbour not in visited:
                    visited.add(neighbour)
                    on_stack.add(neighbour)
                    path.append(neighbour)
                    frames.append((neighbour, iter(delegation_graph.get(neighbour, ()))))
                    break
                if neighbour in on_stack:
                    start = path.index(neighbour)
                    cycles.append([*path[start:], neighbour])
            else:
                frames.pop()
                path.pop()
                on_stack.discard(node)

    return cycles


def format_cycle(cycle: Sequence[str]) -> str:
    return " -> ".join(cycle)


def diagnose_cycles(delegation_graph: Mapping[str, Sequence[str]]) -> list[CompilerDiagnostic]:
    """Turn each detected cycle into a ``cycle_detected`` diagnostic.

    ``source`` is the agent whose delegation closes the cycle and ``target``
    the agent it re-enters.
    """
    return [
        CompilerDiagnostic(
            type="cycle_detected",
            message=f"Delegation cycle detected: {format_cycle(cycle)}",
            source=cycle[-2],
            target=cycle[-1],
        )
        for cycle in detect_cycles(delegation_graph)
    ]
