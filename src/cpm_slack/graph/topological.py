"""Topological ordering via Kahn's algorithm (BFS with in-degree tracking).

The algorithm:
  1.  Compute in-degree for every node.
  2.  Seed a FIFO queue with all in-degree 0 nodes, lowest id first.
  3.  Pop a node, append it to the result, decrement in-degree of its
      successors.  Any successor whose in-degree drops to 0 enters the
      queue.
  4.  If the result contains all nodes, the graph is a DAG.
      Otherwise there is at least one cycle.

Ties between independent nodes are broken by id and edge insertion
order, so the same graph always yields the same order.
"""
from __future__ import annotations

from collections import deque

from cpm_slack.graph.adjacency import AdjacencyGraph


class CyclicDependencyError(Exception):
    """Raised when a topological order is required but a cycle exists."""

    def __init__(self, remaining_nodes: list[int]) -> None:
        self.remaining_nodes = remaining_nodes
        super().__init__(
            f"Cycle detected: {len(remaining_nodes)} node(s) involved in "
            f"circular dependencies"
        )


def _kahn(graph: AdjacencyGraph) -> tuple[list[int], list[int]]:
    n = graph.node_count
    in_deg = [graph.in_degree(node) for node in range(n)]

    q: deque[int] = deque(node for node in range(n) if in_deg[node] == 0)

    result: list[int] = []
    while q:
        node = q.popleft()
        result.append(node)
        for succ in graph.successors(node):
            in_deg[succ] -= 1
            if in_deg[succ] == 0:
                q.append(succ)

    # nodes never released still have a positive in-degree
    remaining = [node for node in range(n) if in_deg[node] > 0]
    return result, remaining


def topological_order(graph: AdjacencyGraph) -> list[int] | None:
    """Return node ids in dependency order, or None if *graph* is cyclic."""
    order, remaining = _kahn(graph)
    if remaining:
        return None
    return order


def topological_sort(graph: AdjacencyGraph) -> list[int]:
    """Return node ids in dependency order (prerequisites first).

    Raises CyclicDependencyError if the graph contains a cycle.
    """
    order, remaining = _kahn(graph)
    if remaining:
        raise CyclicDependencyError(remaining)
    return order
