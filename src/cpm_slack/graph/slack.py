"""Slack (total float) for every node of a DAG.

Slack answers "how far can this node slip before the whole graph gets
longer?".  Every edge has unit length, so path lengths are counted in
nodes.

Algorithm:
  1.  Topologically sort the graph.
  2.  Forward pass: dist_from_start[v] is the number of nodes on the
      longest path ending at v, v included.
  3.  Backward pass over the reversed order: dist_to_end[v] is the
      number of nodes on the longest path starting at v.
  4.  The longest path through v has dist_from_start[v] + dist_to_end[v] - 1
      nodes (v is counted by both passes).  The critical length is the
      maximum of that over all nodes.
  5.  slack[v] = critical length - longest path through v.

Both passes are O(V + E) and all distances stay exact ints; the only
float is the final per-node subtraction.

A cyclic graph has no longest path.  Rather than raising, compute_slack
reports every node with zero slack, so callers treat the whole graph as
critical.  Note this makes "zero" mean both "critical" and "undefined".
"""
from __future__ import annotations

import logging

from cpm_slack.graph.adjacency import AdjacencyGraph
from cpm_slack.graph.topological import topological_order

log = logging.getLogger(__name__)

ZERO_SLACK_TOLERANCE = 0.001


def longest_distances(
    graph: AdjacencyGraph, order: list[int]
) -> tuple[list[int], list[int]]:
    """Run the forward and backward passes over *order*.

    Returns (dist_from_start, dist_to_end), both indexed by node id.
    """
    n = graph.node_count

    dist_from_start = [0] * n
    for v in order:
        best = 0
        for u in graph.predecessors(v):
            if dist_from_start[u] > best:
                best = dist_from_start[u]
        dist_from_start[v] = best + 1

    dist_to_end = [0] * n
    for v in reversed(order):
        best = 0
        for w in graph.successors(v):
            if dist_to_end[w] > best:
                best = dist_to_end[w]
        dist_to_end[v] = best + 1

    return dist_from_start, dist_to_end


def compute_slack(graph: AdjacencyGraph) -> list[float]:
    """Slack of every node, indexed by node id.

    Returns [] for an empty graph and all zeros for a cyclic one.
    """
    n = graph.node_count
    if n == 0:
        return []

    order = topological_order(graph)
    if order is None:
        log.debug("graph with %d nodes is cyclic; reporting zero slack", n)
        return [0.0] * n

    dist_from_start, dist_to_end = longest_distances(graph, order)
    through = [dist_from_start[i] + dist_to_end[i] - 1 for i in range(n)]
    critical_length = max(through)
    log.debug("critical length %d over %d nodes", critical_length, n)

    return [float(critical_length - t) for t in through]


def zero_slack_nodes(
    graph: AdjacencyGraph, tolerance: float = ZERO_SLACK_TOLERANCE
) -> list[int]:
    """Ids of nodes on some critical path, ascending."""
    return [i for i, s in enumerate(compute_slack(graph)) if s < tolerance]


def total_float(graph: AdjacencyGraph) -> float:
    """Largest slack in the graph; 0.0 if empty or fully critical."""
    result = 0.0
    for s in compute_slack(graph):
        if s > result:
            result = s
    return result
