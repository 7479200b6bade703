"""Extract one concrete critical path.

zero_slack_nodes tells you *which* nodes are critical, but when several
longest paths exist their nodes are all mixed together.  This module
walks the forward distances back from an endpoint to produce a single
source-to-sink chain:

  1.  Run the forward pass (see slack.longest_distances).
  2.  The endpoint is the lowest-id node with the largest distance.
  3.  Step to the lowest-id predecessor whose distance is exactly one
      less, until a node with distance 1 (a source) is reached.
  4.  Reverse.

Every node on the result has zero slack and the path has as many nodes
as the critical length.
"""
from __future__ import annotations

from dataclasses import dataclass

from cpm_slack.graph.adjacency import AdjacencyGraph
from cpm_slack.graph.slack import longest_distances
from cpm_slack.graph.topological import topological_sort


@dataclass(slots=True)
class CriticalPath:
    """One longest path through the graph."""
    path: list[int]
    length: int            # number of nodes on the path


def critical_path(graph: AdjacencyGraph) -> CriticalPath:
    """Find one longest path through *graph*.

    Raises ValueError for an empty graph and CyclicDependencyError (via
    topological_sort) if the graph has a cycle.
    """
    if graph.node_count == 0:
        raise ValueError("Cannot compute critical path of an empty graph")

    order = topological_sort(graph)
    dist, _ = longest_distances(graph, order)

    length = max(dist)
    cur = dist.index(length)
    path = [cur]
    while dist[cur] > 1:
        cur = min(u for u in graph.predecessors(cur) if dist[u] == dist[cur] - 1)
        path.append(cur)
    path.reverse()

    return CriticalPath(path=path, length=length)
