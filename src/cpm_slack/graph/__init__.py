"""Graph algorithms for critical path slack analysis."""

from cpm_slack.graph.adjacency import AdjacencyGraph, DiGraph
from cpm_slack.graph.critical_path import CriticalPath, critical_path
from cpm_slack.graph.insights import SlackItem, slack_by_label, top_slack
from cpm_slack.graph.io import GraphFormatError, graph_from_edges, load_graph
from cpm_slack.graph.slack import (
    ZERO_SLACK_TOLERANCE,
    compute_slack,
    total_float,
    zero_slack_nodes,
)
from cpm_slack.graph.topological import (
    CyclicDependencyError,
    topological_order,
    topological_sort,
)

__all__ = [
    "AdjacencyGraph",
    "CriticalPath",
    "CyclicDependencyError",
    "DiGraph",
    "GraphFormatError",
    "SlackItem",
    "ZERO_SLACK_TOLERANCE",
    "compute_slack",
    "critical_path",
    "graph_from_edges",
    "load_graph",
    "slack_by_label",
    "top_slack",
    "topological_order",
    "topological_sort",
    "total_float",
    "zero_slack_nodes",
]
