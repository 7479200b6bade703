"""CPM slack (total float) analysis for directed graphs."""

from cpm_slack.graph import (
    DiGraph,
    compute_slack,
    total_float,
    zero_slack_nodes,
)

__version__ = "0.1.0"

__all__ = [
    "DiGraph",
    "compute_slack",
    "total_float",
    "zero_slack_nodes",
]
