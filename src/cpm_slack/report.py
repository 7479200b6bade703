"""Report generation for slack analysis.

analyze() bundles everything the CLI prints into one SlackReport;
format_table() and format_json() render it for the terminal.  The
row limit only trims the table; the JSON document always carries
every node.
"""
from __future__ import annotations

import json
from dataclasses import dataclass

from cpm_slack.graph.adjacency import DiGraph
from cpm_slack.graph.critical_path import critical_path
from cpm_slack.graph.insights import SlackItem, top_slack
from cpm_slack.graph.slack import ZERO_SLACK_TOLERANCE
from cpm_slack.graph.topological import topological_order


@dataclass(slots=True)
class SlackReport:
    """Slack analysis of one graph."""
    node_count: int
    edge_count: int
    cyclic: bool
    items: list[SlackItem]          # ranked, largest slack first
    critical_nodes: list[str]       # ascending id order
    critical_path: list[str]        # empty when cyclic or empty graph
    total_float: float
    top: int = 0                    # table rows to show, 0 for all

    def shown(self) -> list[SlackItem]:
        return self.items[: self.top] if self.top > 0 else self.items


def analyze(
    graph: DiGraph,
    top: int | None = None,
    tolerance: float = ZERO_SLACK_TOLERANCE,
) -> SlackReport:
    ranked = top_slack(graph)
    slack = [0.0] * graph.node_count
    for item in ranked:
        slack[item.node] = item.slack

    cyclic = graph.node_count > 0 and topological_order(graph) is None
    path: list[str] = []
    if graph.node_count and not cyclic:
        path = [graph.label(v) for v in critical_path(graph).path]

    return SlackReport(
        node_count=graph.node_count,
        edge_count=graph.edge_count,
        cyclic=cyclic,
        items=ranked,
        critical_nodes=[
            graph.label(i) for i, s in enumerate(slack) if s < tolerance
        ],
        critical_path=path,
        total_float=max(slack, default=0.0),
        top=top or 0,
    )


def format_table(report: SlackReport) -> str:
    """Format a SlackReport as a readable table."""
    rows = report.shown()
    width = max([len(it.label) for it in rows] + [4])
    lines = [
        f"Nodes:             {report.node_count:,}",
        f"Edges:             {report.edge_count:,}",
        f"Total float:       {report.total_float:.1f}",
    ]
    if report.cyclic:
        lines.append("Cyclic:            yes (all slack reported as 0)")
    if report.critical_path:
        lines.append(f"Critical path:     {' -> '.join(report.critical_path)}")
    lines += [
        "",
        f"{'Node':<{width}} {'Slack':>8}  Critical",
        "-" * (width + 19),
    ]
    critical = set(report.critical_nodes)
    for it in rows:
        mark = "*" if it.label in critical else ""
        lines.append(f"{it.label:<{width}} {it.slack:>8.1f}  {mark}")
    return "\n".join(lines)


def format_json(report: SlackReport) -> str:
    doc = {
        "nodes": report.node_count,
        "edges": report.edge_count,
        "cyclic": report.cyclic,
        "total_float": report.total_float,
        "critical_nodes": report.critical_nodes,
        "critical_path": report.critical_path,
        "slack": {it.label: it.slack for it in report.items},
    }
    return json.dumps(doc, indent=2)
