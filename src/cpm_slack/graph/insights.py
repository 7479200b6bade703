"""Slack rankings keyed by node label.

High slack marks the flexible parts of a plan: work that can be started
late or run in parallel without moving the finish line.
"""
from __future__ import annotations

from dataclasses import dataclass

from cpm_slack.graph.adjacency import DiGraph
from cpm_slack.graph.slack import compute_slack


@dataclass(slots=True, frozen=True)
class SlackItem:
    node: int
    label: str
    slack: float


def slack_by_label(graph: DiGraph) -> dict[str, float]:
    return {graph.label(i): s for i, s in enumerate(compute_slack(graph))}


def top_slack(graph: DiGraph, limit: int | None = None) -> list[SlackItem]:
    """Nodes sorted by slack, largest first, ties by label.

    A *limit* of None or <= 0 returns every node.
    """
    items = [
        SlackItem(node=i, label=graph.label(i), slack=s)
        for i, s in enumerate(compute_slack(graph))
    ]
    items.sort(key=lambda it: (-it.slack, it.label))
    if limit is not None and limit > 0:
        return items[:limit]
    return items
