"""Loading graphs from edge-list files.

Two formats are understood:

* ``.json``: ``{"nodes": ["a", ...], "edges": [["a", "b"], ...]}``.
  ``nodes`` is optional and only needed for isolated nodes or to fix
  the id order.
* anything else: plain text, one ``src dst`` edge or one lone ``node``
  per line.  Blank lines are skipped; a ``#`` at the start of a line
  or after whitespace starts a comment, so labels may contain ``#``.

Ids are assigned in order of first appearance, listed nodes first.
"""
from __future__ import annotations

import json
import re
from pathlib import Path
from typing import Any, Iterable

from cpm_slack.graph.adjacency import DiGraph


class GraphFormatError(ValueError):
    """Raised when a graph file cannot be parsed."""


_COMMENT = re.compile(r"(?:^|\s)#")


def graph_from_edges(
    edges: Iterable[tuple[str, str]], nodes: Iterable[str] = ()
) -> DiGraph:
    """Build a DiGraph from label pairs."""
    g = DiGraph()
    for label in nodes:
        g.ensure_node(label)
    for src, dst in edges:
        g.add_edge(g.ensure_node(src), g.ensure_node(dst))
    return g


def load_graph(path: str | Path) -> DiGraph:
    """Load a graph from *path*, picking the format by file suffix."""
    path = Path(path)
    text = path.read_text(encoding="utf-8")
    if path.suffix.lower() == ".json":
        return _parse_json(text, path)
    return _parse_text(text, path)


def _parse_json(text: str, path: Path) -> DiGraph:
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise GraphFormatError(f"{path}: invalid JSON ({exc.msg})") from exc
    except RecursionError as exc:
        raise GraphFormatError(f"{path}: JSON nested too deeply") from exc
    _validate_json(data, path)
    edges = [(str(src), str(dst)) for src, dst in data["edges"]]
    nodes = [str(n) for n in data.get("nodes", [])]
    return graph_from_edges(edges, nodes)


def _validate_json(data: Any, path: Path) -> None:
    if not isinstance(data, dict):
        raise GraphFormatError(f"{path}: top level must be an object")
    if "edges" not in data:
        raise GraphFormatError(f"{path}: missing 'edges'")
    if not isinstance(data["edges"], list):
        raise GraphFormatError(f"{path}: 'edges' must be a list")
    if not isinstance(data.get("nodes", []), list):
        raise GraphFormatError(f"{path}: 'nodes' must be a list")
    for i, edge in enumerate(data["edges"]):
        if not isinstance(edge, list) or len(edge) != 2:
            raise GraphFormatError(
                f"{path}: edge {i} must be a [src, dst] pair"
            )
        if not all(_is_label(end) for end in edge):
            raise GraphFormatError(
                f"{path}: edge {i} endpoints must be strings or integers"
            )
    for i, node in enumerate(data.get("nodes", [])):
        if not _is_label(node):
            raise GraphFormatError(
                f"{path}: node {i} must be a string or integer"
            )


def _is_label(value: Any) -> bool:
    # bool is an int subclass but true/false are not labels
    return isinstance(value, str) or (
        isinstance(value, int) and not isinstance(value, bool)
    )


def _parse_text(text: str, path: Path) -> DiGraph:
    g = DiGraph()
    for lineno, raw in enumerate(text.splitlines(), start=1):
        line = _COMMENT.split(raw, maxsplit=1)[0].strip()
        if not line:
            continue
        parts = line.split()
        if len(parts) == 1:
            g.ensure_node(parts[0])
        elif len(parts) == 2:
            g.add_edge(g.ensure_node(parts[0]), g.ensure_node(parts[1]))
        else:
            raise GraphFormatError(
                f"{path}:{lineno}: expected 'src dst' or 'node', "
                f"got {len(parts)} fields"
            )
    return g
