"""Directed graph over dense integer node ids.

Nodes are numbered 0..n in insertion order, so per-node results can be
kept in plain lists instead of dicts.  Each node also carries a string
label; labels are unique and ``index_of`` maps a label back to its id.
That gives callers with named tasks a bijection onto the dense id space
the slack engine works in.

Storage is two lists of adjacency lists: ``_fwd[v]`` holds successors,
``_rev[v]`` holds predecessors, so both directions are O(1) to reach.
"""
from __future__ import annotations

from typing import Iterator, Protocol, Sequence


class AdjacencyGraph(Protocol):
    """What the orderer and slack engine need from a graph.

    Node ids must be exactly ``range(node_count)``.
    """

    @property
    def node_count(self) -> int: ...

    def predecessors(self, node: int) -> Sequence[int]: ...

    def successors(self, node: int) -> Sequence[int]: ...

    def in_degree(self, node: int) -> int: ...


class DiGraph:
    """Directed graph backed by adjacency lists indexed by node id."""

    __slots__ = ("_fwd", "_rev", "_labels", "_index")

    def __init__(self) -> None:
        self._fwd: list[list[int]] = []
        self._rev: list[list[int]] = []
        self._labels: list[str] = []
        self._index: dict[str, int] = {}

    # ---- mutation --------------------------------------------------------

    def add_node(self, label: str | None = None) -> int:
        """Append a node and return its id.

        Without a label the node is named after its id, with a leading
        underscore added while that name is already taken.  Raises
        ValueError if an explicit *label* is already taken.
        """
        node = len(self._fwd)
        if label is None:
            label = str(node)
            while label in self._index:
                label = f"_{label}"
        elif label in self._index:
            raise ValueError(f"Duplicate node label {label!r}")
        self._fwd.append([])
        self._rev.append([])
        self._labels.append(label)
        self._index[label] = node
        return node

    def ensure_node(self, label: str) -> int:
        """Return the id for *label*, adding the node if it is new."""
        node = self._index.get(label)
        if node is None:
            node = self.add_node(label)
        return node

    def add_edge(self, src: int, dst: int) -> None:
        """Add a directed edge src -> dst between existing nodes.

        Duplicate edges are allowed; they never change a longest path.
        """
        self._check(src)
        self._check(dst)
        self._fwd[src].append(dst)
        self._rev[dst].append(src)

    def _check(self, node: int) -> None:
        if not 0 <= node < len(self._fwd):
            raise ValueError(f"Node {node!r} not found")

    # ---- queries ---------------------------------------------------------

    def has_edge(self, src: int, dst: int) -> bool:
        return 0 <= src < len(self._fwd) and dst in self._fwd[src]

    def successors(self, node: int) -> list[int]:
        """Direct successors (neighbors along outgoing edges)."""
        return list(self._fwd[node])

    def predecessors(self, node: int) -> list[int]:
        """Direct predecessors (nodes with an edge into *node*)."""
        return list(self._rev[node])

    def in_degree(self, node: int) -> int:
        return len(self._rev[node])

    def out_degree(self, node: int) -> int:
        return len(self._fwd[node])

    def label(self, node: int) -> str:
        return self._labels[node]

    def index_of(self, label: str) -> int:
        """Id of the node named *label*.  Raises KeyError if unknown."""
        try:
            return self._index[label]
        except KeyError:
            raise KeyError(f"Unknown node label {label!r}") from None

    def nodes(self) -> Iterator[int]:
        return iter(range(len(self._fwd)))

    def edges(self) -> Iterator[tuple[int, int]]:
        for src, dsts in enumerate(self._fwd):
            for dst in dsts:
                yield src, dst

    @property
    def labels(self) -> list[str]:
        return list(self._labels)

    @property
    def node_count(self) -> int:
        return len(self._fwd)

    @property
    def edge_count(self) -> int:
        return sum(len(dsts) for dsts in self._fwd)

    # ---- dunder ----------------------------------------------------------

    def __contains__(self, label: object) -> bool:
        return label in self._index

    def __len__(self) -> int:
        return self.node_count

    def __repr__(self) -> str:
        return f"DiGraph(nodes={self.node_count}, edges={self.edge_count})"
