"""Shared fixtures for graph and slack tests."""
from __future__ import annotations

import pytest

from cpm_slack.graph.adjacency import DiGraph


def _build(labels: str, edges: list[str]) -> DiGraph:
    """Nodes named by the letters of *labels*, edges written as "ab"."""
    g = DiGraph()
    for label in labels:
        g.add_node(label)
    for edge in edges:
        g.add_edge(g.index_of(edge[0]), g.index_of(edge[1]))
    return g


@pytest.fixture
def empty_graph() -> DiGraph:
    return DiGraph()


@pytest.fixture
def chain_graph() -> DiGraph:
    """a -> b -> c"""
    return _build("abc", ["ab", "bc"])


@pytest.fixture
def parallel_chains() -> DiGraph:
    """
    a -> b -> c
    d -> e
    """
    return _build("abcde", ["ab", "bc", "de"])


@pytest.fixture
def diamond_graph() -> DiGraph:
    """
    a -> b -> d
    a -> c -> d
    """
    return _build("abcd", ["ab", "ac", "bd", "cd"])


@pytest.fixture
def cyclic_graph() -> DiGraph:
    """a -> b -> c -> a"""
    return _build("abc", ["ab", "bc", "ca"])


@pytest.fixture
def branching_graph() -> DiGraph:
    """
    a -> b -> f
    a -> c -> d -> e
    """
    return _build("abcdef", ["ab", "ac", "bf", "cd", "de"])


@pytest.fixture
def make_graph():
    """Factory fixture: make_graph("abc", ["ab", "bc"])."""
    return _build
