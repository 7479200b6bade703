"""Tests for extracting a single critical path."""
from __future__ import annotations

import random

import pytest

from cpm_slack.graph.adjacency import DiGraph
from cpm_slack.graph.critical_path import CriticalPath, critical_path
from cpm_slack.graph.slack import compute_slack
from cpm_slack.graph.topological import CyclicDependencyError


class TestCriticalPath:
    def test_single_node(self, make_graph) -> None:
        result = critical_path(make_graph("a", []))
        assert result == CriticalPath(path=[0], length=1)

    def test_chain(self, chain_graph: DiGraph) -> None:
        result = critical_path(chain_graph)
        assert result.path == [0, 1, 2]
        assert result.length == 3

    def test_parallel_chains_picks_longer(self, parallel_chains: DiGraph) -> None:
        assert critical_path(parallel_chains).path == [0, 1, 2]

    def test_diamond_picks_lowest_id_branch(self, diamond_graph: DiGraph) -> None:
        assert critical_path(diamond_graph).path == [0, 1, 3]

    def test_branches_of_different_length(self, branching_graph: DiGraph) -> None:
        g = branching_graph
        labels = [g.label(v) for v in critical_path(g).path]
        assert labels == ["a", "c", "d", "e"]

    def test_ignores_shortcut(self, make_graph) -> None:
        g = make_graph("abc", ["ac", "ab", "bc"])
        assert critical_path(g).path == [0, 1, 2]

    def test_empty_graph_raises(self, empty_graph: DiGraph) -> None:
        with pytest.raises(ValueError, match="empty graph"):
            critical_path(empty_graph)

    def test_cyclic_graph_raises(self, cyclic_graph: DiGraph) -> None:
        with pytest.raises(CyclicDependencyError):
            critical_path(cyclic_graph)

    @pytest.mark.parametrize("seed", range(10))
    def test_path_is_zero_slack_and_connected(self, seed: int) -> None:
        rng = random.Random(seed)
        g = DiGraph()
        for _ in range(30):
            g.add_node()
        for i in range(30):
            for j in range(i + 1, 30):
                if rng.random() < 0.1:
                    g.add_edge(i, j)
        result = critical_path(g)
        slack = compute_slack(g)
        assert len(result.path) == result.length
        assert g.predecessors(result.path[0]) == []
        assert g.successors(result.path[-1]) == []
        for v in result.path:
            assert slack[v] == 0.0
        for u, v in zip(result.path, result.path[1:]):
            assert g.has_edge(u, v)
