"""Shared fixtures for CLI tests."""
from __future__ import annotations

import json
from pathlib import Path

import pytest


@pytest.fixture
def plan_file(tmp_path: Path) -> Path:
    """a -> b -> c critical, d -> e one step short."""
    path = tmp_path / "plan.json"
    path.write_text(json.dumps({
        "nodes": ["a", "b", "c", "d", "e"],
        "edges": [["a", "b"], ["b", "c"], ["d", "e"]],
    }))
    return path


@pytest.fixture
def cyclic_file(tmp_path: Path) -> Path:
    path = tmp_path / "loop.txt"
    path.write_text("a b\nb c\nc a\n")
    return path
