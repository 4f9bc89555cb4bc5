# tests/conftest.py — v2
"""Shared test fixtures: small edge lists and covers written to tmp_path."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest

from modscore.graph.graph import Graph

# Triangle 1-2-3 plus the pair 4-5.
TRIANGLE_PAIR_EDGES = "1 2\n2 3\n3 1\n4 5\n"
TRIANGLE_PAIR_COVER = "1 0\n2 0\n3 0\n4 1\n5 1\n"


@pytest.fixture
def write_file(tmp_path: Path) -> Callable[[str, str], Path]:
    """Write text to tmp_path/<name> and return the path."""

    def _write(name: str, content: str) -> Path:
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def triangle_pair_graph() -> Graph:
    return Graph.from_edges([(1, 2), (2, 3), (3, 1), (4, 5)])


@pytest.fixture
def edge_list_file(write_file: Callable[[str, str], Path]) -> Path:
    return write_file("edges.txt", TRIANGLE_PAIR_EDGES)


@pytest.fixture
def cover_file(write_file: Callable[[str, str], Path]) -> Path:
    return write_file("cover.txt", TRIANGLE_PAIR_COVER)


@pytest.fixture
def alternate_cover_file(write_file: Callable[[str, str], Path]) -> Path:
    return write_file("cover_alt.txt", "1 2 3 -1\n4 5\n")
