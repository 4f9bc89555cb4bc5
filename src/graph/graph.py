# src/graph/graph.py — v1
"""Undirected graph loaded from an edge list.

Each edge record is kept as-is: self-loops and parallel edges count towards
size() while adjacency sets deduplicate neighbors, so degree(node) is the
number of distinct neighbors.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from pathlib import Path

import networkx as nx

from modscore.core.parsing import read_int_pairs, read_text, split_tokens

logger = logging.getLogger(__name__)


class Graph:
    """Adjacency sets plus the ordered list of edge records."""

    def __init__(self) -> None:
        self._adj: dict[int, set[int]] = {}
        self._edges: list[tuple[int, int]] = []

    @classmethod
    def from_edges(cls, edges: Iterable[tuple[int, int]]) -> Graph:
        """Build a graph from (u, v) pairs."""
        graph = cls()
        for u, v in edges:
            graph._add_edge(u, v)
        return graph

    def _add_edge(self, u: int, v: int) -> None:
        self._adj.setdefault(u, set()).add(v)
        self._adj.setdefault(v, set()).add(u)
        self._edges.append((u, v))

    def degree(self, node: int) -> int:
        """Number of distinct neighbors; 0 for unknown nodes."""
        return len(self._adj.get(node, ()))

    def neighbors(self, node: int) -> set[int]:
        """Copy of the neighbor set; empty for unknown nodes."""
        return set(self._adj.get(node, ()))

    def edges(self) -> list[tuple[int, int]]:
        """Edge records in input order."""
        return self._edges

    def nodes(self) -> Iterator[int]:
        return iter(self._adj)

    def size(self) -> int:
        """|E|, counting every edge record."""
        return len(self._edges)

    def order(self) -> int:
        """|V|, the number of distinct node ids seen in any edge."""
        return len(self._adj)

    def is_simple(self) -> bool:
        """True when there are no self-loops and no repeated edges."""
        seen: set[frozenset[int]] = set()
        for u, v in self._edges:
            key = frozenset((u, v))
            if u == v or key in seen:
                return False
            seen.add(key)
        return True

    def to_networkx(self) -> nx.MultiGraph:
        """Equivalent networkx multigraph, one edge per record."""
        nx_graph = nx.MultiGraph()
        nx_graph.add_nodes_from(self._adj)
        nx_graph.add_edges_from(self._edges)
        return nx_graph

    def __contains__(self, node: object) -> bool:
        return node in self._adj

    def __repr__(self) -> str:
        return f"Graph(n={self.order()}, m={self.size()})"


def load_graph(path: str | Path) -> Graph:
    """Read an edge list of whitespace-separated `u v` integer pairs.

    Args:
        path: Edge-list file.

    Returns:
        Loaded Graph.

    Raises:
        InputFileNotFoundError: If the file cannot be opened.
    """
    text = read_text(path)
    graph = Graph.from_edges(read_int_pairs(split_tokens(text)))
    logger.info("Read graph from %s: n=%d, m=%d", path, graph.order(), graph.size())
    return graph
