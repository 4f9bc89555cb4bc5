# src/cover/cluster.py — v1
"""One community of a cover, with its aggregate statistics."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from modscore.graph.graph import Graph


@dataclass
class Cluster:
    """Members of one community plus the counts modularity needs.

    `degree` is accumulated on every add_member() call; `num_edges` stays 0
    until the modularity pass sets it.
    """

    members: set[int] = field(default_factory=set)
    degree: int = 0
    num_edges: int = 0

    def add_member(self, node: int, graph: Graph) -> None:
        """Add a node and accumulate its graph degree."""
        self.members.add(node)
        self.degree += graph.degree(node)

    def increase_edge_count(self) -> None:
        self.num_edges += 1


# label -> Cluster, node -> label
Clusters = dict[int, Cluster]
Community = dict[int, int]
