# src/modularity/engine.py — v1
"""Disjoint modularity of a cover (Newman's formula).

    Q = sum over clusters c of  e_c / m - (d_c / 2m)^2

where e_c is the number of intra-cluster edge records, d_c the cluster's
degree sum and m the number of edge records of the graph.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import networkx as nx

from modscore.core.errors import EmptyGraphError, UnmappedNodeError
from modscore.cover.cluster import Clusters, Community

if TYPE_CHECKING:
    from modscore.graph.graph import Graph

logger = logging.getLogger(__name__)


def _label_of(community: Community, node: int, edge: tuple[int, int]) -> int:
    try:
        return community[node]
    except KeyError:
        raise UnmappedNodeError(node, edge) from None


def count_intra_edges(graph: Graph, clusters: Clusters, community: Community) -> None:
    """Recount each cluster's num_edges from the edge records.

    Counts restart from 0, so repeated passes give the same result.

    Raises:
        UnmappedNodeError: If an edge endpoint has no community label.
    """
    for cluster in clusters.values():
        cluster.num_edges = 0

    for edge in graph.edges():
        u_comm = _label_of(community, edge[0], edge)
        v_comm = _label_of(community, edge[1], edge)
        if u_comm == v_comm:
            clusters[u_comm].increase_edge_count()


def compute_modularity(graph: Graph, clusters: Clusters, community: Community) -> float:
    """Modularity of the partition described by clusters/community.

    Every cluster contributes, including empty ones (which contribute 0).
    The result is neither rounded nor clamped.

    Raises:
        EmptyGraphError: If the graph has no edges.
        UnmappedNodeError: If an edge endpoint has no community label.
    """
    m = graph.size()
    # An empty cover over an empty graph would otherwise sum to 0.0 and be
    # reported as a score.
    if m == 0:
        raise EmptyGraphError("Graph has no edges; modularity is undefined")

    count_intra_edges(graph, clusters, community)

    mod = 0.0
    two_m = 2.0 * m
    for cluster in clusters.values():
        mod += cluster.num_edges / float(m) - (cluster.degree / two_m) ** 2

    logger.debug("Modularity over %d clusters: %r", len(clusters), mod)
    return mod


def reference_modularity(graph: Graph, community: Community) -> float:
    """Modularity computed by networkx, for cross-checking.

    networkx counts parallel edges and self-loops in node degrees, so the two
    values only coincide on simple graphs.
    """
    if not graph.is_simple():
        logger.warning(
            "Graph has self-loops or parallel edges; networkx value is not comparable"
        )
    groups: dict[int, set[int]] = {}
    for node, label in community.items():
        if node in graph:
            groups.setdefault(label, set()).add(node)
    return nx.algorithms.community.modularity(graph.to_networkx(), list(groups.values()))


def check_invariants(graph: Graph, clusters: Clusters) -> list[str]:
    """Describe violated consistency checks between graph and clusters.

    Both checks hold for simple graphs with a cover that labels each node
    once; otherwise they may legitimately fail, so callers only report them.
    """
    violations: list[str] = []
    m = graph.size()

    degree_sum = sum(c.degree for c in clusters.values())
    if degree_sum != 2 * m:
        violations.append(f"sum of cluster degrees {degree_sum} != 2m = {2 * m}")

    intra_sum = sum(c.num_edges for c in clusters.values())
    if intra_sum > m:
        violations.append(f"sum of intra-cluster edges {intra_sum} > m = {m}")

    for violation in violations:
        logger.warning("Invariant violated: %s", violation)
    return violations
