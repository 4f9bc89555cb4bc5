# tests/unit/cover/test_unit_cluster.py — v1
"""Tests for cover/cluster.py."""

from __future__ import annotations

from modscore.cover.cluster import Cluster


class TestCluster:
    def test_defaults(self):
        c = Cluster()
        assert c.members == set()
        assert c.degree == 0
        assert c.num_edges == 0

    def test_add_member_accumulates_degree(self, triangle_pair_graph):
        c = Cluster()
        c.add_member(1, triangle_pair_graph)
        c.add_member(4, triangle_pair_graph)
        assert c.members == {1, 4}
        assert c.degree == 3

    def test_unknown_member_adds_zero_degree(self, triangle_pair_graph):
        c = Cluster()
        c.add_member(99, triangle_pair_graph)
        assert c.degree == 0
        assert 99 not in triangle_pair_graph

    def test_increase_edge_count(self):
        c = Cluster()
        c.increase_edge_count()
        c.increase_edge_count()
        assert c.num_edges == 2
