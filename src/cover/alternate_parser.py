# src/cover/alternate_parser.py — v1
"""Alternate cover format: one community per line.

The label of a community is its 0-based line index. Members are read until
a -1 sentinel, a malformed token or the end of the line. An empty line still
produces an (empty) cluster and consumes its label.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from modscore.core.parsing import read_ints, split_tokens
from modscore.cover.base_cover_parser import BaseCoverParser
from modscore.cover.cluster import Cluster, Clusters, Community

if TYPE_CHECKING:
    from modscore.graph.graph import Graph

SENTINEL = -1


def _split_lines(text: str) -> list[str]:
    """Split on line feeds only; a final line feed does not start another line."""
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return lines


class AlternateCoverParser(BaseCoverParser):
    """Line-indexed, multi-member-per-line cover format."""

    @property
    def format_name(self) -> str:
        return "alternate"

    def parse(self, text: str, graph: Graph) -> tuple[Clusters, Community]:
        clusters: Clusters = {}
        community: Community = {}
        for label, line in enumerate(_split_lines(text)):
            clusters.setdefault(label, Cluster())
            for node in read_ints(split_tokens(line)):
                if node == SENTINEL:
                    break
                self._assign(clusters, community, node, label, graph)
        return clusters, community
