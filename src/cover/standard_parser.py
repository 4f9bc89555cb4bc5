# src/cover/standard_parser.py — v1
"""Standard cover format: `node label` integer pairs."""

from __future__ import annotations

from typing import TYPE_CHECKING

from modscore.core.parsing import read_int_pairs, split_tokens
from modscore.cover.base_cover_parser import BaseCoverParser
from modscore.cover.cluster import Clusters, Community

if TYPE_CHECKING:
    from modscore.graph.graph import Graph


class StandardCoverParser(BaseCoverParser):
    """One `node label` pair per record, read until the first malformed token."""

    @property
    def format_name(self) -> str:
        return "standard"

    def parse(self, text: str, graph: Graph) -> tuple[Clusters, Community]:
        clusters: Clusters = {}
        community: Community = {}
        for node, label in read_int_pairs(split_tokens(text)):
            self._assign(clusters, community, node, label, graph)
        return clusters, community
