# src/cover/base_cover_parser.py — v1
"""Abstract cover parser interface.

A parser turns the text of a cover file into the label -> Cluster and
node -> label mappings. Subclasses only decide how (node, label) pairs are
laid out in the text; assignment and the duplicate policy live here.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Literal

from modscore.core.errors import DuplicateNodeError
from modscore.cover.cluster import Cluster, Clusters, Community

if TYPE_CHECKING:
    from modscore.graph.graph import Graph

logger = logging.getLogger(__name__)

DuplicatePolicy = Literal["overwrite", "reject"]


class BaseCoverParser(ABC):
    """Unified interface for cover file formats.

    Args:
        duplicate_policy: "overwrite" keeps the last label seen for a node
            (the node stays a member of every cluster it was added to);
            "reject" raises DuplicateNodeError on the second assignment.
    """

    def __init__(self, duplicate_policy: DuplicatePolicy = "overwrite") -> None:
        self.duplicate_policy = duplicate_policy

    @property
    @abstractmethod
    def format_name(self) -> str:
        """Name this parser is registered under (e.g. 'standard')."""

    @abstractmethod
    def parse(self, text: str, graph: Graph) -> tuple[Clusters, Community]:
        """Parse cover text into clusters and the node -> label map."""

    def _assign(
        self,
        clusters: Clusters,
        community: Community,
        node: int,
        label: int,
        graph: Graph,
    ) -> None:
        previous = community.get(node)
        if previous is not None:
            if self.duplicate_policy == "reject":
                raise DuplicateNodeError(node, previous, label)
            logger.warning(
                "Node %d relabelled from %d to %d; it stays a member of both clusters",
                node, previous, label,
            )
        clusters.setdefault(label, Cluster()).add_member(node, graph)
        community[node] = label
