# src/cover/loader.py — v1
"""Load a cover file and validate it against the graph."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING

from modscore.core.errors import IncorrectCoverError
from modscore.core.parsing import read_text
from modscore.cover.base_cover_parser import DuplicatePolicy
from modscore.cover.cluster import Clusters, Community
from modscore.cover.cover_parser_factory import create_cover_parser

if TYPE_CHECKING:
    from modscore.graph.graph import Graph

logger = logging.getLogger(__name__)


def load_cover(
    path: str | Path,
    graph: Graph,
    cover_format: str = "standard",
    duplicate_policy: DuplicatePolicy = "overwrite",
) -> tuple[Clusters, Community]:
    """Read a cover and build its clusters.

    Only cardinalities are cross-checked: the cover must label exactly as
    many distinct nodes as the graph has.

    Args:
        path: Cover file.
        graph: Graph the cover partitions; supplies member degrees.
        cover_format: "standard" or "alternate".
        duplicate_policy: "overwrite" or "reject".

    Returns:
        (label -> Cluster, node -> label).

    Raises:
        InputFileNotFoundError: If the file cannot be opened.
        IncorrectCoverError: If the labelled node count differs from graph.order().
        DuplicateNodeError: On a repeated node under the reject policy.
    """
    parser = create_cover_parser(cover_format, duplicate_policy)
    clusters, community = parser.parse(read_text(path), graph)

    if len(community) != graph.order():
        raise IncorrectCoverError(len(community), graph.order())

    logger.info(
        "Read %d clusters covering %d nodes from %s (%s format)",
        len(clusters), len(community), path, parser.format_name,
    )
    return clusters, community
