# src/core/errors.py — v1
"""Exception hierarchy for fatal pipeline failures.

Every error aborts the run: the CLI maps them to exit code 1 and never
reports a partial score.
"""

from __future__ import annotations

from pathlib import Path


class ModScoreError(Exception):
    """Base class for all modscore failures."""


class InputFileNotFoundError(ModScoreError):
    """Raised when an edge-list or cover file cannot be opened."""

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)
        super().__init__(f"File {path} doesnt exist")


class IncorrectCoverError(ModScoreError):
    """Raised when the cover does not label exactly the graph's nodes."""

    def __init__(self, labelled: int, order: int) -> None:
        self.labelled = labelled
        self.order = order
        super().__init__(
            f"Incorrect cover: {labelled} labelled nodes, graph has {order}"
        )


class UnmappedNodeError(ModScoreError):
    """Raised when an edge references a node absent from the community map."""

    def __init__(self, node: int, edge: tuple[int, int]) -> None:
        self.node = node
        self.edge = edge
        super().__init__(
            f"Edge {edge[0]} {edge[1]} references unmapped node {node}"
        )


class DuplicateNodeError(ModScoreError):
    """Raised when a cover labels the same node twice under the reject policy."""

    def __init__(self, node: int, first_label: int, second_label: int) -> None:
        self.node = node
        self.first_label = first_label
        self.second_label = second_label
        super().__init__(
            f"Node {node} assigned twice (labels {first_label} and {second_label})"
        )


class EmptyGraphError(ModScoreError):
    """Raised when modularity is requested for a graph without edges."""
