# src/core/models.py — v2
"""Shared Pydantic models for run results.

Graph and Cluster stay plain mutable classes; only the final, read-only
report crosses module boundaries as a validated model.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field


class PhaseTimings(BaseModel):
    """Elapsed wall-clock seconds per pipeline phase."""

    graph_read_s: float = 0.0
    cover_read_s: float = 0.0
    modularity_s: float = 0.0
    total_s: float = 0.0


class ModularityReport(BaseModel):
    """Outcome of a full graph -> cover -> modularity run."""

    edge_list: str
    cover: str
    cover_format: Literal["standard", "alternate"] = "standard"
    order: int = Field(ge=0, description="Number of distinct nodes (n).")
    size: int = Field(ge=0, description="Number of edge records (m).")
    num_clusters: int = Field(ge=0)
    modularity: float
    reference_modularity: float | None = None
    timings: PhaseTimings = Field(default_factory=PhaseTimings)
    invariant_violations: list[str] = Field(default_factory=list)
