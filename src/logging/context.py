# src/logging/context.py — v2
"""Contextual logging support: attach run_id, phase and input file to log records."""

from __future__ import annotations

import contextvars
from dataclasses import dataclass
from typing import Any

# Context variables for structured logging, set per run and per phase.
_run_id: contextvars.ContextVar[str | None] = contextvars.ContextVar(
    "run_id", default=None
)
_phase: contextvars.ContextVar[str | None] = contextvars.ContextVar(
    "phase", default=None
)
_input_file: contextvars.ContextVar[str | None] = contextvars.ContextVar(
    "input_file", default=None
)


@dataclass
class LogContext:
    """Immutable snapshot of current logging context."""

    run_id: str | None = None
    phase: str | None = None
    input_file: str | None = None

    def as_dict(self) -> dict[str, Any]:
        """Return non-None fields as dict for JSON log injection."""
        return {k: v for k, v in self.__dict__.items() if v is not None}


def get_context() -> LogContext:
    """Snapshot current context variables."""
    return LogContext(
        run_id=_run_id.get(),
        phase=_phase.get(),
        input_file=_input_file.get(),
    )


def set_run_context(run_id: str) -> None:
    """Set run-level context (called once per pipeline run)."""
    _run_id.set(run_id)


def set_phase_context(phase: str, input_file: str | None = None) -> None:
    """Set phase-level context (graph_read, cover_read, modularity)."""
    _phase.set(phase)
    _input_file.set(input_file)


def clear_context() -> None:
    """Reset all context variables."""
    _run_id.set(None)
    _phase.set(None)
    _input_file.set(None)
