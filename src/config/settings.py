# src/config/settings.py — v2
"""Typed configuration loaded from .env via pydantic-settings.

CLI flags are applied on top through load_settings(**overrides).
"""

from __future__ import annotations

from pathlib import Path
from typing import Literal

from pydantic import field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from modscore.core.errors import ModScoreError


class ConfigurationError(ModScoreError):
    """Raised when configuration is internally inconsistent."""


class Settings(BaseSettings):
    """Application settings loaded from .env file."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="MODSCORE_",
        extra="ignore",
    )

    # === Cover parsing ===
    cover_format: Literal["standard", "alternate"] = "standard"
    duplicate_policy: Literal["overwrite", "reject"] = "overwrite"

    # === Computation ===
    check_invariants: bool = True
    cross_check: bool = False

    # === Output ===
    timing_enabled: bool = False
    output_format: Literal["text", "json"] = "text"
    score_precision: int = 6

    # === Logging ===
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "WARNING"
    log_format: Literal["json", "text"] = "text"
    log_file: Path | None = None
    log_rotation: str = "10MB"
    log_retention: int = 5

    # --- Validators ---

    @field_validator("score_precision")
    @classmethod
    def validate_score_precision(cls, v: int) -> int:
        """A double carries at most 17 significant digits."""
        if not 1 <= v <= 17:
            raise ValueError("score_precision must be between 1 and 17")
        return v

    @model_validator(mode="after")
    def validate_config_consistency(self) -> Settings:
        """Validate cross-field consistency rules."""
        errors: list[str] = []

        if self.log_retention < 0:
            errors.append("LOG_RETENTION must be >= 0")

        if self.log_file is not None:
            from modscore.logging.handlers import parse_size

            try:
                parse_size(self.log_rotation)
            except ValueError as exc:
                errors.append(f"LOG_ROTATION invalid: {exc}")

        if errors:
            raise ConfigurationError("; ".join(errors))

        return self

    # --- Helpers ---

    def format_score(self, value: float) -> str:
        """Render a float with score_precision significant digits."""
        return f"{value:.{self.score_precision}g}"


def load_settings(**overrides: object) -> Settings:
    """Load settings from .env with optional overrides.

    Args:
        **overrides: Field-level overrides (CLI flags or tests).

    Returns:
        Validated Settings instance.

    Raises:
        ConfigurationError: If configuration is internally inconsistent.
    """
    return Settings(**overrides)  # type: ignore[arg-type]
