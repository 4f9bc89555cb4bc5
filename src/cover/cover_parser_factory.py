# src/cover/cover_parser_factory.py — v1
"""Factory: instantiate a cover parser from its format name."""

from __future__ import annotations

from modscore.cover.alternate_parser import AlternateCoverParser
from modscore.cover.base_cover_parser import BaseCoverParser, DuplicatePolicy
from modscore.cover.standard_parser import StandardCoverParser

# Registry maps format name → parser class.
_PARSER_REGISTRY: dict[str, type[BaseCoverParser]] = {}


def _register_defaults() -> None:
    """Register built-in parsers."""
    for cls in [StandardCoverParser, AlternateCoverParser]:
        _PARSER_REGISTRY[cls().format_name] = cls


_register_defaults()


class UnsupportedCoverFormatError(ValueError):
    """Raised when no parser is registered for a format."""


def create_cover_parser(
    cover_format: str,
    duplicate_policy: DuplicatePolicy = "overwrite",
) -> BaseCoverParser:
    """Create a cover parser.

    Args:
        cover_format: Registered format name ("standard" or "alternate").
        duplicate_policy: How repeated node assignments are handled.

    Raises:
        UnsupportedCoverFormatError: If no parser is registered.
    """
    cls = _PARSER_REGISTRY.get(cover_format.lower())
    if cls is None:
        raise UnsupportedCoverFormatError(
            f"No cover parser for format {cover_format!r}. "
            f"Supported: {', '.join(supported_formats())}"
        )
    return cls(duplicate_policy=duplicate_policy)


def register_cover_parser(cover_format: str, cls: type[BaseCoverParser]) -> None:
    """Register a custom parser under a format name."""
    _PARSER_REGISTRY[cover_format.lower()] = cls


def supported_formats() -> list[str]:
    """Return list of registered format names."""
    return sorted(_PARSER_REGISTRY)
