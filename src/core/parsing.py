# src/core/parsing.py — v1
"""Token readers shared by the edge-list and cover loaders.

Input is whitespace-separated integers. Reading stops silently at the first
token that is not an integer, like a stream extraction would.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable, Iterator
from pathlib import Path

from modscore.core.errors import InputFileNotFoundError

logger = logging.getLogger(__name__)

_INT_TOKEN = re.compile(r"[+-]?[0-9]+")
_WHITESPACE = re.compile(r"[ \t\n\v\f\r]+")


def read_text(path: str | Path) -> str:
    """Read a whole input file.

    Undecodable bytes become U+FFFD, which the token readers treat as a
    malformed token.

    Raises:
        InputFileNotFoundError: If the file cannot be opened.
    """
    try:
        data = Path(path).read_bytes()
    except OSError as exc:
        logger.debug("Cannot open %s: %s", path, exc)
        raise InputFileNotFoundError(path) from exc
    return data.decode("utf-8", errors="replace")


def split_tokens(text: str) -> list[str]:
    """Split on ASCII whitespace only."""
    return [token for token in _WHITESPACE.split(text) if token]


def read_ints(tokens: Iterable[str]) -> Iterator[int]:
    """Yield integers until the first malformed token.

    Only optionally signed ASCII digit runs are integers.
    """
    for token in tokens:
        if not _INT_TOKEN.fullmatch(token):
            logger.debug("Stopped reading at malformed token %r", token)
            return
        yield int(token)


def read_int_pairs(tokens: Iterable[str]) -> Iterator[tuple[int, int]]:
    """Yield consecutive integer pairs; a dangling odd integer is dropped."""
    ints = read_ints(tokens)
    for first in ints:
        second = next(ints, None)
        if second is None:
            logger.debug("Ignoring dangling token %d", first)
            return
        yield first, second
