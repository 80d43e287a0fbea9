"""Text helpers shared by the analyzers."""

from __future__ import annotations

import re
from typing import Iterable

_SENTENCE_END = re.compile(r"[.!?]+")
_SENTENCE_BOUNDARY = re.compile(r"(?<=[.!?])\s+")
_NON_LETTERS = re.compile(r"[^a-z]")

ELLIPSIS = "…"


def words(text: str) -> list[str]:
    """Whitespace-delimited words, empties dropped."""
    return text.split()


def word_count(text: str) -> int:
    return len(text.split())


def split_sentences(text: str, min_chars: int = 0) -> list[str]:
    """Split on runs of . ! ? and keep trimmed pieces longer than min_chars."""
    pieces = (piece.strip() for piece in _SENTENCE_END.split(text))
    return [piece for piece in pieces if len(piece) > min_chars]


def split_on_boundaries(text: str) -> list[str]:
    """Split on whitespace that follows sentence punctuation, keeping the punctuation."""
    return _SENTENCE_BOUNDARY.split(text)


def letters_only(word: str) -> str:
    return _NON_LETTERS.sub("", word.lower())


def truncate(text: str, limit: int = 120) -> str:
    return text if len(text) <= limit else text[:limit] + ELLIPSIS


def unique(items: Iterable[str]) -> list[str]:
    """Order-preserving de-duplication."""
    return list(dict.fromkeys(items))


def unique_casefold(items: Iterable[str]) -> list[str]:
    """Order-preserving, case-insensitive de-duplication. First spelling wins."""
    seen: dict[str, str] = {}
    for item in items:
        seen.setdefault(item.lower(), item)
    return list(seen.values())


def matches(pattern: re.Pattern, text: str) -> list[str]:
    """Every full match of pattern in text, trimmed."""
    return [m.group(0).strip() for m in pattern.finditer(text)]
