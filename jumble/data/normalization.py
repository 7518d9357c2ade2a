"""Shared helpers for word normalization."""

from __future__ import annotations

from typing import Optional


def normalize_word(text: Optional[str]) -> str:
    """Return the lower-cased form of ``text`` used for dictionary lookups.

    Case-folding follows the host ``str.lower`` rules, which can change the
    length of a word (``"İ".lower()`` yields two code points).
    """

    if not text:
        return ""
    return text.lower()


def normalize_line(line: str) -> str:
    """Normalize one word-list line, dropping surrounding whitespace."""

    return normalize_word(line.strip())


__all__ = ["normalize_word", "normalize_line"]
