"""Output helpers for anagram results."""

from __future__ import annotations

import sys
from typing import Iterable, List


def format_results(words: Iterable[str], *, sort: bool = False) -> List[str]:
    lines = list(words)
    if sort:
        lines.sort()
    return lines


def print_results(words: Iterable[str], *, sort: bool = False, stream=None) -> None:
    """Print one word per line; order follows the set unless ``sort`` is given."""

    stream = stream or sys.stdout
    for word in format_results(words, sort=sort):
        print(word, file=stream)
