"""Permutation enumeration and dictionary matching.

Permutations of a string of length ``n`` are built from the permutations of
its first ``n - 1`` characters by inserting the last character at every
position. Every suffix ``text[i:]`` of the input is expanded this way, so a
suffix of length ``n`` costs ``n!`` candidates and the whole run stays
``O(n!)`` for the longest suffix.
"""

from __future__ import annotations

import concurrent.futures
from dataclasses import dataclass
from typing import Container, Iterable, List, Optional, Set

from ..core.exceptions import InputTooLongError
from ..data.normalization import normalize_word
from ..utils.logger import get_logger

LOGGER = get_logger(__name__)


@dataclass
class EnumeratorConfig:
    """Tuning knobs for :class:`AnagramEnumerator`."""

    workers: int = 1
    substrings: bool = False
    max_length: Optional[int] = None


def _expand(
    text: str,
    dictionary: Optional[Container[str]],
    matches: Set[str],
    min_match_length: int,
) -> List[str]:
    n = len(text)
    check = dictionary is not None and n >= min_match_length
    if n == 1:
        if check and text in dictionary:
            matches.add(text)
        return [text]

    last_char = text[-1]
    permutations = []
    for perm in _expand(text[:-1], dictionary, matches, min_match_length):
        for i in range(len(perm) + 1):
            candidate = perm[:i] + last_char + perm[i:]
            if check and candidate in dictionary:
                matches.add(candidate)
            permutations.append(candidate)
    return permutations


def permutations(text: str) -> List[str]:
    """Return every insertion-built rearrangement of ``text``.

    Duplicates are kept, so the list always holds ``len(text)!`` entries.
    """

    if not text:
        return []
    return _expand(text, None, set(), len(text))


def suffix_anagrams(
    suffix: str,
    dictionary: Container[str],
    substrings: bool = False,
) -> Set[str]:
    """Return the dictionary words that rearrange ``suffix``.

    With ``substrings`` the shorter intermediate permutation sets are matched
    as well, which also reports rearrangements of every prefix of ``suffix``.
    """

    matches: Set[str] = set()
    if not suffix:
        return matches
    min_match_length = 1 if substrings else len(suffix)
    _expand(suffix, dictionary, matches, min_match_length)
    LOGGER.debug("Suffix %r produced %s match(es)", suffix, len(matches))
    return matches


def find_anagrams(
    text: Optional[str],
    dictionary: Container[str],
    substrings: bool = False,
) -> Set[str]:
    """Return dictionary words that are anagrams of ``text`` or of its suffixes.

    ``text`` is lower-cased first; ``dictionary`` is expected to hold
    lower-cased words already.
    """

    text = normalize_word(text)
    result: Set[str] = set()
    for i in range(len(text)):
        result |= suffix_anagrams(text[i:], dictionary, substrings)
    return result


class AnagramEnumerator:
    """Reusable enumerator bound to one dictionary.

    With ``workers > 1`` each suffix is expanded in its own process and the
    per-suffix result sets are merged by union.
    """

    def __init__(
        self,
        dictionary: Container[str],
        config: Optional[EnumeratorConfig] = None,
    ) -> None:
        self.dictionary = dictionary
        self.config = config or EnumeratorConfig()

    def find(self, text: Optional[str]) -> Set[str]:
        text = normalize_word(text)
        max_length = self.config.max_length
        if max_length is not None and len(text) > max_length:
            raise InputTooLongError(
                f"Input has {len(text)} characters; the limit is {max_length}"
            )

        suffixes = [text[i:] for i in range(len(text))]
        if self.config.workers <= 1 or len(suffixes) <= 1:
            return self._find_sequential(suffixes)
        return self._find_parallel(suffixes)

    def _find_sequential(self, suffixes: Iterable[str]) -> Set[str]:
        result: Set[str] = set()
        for suffix in suffixes:
            result |= suffix_anagrams(suffix, self.dictionary, self.config.substrings)
        return result

    def _find_parallel(self, suffixes: List[str]) -> Set[str]:
        workers = min(self.config.workers, len(suffixes))
        LOGGER.debug("Expanding %s suffixes across %s workers", len(suffixes), workers)
        result: Set[str] = set()
        with concurrent.futures.ProcessPoolExecutor(
            max_workers=workers,
            initializer=_init_worker,
            initargs=(self.dictionary,),
        ) as executor:
            futures = [
                executor.submit(_worker_suffix_anagrams, suffix, self.config.substrings)
                for suffix in suffixes
            ]
            for future in concurrent.futures.as_completed(futures):
                result |= future.result()
        return result


# Set once per worker process so the dictionary is not pickled with every task.
_WORKER_DICTIONARY: Container[str] = frozenset()


def _init_worker(dictionary: Container[str]) -> None:
    global _WORKER_DICTIONARY
    _WORKER_DICTIONARY = dictionary


def _worker_suffix_anagrams(suffix: str, substrings: bool) -> Set[str]:
    return suffix_anagrams(suffix, _WORKER_DICTIONARY, substrings)


__all__ = [
    "AnagramEnumerator",
    "EnumeratorConfig",
    "find_anagrams",
    "permutations",
    "suffix_anagrams",
]
