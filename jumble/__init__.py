"""Anagram enumeration against word-list dictionaries.

This package exposes the public API surface via:

- ``jumble.engine.enumerator.find_anagrams``: anagrams of an input and its suffixes.
- ``jumble.engine.enumerator.AnagramEnumerator``: reusable, optionally parallel enumerator.
- ``jumble.data.dictionary.WordDictionary``: loads word lists from files, directories and URLs.
"""

from .data.dictionary import DictionaryConfig, WordDictionary, load_dictionary
from .engine.enumerator import AnagramEnumerator, EnumeratorConfig, find_anagrams, permutations

__all__ = [
    "AnagramEnumerator",
    "DictionaryConfig",
    "EnumeratorConfig",
    "WordDictionary",
    "find_anagrams",
    "load_dictionary",
    "permutations",
]

__version__ = "0.1.0"
