import concurrent.futures
import unittest
from collections import Counter
from unittest.mock import patch

from jumble.core.exceptions import InputTooLongError
from jumble.engine import enumerator as enumerator_module
from jumble.engine.enumerator import (
    AnagramEnumerator,
    EnumeratorConfig,
    find_anagrams,
    permutations,
    suffix_anagrams,
)


class PermutationTests(unittest.TestCase):
    def test_permutation_count_is_factorial(self) -> None:
        self.assertEqual(len(permutations("abcd")), 24)
        self.assertEqual(len(set(permutations("abcd"))), 24)

    def test_repeated_characters_are_not_deduplicated(self) -> None:
        perms = permutations("aab")
        self.assertEqual(len(perms), 6)
        self.assertEqual(set(perms), {"aab", "aba", "baa"})

    def test_insertion_order(self) -> None:
        self.assertEqual(permutations("ab"), ["ba", "ab"])
        self.assertEqual(permutations("abc")[:3], ["cba", "bca", "bac"])

    def test_empty_and_single(self) -> None:
        self.assertEqual(permutations(""), [])
        self.assertEqual(permutations("x"), ["x"])

    def test_characters_are_atomic(self) -> None:
        perms = permutations("éß")
        self.assertEqual(set(perms), {"éß", "ßé"})


class FindAnagramsTests(unittest.TestCase):
    def test_full_word_anagrams(self) -> None:
        dictionary = {"listen", "silent", "enlist", "tin", "sin"}
        self.assertEqual(find_anagrams("listen", dictionary), {"listen", "silent", "enlist"})

    def test_single_character_word(self) -> None:
        self.assertEqual(find_anagrams("a", {"a"}), {"a"})

    def test_all_rearrangements_found(self) -> None:
        self.assertEqual(find_anagrams("cat", {"cat", "act", "tac"}), {"cat", "act", "tac"})

    def test_suffix_anagram(self) -> None:
        self.assertEqual(find_anagrams("cat", {"at"}), {"at"})
        self.assertEqual(find_anagrams("cat", {"ta", "t"}), {"ta", "t"})

    def test_prefix_is_not_a_suffix(self) -> None:
        self.assertEqual(find_anagrams("tab", {"at"}), set())

    def test_substrings_mode_matches_inner_substrings(self) -> None:
        self.assertEqual(find_anagrams("tab", {"at"}, substrings=True), {"at"})
        self.assertEqual(find_anagrams("stop", {"post", "to", "ots"}, substrings=True), {"post", "to", "ots"})

    def test_empty_inputs(self) -> None:
        self.assertEqual(find_anagrams("", {"a"}), set())
        self.assertEqual(find_anagrams(None, {"a"}), set())
        self.assertEqual(find_anagrams("anything", set()), set())

    def test_case_insensitive_input(self) -> None:
        dictionary = {"listen", "silent", "enlist"}
        self.assertEqual(find_anagrams("LISTEN", dictionary), find_anagrams("listen", dictionary))

    def test_upper_case_dictionary_yields_false_negatives(self) -> None:
        self.assertEqual(find_anagrams("cat", {"ACT"}), set())

    def test_results_are_dictionary_words_built_from_suffixes(self) -> None:
        text = "parsed"
        dictionary = {"spared", "drapes", "red", "eds", "ed", "de", "d", "spa", "sped", "pa"}
        result = find_anagrams(text, dictionary)
        self.assertTrue(result <= dictionary)
        suffix_counts = [Counter(text[i:]) for i in range(len(text))]
        for word in result:
            self.assertIn(Counter(word), suffix_counts)
        self.assertEqual(result, {"spared", "drapes", "eds", "ed", "de", "d"})
        self.assertEqual(find_anagrams(text, dictionary), result)

    def test_suffix_anagrams_only_full_length(self) -> None:
        self.assertEqual(suffix_anagrams("at", {"a", "ta"}), {"ta"})
        self.assertEqual(suffix_anagrams("at", {"a", "ta"}, substrings=True), {"a", "ta"})


class AnagramEnumeratorTests(unittest.TestCase):
    def test_sequential_and_parallel_agree(self) -> None:
        dictionary = frozenset({"stop", "pots", "tops", "spot", "opts", "top", "pot", "op", "p", "ts"})
        sequential = AnagramEnumerator(dictionary).find("Stop")
        parallel = AnagramEnumerator(dictionary, EnumeratorConfig(workers=2)).find("Stop")
        self.assertEqual(sequential, parallel)
        self.assertEqual(sequential, dictionary - {"ts"})

    def test_max_length_guard(self) -> None:
        enumerator = AnagramEnumerator({"abc"}, EnumeratorConfig(max_length=3))
        self.assertEqual(enumerator.find("cab"), {"abc"})
        with self.assertRaises(InputTooLongError):
            enumerator.find("abcd")

    def test_parallel_ships_dictionary_once_per_worker(self) -> None:
        created = []

        class InlineExecutor:
            def __init__(self, max_workers=None, initializer=None, initargs=()):
                self.initargs = initargs
                self.submitted = []
                initializer(*initargs)
                created.append(self)

            def __enter__(self):
                return self

            def __exit__(self, *exc_info):
                return False

            def submit(self, fn, *args):
                self.submitted.append(args)
                future = concurrent.futures.Future()
                future.set_result(fn(*args))
                return future

        dictionary = frozenset({"ta", "t", "act"})
        self.addCleanup(enumerator_module._init_worker, frozenset())
        with patch.object(enumerator_module.concurrent.futures, "ProcessPoolExecutor", InlineExecutor):
            result = AnagramEnumerator(dictionary, EnumeratorConfig(workers=3)).find("cat")

        self.assertEqual(result, {"act", "ta", "t"})
        self.assertEqual(len(created), 1)
        self.assertEqual(created[0].initargs, (dictionary,))
        self.assertEqual(created[0].submitted, [("cat", False), ("at", False), ("t", False)])


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
