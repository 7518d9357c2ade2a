"""CLI entrypoint for the jumble anagram finder."""

from __future__ import annotations

import argparse
import logging
import sys
from typing import List

from jumble.core.exceptions import DictionaryLoadError, InputTooLongError
from jumble.data.dictionary import DictionaryConfig, WordDictionary
from jumble.engine.enumerator import AnagramEnumerator, EnumeratorConfig
from jumble.utils.logger import configure_logging
from jumble.utils.pretty import print_results

LOGGER = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Print every dictionary word that can be made by jumbling the input or one of its suffixes",
    )
    parser.add_argument(
        "dictionary",
        type=str,
        help="Word-list file, directory of word lists, or http(s) URL",
    )
    parser.add_argument("input", type=str, help="Input string whose anagrams are required")
    parser.add_argument(
        "--dictionary",
        dest="extra_dictionaries",
        action="append",
        default=[],
        metavar="SOURCE",
        help="Additional dictionary source (may be repeated)",
    )
    parser.add_argument(
        "--substrings",
        action="store_true",
        help="Also report anagrams of every contiguous substring, not only suffixes",
    )
    parser.add_argument("--workers", type=int, default=1, help="Processes used to expand suffixes")
    parser.add_argument(
        "--max-length",
        type=int,
        default=None,
        help="Refuse inputs longer than this many characters",
    )
    parser.add_argument("--sort", action="store_true", help="Print results in sorted order")
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Fail instead of continuing when a dictionary source cannot be loaded",
    )
    parser.add_argument(
        "--timeout",
        type=float,
        default=30.0,
        help="Timeout in seconds for URL dictionary sources",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default="WARNING",
        help="Logging level (DEBUG, INFO, WARNING, ERROR)",
    )
    return parser


def main(argv: List[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    level = getattr(logging, args.log_level.upper(), logging.WARNING)
    configure_logging(level)

    if args.workers < 1:
        parser.error("--workers must be at least 1")
    if args.max_length is not None and args.max_length < 1:
        parser.error("--max-length must be at least 1")

    sources = [args.dictionary, *args.extra_dictionaries]
    config = DictionaryConfig(strict=args.strict, timeout_seconds=args.timeout)
    try:
        dictionary, warnings = WordDictionary.from_sources(*sources, config=config)
    except DictionaryLoadError as exc:
        LOGGER.error("%s", exc)
        return 1
    if warnings:
        LOGGER.info("Continuing with %s word(s) after %s failed source(s)", len(dictionary), len(warnings))

    enumerator = AnagramEnumerator(
        dictionary,
        EnumeratorConfig(
            workers=args.workers,
            substrings=args.substrings,
            max_length=args.max_length,
        ),
    )
    try:
        words = enumerator.find(args.input)
    except InputTooLongError as exc:
        parser.error(str(exc))

    print_results(words, sort=args.sort, stream=sys.stdout)
    return 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
