"""Word-list loading for anagram lookups."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import FrozenSet, Iterable, Iterator, List, Optional, Set, Tuple

from ..core.exceptions import (
    DictionaryLoadError,
    DictionarySourceNotFound,
    DictionarySourceUnreadable,
)
from ..io.remote import RemoteWordListError, WordListClient, is_url
from ..utils.logger import get_logger
from .normalization import normalize_line, normalize_word

LOGGER = get_logger(__name__)


@dataclass
class DictionaryConfig:
    """Configuration for dictionary loading."""

    strict: bool = False
    encoding: str = "utf-8"
    timeout_seconds: float = 30.0
    client: Optional[WordListClient] = None


class WarningKind(str, Enum):
    """Distinct failure kinds reported while loading sources."""

    NOT_FOUND = "not_found"
    UNREADABLE = "unreadable"


@dataclass(frozen=True)
class DictionaryWarning:
    """A source that could not be loaded."""

    source: str
    kind: WarningKind
    message: str


@dataclass
class DictionaryLoadReport:
    """Words gathered from every source plus the failures met on the way."""

    words: Set[str] = field(default_factory=set)
    warnings: List[DictionaryWarning] = field(default_factory=list)
    sources_loaded: int = 0

    @property
    def ok(self) -> bool:
        return not self.warnings


class WordDictionary:
    """Immutable set of lower-cased words."""

    def __init__(self, words: Iterable[str] = ()) -> None:
        self._words: FrozenSet[str] = frozenset(words)

    @classmethod
    def from_sources(
        cls,
        *sources: Path | str,
        config: Optional[DictionaryConfig] = None,
    ) -> Tuple["WordDictionary", List[DictionaryWarning]]:
        report = load_dictionary(*sources, config=config)
        return cls(report.words), report.warnings

    def contains(self, word: str) -> bool:
        return normalize_word(word) in self._words

    @property
    def words(self) -> FrozenSet[str]:
        return self._words

    def __contains__(self, word: object) -> bool:
        return word in self._words

    def __iter__(self) -> Iterator[str]:
        return iter(self._words)

    def __len__(self) -> int:
        return len(self._words)

    def __repr__(self) -> str:
        return f"WordDictionary({len(self._words)} words)"


def load_dictionary(
    *sources: Path | str,
    config: Optional[DictionaryConfig] = None,
) -> DictionaryLoadReport:
    """Load every source into a single normalized word set.

    A source is a word-list file, a directory of word-list files (walked
    recursively in sorted order) or an ``http(s)://`` URL. Failing sources
    are logged and recorded in the report, and loading carries on with the
    rest; with ``config.strict`` the first failure is raised instead.
    """

    config = config or DictionaryConfig()
    report = DictionaryLoadReport()
    for source in sources:
        if isinstance(source, str) and is_url(source):
            _load_url(source, config, report)
        else:
            _load_path(Path(source), config, report)
    LOGGER.info(
        "Loaded %s words from %s source(s) (%s warning(s))",
        len(report.words),
        report.sources_loaded,
        len(report.warnings),
    )
    return report


def _load_path(path: Path, config: DictionaryConfig, report: DictionaryLoadReport) -> None:
    if path.is_dir():
        try:
            entries = sorted(path.iterdir())
        except OSError as exc:
            _record(report, config, DictionarySourceUnreadable(str(path), f"Problem reading directory ({exc})"))
            return
        for entry in entries:
            _load_path(entry, config, report)
        return

    if not path.exists():
        _record(report, config, DictionarySourceNotFound(str(path), "No such dictionary source"))
        return

    try:
        with path.open("r", encoding=config.encoding) as handle:
            _add_lines(handle, report)
    except (OSError, UnicodeDecodeError) as exc:
        _record(
            report,
            config,
            DictionarySourceUnreadable(str(path), f"Problem reading dictionary source ({exc})"),
        )
        return
    report.sources_loaded += 1


def _load_url(url: str, config: DictionaryConfig, report: DictionaryLoadReport) -> None:
    client = config.client or WordListClient(config.timeout_seconds, config.encoding)
    try:
        lines = client.fetch_lines(url)
    except RemoteWordListError as exc:
        error_cls = DictionarySourceNotFound if exc.not_found else DictionarySourceUnreadable
        _record(report, config, error_cls(url, str(exc)))
        return
    _add_lines(lines, report)
    report.sources_loaded += 1


def _add_lines(lines: Iterable[str], report: DictionaryLoadReport) -> None:
    for line in lines:
        word = normalize_line(line)
        if word:
            report.words.add(word)


def _record(report: DictionaryLoadReport, config: DictionaryConfig, error: DictionaryLoadError) -> None:
    if config.strict:
        raise error
    kind = WarningKind.NOT_FOUND if isinstance(error, DictionarySourceNotFound) else WarningKind.UNREADABLE
    LOGGER.warning("%s", error)
    report.warnings.append(DictionaryWarning(source=error.source, kind=kind, message=str(error)))


__all__ = [
    "DictionaryConfig",
    "DictionaryLoadReport",
    "DictionaryWarning",
    "WarningKind",
    "WordDictionary",
    "load_dictionary",
]
