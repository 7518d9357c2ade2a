"""Custom exception hierarchy for anagram enumeration."""


class JumbleError(Exception):
    """Base exception for jumble failures."""


class DictionaryLoadError(JumbleError):
    """Raised when a dictionary source cannot be loaded."""

    def __init__(self, source: str, message: str) -> None:
        super().__init__(f"{message}: {source}")
        self.source = source


class DictionarySourceNotFound(DictionaryLoadError):
    """Raised when a dictionary path or URL does not exist."""


class DictionarySourceUnreadable(DictionaryLoadError):
    """Raised when a dictionary source exists but cannot be read."""


class InputTooLongError(JumbleError):
    """Raised when an input exceeds the configured enumeration cap."""
