"""Lightweight HTTP client for remote word lists."""

from __future__ import annotations

from typing import List

import requests

from ..utils.logger import get_logger

LOGGER = get_logger(__name__)

URL_SCHEMES = ("http://", "https://")


class RemoteWordListError(RuntimeError):
    """Raised when a remote word list cannot be retrieved."""

    def __init__(self, url: str, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.url = url
        self.status_code = status_code

    @property
    def not_found(self) -> bool:
        return self.status_code in (404, 410)


def is_url(source: str) -> bool:
    return source.lower().startswith(URL_SCHEMES)


class WordListClient:
    """Minimal client that downloads newline separated word lists."""

    def __init__(self, timeout_seconds: float = 30.0, encoding: str = "utf-8") -> None:
        self.timeout_seconds = timeout_seconds
        self.encoding = encoding

    def fetch_lines(self, url: str) -> List[str]:
        """Download ``url`` and return its lines without line terminators."""
        LOGGER.debug("Fetching word list from %s", url)
        try:
            response = requests.get(url, timeout=self.timeout_seconds)
        except requests.RequestException as exc:
            raise RemoteWordListError(url, f"Word list request failed: {exc}") from exc

        if response.status_code >= 400:
            raise RemoteWordListError(
                url,
                f"Word list request returned HTTP {response.status_code}",
                status_code=response.status_code,
            )

        try:
            text = response.content.decode(self.encoding)
        except UnicodeDecodeError as exc:
            raise RemoteWordListError(url, f"Word list is not valid {self.encoding}") from exc
        return text.splitlines()
