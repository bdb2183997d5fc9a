"""Lightweight HTTP client for remote word lists."""

from __future__ import annotations

import os
from typing import List, Optional

import requests

from ..core.exceptions import WordListLoadError
from ..utils.logger import get_logger

LOGGER = get_logger(__name__)

DEFAULT_URL_ENV = "FIVEWORDS_WORDLIST_URL"


class WordListClient:
    """Fetch a newline-separated word list over HTTP."""

    def __init__(
        self,
        url: Optional[str] = None,
        url_env: str = DEFAULT_URL_ENV,
        timeout_seconds: float = 60.0,
    ) -> None:
        self.url = url or os.environ.get(url_env)
        self.url_env = url_env
        self.timeout_seconds = timeout_seconds
        if not self.url:
            raise WordListLoadError(
                f"No word list URL given and environment variable {self.url_env} is unset"
            )

    def fetch_lines(self) -> List[str]:
        """Download the word list and return its lines."""
        try:
            response = requests.get(self.url, timeout=self.timeout_seconds)
            response.raise_for_status()
        except requests.RequestException as exc:  # pragma: no cover - network failure
            raise WordListLoadError(f"Word list request failed: {exc}") from exc

        text = response.text
        if not text:
            LOGGER.warning("Word list at %s is empty", self.url)
        lines = text.splitlines()
        LOGGER.info("Fetched %d lines from %s", len(lines), self.url)
        return lines
