"""Word list loading from a local file or a remote URL."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, List, Optional

from ..core.constants import WORD_LENGTH
from ..core.exceptions import WordListLoadError
from ..io.wordlist_client import WordListClient
from ..utils.logger import get_logger
from .normalization import normalize_line

LOGGER = get_logger(__name__)


@dataclass
class WordListConfig:
    """Configuration for word list loading."""

    path: Path | str | None = None
    url: Optional[str] = None
    timeout_seconds: float = 60.0
    encoding: str = "utf-8"
    length: int = WORD_LENGTH

    def __post_init__(self) -> None:
        if self.path is not None and self.url is not None:
            raise ValueError("WordListConfig takes either a path or a url, not both")


def filter_lines(lines: Iterable[str], length: int = WORD_LENGTH) -> List[str]:
    """Keep trimmed lines of exactly ``length`` ASCII letters, in order."""

    words: List[str] = []
    skipped = 0
    for line in lines:
        word = normalize_line(line, length)
        if word is None:
            skipped += 1
            continue
        words.append(word)
    LOGGER.debug("Kept %d candidate words, skipped %d lines", len(words), skipped)
    return words


def read_lines(path: Path | str, encoding: str = "utf-8") -> List[str]:
    source = Path(path)
    if not source.exists():
        raise WordListLoadError(f"Missing word list: {source}")
    try:
        return source.read_text(encoding=encoding).splitlines()
    except (OSError, UnicodeDecodeError) as exc:
        raise WordListLoadError(f"Cannot read word list {source}: {exc}") from exc


def load_word_list(config: WordListConfig) -> List[str]:
    """Return the candidate words described by ``config``."""

    if config.path is not None:
        lines = read_lines(config.path, config.encoding)
    else:
        client = WordListClient(url=config.url, timeout_seconds=config.timeout_seconds)
        lines = client.fetch_lines()
    words = filter_lines(lines, config.length)
    LOGGER.info("Loaded %d candidate words", len(words))
    return words
