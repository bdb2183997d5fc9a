"""Shared helpers for word-list line normalization."""

from __future__ import annotations

import re
from typing import Optional

from ..core.constants import WORD_LENGTH

WORD_RE = re.compile(r"^[A-Za-z]+$")


def clean_word(text: str) -> str:
    """Return ``text`` trimmed of surrounding whitespace."""

    if not text:
        return ""
    return text.strip()


def is_plain_word(text: str) -> bool:
    """True when ``text`` is non-empty plain ASCII alphabetic text."""

    return bool(WORD_RE.match(text))


def normalize_line(line: str, length: int = WORD_LENGTH) -> Optional[str]:
    """Return the cleaned word for ``line`` or None when it is not a candidate."""

    word = clean_word(line)
    if len(word) != length or not is_plain_word(word):
        return None
    return word


__all__ = ["clean_word", "is_plain_word", "normalize_line", "WORD_RE"]
