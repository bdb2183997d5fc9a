"""Encoding, anagram collapsing and id assignment for the search universe."""

from __future__ import annotations

from typing import Iterable, List, Tuple

from ..core.constants import MASK_WORD_BITS, WordOrder
from ..core.models import Word
from ..utils.logger import get_logger
from .encoding import encode_word

LOGGER = get_logger(__name__)


def reverse_bits(mask: int, width: int = MASK_WORD_BITS) -> int:
    """Mirror the low ``width`` bits of ``mask`` (bit 0 becomes bit ``width - 1``)."""

    result = 0
    for _ in range(width):
        result = (result << 1) | (mask & 1)
        mask >>= 1
    return result


def encode_words(words: Iterable[str]) -> List[Tuple[int, str, int]]:
    """Return ``(source_index, text, mask)`` for every word with five distinct letters.

    Words with a repeated letter are dropped silently.
    """

    encoded: List[Tuple[int, str, int]] = []
    rejected = 0
    for index, text in enumerate(words):
        mask = encode_word(text)
        if mask is None:
            rejected += 1
            LOGGER.debug("Skipping %r: letters are not all distinct", text)
            continue
        encoded.append((index, text, mask))
    if rejected:
        LOGGER.debug("Rejected %d words with repeated letters", rejected)
    return encoded


def deduplicate(
    encoded: Iterable[Tuple[int, str, int]],
    order: WordOrder = WordOrder.REVERSED_MASK,
) -> List[Word]:
    """Keep one word per letter set and assign contiguous search ids.

    The representative of each group is the earliest entry in input order.
    With ``WordOrder.REVERSED_MASK`` the survivors are ordered by the
    bit-reversed mask; the sort is stable so the tie-break is unaffected.
    """

    entries = list(encoded)
    if order == WordOrder.REVERSED_MASK:
        entries.sort(key=lambda entry: reverse_bits(entry[2]))

    seen = set()
    unique: List[Word] = []
    for index, text, mask in entries:
        if mask in seen:
            continue
        seen.add(mask)
        unique.append(Word(id=len(unique), text=text, mask=mask, source_index=index))

    dropped = len(entries) - len(unique)
    if dropped:
        LOGGER.debug("Collapsed %d anagrams", dropped)
    return unique


def prepare_words(words: Iterable[str], order: WordOrder = WordOrder.REVERSED_MASK) -> List[Word]:
    """Encode and deduplicate ``words`` into the id-ordered search universe."""

    return deduplicate(encode_words(words), order=order)
