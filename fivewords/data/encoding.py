"""Letter-mask encoding of candidate words.

A word is reduced to the set of letters it contains, stored as an integer
with bit ``ord(letter) - ord('A')`` set for each letter. Two words share a
letter exactly when ``a & b`` is non-zero, and a combination of words is
the bitwise OR of their masks.
"""

from __future__ import annotations

from typing import Optional

from ..core.constants import WORD_LENGTH
from ..core.exceptions import InvalidCharacterError


def popcount(mask: int) -> int:
    return mask.bit_count()


def letter_mask(word: str) -> int:
    """Fold every letter of ``word`` (case-insensitive) into a 26-bit mask.

    Raises :class:`InvalidCharacterError` for anything outside ``A-Z``.
    """

    mask = 0
    for char in word:
        # Checked before case folding: str.upper maps some non-ASCII letters into A-Z.
        if not ("A" <= char <= "Z" or "a" <= char <= "z"):
            raise InvalidCharacterError(f"Invalid character {char!r} in word {word!r}")
        mask |= 1 << (ord(char.upper()) - ord("A"))
    return mask


def encode_word(word: str, length: int = WORD_LENGTH) -> Optional[int]:
    """Return the mask of ``word``, or None if it lacks ``length`` distinct letters."""

    mask = letter_mask(word)
    if len(word) != length or popcount(mask) != length:
        return None
    return mask


def mask_letters(mask: int) -> str:
    return "".join(chr(ord("A") + bit) for bit in range(26) if mask >> bit & 1)
