"""Shared constants and enumerations for the five-word search."""

from __future__ import annotations

from enum import Enum

ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
ALPHABET_SIZE = len(ALPHABET)
ALL_LETTERS_MASK = (1 << ALPHABET_SIZE) - 1

WORD_LENGTH = 5
COMBINATION_SIZE = 5
TARGET_LETTERS = WORD_LENGTH * COMBINATION_SIZE

# Width used when sorting masks by their bit-reversed value.
MASK_WORD_BITS = 32

DEFAULT_COUNTER_BITS = 64


class WordOrder(str, Enum):
    """Ordering used to assign search ids to deduplicated words."""

    REVERSED_MASK = "reversed-mask"
    INPUT = "input"


class Strategy(str, Enum):
    """Available search algorithms."""

    TREE = "tree"
    NESTED = "nested"
    LEVEL_SCAN = "level-scan"
    ADJACENCY = "adjacency"


LEVEL_LABELS = {
    1: "words",
    2: "pairs of words",
    3: "sets of three words",
    4: "sets of four words",
    5: "sets of five words",
}
