"""Console formatting for combinations and level counts."""

from __future__ import annotations

import sys
from typing import List, Tuple

from ..core.constants import COMBINATION_SIZE, LEVEL_LABELS
from ..core.models import LevelCounts


def format_combination(combo: Tuple[str, ...]) -> str:
    return ", ".join(combo)


def format_counts(counts: LevelCounts) -> List[str]:
    lines = []
    for size in range(1, COMBINATION_SIZE + 1):
        lines.append(f"Found {counts[size]} {LEVEL_LABELS[size]} with unique letters")
    return lines


def print_counts(counts: LevelCounts, *, complete: bool = True, stream=None) -> None:
    stream = stream or sys.stdout
    for line in format_counts(counts):
        print(line, file=stream)
    if not complete:
        print("(search stopped early; counts are partial)", file=stream)
