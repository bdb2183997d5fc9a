"""Simpler search strategies used to cross-check the combination tree.

All three produce the same id tuples (increasing ids) and the same level
counts as :class:`~fivewords.engine.tree.CombinationTree`; they differ only
in how much of the word list they rescan per level.
"""

from __future__ import annotations

from typing import Iterator, List, Sequence, Tuple

from ..core.constants import COMBINATION_SIZE
from ..core.models import IdCombination, LevelCounts, Word


def nested_loop_combinations(words: Sequence[Word], counts: LevelCounts) -> Iterator[IdCombination]:
    """Five nested loops over increasing ids, pruning on the running mask."""

    masks = [word.mask for word in words]
    total = len(masks)
    counts.add(1, total)
    for a in range(total):
        bits1 = masks[a]
        for b in range(a + 1, total):
            if bits1 & masks[b]:
                continue
            counts.add(2)
            bits2 = bits1 | masks[b]
            for c in range(b + 1, total):
                if bits2 & masks[c]:
                    continue
                counts.add(3)
                bits3 = bits2 | masks[c]
                for d in range(c + 1, total):
                    if bits3 & masks[d]:
                        continue
                    counts.add(4)
                    bits4 = bits3 | masks[d]
                    for e in range(d + 1, total):
                        if bits4 & masks[e]:
                            continue
                        counts.add(5)
                        yield (a, b, c, d, e)


def level_scan_combinations(words: Sequence[Word], counts: LevelCounts) -> Iterator[IdCombination]:
    """Materialize each level as a list, rescanning every id above the last word."""

    masks = [word.mask for word in words]
    total = len(masks)
    counts.add(1, total)
    level: List[Tuple[IdCombination, int]] = [((i,), masks[i]) for i in range(total)]
    for size in range(2, COMBINATION_SIZE):
        next_level: List[Tuple[IdCombination, int]] = []
        for ids, bits in level:
            for i in range(ids[-1] + 1, total):
                if bits & masks[i]:
                    continue
                next_level.append((ids + (i,), bits | masks[i]))
        counts.add(size, len(next_level))
        level = next_level
    for ids, bits in level:
        for i in range(ids[-1] + 1, total):
            if not bits & masks[i]:
                counts.add(COMBINATION_SIZE)
                yield ids + (i,)


def build_adjacency(words: Sequence[Word]) -> List[List[int]]:
    """For each id, the increasing list of higher ids sharing no letter with it."""

    masks = [word.mask for word in words]
    total = len(masks)
    return [[j for j in range(i + 1, total) if not masks[i] & masks[j]] for i in range(total)]


def adjacency_combinations(words: Sequence[Word], counts: LevelCounts) -> Iterator[IdCombination]:
    """Depth-first search that extends a combination from its last word's neighbours."""

    masks = [word.mask for word in words]
    adjacency = build_adjacency(words)
    counts.add(1, len(masks))

    def extend(ids: IdCombination, bits: int) -> Iterator[IdCombination]:
        for j in adjacency[ids[-1]]:
            if bits & masks[j]:
                continue
            grown = ids + (j,)
            counts.add(len(grown))
            if len(grown) == COMBINATION_SIZE:
                yield grown
            else:
                yield from extend(grown, bits | masks[j])

    for i in range(len(masks)):
        yield from extend((i,), masks[i])
