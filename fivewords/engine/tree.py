"""Level-order combination tree with memoized continuation ranges.

Every node is a partial combination of disjoint-letter words. Nodes live in
parallel lists (an arena) and are addressed by integer handles; a node only
points back at its parent, so walking a size-5 node to the root recovers its
words in decreasing id order.

Continuation ranges are half-open slices ``[start, end)`` into the shared,
append-only ``candidates`` list. Level-1 nodes slice the initial run of all
word ids. When a node is expanded, the ids in its range that do not collide
with its mask are appended to ``candidates`` as a new run; each child gets
the part of that run after its own word. A child therefore never looks at a
word its ancestors already excluded.
"""

from __future__ import annotations

from typing import Iterator, List, Sequence

from ..core.constants import COMBINATION_SIZE, DEFAULT_COUNTER_BITS
from ..core.models import IdCombination, LevelCounts, Word
from ..utils.logger import get_logger

LOGGER = get_logger(__name__)

NO_PARENT = -1


class CombinationTree:
    """Builds all partial combinations of 1..5 pairwise-disjoint words."""

    def __init__(
        self,
        words: Sequence[Word],
        counter_bits: int = DEFAULT_COUNTER_BITS,
        max_size: int = COMBINATION_SIZE,
    ) -> None:
        self.words = words
        self.masks: List[int] = [word.mask for word in words]
        self.max_size = max_size
        self.counts = LevelCounts(counter_bits=counter_bits)

        # Node arena.
        self.parent: List[int] = []
        self.word_id: List[int] = []
        self.mask: List[int] = []
        self.size: List[int] = []
        self.range_start: List[int] = []
        self.range_end: List[int] = []

        self.candidates: List[int] = []
        # Handles of the nodes at each level, as [first, last) spans of the arena.
        self.levels: List[range] = []
        self.complete = False
        self._final_started = False

    def __len__(self) -> int:
        return len(self.word_id)

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------
    def _new_node(self, parent: int, word: int, mask: int, size: int, start: int, end: int) -> int:
        handle = len(self.word_id)
        self.parent.append(parent)
        self.word_id.append(word)
        self.mask.append(mask)
        self.size.append(size)
        self.range_start.append(start)
        self.range_end.append(end)
        self.counts.add(size)
        return handle

    def _build_roots(self) -> None:
        count = len(self.masks)
        self.candidates.extend(range(count))
        first = len(self.word_id)
        for word in range(count):
            self._new_node(NO_PARENT, word, self.masks[word], 1, word + 1, count)
        self.levels.append(range(first, len(self.word_id)))

    def _expand(self, node: int) -> Iterator[int]:
        """Create the children of ``node`` and yield their handles."""

        node_mask = self.mask[node]
        masks = self.masks
        candidates = self.candidates
        run = [
            word
            for word in candidates[self.range_start[node]:self.range_end[node]]
            if not node_mask & masks[word]
        ]
        if not run:
            return
        child_size = self.size[node] + 1
        if child_size == self.max_size:
            # Leaves are never expanded.
            run_start = run_end = len(candidates)
        else:
            run_start = len(candidates)
            candidates.extend(run)
            run_end = len(candidates)
        for offset, word in enumerate(run):
            yield self._new_node(
                node,
                word,
                node_mask | masks[word],
                child_size,
                min(run_start + offset + 1, run_end),
                run_end,
            )

    def _build_level(self, level: range) -> range:
        first = len(self.word_id)
        for node in level:
            for _ in self._expand(node):
                pass
        return range(first, len(self.word_id))

    def build_partial(self) -> None:
        """Materialize every level below ``max_size``.

        Level ``k + 1`` is complete before level ``k + 2`` starts.
        """

        if self.levels:
            return
        self._build_roots()
        LOGGER.info("Level 1: %d words", len(self.levels[0]))
        while len(self.levels) < self.max_size - 1:
            level = self._build_level(self.levels[-1])
            self.levels.append(level)
            LOGGER.info(
                "Level %d: %d partial combinations", len(self.levels), len(level)
            )

    def iter_complete(self) -> Iterator[int]:
        """Yield handles of ``max_size`` nodes as the final level is expanded.

        The stream may be abandoned at any point; every node already created
        is final, so the tree stays consistent.
        """

        self.build_partial()
        if len(self.levels) == self.max_size:
            yield from self.levels[-1]
            return
        if self._final_started:
            raise RuntimeError("Final level expansion was abandoned; build a new tree")
        self._final_started = True
        first = len(self.word_id)
        for node in self.levels[-1]:
            yield from self._expand(node)
        self.levels.append(range(first, len(self.word_id)))
        self.complete = True
        LOGGER.info("Level %d: %d combinations", self.max_size, len(self.levels[-1]))

    def build(self) -> "CombinationTree":
        for _ in self.iter_complete():
            pass
        return self

    # ------------------------------------------------------------------
    # Read-only helpers
    # ------------------------------------------------------------------
    def word_ids(self, node: int) -> IdCombination:
        """Walk the parent chain of ``node``; ids come back increasing."""

        ids: List[int] = []
        while node != NO_PARENT:
            ids.append(self.word_id[node])
            node = self.parent[node]
        ids.reverse()
        return tuple(ids)

    def continuation(self, node: int) -> List[int]:
        return self.candidates[self.range_start[node]:self.range_end[node]]

    def level(self, size: int) -> range:
        return self.levels[size - 1]
