"""Data models supporting the five-word search."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Optional, Tuple

from .constants import COMBINATION_SIZE, DEFAULT_COUNTER_BITS
from .exceptions import CounterOverflowError


@dataclass(frozen=True)
class Word:
    """A word admitted to the search, with its letter mask."""

    id: int
    text: str
    mask: int
    source_index: int = 0


@dataclass
class LevelCounts:
    """Number of valid partial combinations per size (1..5).

    Counts are bounded by ``counter_bits``; exceeding the bound raises
    :class:`CounterOverflowError` instead of wrapping.
    """

    counter_bits: int = DEFAULT_COUNTER_BITS
    counts: Dict[int, int] = field(
        default_factory=lambda: {size: 0 for size in range(1, COMBINATION_SIZE + 1)}
    )

    @property
    def limit(self) -> int:
        return (1 << self.counter_bits) - 1

    def add(self, size: int, amount: int = 1) -> None:
        value = self.counts[size] + amount
        if value > self.limit:
            raise CounterOverflowError(
                f"Count for size-{size} combinations exceeds {self.counter_bits}-bit counter"
            )
        self.counts[size] = value

    def __getitem__(self, size: int) -> int:
        return self.counts[size]

    @property
    def singles(self) -> int:
        return self.counts[1]

    @property
    def pairs(self) -> int:
        return self.counts[2]

    @property
    def triples(self) -> int:
        return self.counts[3]

    @property
    def quads(self) -> int:
        return self.counts[4]

    @property
    def quints(self) -> int:
        return self.counts[5]

    def as_tuple(self) -> Tuple[int, ...]:
        return tuple(self.counts[size] for size in range(1, COMBINATION_SIZE + 1))


_END = object()

IdCombination = Tuple[int, ...]
TextCombination = Tuple[str, ...]


@dataclass
class SearchResult:
    """Lazy stream of complete combinations plus the counts gathered so far.

    Iterating yields word-text 5-tuples. ``counts`` is final only once the
    stream has been exhausted, which also sets ``complete``. When ``limit``
    is set, iteration stops after that many combinations; ``complete`` is
    then True only if no further combination exists.
    """

    words: List[Word]
    counts: LevelCounts
    id_combinations: Iterator[IdCombination]
    limit: Optional[int] = None
    complete: bool = False
    emitted: int = 0
    _peeked: bool = field(default=False, repr=False)

    def iter_ids(self) -> Iterator[IdCombination]:
        while True:
            if self.limit is not None and self.emitted >= self.limit:
                self._check_exhausted()
                return
            ids = next(self.id_combinations, _END)
            if ids is _END:
                self.complete = True
                return
            self.emitted += 1
            yield ids

    def _check_exhausted(self) -> None:
        """Look one item past the limit to learn whether the search finished."""
        if self.complete or self._peeked:
            return
        self._peeked = True
        if next(self.id_combinations, _END) is _END:
            self.complete = True

    def __iter__(self) -> Iterator[TextCombination]:
        for ids in self.iter_ids():
            yield tuple(self.words[i].text for i in ids)

    def drain(self) -> List[TextCombination]:
        return list(self)
