"""Search orchestration: word preparation, strategy dispatch and cross-checks."""

from __future__ import annotations

import time
from dataclasses import dataclass
from typing import Callable, Dict, Iterable, Iterator, List, Optional, Sequence, Set

from ..core.constants import DEFAULT_COUNTER_BITS, Strategy, WordOrder
from ..core.exceptions import CrossCheckError
from ..core.models import IdCombination, LevelCounts, SearchResult, Word
from ..data.anagrams import prepare_words
from ..utils.logger import get_logger
from .emitter import emit_results
from .oracles import adjacency_combinations, level_scan_combinations, nested_loop_combinations
from .solver import solve_combinations
from .tree import CombinationTree

LOGGER = get_logger(__name__)

CP_SAT = "cp-sat"

_ORACLES: Dict[Strategy, Callable[[Sequence[Word], LevelCounts], Iterator[IdCombination]]] = {
    Strategy.NESTED: nested_loop_combinations,
    Strategy.LEVEL_SCAN: level_scan_combinations,
    Strategy.ADJACENCY: adjacency_combinations,
}


@dataclass
class SearchConfig:
    strategy: Strategy = Strategy.TREE
    order: WordOrder = WordOrder.REVERSED_MASK
    counter_bits: int = DEFAULT_COUNTER_BITS
    limit: Optional[int] = None
    solver_timeout_seconds: float = 300.0

    def __post_init__(self) -> None:
        self.strategy = Strategy(self.strategy)
        self.order = WordOrder(self.order)
        if self.counter_bits < 1:
            raise ValueError("counter_bits must be positive")
        if self.limit is not None and self.limit < 0:
            raise ValueError("limit must not be negative")


def search_words(words: Sequence[Word], config: Optional[SearchConfig] = None) -> SearchResult:
    """Run the configured strategy over already prepared ``words``."""

    config = config or SearchConfig()
    if config.strategy == Strategy.TREE:
        tree = CombinationTree(words, counter_bits=config.counter_bits)
        return emit_results(tree, limit=config.limit)

    counts = LevelCounts(counter_bits=config.counter_bits)
    oracle = _ORACLES[config.strategy]
    return SearchResult(
        words=list(words),
        counts=counts,
        id_combinations=oracle(words, counts),
        limit=config.limit,
    )


def find_combinations(texts: Iterable[str], config: Optional[SearchConfig] = None) -> SearchResult:
    """Encode, deduplicate and search ``texts``.

    ``texts`` must already be five-letter ASCII words; anything else raises
    :class:`~fivewords.core.exceptions.InvalidCharacterError` or is skipped.
    """

    config = config or SearchConfig()
    words = prepare_words(texts, order=config.order)
    LOGGER.info("Searching %d distinct letter sets with strategy %s", len(words), config.strategy.value)
    return search_words(words, config)


def collect_ids(
    words: Sequence[Word],
    strategy: Strategy | str,
    counter_bits: int = DEFAULT_COUNTER_BITS,
    solver_timeout_seconds: float = 300.0,
) -> Set[IdCombination]:
    """Return the full set of id tuples found by ``strategy`` (or ``"cp-sat"``)."""

    if strategy == CP_SAT:
        return set(solve_combinations(words, timeout=solver_timeout_seconds))
    result = search_words(words, SearchConfig(strategy=strategy, counter_bits=counter_bits))
    return set(result.iter_ids())


def cross_check(
    words: Sequence[Word],
    expected: Set[IdCombination],
    oracle: Strategy | str,
    solver_timeout_seconds: float = 300.0,
) -> None:
    """Compare ``expected`` against the combinations found by ``oracle``.

    Raises :class:`CrossCheckError` on any difference.
    """

    started = time.perf_counter()
    found = collect_ids(words, oracle, solver_timeout_seconds=solver_timeout_seconds)
    elapsed = time.perf_counter() - started
    name = oracle.value if isinstance(oracle, Strategy) else oracle
    missing: List[IdCombination] = sorted(found - expected)
    extra: List[IdCombination] = sorted(expected - found)
    if missing or extra:
        LOGGER.warning(
            "Cross-check against %s failed: %d missing, %d unexpected", name, len(missing), len(extra)
        )
        raise CrossCheckError(
            f"{name} disagrees: {len(missing)} combinations missing, {len(extra)} unexpected"
        )
    LOGGER.info("Cross-check against %s passed (%d combinations, %.2fs)", name, len(found), elapsed)
