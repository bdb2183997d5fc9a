"""Turns completed tree nodes back into word combinations."""

from __future__ import annotations

from typing import Iterator, Optional

from ..core.models import IdCombination, SearchResult
from .tree import CombinationTree


def iter_tree_combinations(tree: CombinationTree) -> Iterator[IdCombination]:
    """Yield the increasing id tuple of every complete node."""

    for node in tree.iter_complete():
        yield tree.word_ids(node)


def emit_results(tree: CombinationTree, limit: Optional[int] = None) -> SearchResult:
    """Wrap ``tree`` as a lazy :class:`SearchResult`.

    Counts for sizes below five are available as soon as the first
    combination is requested; the size-5 count is final once the result is
    exhausted.
    """

    return SearchResult(
        words=list(tree.words),
        counts=tree.counts,
        id_combinations=iter_tree_combinations(tree),
        limit=limit,
    )
