"""CP-SAT enumeration of five-word combinations using OR-Tools.

Used as an independent cross-check of the combination tree: it shares no
code with the search, only the encoded word list.
"""

from __future__ import annotations

from typing import Dict, List, Sequence, Set

from ortools.sat.python import cp_model

from ..core.constants import ALPHABET_SIZE, COMBINATION_SIZE
from ..core.exceptions import SolverError
from ..core.models import IdCombination, Word
from ..utils.logger import get_logger

LOGGER = get_logger(__name__)


class _CombinationCollector(cp_model.CpSolverSolutionCallback):
    """Records every solution as an increasing tuple of word ids."""

    def __init__(self, chosen: Sequence[cp_model.IntVar]) -> None:
        super().__init__()
        self._chosen = chosen
        self.solutions: Set[IdCombination] = set()

    def on_solution_callback(self) -> None:
        ids = tuple(i for i, var in enumerate(self._chosen) if self.boolean_value(var))
        self.solutions.add(ids)


def solve_combinations(
    words: Sequence[Word],
    timeout: float = 300.0,
    size: int = COMBINATION_SIZE,
) -> List[IdCombination]:
    """Enumerate every set of ``size`` words with pairwise-disjoint letters.

    Args:
        words: Deduplicated words; solution ids index into this sequence.
        timeout: Solver time limit in seconds.
        size: Number of words per combination.

    Returns:
        Sorted list of increasing id tuples.

    Raises:
        SolverError: if the solver stops before proving the enumeration complete.
    """
    if len(words) < size:
        return []

    model = cp_model.CpModel()
    chosen = [model.new_bool_var(f"w_{word.id}") for word in words]
    model.add(sum(chosen) == size)

    # Each letter may be used by at most one chosen word.
    by_letter: Dict[int, List[cp_model.IntVar]] = {}
    for word, var in zip(words, chosen):
        for bit in range(ALPHABET_SIZE):
            if word.mask >> bit & 1:
                by_letter.setdefault(bit, []).append(var)
    for letter_vars in by_letter.values():
        if len(letter_vars) > 1:
            model.add_at_most_one(letter_vars)

    solver = cp_model.CpSolver()
    solver.parameters.max_time_in_seconds = timeout
    solver.parameters.enumerate_all_solutions = True
    collector = _CombinationCollector(chosen)

    LOGGER.info("CP-SAT: %d word vars, enumerating (timeout=%0.1fs)...", len(chosen), timeout)
    status = solver.solve(model, collector)

    if status == cp_model.INFEASIBLE:
        return []
    if status != cp_model.OPTIMAL:
        raise SolverError(
            f"CP-SAT stopped before enumerating all combinations (status={solver.status_name(status)})"
        )

    LOGGER.info("CP-SAT: %d combinations in %.2fs", len(collector.solutions), solver.wall_time)
    return sorted(collector.solutions)
