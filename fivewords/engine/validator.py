"""Deterministic checks over emitted combinations."""

from __future__ import annotations

from dataclasses import dataclass
from itertools import combinations
from typing import Iterable, List, Sequence, Set

from ..core.constants import COMBINATION_SIZE, TARGET_LETTERS, WORD_LENGTH
from ..core.exceptions import ValidationError
from ..core.models import IdCombination, Word
from ..data.encoding import popcount
from ..utils.logger import get_logger


LOGGER = get_logger(__name__)


@dataclass
class ValidationResult:
    ok: bool
    messages: List[str]


class CombinationValidator:
    """Checks that combinations are disjoint, ordered and not repeated."""

    def __init__(self, words: Sequence[Word]) -> None:
        self.words = words

    def validate(self, combos: Iterable[IdCombination]) -> ValidationResult:
        messages: List[str] = []
        seen: Set[IdCombination] = set()
        try:
            self._check_words()
            for ids in combos:
                self._check_shape(ids)
                self._check_ordered(ids)
                self._check_disjoint(ids)
                if ids in seen:
                    raise ValidationError(f"Combination {ids} emitted twice")
                seen.add(ids)
        except ValidationError as exc:
            messages.append(str(exc))
            LOGGER.error("Validation failed: %s", exc)
            return ValidationResult(ok=False, messages=messages)
        return ValidationResult(ok=True, messages=[])

    def _check_words(self) -> None:
        masks: Set[int] = set()
        for index, word in enumerate(self.words):
            if word.id != index:
                raise ValidationError(f"Word {word.text!r} has id {word.id}, expected {index}")
            if popcount(word.mask) != WORD_LENGTH:
                raise ValidationError(f"Word {word.text!r} does not have {WORD_LENGTH} distinct letters")
            if word.mask in masks:
                raise ValidationError(f"Word {word.text!r} duplicates an earlier letter set")
            masks.add(word.mask)

    def _check_shape(self, ids: IdCombination) -> None:
        if len(ids) != COMBINATION_SIZE:
            raise ValidationError(f"Combination {ids} has {len(ids)} words")

    def _check_ordered(self, ids: IdCombination) -> None:
        if any(a >= b for a, b in zip(ids, ids[1:])):
            raise ValidationError(f"Combination {ids} is not in increasing id order")

    def _check_disjoint(self, ids: IdCombination) -> None:
        for a, b in combinations(ids, 2):
            if self.words[a].mask & self.words[b].mask:
                raise ValidationError(
                    f"Words {self.words[a].text!r} and {self.words[b].text!r} share a letter"
                )
        union = 0
        for i in ids:
            union |= self.words[i].mask
        if popcount(union) != TARGET_LETTERS:
            raise ValidationError(f"Combination {ids} covers {popcount(union)} letters")
