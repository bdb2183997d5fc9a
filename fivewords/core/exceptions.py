"""Custom exception hierarchy for the five-word search."""


class FiveWordsError(Exception):
    """Base exception for search failures."""


class InvalidCharacterError(FiveWordsError):
    """Raised when a word handed to the encoder contains a non-alphabetic character."""


class CounterOverflowError(FiveWordsError):
    """Raised when a level count no longer fits the configured counter width."""


class WordListLoadError(FiveWordsError):
    """Raised when the word list cannot be read or fetched."""


class SolverError(FiveWordsError):
    """Raised when the CP-SAT model cannot be solved to completion."""


class CrossCheckError(FiveWordsError):
    """Raised when two search strategies disagree."""


class ValidationError(FiveWordsError):
    """Raised when an emitted combination breaks a search invariant."""
