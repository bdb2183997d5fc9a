"""Five-word, twenty-five-letter combination finder.

This package exposes the public API surface via:

- ``fivewords.engine.search.find_combinations``: prepares words and runs a search.
- ``fivewords.engine.tree.CombinationTree``: the memoized level-order search.
- ``fivewords.data.wordlist.load_word_list``: reads candidate words from a file or URL.
"""

from .data.wordlist import WordListConfig, load_word_list
from .engine.search import SearchConfig, find_combinations
from .engine.tree import CombinationTree

__all__ = [
    "CombinationTree",
    "SearchConfig",
    "WordListConfig",
    "find_combinations",
    "load_word_list",
]

__version__ = "0.1.0"
