"""CLI entrypoint for the five-word, twenty-five-letter search."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any, Dict, List

from fivewords.core.constants import Strategy, WordOrder
from fivewords.core.exceptions import FiveWordsError
from fivewords.data.anagrams import prepare_words
from fivewords.data.wordlist import WordListConfig, load_word_list
from fivewords.engine.search import CP_SAT, SearchConfig, cross_check, search_words
from fivewords.engine.validator import CombinationValidator
from fivewords.utils.logger import configure_logging, get_logger
from fivewords.utils.pretty import format_combination, print_counts

LOGGER = get_logger("fivewords.cli")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Find five five-letter words that together use twenty-five distinct letters",
    )
    parser.add_argument("words_file", nargs="?", type=Path, help="Word list, one word per line")
    parser.add_argument(
        "--words-url",
        type=str,
        metavar="URL",
        help="Fetch the word list over HTTP instead of reading a file",
    )
    parser.add_argument(
        "--strategy",
        type=str,
        choices=[s.value for s in Strategy],
        default=Strategy.TREE.value,
        help="Search algorithm (default: tree)",
    )
    parser.add_argument(
        "--order",
        type=str,
        choices=[o.value for o in WordOrder],
        default=WordOrder.REVERSED_MASK.value,
        help="Order in which deduplicated words are given search ids",
    )
    parser.add_argument("--limit", type=int, default=None, help="Stop after this many combinations")
    parser.add_argument(
        "--counter-bits",
        type=int,
        default=64,
        help="Width of the per-level combination counters (default 64)",
    )
    parser.add_argument(
        "--cross-check",
        type=str,
        choices=[Strategy.NESTED.value, Strategy.LEVEL_SCAN.value, Strategy.ADJACENCY.value, CP_SAT],
        help="Re-run the search with another algorithm and compare the results",
    )
    parser.add_argument(
        "--solver-timeout",
        type=float,
        default=300.0,
        help="Time limit in seconds for the cp-sat cross-check",
    )
    parser.add_argument(
        "--validate",
        action="store_true",
        help="Check every emitted combination for disjointness and ordering",
    )
    parser.add_argument("--quiet", action="store_true", help="Only print the level counts")
    parser.add_argument("--output", type=Path, help="Optional path to JSON output")
    parser.add_argument(
        "--log-level",
        type=str,
        default="WARNING",
        help="Logging level (DEBUG, INFO, WARNING, ERROR)",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    level = getattr(logging, args.log_level.upper(), logging.WARNING)
    configure_logging(level)

    if bool(args.words_file) == bool(args.words_url):
        parser.error("provide exactly one of WORDS_FILE or --words-url")
    if args.limit is not None and args.limit < 0:
        parser.error("--limit must not be negative")
    if args.counter_bits < 1:
        parser.error("--counter-bits must be positive")
    if args.limit is not None and args.cross_check:
        parser.error("--cross-check needs the complete result and cannot be combined with --limit")

    try:
        texts = load_word_list(WordListConfig(path=args.words_file, url=args.words_url))
        config = SearchConfig(
            strategy=args.strategy,
            order=args.order,
            counter_bits=args.counter_bits,
            limit=args.limit,
            solver_timeout_seconds=args.solver_timeout,
        )
        words = prepare_words(texts, order=config.order)
        result = search_words(words, config)

        id_combos: List[tuple] = []
        for ids in result.iter_ids():
            id_combos.append(ids)
            if not args.quiet and not args.output:
                print(format_combination(tuple(words[i].text for i in ids)))

        if args.validate:
            validation = CombinationValidator(words).validate(id_combos)
            if not validation.ok:
                for message in validation.messages:
                    print(message, file=sys.stderr)
                return 1

        if args.cross_check:
            cross_check(
                words,
                set(id_combos),
                args.cross_check,
                solver_timeout_seconds=args.solver_timeout,
            )
    except FiveWordsError as exc:
        LOGGER.error("%s", exc)
        print(f"error: {exc}", file=sys.stderr)
        return 2

    if args.output:
        payload: Dict[str, Any] = {
            "strategy": config.strategy.value,
            "order": config.order.value,
            "complete": result.complete,
            "counts": {str(size): count for size, count in result.counts.counts.items()},
            "combinations": [[words[i].text for i in ids] for ids in id_combos],
        }
        args.output.write_text(json.dumps(payload, indent=2), encoding="utf-8")
    else:
        print_counts(result.counts, complete=result.complete)
    return 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
