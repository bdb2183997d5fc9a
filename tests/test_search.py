import unittest

from fivewords.core.constants import Strategy, WordOrder
from fivewords.core.exceptions import CounterOverflowError, CrossCheckError, InvalidCharacterError
from fivewords.data.anagrams import prepare_words
from fivewords.data.encoding import popcount
from fivewords.engine.oracles import build_adjacency
from fivewords.engine.search import SearchConfig, collect_ids, cross_check, find_combinations, search_words

from tests.helpers import DISJOINT_FIVE, random_word_list


class StrategyAgreementTests(unittest.TestCase):
    def test_all_strategies_agree_on_random_lists(self) -> None:
        for seed in (1, 2, 11):
            words = prepare_words(random_word_list(seed=seed))
            reference = search_words(words, SearchConfig(strategy=Strategy.NESTED))
            expected_ids = set(reference.iter_ids())
            expected_counts = reference.counts.as_tuple()
            for strategy in (Strategy.TREE, Strategy.LEVEL_SCAN, Strategy.ADJACENCY):
                with self.subTest(seed=seed, strategy=strategy):
                    result = search_words(words, SearchConfig(strategy=strategy))
                    self.assertEqual(set(result.iter_ids()), expected_ids)
                    self.assertEqual(result.counts.as_tuple(), expected_counts)
                    self.assertTrue(result.complete)

    def test_strategies_agree_on_concrete_scenario(self) -> None:
        words = prepare_words(DISJOINT_FIVE)
        for strategy in Strategy:
            with self.subTest(strategy=strategy):
                result = search_words(words, SearchConfig(strategy=strategy))
                self.assertEqual(len(result.drain()), 1)
                self.assertEqual(result.counts.as_tuple(), (5, 10, 10, 5, 1))

    def test_adjacency_lists_are_increasing_and_disjoint(self) -> None:
        words = prepare_words(random_word_list(seed=5))
        for i, neighbours in enumerate(build_adjacency(words)):
            self.assertEqual(neighbours, sorted(neighbours))
            for j in neighbours:
                self.assertGreater(j, i)
                self.assertFalse(words[i].mask & words[j].mask)


class FindCombinationsTests(unittest.TestCase):
    def test_every_combination_covers_twenty_five_letters(self) -> None:
        result = find_combinations(random_word_list(seed=4))
        combos = list(result.iter_ids())
        self.assertTrue(combos)
        for ids in combos:
            union = 0
            for a in ids:
                for b in ids:
                    if a != b:
                        self.assertFalse(result.words[a].mask & result.words[b].mask)
                union |= result.words[a].mask
            self.assertEqual(popcount(union), 25)
            self.assertEqual(list(ids), sorted(set(ids)))

    def test_anagram_representative_is_reported(self) -> None:
        texts = ["EDCBA", "FGHIJ", "KLMNO", "ABCDE", "PQRST", "UVWXY", "JIHGF"]
        result = find_combinations(texts)
        combos = result.drain()
        self.assertEqual(len(combos), 1)
        self.assertEqual(set(combos[0]), {"EDCBA", "FGHIJ", "KLMNO", "PQRST", "UVWXY"})

    def test_input_order_reports_combination_in_input_order(self) -> None:
        result = find_combinations(DISJOINT_FIVE, SearchConfig(order=WordOrder.INPUT))
        self.assertEqual(result.drain(), [tuple(DISJOINT_FIVE)])

    def test_orderings_find_same_letter_sets(self) -> None:
        texts = random_word_list(seed=9)
        found = {}
        for order in WordOrder:
            result = find_combinations(texts, SearchConfig(order=order))
            found[order] = {frozenset(combo) for combo in result}
        self.assertEqual(found[WordOrder.INPUT], found[WordOrder.REVERSED_MASK])

    def test_counts_are_reported_for_all_levels(self) -> None:
        result = find_combinations(["ABCDE", "ABCDF"])
        self.assertEqual(result.drain(), [])
        self.assertEqual(result.counts.pairs, 0)
        self.assertEqual(result.counts.as_tuple()[1:], (0, 0, 0, 0))

    def test_running_twice_is_idempotent(self) -> None:
        texts = random_word_list(seed=12)
        first = find_combinations(texts)
        second = find_combinations(texts)
        self.assertEqual(first.drain(), second.drain())
        self.assertEqual(first.counts.as_tuple(), second.counts.as_tuple())

    def test_invalid_character_is_fatal(self) -> None:
        with self.assertRaises(InvalidCharacterError):
            find_combinations(["ABCDE", "AB3DE"])

    def test_non_ascii_case_folding_letters_are_fatal(self) -> None:
        for first in ("ıBCDE", "ſBCDE", "ßBCDE"):
            with self.subTest(word=first):
                with self.assertRaises(InvalidCharacterError):
                    find_combinations([first, "FGHJK"]).drain()

    def test_limit_on_oracle_strategy(self) -> None:
        result = find_combinations(random_word_list(seed=4), SearchConfig(strategy=Strategy.ADJACENCY, limit=1))
        self.assertEqual(len(result.drain()), 1)
        self.assertFalse(result.complete)

    def test_oracle_counter_overflow(self) -> None:
        result = find_combinations(DISJOINT_FIVE, SearchConfig(strategy=Strategy.NESTED, counter_bits=3))
        with self.assertRaises(CounterOverflowError):
            result.drain()


class SearchResultLimitTests(unittest.TestCase):
    def test_limit_equal_to_total_marks_complete(self) -> None:
        result = find_combinations(DISJOINT_FIVE, SearchConfig(limit=1))
        self.assertEqual(len(result.drain()), 1)
        self.assertTrue(result.complete)
        self.assertEqual(result.counts.quints, 1)

    def test_limit_below_total_stays_incomplete(self) -> None:
        result = find_combinations(DISJOINT_FIVE + ["ZABCD"], SearchConfig(limit=1))
        self.assertEqual(len(result.drain()), 1)
        self.assertFalse(result.complete)

    def test_second_pass_does_not_exceed_limit(self) -> None:
        texts = DISJOINT_FIVE + ["ZABCD", "ZEBRA"]
        for strategy in Strategy:
            with self.subTest(strategy=strategy):
                result = find_combinations(texts, SearchConfig(strategy=strategy, limit=1))
                self.assertEqual(len(result.drain()), 1)
                self.assertEqual(result.drain(), [])
                self.assertEqual(result.emitted, 1)
                self.assertFalse(result.complete)

    def test_zero_limit_emits_nothing(self) -> None:
        result = find_combinations(DISJOINT_FIVE, SearchConfig(limit=0))
        self.assertEqual(result.drain(), [])
        self.assertFalse(result.complete)

    def test_exhausted_result_is_empty_on_second_pass(self) -> None:
        result = find_combinations(DISJOINT_FIVE)
        self.assertEqual(len(result.drain()), 1)
        self.assertEqual(result.drain(), [])
        self.assertTrue(result.complete)


class SearchConfigTests(unittest.TestCase):
    def test_strings_are_coerced_to_enums(self) -> None:
        config = SearchConfig(strategy="adjacency", order="input")
        self.assertIs(config.strategy, Strategy.ADJACENCY)
        self.assertIs(config.order, WordOrder.INPUT)

    def test_rejects_bad_values(self) -> None:
        with self.assertRaises(ValueError):
            SearchConfig(strategy="bogus")
        with self.assertRaises(ValueError):
            SearchConfig(counter_bits=0)
        with self.assertRaises(ValueError):
            SearchConfig(limit=-1)


class CrossCheckTests(unittest.TestCase):
    def setUp(self) -> None:
        self.words = prepare_words(random_word_list(seed=6))
        self.expected = collect_ids(self.words, Strategy.TREE)

    def test_matching_oracle_passes(self) -> None:
        cross_check(self.words, self.expected, Strategy.LEVEL_SCAN)

    def test_mismatch_raises(self) -> None:
        tampered = set(list(self.expected)[1:])
        with self.assertRaises(CrossCheckError):
            cross_check(self.words, tampered, Strategy.NESTED)


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
