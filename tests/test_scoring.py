import unittest

from core.scoring import MatchResult, WarningScorer, score_warnings
from models import LintWarning


def warning(path="a", key="k", message="hardcoded secret"):
    return LintWarning(path=path, key=key, message=message)


class PairScoreTests(unittest.TestCase):
    def setUp(self):
        self.scorer = WarningScorer()

    def test_full_match_components(self):
        pair = self.scorer.score_pair(warning(), warning(message="hardcoded secret value"))

        self.assertEqual(pair.path, 1.0)
        self.assertEqual(pair.key, 1.0)
        self.assertGreater(pair.message, 0.8)
        self.assertGreaterEqual(pair.total, 0.75)

    def test_key_is_case_sensitive(self):
        pair = self.scorer.score_pair(warning(key="Region"), warning(key="region"))

        self.assertEqual(pair.key, 0.0)
        self.assertLess(pair.total, 0.75)

    def test_path_and_message_alone_stay_below_threshold(self):
        pair = self.scorer.score_pair(warning(key="x"), warning(key="y"))

        self.assertAlmostEqual(pair.total, 0.4 + 0.2, places=6)
        self.assertLess(pair.total, self.scorer.threshold)

    def test_path_and_key_alone_clear_threshold(self):
        pair = self.scorer.score_pair(warning(message="alpha"), warning(message="beta"))

        self.assertEqual(pair.message, 0.0)
        self.assertAlmostEqual(pair.total, 0.8)


class ScoreWarningsTests(unittest.TestCase):
    def test_similar_warning_is_perfect(self):
        precision, recall = score_warnings([warning()], [warning(message="hardcoded secret value")])

        self.assertEqual((precision, recall), (1.0, 1.0))

    def test_both_empty_is_perfect(self):
        self.assertEqual(score_warnings([], []), (1.0, 1.0))

    def test_nothing_expected_but_something_reported(self):
        self.assertEqual(score_warnings([], [warning()]), (0.0, 1.0))

    def test_something_expected_but_nothing_reported(self):
        self.assertEqual(score_warnings([warning()], []), (1.0, 0.0))

    def test_partial_match(self):
        expected = [warning(key="region"), warning(key="token")]
        actual = [
            warning(key="region"),
            warning(key="password"),
            warning(key="replicas"),
            warning(key="image"),
        ]

        precision, recall = score_warnings(expected, actual)

        self.assertEqual(precision, 0.25)
        self.assertEqual(recall, 0.5)

    def test_path_overlap_counts_for_multi_file_paths(self):
        expected = [warning(path="c/values.yaml, c/default.yaml", key="logLevel")]
        actual = [warning(path="c/default.yaml", key="logLevel", message="duplicate key")]

        self.assertEqual(score_warnings(expected, actual), (1.0, 1.0))


class GreedyMatchingTests(unittest.TestCase):
    def setUp(self):
        self.scorer = WarningScorer()

    def test_actual_warning_is_never_used_twice(self):
        expected = [warning(), warning()]
        actual = [warning()]

        result = self.scorer.match(expected, actual)

        self.assertEqual(result.matches, 1)
        self.assertEqual(result.used, [True])
        self.assertEqual(result.unmatched_expected, [1])
        self.assertEqual((result.precision, result.recall), (1.0, 0.5))

    def test_first_fit_not_best_fit(self):
        expected = [warning(message="hardcoded secret")]
        actual = [
            warning(message="something unrelated"),
            warning(message="hardcoded secret"),
        ]

        result = self.scorer.match(expected, actual)

        # The first candidate already clears the threshold on path + key.
        self.assertEqual(result.pairs[0][1], 0)
        self.assertEqual(result.unmatched_actual, [1])

    def test_greedy_order_can_lose_a_match(self):
        # Expected #0 could use either actual; it takes the first, leaving
        # expected #1 (which only fits actual #0) unmatched.
        expected = [
            warning(path="a, b", key="k"),
            warning(path="a", key="k"),
        ]
        actual = [
            warning(path="a", key="k"),
            warning(path="b", key="k"),
        ]

        result = self.scorer.match(expected, actual)

        self.assertEqual(result.matches, 1)
        self.assertEqual(result.used, [True, False])

    def test_matches_bounded_by_smaller_side(self):
        cases = [
            ([warning()] * 3, [warning()] * 5),
            ([warning()] * 5, [warning()] * 2),
            ([warning(key=str(i)) for i in range(4)], [warning(key=str(i)) for i in range(4)]),
        ]
        for expected, actual in cases:
            result = self.scorer.match(expected, actual)
            self.assertLessEqual(result.matches, min(len(expected), len(actual)))
            self.assertEqual(sum(result.used), result.matches)
            matched_actual = [a for _, a, _ in result.pairs]
            self.assertEqual(len(matched_actual), len(set(matched_actual)))

    def test_result_is_fresh_per_call(self):
        first = self.scorer.match([warning()], [warning()])
        second = self.scorer.match([warning()], [warning()])

        self.assertIsInstance(first, MatchResult)
        self.assertIsNot(first.used, second.used)
        self.assertEqual(second.matches, 1)


class ScorerConfigTests(unittest.TestCase):
    def test_from_config_overrides_weights_and_threshold(self):
        scorer = WarningScorer.from_config(
            {"path_weight": 0.2, "key_weight": 0.3, "message_weight": 0.5, "match_threshold": 0.9}
        )

        self.assertEqual(scorer.weights, {"path": 0.2, "key": 0.3, "message": 0.5})
        self.assertEqual(scorer.threshold, 0.9)
        # Path and key alone no longer suffice
        self.assertEqual(scorer.score([warning(message="x")], [warning(message="y")]), (0.0, 0.0))

    def test_from_config_defaults(self):
        scorer = WarningScorer.from_config({})

        self.assertEqual(scorer.weights, {"path": 0.4, "key": 0.4, "message": 0.2})
        self.assertEqual(scorer.threshold, 0.75)


if __name__ == "__main__":
    unittest.main()
