"""
Fuzzy matching of extracted warnings against expected warnings.

Each (expected, actual) pair gets a weighted score from path overlap,
key equality and message similarity. Matching is greedy and first-fit:
expected warnings are visited in order and each one claims the first
unused actual warning whose score clears the threshold. There is no
backtracking, so results depend on input order.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Sequence

from core.paths import paths_overlap
from core.similarity import cosine_similarity
from models import LintWarning

__all__ = [
    "DEFAULT_WEIGHTS",
    "MATCH_THRESHOLD",
    "PairScore",
    "MatchResult",
    "WarningScorer",
    "score_warnings",
]

logger = logging.getLogger(__name__)

# ══════════════════════════════════════════════════════════════════════════════
# Scoring Constants
# ══════════════════════════════════════════════════════════════════════════════

DEFAULT_WEIGHTS: dict[str, float] = {
    "path": 0.4,
    "key": 0.4,
    "message": 0.2,
}

MATCH_THRESHOLD = 0.75

# ══════════════════════════════════════════════════════════════════════════════
# Results
# ══════════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True)
class PairScore:
    """Component and weighted scores for one (expected, actual) pair."""

    path: float
    key: float
    message: float
    total: float


@dataclass
class MatchResult:
    """Outcome of matching one expected list against one actual list."""

    expected_count: int
    actual_count: int
    used: list[bool]
    # (expected index, actual index, score) for every accepted match
    pairs: list[tuple[int, int, PairScore]] = field(default_factory=list)

    @property
    def matches(self) -> int:
        return len(self.pairs)

    @property
    def precision(self) -> float:
        # Nothing reported means nothing reported wrongly.
        if self.actual_count > 0:
            return self.matches / self.actual_count
        return 1.0

    @property
    def recall(self) -> float:
        if self.expected_count > 0:
            return self.matches / self.expected_count
        return 1.0

    @property
    def unmatched_expected(self) -> list[int]:
        matched = {e for e, _, _ in self.pairs}
        return [i for i in range(self.expected_count) if i not in matched]

    @property
    def unmatched_actual(self) -> list[int]:
        return [i for i, was_used in enumerate(self.used) if not was_used]


# ══════════════════════════════════════════════════════════════════════════════
# Warning Scorer
# ══════════════════════════════════════════════════════════════════════════════


class WarningScorer:
    """
    Score extracted warnings against expected ones.

    Example:
        >>> scorer = WarningScorer()
        >>> precision, recall = scorer.score(expected, extracted)
    """

    def __init__(
        self,
        weights: dict[str, float] | None = None,
        threshold: float = MATCH_THRESHOLD,
    ):
        self.weights = {**DEFAULT_WEIGHTS, **(weights or {})}
        self.threshold = threshold

    @classmethod
    def from_config(cls, scoring: dict[str, Any]) -> "WarningScorer":
        """Build a scorer from the ``scoring`` section of the configuration."""
        weights = {
            "path": scoring.get("path_weight", DEFAULT_WEIGHTS["path"]),
            "key": scoring.get("key_weight", DEFAULT_WEIGHTS["key"]),
            "message": scoring.get("message_weight", DEFAULT_WEIGHTS["message"]),
        }
        return cls(weights, scoring.get("match_threshold", MATCH_THRESHOLD))

    def score_pair(self, expected: LintWarning, actual: LintWarning) -> PairScore:
        """Weighted similarity of two warnings."""
        path_score = 1.0 if paths_overlap(expected.path, actual.path) else 0.0
        key_score = 1.0 if expected.key == actual.key else 0.0
        msg_score = cosine_similarity(expected.message, actual.message)

        total = (
            self.weights["path"] * path_score
            + self.weights["key"] * key_score
            + self.weights["message"] * msg_score
        )
        return PairScore(path_score, key_score, msg_score, total)

    def match(
        self, expected: Sequence[LintWarning], actual: Sequence[LintWarning]
    ) -> MatchResult:
        """Greedily pair each expected warning with the first acceptable actual one."""
        result = MatchResult(
            expected_count=len(expected),
            actual_count=len(actual),
            used=[False] * len(actual),
        )

        for e_idx, exp in enumerate(expected):
            for a_idx, act in enumerate(actual):
                if result.used[a_idx]:
                    continue

                pair = self.score_pair(exp, act)
                if pair.total >= self.threshold:
                    result.used[a_idx] = True
                    result.pairs.append((e_idx, a_idx, pair))
                    logger.debug(
                        "Matched expected %s/%s to extracted %s/%s (%.2f)",
                        exp.path,
                        exp.key,
                        act.path,
                        act.key,
                        pair.total,
                    )
                    break

        return result

    def score(
        self, expected: Sequence[LintWarning], actual: Sequence[LintWarning]
    ) -> tuple[float, float]:
        """Return (precision, recall) of ``actual`` against ``expected``."""
        result = self.match(expected, actual)
        return result.precision, result.recall


def score_warnings(
    expected: Sequence[LintWarning], actual: Sequence[LintWarning]
) -> tuple[float, float]:
    """(precision, recall) with the default weights and threshold."""
    return WarningScorer().score(expected, actual)
