"""
Core logic for the linter evaluation harness.

This module provides the fuzzy grading of free-form linter output:

    Similarity     Bag-of-words cosine similarity for warning messages
    Paths          Loose overlap test for comma-separated path lists
    Extraction     Regex recovery of (path, key, message) warnings
    Scoring        Greedy first-fit matching and precision/recall
    Metrics        Per-case results and suite reports
"""

from core.extraction import (
    WARNING_PATTERN,
    extract_warnings,
)
from core.metrics import (
    CaseResult,
    EvalReport,
    format_report,
)
from core.paths import (
    has_common_element,
    normalize_path,
    paths_overlap,
)
from core.scoring import (
    DEFAULT_WEIGHTS,
    MATCH_THRESHOLD,
    MatchResult,
    PairScore,
    WarningScorer,
    score_warnings,
)
from core.similarity import (
    cosine_similarity,
    tokenize,
    vectorize,
)

__all__ = [
    # Similarity
    "tokenize",
    "vectorize",
    "cosine_similarity",
    # Paths
    "normalize_path",
    "has_common_element",
    "paths_overlap",
    # Extraction
    "WARNING_PATTERN",
    "extract_warnings",
    # Scoring
    "DEFAULT_WEIGHTS",
    "MATCH_THRESHOLD",
    "PairScore",
    "MatchResult",
    "WarningScorer",
    "score_warnings",
    # Metrics
    "CaseResult",
    "EvalReport",
    "format_report",
]
