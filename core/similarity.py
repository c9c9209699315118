"""
Bag-of-words text similarity.

Messages from the linter model are free text, so they are compared by
word counts over the shared vocabulary of the two strings.
"""

import math
from collections import Counter

__all__ = ["EPSILON", "tokenize", "vectorize", "cosine_similarity"]

EPSILON = 1e-8


def tokenize(text: str) -> list[str]:
    """Lowercase and split on whitespace."""
    return text.lower().split()


def vectorize(a: str, b: str) -> tuple[list[float], list[float]]:
    """
    Build term-count vectors for two strings over their union vocabulary.

    Both vectors use the same vocabulary order, so component i of each
    refers to the same word.
    """
    a_words = tokenize(a)
    b_words = tokenize(b)
    vocabulary = list(dict.fromkeys(a_words + b_words))

    a_counts = Counter(a_words)
    b_counts = Counter(b_words)
    vec_a = [float(a_counts[word]) for word in vocabulary]
    vec_b = [float(b_counts[word]) for word in vocabulary]
    return vec_a, vec_b


def _dot(a: list[float], b: list[float]) -> float:
    return sum(x * y for x, y in zip(a, b))


def _magnitude(v: list[float]) -> float:
    return math.sqrt(sum(x * x for x in v))


def cosine_similarity(a: str, b: str) -> float:
    """Cosine similarity of the word-count vectors of ``a`` and ``b``.

    Returns 0.0 for strings with no word in common (including empty ones)
    and a value just under 1.0 for identical non-empty strings.
    """
    vec_a, vec_b = vectorize(a, b)
    return _dot(vec_a, vec_b) / (_magnitude(vec_a) * _magnitude(vec_b) + EPSILON)
