"""Loose comparison of comma-separated path lists."""

__all__ = ["normalize_path", "has_common_element", "paths_overlap"]


def normalize_path(path: str) -> list[str]:
    """Split on commas, strip each segment and sort."""
    return sorted(part.strip() for part in path.split(","))


def has_common_element(first: list[str], second: list[str]) -> bool:
    """True if any element of ``second`` also appears in ``first``."""
    elements = set(first)
    return any(item in elements for item in second)


def paths_overlap(p1: str, p2: str) -> bool:
    """
    True if two warning paths mention at least one common file.

    Models often list several files for one warning ("a/values.yaml,
    a/default.yaml") or emit them in a different order, so any shared
    segment counts. A blank path never overlaps anything.
    """
    if not p1.strip() or not p2.strip():
        return False
    return has_common_element(normalize_path(p1), normalize_path(p2))
