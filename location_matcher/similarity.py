"""
Edit-distance similarity between location strings.

similarity() maps the Levenshtein distance onto a 0-100 scale relative to the
longer string, so a single typo in an 8-letter district costs 12.5 points.
"""

from __future__ import annotations

from rapidfuzz.distance import Levenshtein


def levenshtein_distance(s1: str, s2: str) -> int:
    """
    Minimum number of single-character insertions, deletions or
    substitutions turning s1 into s2 (all operations cost 1).
    """
    return Levenshtein.distance(s1, s2)


def similarity(s1: str, s2: str) -> float:
    """Similarity percentage (0-100). Two empty strings are a perfect match."""
    max_len = max(len(s1), len(s2))
    if max_len == 0:
        return 100.0
    distance = levenshtein_distance(s1, s2)
    return (max_len - distance) / max_len * 100.0
