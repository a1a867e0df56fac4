"""String similarity scoring."""

from __future__ import annotations

import math

from rapidfuzz.distance import Levenshtein

EXACT_SCORE = 100
CONTAINS_SCORE = 85


def similarity(a: str, b: str) -> int:
    """Return a 0-100 confidence that ``a`` and ``b`` name the same thing.

    Both strings are trimmed and casefolded first. Equal strings score 100 and
    a string contained in the other scores 85; everything else is scored by
    Levenshtein distance relative to the longer string.
    """
    s1 = a.strip().casefold()
    s2 = b.strip().casefold()

    if s1 == s2:
        return EXACT_SCORE
    if not s1 or not s2:
        return 0
    if s1 in s2 or s2 in s1:
        return CONTAINS_SCORE

    distance = Levenshtein.distance(s1, s2)
    max_length = max(len(s1), len(s2))
    return _round_half_up((1 - distance / max_length) * 100)


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))
