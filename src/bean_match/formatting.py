"""Presentation helpers for match results."""

from __future__ import annotations

from typing import Literal

from bean_match.schema import MatchResult

ConfidenceLevel = Literal["high", "medium", "low", "none"]

HIGH_CONFIDENCE = 90
MEDIUM_CONFIDENCE = 75
REVIEW_BELOW = 85
NAME_ONLY_AT = 95
PERCENT_ONLY_AT = 80


def confidence_level(match: MatchResult | None) -> ConfidenceLevel:
    if match is None:
        return "none"
    if match.confidence >= HIGH_CONFIDENCE:
        return "high"
    if match.confidence >= MEDIUM_CONFIDENCE:
        return "medium"
    return "low"


def needs_review(match: MatchResult | None) -> bool:
    """Whether the user should be offered suggestions instead of the match."""
    return match is None or match.confidence < REVIEW_BELOW


def format_match_result(match: MatchResult) -> str:
    """Format a match for display, adding detail as confidence drops."""
    if match.confidence >= NAME_ONLY_AT:
        return match.name
    if match.confidence >= PERCENT_ONLY_AT:
        return f"{match.name} ({match.confidence}% 일치)"
    return f"{match.name} ({match.english_name}) - {match.confidence}% 일치"
