"""Tests for match presentation helpers."""

import pytest

from bean_match import MatchResult, confidence_level, format_match_result, needs_review


def _match(confidence: int) -> MatchResult:
    return MatchResult(id="ethiopia", name="에티오피아", english_name="Ethiopia", confidence=confidence)


@pytest.mark.parametrize(
    ("confidence", "expected"),
    [(100, "high"), (90, "high"), (89, "medium"), (75, "medium"), (74, "low"), (70, "low")],
)
def test_confidence_level(confidence, expected):
    assert confidence_level(_match(confidence)) == expected


def test_confidence_level_without_match():
    assert confidence_level(None) == "none"


def test_needs_review():
    assert needs_review(None)
    assert needs_review(_match(84))
    assert not needs_review(_match(85))


def test_format_high_confidence_shows_name_only():
    assert format_match_result(_match(95)) == "에티오피아"


def test_format_medium_confidence_shows_percentage():
    assert format_match_result(_match(88)) == "에티오피아 (88% 일치)"
    assert format_match_result(_match(80)) == "에티오피아 (80% 일치)"


def test_format_low_confidence_shows_english_name():
    assert format_match_result(_match(79)) == "에티오피아 (Ethiopia) - 79% 일치"
