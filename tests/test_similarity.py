"""Tests for similarity scoring."""

import pytest

from bean_match.similarity import similarity


@pytest.mark.parametrize("value", ["Ethiopia", "게이샤", "Huila, Colombia", "sl-28", ""])
def test_identical_strings_score_100(value):
    assert similarity(value, value) == 100


@pytest.mark.parametrize("value", ["Ethiopia", "washed", "Costa Rica", "straße"])
def test_case_and_whitespace_are_ignored(value):
    assert similarity(value, value.upper()) == 100
    assert similarity(value, f"  {value} ") == 100


def test_case_folding_handles_expanding_uppercase():
    assert similarity("Straße", "STRASSE") == 100


def test_substring_scores_85():
    assert similarity("Colombia", "Huila, Colombia") == 85
    assert similarity("Huila, Colombia", "Colombia") == 85


def test_empty_against_non_empty_scores_zero():
    assert similarity("abc", "") == 0
    assert similarity("", "abc") == 0


def test_single_typo_uses_edit_distance():
    assert similarity("kenya", "kenia") == 80
    assert similarity("ethipia", "ethiopia") == 88


def test_half_scores_round_up():
    # distance 3 over length 8 -> 62.5
    assert similarity("abcdefgh", "abcdexyz") == 63


def test_unrelated_strings_score_low():
    assert similarity("xyzzyqqq", "ethiopia") < 50


@pytest.mark.parametrize(
    ("a", "b"),
    [
        ("ethiopia", "ethiopian"),
        ("게샤", "게이샤"),
        ("natural", "neutral"),
        ("Sidra", "Sidamo"),
        ("washed", "semi washed"),
    ],
)
def test_similarity_is_symmetric(a, b):
    assert similarity(a, b) == similarity(b, a)
