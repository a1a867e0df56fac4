"""Tests for suggestion filtering and origin selection."""

from bean_match import OriginSelection, filter_suggestions
from bean_match.catalog import load_catalog


def test_filter_suggestions_by_korean_name():
    varieties = load_catalog("v1").varieties

    result = filter_suggestions(varieties, "버번")

    assert [item.id for item in result] == ["bourbon", "yellow_bourbon", "pink_bourbon"]


def test_filter_suggestions_by_english_name_ignores_case():
    processes = load_catalog("v1").processing_methods

    result = filter_suggestions(processes, "HONEY")

    assert [item.id for item in result] == ["honey", "black_honey", "red_honey", "yellow_honey"]


def test_filter_suggestions_blank_returns_all():
    countries = load_catalog("v1").countries

    assert filter_suggestions(countries, "") == list(countries)
    assert filter_suggestions(countries, None) == list(countries)


def test_filter_suggestions_no_hits():
    assert filter_suggestions(load_catalog("v1").countries, "zzz") == []


def test_changing_country_clears_region_and_farm():
    selection = OriginSelection(country="ethiopia", region="예가체프", farm="코체레")

    updated = selection.with_country("kenya")

    assert updated == OriginSelection(country="kenya")
    assert selection.region == "예가체프"


def test_same_country_keeps_dependents():
    selection = OriginSelection(country="ethiopia", region="예가체프", farm="코체레")

    assert selection.with_country("ethiopia") is selection


def test_changing_region_clears_farm_only():
    selection = OriginSelection(country="ethiopia", region="예가체프", farm="코체레")

    updated = selection.with_region("시다마")

    assert updated.country == "ethiopia"
    assert updated.region == "시다마"
    assert updated.farm is None


def test_with_farm_keeps_parents():
    selection = OriginSelection(country="brazil", region="세라도")

    updated = selection.with_farm("다테라 농장")

    assert updated == OriginSelection(country="brazil", region="세라도", farm="다테라 농장")


def test_scopes_follow_selection():
    selection = OriginSelection(country="brazil", region="세라도")

    assert selection.region_scope() == "brazil"
    assert selection.farm_scope() == "세라도"
