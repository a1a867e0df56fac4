"""Tests for the command-line interface."""

import json

import pytest

from bean_match.cli import main


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ("BEAN_MATCH_CATALOG_VERSION", "BEAN_MATCH_MIN_CONFIDENCE", "BEAN_MATCH_SCOPE_MODE"):
        monkeypatch.delenv(name, raising=False)


def test_match_json_output(capsys):
    exit_code = main(["match", "country", "에티오피아", "--json"])

    assert exit_code == 0
    payload = json.loads(capsys.readouterr().out)
    assert payload["id"] == "ethiopia"
    assert payload["confidence"] == 100


def test_match_formatted_output(capsys):
    exit_code = main(["match", "variety", "gesha"])

    out = capsys.readouterr().out
    assert exit_code == 0
    assert "geisha" in out
    assert "100 (high)" in out


def test_match_farm_with_scope(capsys):
    exit_code = main(["match", "farm", "Elida Estate", "--scope", "보케테", "--json"])

    assert exit_code == 0
    assert json.loads(capsys.readouterr().out)["id"] == "elida_estate"


def test_no_match_exits_with_error(capsys):
    exit_code = main(["match", "country", "xyzzyqqq"])

    assert exit_code == 1
    assert "No match" in capsys.readouterr().err


def test_scope_rejected_for_flat_category():
    with pytest.raises(SystemExit) as exc_info:
        main(["match", "country", "kenya", "--scope", "africa"])

    assert exc_info.value.code == 2


def test_options_lists_entities(capsys):
    exit_code = main(["options", "process"])

    out = capsys.readouterr().out
    assert exit_code == 0
    assert "washed" in out
    assert "Carbonic Maceration" in out


def test_validate_packaged_catalog(capsys):
    exit_code = main(["validate"])

    assert exit_code == 0
    assert "[catalog-check] OK (v1)" in capsys.readouterr().out


def test_unknown_catalog_version_reports_error(monkeypatch, capsys):
    monkeypatch.setenv("BEAN_MATCH_CATALOG_VERSION", "v999")

    exit_code = main(["validate"])

    assert exit_code == 1
    assert "Error:" in capsys.readouterr().err


def test_validate_reports_problems(mocker, capsys):
    mocker.patch("bean_match.cli.validate_catalog", return_value=["country: duplicate id 'kenya'"])

    exit_code = main(["validate"])

    assert exit_code == 1
    assert "country: duplicate id 'kenya'" in capsys.readouterr().out
