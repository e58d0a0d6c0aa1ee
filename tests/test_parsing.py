"""Tests for model output parsing."""

import pytest

from tradewatch.llm.parsing import parse_boolean, parse_json_array


@pytest.mark.parametrize("text", ["YES", "yes", " Yes. ", "TRUE", "y", "1"])
def test_parse_boolean_affirmative(text: str) -> None:
    assert parse_boolean(text) is True


@pytest.mark.parametrize("text", ["NO", "no!", "False", "n", "0", "off"])
def test_parse_boolean_negative(text: str) -> None:
    assert parse_boolean(text) is False


@pytest.mark.parametrize("text", ["", "maybe", "Yes, definitely"])
def test_parse_boolean_unparseable(text: str) -> None:
    assert parse_boolean(text) is None


def test_parse_json_array_from_fenced_block() -> None:
    text = 'Here you go:\n```json\n[{"ticker": "ROULETTE"}]\n```\nDone.'
    assert parse_json_array(text) == [{"ticker": "ROULETTE"}]


def test_parse_json_array_bare() -> None:
    assert parse_json_array('[{"a": 1}, {"b": 2}]') == [{"a": 1}, {"b": 2}]


def test_parse_json_array_with_surrounding_prose() -> None:
    assert parse_json_array('Sure! [{"a": 1}] hope that helps') == [{"a": 1}]


def test_parse_json_array_empty_array() -> None:
    assert parse_json_array("```json\n[]\n```") == []


def test_parse_json_array_drops_non_objects() -> None:
    assert parse_json_array('[{"a": 1}, "junk", 3, null]') == [{"a": 1}]


@pytest.mark.parametrize(
    "text",
    ["", "   ", "null", '{"ticker": "X"}', "not json at all", "```json\n[{broken\n```"],
)
def test_parse_json_array_unparseable(text: str) -> None:
    assert parse_json_array(text) is None
