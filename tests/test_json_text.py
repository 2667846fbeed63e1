import json

import pytest

from editing import format_json, validate_json


@pytest.mark.parametrize(
    "content",
    [
        '{"name":"test","value":123}',
        "[1, 2, 3]",
        '"just a string"',
        "42",
        "null",
        '  {"nested": {"list": [true, false, null]}}\n',
    ],
)
def test_validate_json_accepts_documents(content):
    assert validate_json(content) is True


@pytest.mark.parametrize(
    "content",
    [
        None,
        "",
        "   \n\t ",
        "{invalid json}",
        '{"a": 1,}',
        '{"a": 1} {"b": 2}',
        "[NaN]",
        '{"x": Infinity}',
        "// comment\n{}",
    ],
)
def test_validate_json_rejects_without_raising(content):
    assert validate_json(content) is False


def test_validate_json_survives_deep_nesting():
    assert validate_json("[" * 100000 + "]" * 100000) in (True, False)


def test_format_json_indents_consistently():
    formatted = format_json('{"name":"test","items":[1,2]}')
    assert formatted.splitlines() == [
        "{",
        '  "name": "test",',
        '  "items": [',
        "    1,",
        "    2",
        "  ]",
        "}",
    ]


def test_format_json_is_idempotent_under_reparse():
    source = '{"b": [1, {"c": "ü"}], "a": null}'
    once = format_json(source)
    twice = format_json(once)
    assert json.loads(once) == json.loads(twice) == json.loads(source)
    assert once == twice
    assert "ü" in once


def test_format_json_rejects_invalid_input():
    with pytest.raises(ValueError, match="Invalid JSON"):
        format_json("{not json")
