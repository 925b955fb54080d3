import sys

import pytest

from argv_flags.parser import FlagParser, IssueCode, parse_args

SCHEMA = {
    "name": {"type": "string", "flags": ["--name", "-n"]},
    "verbose": {"type": "boolean", "flags": ["--verbose", "-v"]},
}


def test_double_dash_stops_parsing():
    result = parse_args(SCHEMA, ["--name", "x", "--", "--verbose", "-n", "--"])
    assert result.values == {"name": "x", "verbose": None}
    assert result.rest == ["--verbose", "-n", "--"]
    assert result.ok is True


def test_double_dash_as_flag_when_not_stopping():
    result = parse_args(SCHEMA, ["--", "--verbose"], stop_at_double_dash=False)
    assert result.values["verbose"] is True
    assert result.ok is False
    (issue,) = result.issues
    assert issue.code == IssueCode.UNKNOWN_FLAG
    assert issue.flag == "--"
    assert issue.message == "Unknown flag --."


def test_positionals_go_to_rest_in_order():
    result = parse_args(SCHEMA, ["build", "--verbose", "src", "-", "dist"])
    assert result.rest == ["build", "src", "-", "dist"]
    assert result.values["verbose"] is True


def test_unknown_flag_reported():
    result = parse_args(SCHEMA, ["--bogus", "-x"])
    assert result.ok is False
    assert [(i.code, i.flag, i.index) for i in result.issues] == [
        (IssueCode.UNKNOWN_FLAG, "--bogus", 0),
        (IssueCode.UNKNOWN_FLAG, "-x", 1),
    ]
    assert result.unknown == []


def test_unknown_flag_with_inline_value_reports_flag_part():
    result = parse_args(SCHEMA, ["--bogus=1"])
    assert result.issues[0].flag == "--bogus"


def test_allow_unknown_collects_raw_tokens():
    result = parse_args(SCHEMA, ["--bogus=1", "--name", "x"], allow_unknown=True)
    assert result.ok is True
    assert result.unknown == ["--bogus=1"]
    assert result.issues == []


def test_unknown_flag_does_not_consume_value():
    result = parse_args(SCHEMA, ["--bogus", "value"], allow_unknown=True)
    assert result.unknown == ["--bogus"]
    assert result.rest == ["value"]


def test_empty_argv():
    result = parse_args(SCHEMA, [])
    assert result.ok is True
    assert result.rest == []
    assert result.present == {"name": False, "verbose": False}


def test_tuple_argv_is_accepted():
    result = parse_args(SCHEMA, ("--name", "x"))
    assert result.values["name"] == "x"


def test_string_argv_is_rejected():
    with pytest.raises(TypeError):
        parse_args(SCHEMA, "--name x")


def test_non_string_token_is_rejected():
    with pytest.raises(TypeError):
        parse_args(SCHEMA, ["--name", 3])


def test_argv_source_used_when_argv_is_none():
    result = parse_args(SCHEMA, argv_source=lambda: ["--name", "from-source"])
    assert result.values["name"] == "from-source"


def test_default_argv_source_reads_sys_argv(monkeypatch):
    monkeypatch.setattr(sys, "argv", ["prog", "--name", "from-argv"])
    result = parse_args(SCHEMA)
    assert result.values["name"] == "from-argv"


def test_explicit_argv_skips_argv_source():
    def fail():
        raise AssertionError("argv_source should not be called")

    result = parse_args(SCHEMA, ["-v"], argv_source=fail)
    assert result.values["verbose"] is True


def test_flag_parser_is_reusable():
    parser = FlagParser(SCHEMA)
    first = parser.parse(["--name", "a"])
    second = parser.parse(["--verbose"])
    assert first.values == {"name": "a", "verbose": None}
    assert second.values == {"name": None, "verbose": True}
    assert second.present["name"] is False


def test_flag_parser_str():
    schema = {**SCHEMA, "out": {"type": "string", "flags": ["--out"], "required": True}}
    parser = FlagParser(schema)
    assert str(parser) == "FlagParser(keys=3, flags=5, required=1)"
    assert repr(parser) == str(parser)
