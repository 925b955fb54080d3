import pytest

from argv_flags.parser.utils import (
    coerce_bool,
    coerce_number,
    is_finite_number,
    is_flag_token,
    is_numeric_value,
    split_inline_value,
)


@pytest.mark.parametrize(
    "token, expected",
    [
        ("--name", True),
        ("-n", True),
        ("--", True),
        ("-3", True),
        ("-", False),
        ("name", False),
        ("", False),
        (None, False),
    ],
)
def test_is_flag_token(token, expected):
    assert is_flag_token(token) is expected


@pytest.mark.parametrize(
    "token, expected",
    [
        ("--name=value", ("--name", "value")),
        ("--name=", ("--name", "")),
        ("--name=a=b", ("--name", "a=b")),
        ("--name", ("--name", None)),
        ("=value", ("=value", None)),
    ],
)
def test_split_inline_value(token, expected):
    assert split_inline_value(token) == expected


@pytest.mark.parametrize(
    "value, expected",
    [
        ("true", True),
        ("TRUE", True),
        ("1", True),
        ("yes", True),
        ("Y", True),
        ("on", True),
        ("false", False),
        ("0", False),
        ("No", False),
        ("n", False),
        ("OFF", False),
        ("banana", None),
        ("", None),
        ("t", None),
        (None, None),
    ],
)
def test_coerce_bool(value, expected):
    assert coerce_bool(value) is expected


@pytest.mark.parametrize(
    "value, expected",
    [
        ("42", 42),
        ("-3", -3),
        ("+7", 7),
        ("3.14", 3.14),
        ("-0.5", -0.5),
        (".5", 0.5),
        ("5.", 5.0),
        ("1e3", 1000.0),
        ("0x1f", 31),
        ("0o17", 15),
        ("0b101", 5),
        (" 12 ", 12),
    ],
)
def test_coerce_number(value, expected):
    result = coerce_number(value)
    assert result == expected
    assert type(result) is type(expected)


@pytest.mark.parametrize(
    "value",
    [
        "",
        " ",
        "abc",
        "NaN",
        "nan",
        "inf",
        "Infinity",
        "-Infinity",
        "1e999",
        "1_000",
        "-0x10",
        "3.1.4",
        "\u0663",
        "-\u0663",
        "\uff11\uff12",
        "1.\u0665",
    ],
)
def test_coerce_number_rejects(value):
    with pytest.raises(ValueError):
        coerce_number(value)
    assert is_numeric_value(value) is False


def test_is_numeric_value():
    assert is_numeric_value("-3") is True
    assert is_numeric_value("--3") is False
    assert is_numeric_value(None) is False


@pytest.mark.parametrize(
    "value, expected",
    [
        (1, True),
        (1.5, True),
        (-0.0, True),
        (float("inf"), False),
        (float("nan"), False),
        (True, False),
        ("1", False),
        (None, False),
    ],
)
def test_is_finite_number(value, expected):
    assert is_finite_number(value) is expected
