# Argv Flags — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Token classification and value conversion helpers for the Argv Flags scanner.

Functions:
- is_flag_token: Check whether a token is flag-shaped (`-x`, `--name`, `--name=v`).
- split_inline_value: Split `--flag=value` on the first `=`.
- coerce_bool: Convert a boolean word to a bool, or None if it is not one.
- is_numeric_value: Check whether a string is a well-formed finite number.
- coerce_number: Convert a numeric string to an int or float.
- is_finite_number: Check whether a Python object is a usable number default.
"""
from __future__ import annotations

import math
import re
from typing import Any

BOOLEAN_TRUE = frozenset({"true", "1", "yes", "y", "on"})
BOOLEAN_FALSE = frozenset({"false", "0", "no", "n", "off"})

_INTEGER = re.compile(r"[+-]?[0-9]+")
_DECIMAL = re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")
_RADIX = {
    "0x": (re.compile(r"0[xX][0-9a-fA-F]+"), 16),
    "0o": (re.compile(r"0[oO][0-7]+"), 8),
    "0b": (re.compile(r"0[bB][01]+"), 2),
}


def is_flag_token(token: Any) -> bool:
    """Return True if the token starts with '-' and is at least two characters long."""
    return isinstance(token, str) and token.startswith("-") and len(token) > 1


def split_inline_value(token: str) -> tuple[str, str | None]:
    """
    Split a flag token on its first '='.

    A token whose first '=' is at position 0 is returned unsplit.

    Returns:
        tuple[str, str | None]: The flag part and the inline value, if any.
    """
    flag, sep, value = token.partition("=")
    if not sep or not flag:
        return token, None
    return flag, value


def coerce_bool(value: str | None) -> bool | None:
    """
    Convert a boolean word to a bool.

    Accepts 'true', 'false', '1', '0', 'yes', 'no', 'y', 'n', 'on' and 'off',
    case-insensitively.

    Args:
        value (str | None): The input string.

    Returns:
        bool | None: Parsed boolean, or None if the value is not a boolean word.
    """
    if not isinstance(value, str):
        return None
    normalized = value.lower()
    if normalized in BOOLEAN_TRUE:
        return True
    if normalized in BOOLEAN_FALSE:
        return False
    return None


def coerce_number(value: str) -> int | float:
    """
    Convert a numeric string to a finite int or float.

    Integer literals (including unsigned 0x/0o/0b forms) yield an int, literals
    with a fraction or exponent yield a float. Surrounding whitespace is ignored.

    Raises:
        ValueError: If the value is not a well-formed finite number.
    """
    if not isinstance(value, str):
        raise ValueError(f"Value {value!r} is not a string")
    text = value.strip()
    if _INTEGER.fullmatch(text):
        return int(text)
    prefix = text[:2].lower()
    if prefix in _RADIX:
        pattern, base = _RADIX[prefix]
        if pattern.fullmatch(text):
            return int(text, base)
    if _DECIMAL.fullmatch(text):
        number = float(text)
        if math.isfinite(number):
            return number
    raise ValueError(f"Value '{value}' is not a finite number")


def is_numeric_value(value: Any) -> bool:
    """Return True if the value is a string holding a well-formed finite number."""
    try:
        coerce_number(value)
    except ValueError:
        return False
    return True


def is_finite_number(value: Any) -> bool:
    """Return True for int/float values that are finite and not bools."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return math.isfinite(value)
