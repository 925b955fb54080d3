# Argv Flags — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Single-flag lookup kept for callers of the pre-schema API.

`parse_flag()` looks up one flag without a schema and without diagnostics. It only
understands the exact flag token (no inline values, no negation) and signals every
kind of failure by returning False. New code should use `parse_args()`.

Example:
    parse_flag("--out", "string", ["--out", "dist"])   # "dist"
    parse_flag("--keep", "array", ["--keep", "a", "b"])  # ["a", "b"]
    parse_flag("--dry-run", "boolean", [])              # False
"""
from __future__ import annotations

from typing import Sequence

from argv_flags.parser.flag_parser import ArgvSource, default_argv_source
from argv_flags.parser.flag_type import FlagType
from argv_flags.parser.utils import coerce_number


def _is_long_flag(value: str | None) -> bool:
    return isinstance(value, str) and value.startswith("--")


def parse_flag(
    target: str,
    flag_type: FlagType | str,
    argv: Sequence[str] | None = None,
    *,
    argv_source: ArgvSource = default_argv_source,
) -> str | bool | int | float | list[str]:
    """
    Return the value following the first exact occurrence of `target`.

    Args:
        target (str): The flag token to find, e.g. "--name".
        flag_type (FlagType | str): How to read the value.
        argv (Sequence[str] | None): Tokens to search, `argv_source()` when None.

    Returns:
        - False if `target` is absent, or the flag type is not recognized.
        - string: the next token, or False if it is missing or starts with '--'.
        - array: every token up to the next '--'-prefixed token.
        - boolean: the next token if it is 'true'/'false', else True.
        - number: the next token as a number, or False if it is missing,
          starts with '--', or is not numeric.
    """
    tokens = list(argv_source() if argv is None else argv)
    try:
        flag_type = FlagType(flag_type)
    except ValueError:
        return False
    if target not in tokens:
        return False

    index = tokens.index(target)
    next_value = tokens[index + 1] if index + 1 < len(tokens) else None

    if flag_type == FlagType.STRING:
        if next_value is None or _is_long_flag(next_value):
            return False
        return next_value
    elif flag_type == FlagType.ARRAY:
        values = []
        for value in tokens[index + 1 :]:
            if _is_long_flag(value):
                break
            values.append(value)
        return values
    elif flag_type == FlagType.BOOLEAN:
        if isinstance(next_value, str) and next_value.lower() in ("true", "false"):
            return next_value.lower() == "true"
        return True
    elif flag_type == FlagType.NUMBER:
        if next_value is None or _is_long_flag(next_value):
            return False
        try:
            return coerce_number(next_value)
        except ValueError:
            return False
    return False
