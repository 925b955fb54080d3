# Argv Flags — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Value coercers for the four `FlagType` members.

Each coercer receives the scan state, the resolved spec and the flag token that
selected it. It reads the inline value or upcoming tokens, stores the typed value or
records an issue, and returns the index of the next token the scanner should look at.

Coercers:
- coerce_boolean_flag: Inline value, else the next token only if it is a boolean word,
  else True by presence.
- coerce_string_flag: Inline value, else the next non-flag token.
- coerce_number_flag: Like strings, but a numeric next token is accepted even if it
  starts with '-' (so `--n -3` works).
- coerce_array_flag: Inline value plus every following token up to the next flag
  (or `--`), appended to earlier occurrences.

`COERCERS` maps every `FlagType` to its coercer and is checked to be exhaustive
at import time.
"""
from __future__ import annotations

from typing import Callable

from argv_flags.parser.flag_spec import NormalizedSpec
from argv_flags.parser.flag_type import FlagType
from argv_flags.parser.parser_types import FlagToken, IssueCode, ScanState
from argv_flags.parser.utils import (
    coerce_bool,
    coerce_number,
    is_flag_token,
    is_numeric_value,
)

Coercer = Callable[[ScanState, NormalizedSpec, FlagToken], int]


def _missing_value(state: ScanState, spec: NormalizedSpec, token: FlagToken) -> int:
    state.add_issue(
        IssueCode.MISSING_VALUE,
        f"Missing value for {token.flag}.",
        flag=token.flag,
        key=spec.key,
        index=token.index,
    )
    return token.index + 1


def coerce_boolean_flag(
    state: ScanState, spec: NormalizedSpec, token: FlagToken
) -> int:
    raw = token.inline_value
    next_index = token.index + 1
    if raw is None:
        upcoming = state.peek(next_index)
        if coerce_bool(upcoming) is not None:
            raw = upcoming
            next_index += 1

    if raw is None:
        state.values[spec.key] = True
        return next_index

    value = coerce_bool(raw)
    if value is None:
        state.add_issue(
            IssueCode.INVALID_VALUE,
            f"Invalid boolean value for {token.flag}: {raw}.",
            flag=token.flag,
            key=spec.key,
            value=raw,
            index=token.index,
        )
        return next_index
    state.values[spec.key] = value
    return next_index


def coerce_string_flag(
    state: ScanState, spec: NormalizedSpec, token: FlagToken
) -> int:
    raw = token.inline_value
    value_index = token.index
    if raw is None:
        upcoming = state.peek(token.index + 1)
        if upcoming is None or is_flag_token(upcoming):
            return _missing_value(state, spec, token)
        raw = upcoming
        value_index += 1

    if not raw and not spec.allow_empty:
        state.add_issue(
            IssueCode.EMPTY_VALUE,
            f"Empty value not allowed for {token.flag}.",
            flag=token.flag,
            key=spec.key,
            index=value_index,
        )
        return value_index + 1
    state.values[spec.key] = raw
    return value_index + 1


def coerce_number_flag(
    state: ScanState, spec: NormalizedSpec, token: FlagToken
) -> int:
    raw = token.inline_value
    value_index = token.index
    if raw is None:
        upcoming = state.peek(token.index + 1)
        if upcoming is None or (
            is_flag_token(upcoming) and not is_numeric_value(upcoming)
        ):
            return _missing_value(state, spec, token)
        raw = upcoming
        value_index += 1

    try:
        state.values[spec.key] = coerce_number(raw)
    except ValueError:
        state.add_issue(
            IssueCode.INVALID_VALUE,
            f"Invalid number value for {token.flag}: {raw}.",
            flag=token.flag,
            key=spec.key,
            value=raw,
            index=value_index,
        )
    return value_index + 1


def coerce_array_flag(
    state: ScanState, spec: NormalizedSpec, token: FlagToken
) -> int:
    collected: list[str] = []
    if token.inline_value:
        collected.append(token.inline_value)

    cursor = token.index + 1
    while cursor < len(state.tokens):
        upcoming = state.tokens[cursor]
        if state.stop_at_double_dash and upcoming == "--":
            break
        if is_flag_token(upcoming):
            break
        collected.append(upcoming)
        cursor += 1

    if not collected and not spec.allow_empty:
        return _missing_value(state, spec, token)

    existing = state.values.get(spec.key)
    state.values[spec.key] = [*(existing or []), *collected]
    return cursor


COERCERS: dict[FlagType, Coercer] = {
    FlagType.STRING: coerce_string_flag,
    FlagType.BOOLEAN: coerce_boolean_flag,
    FlagType.NUMBER: coerce_number_flag,
    FlagType.ARRAY: coerce_array_flag,
}

assert set(COERCERS) == set(FlagType), "Every FlagType needs a coercer"


def get_coercer(flag_type: FlagType) -> Coercer:
    """Return the coercer bound to `flag_type`."""
    return COERCERS[flag_type]
