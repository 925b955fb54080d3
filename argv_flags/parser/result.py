# Argv Flags — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Result assembly and the JSON-safe projection of a `ParseResult`.

- `build_result()` turns the final `ScanState` into a `ParseResult`.
- `to_json_result()` returns plain dicts and lists with absent values as None, ready
  for `json.dumps()` or validation against the published result schema.
"""
from __future__ import annotations

from typing import Any, TypedDict

from argv_flags.parser.parser_types import ParseResult, ScanState

JsonFlagValue = str | int | float | bool | list[str] | None


class ParseResultJson(TypedDict):
    values: dict[str, JsonFlagValue]
    present: dict[str, bool]
    rest: list[str]
    unknown: list[str]
    issues: list[dict[str, Any]]
    ok: bool


def build_result(state: ScanState) -> ParseResult:
    """Assemble the `ParseResult` for a finished scan."""
    return ParseResult(
        values=state.values,
        present=state.present,
        rest=state.rest,
        unknown=state.unknown,
        issues=state.issues,
        ok=not any(issue.is_error for issue in state.issues),
    )


def to_json_result(result: ParseResult) -> ParseResultJson:
    """
    Project a `ParseResult` into JSON-safe builtins.

    Absent values become None (`null` once serialized). Array values and the
    `rest`, `unknown` and `issues` lists are copied, so the projection shares no
    mutable state with the result.
    """
    values: dict[str, JsonFlagValue] = {}
    for key, value in result.values.items():
        values[key] = list(value) if isinstance(value, list) else value
    return {
        "values": values,
        "present": dict(result.present),
        "rest": list(result.rest),
        "unknown": list(result.unknown),
        "issues": [issue.to_dict() for issue in result.issues],
        "ok": result.ok,
    }
