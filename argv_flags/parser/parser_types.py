# Argv Flags — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Issue and result models for the Argv Flags parser.

Contents:
- `IssueCode` / `IssueSeverity`: The six diagnostic codes and their two severities.
- `ParseIssue`: One structured diagnostic produced while scanning.
- `ParseResult`: Typed values, presence flags, leftovers and issues for one parse.
- `FlagToken`: A flag-shaped input token split into flag and inline value.
- `ScanState`: Mutable per-parse state shared by the scanner and the coercers.

`ScanState` never outlives a single `FlagParser.parse()` call. Only the
`ParseResult` built from it is returned to callers.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from argv_flags.parser.schema import NormalizedSchema


class IssueSeverity(Enum):
    """Severity of a `ParseIssue`. Only errors flip `ParseResult.ok`."""

    ERROR = "error"
    WARNING = "warning"

    def __str__(self) -> str:
        return self.value


class IssueCode(Enum):
    """Diagnostic codes reported by the parser."""

    UNKNOWN_FLAG = "UNKNOWN_FLAG"
    MISSING_VALUE = "MISSING_VALUE"
    INVALID_VALUE = "INVALID_VALUE"
    REQUIRED = "REQUIRED"
    DUPLICATE = "DUPLICATE"
    EMPTY_VALUE = "EMPTY_VALUE"

    @property
    def severity(self) -> IssueSeverity:
        """DUPLICATE is the only warning; every other code is an error."""
        if self is IssueCode.DUPLICATE:
            return IssueSeverity.WARNING
        return IssueSeverity.ERROR

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class ParseIssue:
    """
    A structured parse diagnostic.

    Attributes:
        code (IssueCode): What went wrong.
        severity (IssueSeverity): ERROR or WARNING.
        message (str): Human-readable description.
        flag (str | None): The flag token involved, if any.
        key (str | None): The schema key involved, if any.
        value (str | None): The offending raw value, if any.
        index (int | None): Position of the offending token in the input, if any.
    """

    code: IssueCode
    severity: IssueSeverity
    message: str
    flag: str | None = None
    key: str | None = None
    value: str | None = None
    index: int | None = None

    @property
    def is_error(self) -> bool:
        return self.severity is IssueSeverity.ERROR

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-safe dict, omitting optional fields that are not set."""
        data: dict[str, Any] = {
            "code": self.code.value,
            "severity": self.severity.value,
            "message": self.message,
        }
        for name in ("flag", "key", "value", "index"):
            attribute = getattr(self, name)
            if attribute is not None:
                data[name] = attribute
        return data


@dataclass
class ParseResult:
    """
    The outcome of parsing one token list against a schema.

    Every schema key has exactly one entry in `values` and in `present`. A value of
    None means the flag was absent and no default was declared.
    """

    values: dict[str, Any]
    present: dict[str, bool]
    rest: list[str]
    unknown: list[str]
    issues: list[ParseIssue]
    ok: bool

    @property
    def errors(self) -> list[ParseIssue]:
        return [issue for issue in self.issues if issue.is_error]

    @property
    def warnings(self) -> list[ParseIssue]:
        return [issue for issue in self.issues if not issue.is_error]


@dataclass(frozen=True)
class FlagToken:
    """A flag-shaped token at `index`, split on its first '='."""

    raw: str
    flag: str
    inline_value: str | None
    index: int


@dataclass
class ScanState:
    """Tracks values, presence and diagnostics while a token list is scanned."""

    tokens: tuple[str, ...]
    schema: NormalizedSchema
    stop_at_double_dash: bool = True
    values: dict[str, Any] = field(default_factory=dict)
    present: dict[str, bool] = field(default_factory=dict)
    rest: list[str] = field(default_factory=list)
    unknown: list[str] = field(default_factory=list)
    issues: list[ParseIssue] = field(default_factory=list)

    def __post_init__(self) -> None:
        for key, spec in self.schema.specs.items():
            self.values[key] = spec.initial_value()
            self.present[key] = False

    def peek(self, index: int) -> str | None:
        """Return the token at `index`, or None past the end."""
        if 0 <= index < len(self.tokens):
            return self.tokens[index]
        return None

    def add_issue(
        self,
        code: IssueCode,
        message: str,
        *,
        flag: str | None = None,
        key: str | None = None,
        value: str | None = None,
        index: int | None = None,
    ) -> None:
        self.issues.append(
            ParseIssue(
                code=code,
                severity=code.severity,
                message=message,
                flag=flag,
                key=key,
                value=value,
                index=index,
            )
        )
