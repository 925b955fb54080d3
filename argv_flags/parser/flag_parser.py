# Argv Flags — (c) 2025 rtj.dev LLC — MIT Licensed
"""
This module implements `FlagParser` and `parse_args()`, the schema-driven scanner at
the heart of Argv Flags.

A single cursor walks the token list left to right. Each token is either
collected into `rest`, treated as a `--no-<name>` negation, reported as unknown, or
dispatched to the coercer bound to its schema entry. Coercers may consume upcoming
tokens and move the cursor forward. After the scan, required entries that were
never supplied are reported.

Parsing never raises for bad input. Every problem becomes a `ParseIssue` on the
returned `ParseResult`, and the parser never prints, logs or exits.

Key Features:
- Long and short aliases (`--name`, `-n`) and inline values (`--name=value`)
- Boolean words (`--flag yes`) and negation (`--no-flag`)
- Negative numbers as values (`--offset -3`)
- Array accumulation across repeated flags
- `--` terminator and optional collection of unknown flags

Example Usage:
    schema = define_schema({
        "name": FlagSpec(type="string", flags=("-n", "--name"), required=True),
        "items": FlagSpec(type="array", flags=("--items",)),
    })
    result = parse_args(schema, ["--name", "x", "--items", "a", "b"])

    # result.values == {"name": "x", "items": ["a", "b"]}
    # result.ok is True
"""
from __future__ import annotations

import sys
from typing import Any, Callable, Sequence

from argv_flags.parser.coercers import get_coercer
from argv_flags.parser.flag_type import FlagType
from argv_flags.parser.parser_types import FlagToken, IssueCode, ParseResult, ScanState
from argv_flags.parser.result import build_result
from argv_flags.parser.schema import NormalizedSchema, normalize_schema
from argv_flags.parser.utils import is_flag_token, split_inline_value

ArgvSource = Callable[[], Sequence[str]]


def default_argv_source() -> list[str]:
    """Return the running program's arguments, without the interpreter and script."""
    return sys.argv[1:]


class FlagParser:
    """
    Parses token lists against one schema.

    The schema is validated once, when the parser is created, so a single
    `FlagParser` can parse many token lists. It keeps no state between calls.

    Raises:
        SchemaError: On creation, if the schema is malformed.
    """

    def __init__(self, schema: Any) -> None:
        self.schema: NormalizedSchema = normalize_schema(schema)

    def __str__(self) -> str:
        specs = self.schema.specs.values()
        required = sum(spec.required for spec in specs)
        return (
            f"FlagParser(keys={len(self.schema)}, "
            f"flags={len(self.schema.flag_to_key)}, required={required})"
        )

    def __repr__(self) -> str:
        return str(self)

    def _handle_negation(self, state: ScanState, token: FlagToken) -> bool:
        """Apply `--no-<name>` to a boolean entry. Return False if it is not one."""
        if not token.flag.startswith("--no-") or token.flag in self.schema.flag_to_key:
            return False
        base = f"--{token.flag[5:]}"
        spec = self.schema.resolve(base)
        if spec is None or spec.type != FlagType.BOOLEAN or not spec.allow_no:
            return False
        if state.present[spec.key]:
            state.add_issue(
                IssueCode.DUPLICATE,
                f"Duplicate flag {base}.",
                flag=base,
                key=spec.key,
                index=token.index,
            )
        state.present[spec.key] = True
        state.values[spec.key] = False
        return True

    def _handle_token(self, state: ScanState, index: int, allow_unknown: bool) -> int:
        raw = state.tokens[index]
        flag, inline_value = split_inline_value(raw)
        token = FlagToken(raw=raw, flag=flag, inline_value=inline_value, index=index)

        if self._handle_negation(state, token):
            return index + 1

        spec = self.schema.resolve(flag)
        if spec is None:
            if allow_unknown:
                state.unknown.append(raw)
            else:
                state.add_issue(
                    IssueCode.UNKNOWN_FLAG,
                    f"Unknown flag {flag}.",
                    flag=flag,
                    index=index,
                )
            return index + 1

        if state.present[spec.key] and spec.type != FlagType.ARRAY:
            state.add_issue(
                IssueCode.DUPLICATE,
                f"Duplicate flag {flag}.",
                flag=flag,
                key=spec.key,
                index=index,
            )
        state.present[spec.key] = True
        return get_coercer(spec.type)(state, spec, token)

    def _check_required(self, state: ScanState) -> None:
        for key, spec in self.schema.specs.items():
            if spec.required and not state.present[key]:
                state.add_issue(
                    IssueCode.REQUIRED,
                    f"Missing required flag {spec.primary_flag}.",
                    flag=spec.primary_flag,
                    key=key,
                )

    def parse(
        self,
        argv: Sequence[str] | None = None,
        *,
        allow_unknown: bool = False,
        stop_at_double_dash: bool = True,
        argv_source: ArgvSource = default_argv_source,
    ) -> ParseResult:
        """
        Parse a token list into typed values and issues.

        Args:
            argv (Sequence[str] | None): Tokens to parse. When None, `argv_source`
                is called once to supply them.
            allow_unknown (bool): Collect unrecognized flags in `unknown` instead of
                reporting UNKNOWN_FLAG errors.
            stop_at_double_dash (bool): Treat `--` as the end of flags. Everything
                after it goes to `rest` verbatim.
            argv_source (Callable[[], Sequence[str]]): Fallback token source.

        Returns:
            ParseResult: A fresh result. The input sequence is never modified.

        Raises:
            TypeError: If argv is a plain string or holds non-string tokens.
        """
        if argv is None:
            argv = argv_source()
        if isinstance(argv, str):
            raise TypeError("argv must be a sequence of strings, not a string")
        tokens = tuple(argv)
        for token in tokens:
            if not isinstance(token, str):
                raise TypeError(f"argv tokens must be strings, got {token!r}")

        state = ScanState(
            tokens=tokens,
            schema=self.schema,
            stop_at_double_dash=stop_at_double_dash,
        )
        index = 0
        while index < len(tokens):
            token = tokens[index]
            if stop_at_double_dash and token == "--":
                state.rest.extend(tokens[index + 1 :])
                break
            if not is_flag_token(token):
                state.rest.append(token)
                index += 1
                continue
            index = self._handle_token(state, index, allow_unknown)

        self._check_required(state)
        return build_result(state)


def parse_args(
    schema: Any,
    argv: Sequence[str] | None = None,
    *,
    allow_unknown: bool = False,
    stop_at_double_dash: bool = True,
    argv_source: ArgvSource = default_argv_source,
) -> ParseResult:
    """
    Validate `schema` and parse `argv` against it.

    Equivalent to `FlagParser(schema).parse(argv, ...)`. The schema is normalized
    afresh on every call and is never modified.

    Raises:
        SchemaError: If the schema is malformed.
    """
    return FlagParser(schema).parse(
        argv,
        allow_unknown=allow_unknown,
        stop_at_double_dash=stop_at_double_dash,
        argv_source=argv_source,
    )
