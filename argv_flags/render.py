# Argv Flags — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Rich table views of a `ParseResult`.

The parser itself never prints. These helpers are for callers that want a readable
summary of what was parsed and what went wrong.

Functions:
- build_values_table(result, schema): One row per schema key with its value.
- build_issues_table(result): One row per issue, errors and warnings styled apart.
- render_result(result, schema, console): Print both tables and a status line.
"""
from __future__ import annotations

from typing import Any

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from argv_flags.console import console as default_console
from argv_flags.parser.parser_types import ParseResult
from argv_flags.parser.schema import normalize_schema


def _format_value(value: Any) -> str:
    if value is None:
        return "[absent]-[/]"
    return f"[value]{escape(repr(value))}[/]"


def build_values_table(result: ParseResult, schema: Any) -> Table:
    """Build a table of every schema key, its flags, value and presence."""
    normalized = normalize_schema(schema)
    table = Table(title="Values", box=box.SIMPLE)
    table.add_column("Key", style="key")
    table.add_column("Flag", style="flag")
    table.add_column("Type")
    table.add_column("Value")
    table.add_column("Present", justify="center")
    table.add_column("Help", style="dim")
    for key, spec in normalized.specs.items():
        aliases = [flag for flag in spec.flags if flag != spec.display_flag]
        flag_text = spec.display_flag
        if aliases:
            flag_text = f"{flag_text} ({', '.join(aliases)})"
        table.add_row(
            escape(key),
            escape(flag_text),
            str(spec.type),
            _format_value(result.values.get(key)),
            "✔" if result.present.get(key) else "",
            escape(spec.help),
        )
    return table


def build_issues_table(result: ParseResult) -> Table:
    """Build a table of parse issues in the order they were reported."""
    table = Table(title="Issues", box=box.SIMPLE)
    table.add_column("Severity")
    table.add_column("Code")
    table.add_column("Flag", style="flag")
    table.add_column("Index", justify="right")
    table.add_column("Message")
    for issue in result.issues:
        style = "error" if issue.is_error else "warning"
        table.add_row(
            f"[{style}]{issue.severity}[/]",
            f"[{style}]{issue.code}[/]",
            escape(issue.flag or ""),
            "" if issue.index is None else str(issue.index),
            escape(issue.message),
        )
    return table


def render_result(
    result: ParseResult, schema: Any, console: Console | None = None
) -> None:
    """Print values, issues, leftovers and an overall status line."""
    console = console or default_console
    console.print(build_values_table(result, schema))
    if result.issues:
        console.print(build_issues_table(result))
    if result.rest:
        console.print(f"[bold]rest:[/bold] {escape(' '.join(result.rest))}")
    if result.unknown:
        console.print(f"[bold]unknown:[/bold] {escape(' '.join(result.unknown))}")
    if result.ok:
        console.print("[ok]✅ ok[/]")
    else:
        console.print(f"[error]❌ {len(result.errors)} error(s)[/]")
