# Argv Flags — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines `FlagType`, the enum naming the four value types a schema entry can declare.

Each member is bound to one value coercer (see `argv_flags.parser.coercers`), so the
scanner dispatches on the enum member rather than on raw strings. Only the exact
lowercase names are accepted: `FlagType("string")` works, `FlagType("str")` and
`FlagType("String")` raise `ValueError`.
"""
from __future__ import annotations

from enum import Enum


class FlagType(Enum):
    """
    The value type of a schema entry.

    Members:
        STRING: A single string value (`--name value`, `--name=value`).
        BOOLEAN: A switch that also accepts boolean words and `--no-<name>`.
        NUMBER: A finite int or float, negative values included (`--n -3`).
        ARRAY: A list of strings collected until the next flag.
    """

    STRING = "string"
    BOOLEAN = "boolean"
    NUMBER = "number"
    ARRAY = "array"

    def __str__(self) -> str:
        """Return the string representation of the flag type."""
        return self.value
