# Argv Flags — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines all custom exception classes used by Argv Flags.

Parse-time problems are never raised. They are reported as `ParseIssue` records on
the returned `ParseResult`. The exceptions below cover developer-facing faults that
must be fixed before any token can be parsed.

Exception Hierarchy:
- ArgvFlagsError
    ├── SchemaError
    └── SchemaFileError
"""


class ArgvFlagsError(Exception):
    """Base exception for Argv Flags."""


class SchemaError(ArgvFlagsError, TypeError):
    """Exception raised when a flag schema is malformed."""


class SchemaFileError(ArgvFlagsError, ValueError):
    """Exception raised when a schema file cannot be read or validated."""
