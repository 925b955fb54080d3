"""
Argv Flags

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

from .config import load_schema
from .exceptions import ArgvFlagsError, SchemaError, SchemaFileError
from .json_schema import parse_result_json_schema, validate_json_result
from .legacy import parse_flag
from .logger import logger
from .parser import (
    FlagParser,
    FlagSpec,
    FlagType,
    IssueCode,
    IssueSeverity,
    ParseIssue,
    ParseResult,
    define_schema,
    normalize_schema,
    parse_args,
    to_json_result,
)
from .utils import setup_logging

__all__ = [
    "ArgvFlagsError",
    "FlagParser",
    "FlagSpec",
    "FlagType",
    "IssueCode",
    "IssueSeverity",
    "ParseIssue",
    "ParseResult",
    "SchemaError",
    "SchemaFileError",
    "define_schema",
    "load_schema",
    "logger",
    "normalize_schema",
    "parse_args",
    "parse_flag",
    "parse_result_json_schema",
    "setup_logging",
    "to_json_result",
    "validate_json_result",
]
