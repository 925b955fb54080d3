"""
Argv Flags

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

from .flag_parser import FlagParser, default_argv_source, parse_args
from .flag_spec import FlagSpec, NormalizedSpec
from .flag_type import FlagType
from .parser_types import IssueCode, IssueSeverity, ParseIssue, ParseResult
from .result import ParseResultJson, to_json_result
from .schema import NormalizedSchema, define_schema, normalize_schema

__all__ = [
    "FlagParser",
    "FlagSpec",
    "FlagType",
    "IssueCode",
    "IssueSeverity",
    "NormalizedSchema",
    "NormalizedSpec",
    "ParseIssue",
    "ParseResult",
    "ParseResultJson",
    "default_argv_source",
    "define_schema",
    "normalize_schema",
    "parse_args",
    "to_json_result",
]
