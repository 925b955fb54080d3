"""
Argv Flags

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

import sys
from argparse import ArgumentParser, RawDescriptionHelpFormatter
from pathlib import Path
from typing import Sequence

from rich.markup import escape

from argv_flags.config import load_schema
from argv_flags.console import console, error_console
from argv_flags.exceptions import SchemaError, SchemaFileError
from argv_flags.json_schema import parse_result_json_schema
from argv_flags.logger import logger
from argv_flags.parser import parse_args, to_json_result
from argv_flags.render import render_result
from argv_flags.utils import LOG_MODES, setup_logging

EXIT_OK = 0
EXIT_PARSE_ERRORS = 1
EXIT_SCHEMA_ERROR = 2


def get_root_parser(prog: str | None = "argv-flags") -> ArgumentParser:
    parser = ArgumentParser(
        prog=prog,
        description="Parse a token list against a flag schema file.",
        epilog=(
            "Tokens to parse follow the first '--'.\n"
            "Example:\n"
            "  argv-flags --schema cli.yaml -- --src ./in --exclude a b --verbose"
        ),
        formatter_class=RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "-s",
        "--schema",
        type=Path,
        help="Schema file (.yaml, .yml, .toml or .json).",
    )
    parser.add_argument(
        "--allow-unknown",
        action="store_true",
        help="Collect unrecognized flags instead of reporting errors.",
    )
    parser.add_argument(
        "--no-stop-at-double-dash",
        dest="stop_at_double_dash",
        action="store_false",
        help="Do not treat a second '--' as the end of flags.",
    )
    parser.add_argument(
        "-f",
        "--format",
        choices=["table", "json"],
        default="table",
        help="Output format.",
    )
    parser.add_argument(
        "--print-schema",
        action="store_true",
        help="Print the JSON Schema of a parse result and exit.",
    )
    parser.add_argument(
        "--log-mode",
        choices=LOG_MODES,
        default=None,
        help="Logging output mode.",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable debug logging."
    )
    return parser


def split_cli_args(argv: Sequence[str]) -> tuple[list[str], list[str]]:
    """Split argv at the first '--' into CLI options and tokens to parse."""
    argv = list(argv)
    if "--" not in argv:
        return argv, []
    index = argv.index("--")
    return argv[:index], argv[index + 1 :]


def main(argv: Sequence[str] | None = None) -> int:
    cli_args, tokens = split_cli_args(sys.argv[1:] if argv is None else argv)
    root_parser = get_root_parser()
    args = root_parser.parse_args(cli_args)

    setup_logging(mode=args.log_mode, verbose=args.verbose)

    if args.print_schema:
        console.print_json(data=parse_result_json_schema())
        return EXIT_OK

    if args.schema is None:
        root_parser.error("the following arguments are required: -s/--schema")

    try:
        schema = load_schema(args.schema)
        result = parse_args(
            schema,
            tokens,
            allow_unknown=args.allow_unknown,
            stop_at_double_dash=args.stop_at_double_dash,
        )
    except (SchemaFileError, SchemaError) as error:
        logger.error("Schema error: %s", error)
        error_console.print(f"[error]❌ {escape(str(error))}[/]")
        return EXIT_SCHEMA_ERROR

    logger.debug(
        "Parsed %d tokens against '%s': ok=%s, issues=%d",
        len(tokens),
        args.schema,
        result.ok,
        len(result.issues),
    )
    if args.format == "json":
        console.print_json(data=to_json_result(result))
    else:
        render_result(result, schema, console)
    return EXIT_OK if result.ok else EXIT_PARSE_ERRORS


if __name__ == "__main__":
    sys.exit(main())
