# Argv Flags — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Logging setup for the `argv-flags` command.

The parser never logs. Only schema file loading and the command do, through the
`argv_flags` logger. `setup_logging()` attaches handlers to that logger alone, so an
application embedding the library keeps full control of the root logger.
"""
from __future__ import annotations

import logging
import os

import pythonjsonlogger.json
from rich.logging import RichHandler

from argv_flags.console import error_console
from argv_flags.logger import logger

LOG_MODES = ("cli", "json")
JSON_LOG_FORMAT = "%(asctime)s %(name)s %(levelname)s %(message)s"


def build_console_handler(mode: str) -> logging.Handler:
    """
    Return a stderr handler for `mode`.

    "cli" renders through Rich on the shared error console, "json" writes one JSON
    object per record.

    Raises:
        ValueError: If `mode` is not one of `LOG_MODES`.
    """
    if mode == "cli":
        return RichHandler(
            console=error_console,
            rich_tracebacks=True,
            show_path=False,
            markup=False,
            log_time_format="[%Y-%m-%d %H:%M:%S]",
        )
    elif mode == "json":
        handler = logging.StreamHandler()
        handler.setFormatter(pythonjsonlogger.json.JsonFormatter(JSON_LOG_FORMAT))
        return handler
    raise ValueError(
        f"Invalid log mode: {mode}. Must be one of: {', '.join(LOG_MODES)}"
    )


def setup_logging(
    mode: str | None = None,
    verbose: bool = False,
    log_filename: str | None = None,
) -> None:
    """
    Configure the `argv_flags` logger for command-line use.

    Args:
        mode (str | None): "cli" or "json". Falls back to the `ARGV_FLAGS_LOG_MODE`
            environment variable, then "cli".
        verbose (bool): Show DEBUG records on the console instead of WARNING and up.
        log_filename (str | None): Also append every record, as JSON lines, to this
            file.

    Raises:
        ValueError: If the resolved mode is invalid.
    """
    mode = mode or os.getenv("ARGV_FLAGS_LOG_MODE") or "cli"
    console_handler = build_console_handler(mode)
    console_handler.setLevel(logging.DEBUG if verbose else logging.WARNING)

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.DEBUG)
    logger.propagate = False
    logger.addHandler(console_handler)

    if log_filename:
        file_handler = logging.FileHandler(log_filename, "a", "UTF-8")
        file_handler.setFormatter(pythonjsonlogger.json.JsonFormatter(JSON_LOG_FORMAT))
        logger.addHandler(file_handler)

    logger.debug("Logging initialized in '%s' mode.", mode)
