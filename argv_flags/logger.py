# Argv Flags — (c) 2025 rtj.dev LLC — MIT Licensed
"""Global logger instance for Argv Flags."""
import logging

logger: logging.Logger = logging.getLogger("argv_flags")
