# Argv Flags — (c) 2025 rtj.dev LLC — MIT Licensed
"""Global console instances for Argv Flags command-line output."""
from rich.console import Console
from rich.theme import Theme

ARGV_FLAGS_THEME = Theme(
    {
        "flag": "bold cyan",
        "key": "bold",
        "value": "green",
        "absent": "dim",
        "error": "bold red",
        "warning": "yellow",
        "ok": "bold green",
    }
)

console = Console(theme=ARGV_FLAGS_THEME)
error_console = Console(theme=ARGV_FLAGS_THEME, stderr=True)
