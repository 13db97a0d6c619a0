"""
CLI command modules for gedcomx7.

Each command module defines a single Typer-compatible command function.
"""

from gedcomx7.cli.commands.convert import convert_command
from gedcomx7.cli.commands.stats import stats_command

__all__ = [
    "convert_command",
    "stats_command",
]
