
"""
CLI command modules for gedcom_validator.

Each command module defines a single Typer-compatible command function.
"""

from gedcom_validator.cli.commands.rules import rules_command
from gedcom_validator.cli.commands.tables import tables_command
from gedcom_validator.cli.commands.validate import validate_command

__all__ = [
    "rules_command",
    "tables_command",
    "validate_command",
]
