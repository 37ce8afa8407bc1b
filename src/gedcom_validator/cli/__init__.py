
"""
CLI package for gedcom_validator.

Provides the Typer application entrypoint and shared CLI utilities.
"""

from gedcom_validator.cli.app import app, main

__all__ = [
    "app",
    "main",
]
