"""Consistency checks over genealogical records, reported as plain-text errors."""

__version__ = "0.1.0"
