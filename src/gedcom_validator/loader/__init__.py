# src/gedcom_validator/loader/__init__.py

"""
GEDCOM ingestion for the validator.

    from gedcom_validator.loader import load_record_store

    store = load_record_store("family.ged")
"""

from __future__ import annotations

from .store_builder import build_family, build_individual, build_record_store, load_record_store
from .tokenizer import GedcomSyntaxError, Token, tokenize_file, tokenize_line, tokenize_lines
from .tree import GedcomNode, GedcomStructureError, build_tree

__all__ = [
    "GedcomNode",
    "GedcomStructureError",
    "GedcomSyntaxError",
    "Token",
    "build_family",
    "build_individual",
    "build_record_store",
    "build_tree",
    "load_record_store",
    "tokenize_file",
    "tokenize_line",
    "tokenize_lines",
]
