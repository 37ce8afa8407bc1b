# src/gedcom_validator/loader/tokenizer.py

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Iterator, Optional, Union


@dataclass(frozen=True)
class Token:
    """
    One GEDCOM line: ``<level> [<pointer>] <tag> [<value>]``.

    Attributes:
        lineno: 1-based line number in the source.
        level: GEDCOM level (0 for records).
        pointer: Cross-reference such as "@I1@" (on records) or None.
        tag: GEDCOM tag, e.g. "INDI", "NAME", "DATE".
        value: Line payload; for HUSB/WIFE/CHIL this is the referenced pointer.
    """
    lineno: int
    level: int
    pointer: Optional[str]
    tag: str
    value: str


class GedcomSyntaxError(ValueError):
    """Raised when a GEDCOM line does not follow the basic line grammar."""


def tokenize_line(line: str, lineno: int = 0) -> Token:
    raw = line.rstrip("\r\n").lstrip("\ufeff")
    if not raw.strip():
        raise GedcomSyntaxError(f"Line {lineno}: empty line")

    parts = raw.strip().split(" ", 1)
    if not parts[0].isdigit():
        raise GedcomSyntaxError(f"Line {lineno}: level is not numeric -> {raw!r}")
    if len(parts) == 1 or not parts[1].strip():
        raise GedcomSyntaxError(f"Line {lineno}: missing tag -> {raw!r}")

    level = int(parts[0])
    rest = parts[1].lstrip(" ")

    pointer: Optional[str] = None
    if rest.startswith("@"):
        ptr, _, rest = rest.partition(" ")
        rest = rest.lstrip(" ")
        if not rest:
            raise GedcomSyntaxError(f"Line {lineno}: pointer without tag -> {raw!r}")
        pointer = ptr

    tag, _, value = rest.partition(" ")
    return Token(lineno=lineno, level=level, pointer=pointer, tag=tag.upper(), value=value)


def tokenize_lines(lines: Iterable[str]) -> Iterator[Token]:
    """Tokenize every non-blank line; blank lines are skipped."""
    for lineno, line in enumerate(lines, start=1):
        if not line.strip():
            continue
        yield tokenize_line(line, lineno=lineno)


def tokenize_file(path: Union[str, Path]) -> Iterator[Token]:
    """
    Yield Tokens for a GEDCOM file.

    Raises:
        FileNotFoundError: if ``path`` does not exist.
        GedcomSyntaxError: if a line is syntactically invalid.
    """
    file_path = Path(path)
    if not file_path.is_file():
        raise FileNotFoundError(f"GEDCOM file not found: {file_path}")

    with file_path.open("r", encoding="utf-8", errors="replace") as f:
        yield from tokenize_lines(f)
