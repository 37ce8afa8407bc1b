# src/gedcom_validator/loader/tree.py

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, List, Optional

from .tokenizer import Token


@dataclass
class GedcomNode:
    """
    A GEDCOM line placed in its record hierarchy.

    Attributes:
        level: 0 for records, >0 for substructures.
        tag: GEDCOM tag.
        value: Line value, with CONC/CONT continuations already folded in.
        pointer: @XREF@ on level-0 records.
        lineno: Line number in the source (for error messages).
        children: Direct substructures in source order.
    """

    level: int
    tag: str
    value: str = ""
    pointer: Optional[str] = None
    lineno: int = 0
    children: List["GedcomNode"] = field(default_factory=list)

    def find_children(self, tag: str) -> List["GedcomNode"]:
        return [c for c in self.children if c.tag == tag]

    def find_first(self, tag: str) -> Optional["GedcomNode"]:
        for c in self.children:
            if c.tag == tag:
                return c
        return None

    def child_value(self, tag: str) -> Optional[str]:
        node = self.find_first(tag)
        return node.value if node is not None else None

    def __repr__(self) -> str:
        ptr = f" {self.pointer}" if self.pointer else ""
        return f"<GedcomNode {self.level}{ptr} {self.tag}: {self.value!r}>"


class GedcomStructureError(ValueError):
    """Raised when line levels do not nest properly."""


def build_tree(tokens: Iterable[Token]) -> List[GedcomNode]:
    """
    Nest a flat token stream into level-0 records.

    A level-N line attaches to the nearest preceding level-(N-1) line; levels
    may not jump by more than one. CONC appends to the parent value and CONT
    appends a newline first; neither becomes a node.
    """
    records: List[GedcomNode] = []
    stack: List[GedcomNode] = []  # stack[level] = open node at that level

    for tok in tokens:
        if tok.level == 0:
            node = GedcomNode(level=0, tag=tok.tag, value=tok.value, pointer=tok.pointer, lineno=tok.lineno)
            records.append(node)
            stack = [node]
            continue

        if not stack or tok.level > len(stack):
            raise GedcomStructureError(
                f"Line {tok.lineno}: level {tok.level} has no parent at level {tok.level - 1}"
            )

        stack = stack[: tok.level]
        parent = stack[-1]

        if tok.tag == "CONC":
            parent.value += tok.value
            continue
        if tok.tag == "CONT":
            parent.value += "\n" + tok.value
            continue

        node = GedcomNode(
            level=tok.level,
            tag=tok.tag,
            value=tok.value,
            pointer=tok.pointer,
            lineno=tok.lineno,
        )
        parent.children.append(node)
        stack.append(node)

    return records
