from __future__ import annotations

import re
from pathlib import Path
from typing import Iterable, List, Optional, Union

from gedcom_validator.dates import gedcom_to_us_date
from gedcom_validator.logging import get_logger
from gedcom_validator.store import (
    SEX_FEMALE,
    SEX_MALE,
    Family,
    FamilyId,
    Individual,
    IndividualId,
    RecordStore,
)

from .tokenizer import tokenize_file
from .tree import GedcomNode, build_tree

log = get_logger(__name__)

_SEX_CODES = {"M": SEX_MALE, "F": SEX_FEMALE}


def _clean_name(value: Optional[str]) -> Optional[str]:
    """``John /Doe/`` -> ``John Doe``."""
    if value is None:
        return None
    text = re.sub(r"\s+", " ", value.replace("/", " ")).strip()
    return text or None


def _event_date(node: GedcomNode, tag: str) -> Optional[str]:
    event = node.find_first(tag)
    if event is None:
        return None
    return gedcom_to_us_date(event.child_value("DATE"))


def _ref(node: GedcomNode, tag: str) -> Optional[str]:
    value = node.child_value(tag)
    return value.strip() if value and value.strip() else None


def build_individual(node: GedcomNode) -> Individual:
    if node.tag != "INDI":
        raise ValueError(f"Expected INDI node, got {node.tag}")
    if not node.pointer:
        raise ValueError(f"Line {node.lineno}: INDI record is missing pointer")

    sex_value = (node.child_value("SEX") or "").strip().upper()
    return Individual(
        id=IndividualId(node.pointer),
        name=_clean_name(node.child_value("NAME")),
        sex=_SEX_CODES.get(sex_value),
        birth=_event_date(node, "BIRT"),
        death=_event_date(node, "DEAT"),
    )


def build_family(node: GedcomNode) -> Family:
    if node.tag != "FAM":
        raise ValueError(f"Expected FAM node, got {node.tag}")
    if not node.pointer:
        raise ValueError(f"Line {node.lineno}: FAM record is missing pointer")

    children = [
        IndividualId(c.value.strip()) for c in node.find_children("CHIL") if c.value.strip()
    ]
    husband = _ref(node, "HUSB")
    wife = _ref(node, "WIFE")
    return Family(
        id=FamilyId(node.pointer),
        husband_id=IndividualId(husband) if husband else None,
        wife_id=IndividualId(wife) if wife else None,
        marriage_date=_event_date(node, "MARR"),
        divorce_date=_event_date(node, "DIV"),
        children=tuple(children),
    )


def build_record_store(records: Iterable[GedcomNode]) -> RecordStore:
    """Build a RecordStore from level-0 records; other record types are ignored."""
    individuals: List[Individual] = []
    families: List[Family] = []

    for node in records:
        if node.tag == "INDI":
            individuals.append(build_individual(node))
        elif node.tag == "FAM":
            families.append(build_family(node))

    store = RecordStore(individuals, families)
    for fam_id, role, ref in store.dangling_references():
        log.warning(f"Family {fam_id} {role} reference {ref} does not resolve")

    log.info(f"Record store built: {len(individuals)} individuals, {len(families)} families")
    return store


def load_record_store(path: Union[str, Path]) -> RecordStore:
    """Tokenize, nest and convert a GEDCOM file in one call."""
    log.info(f"Loading GEDCOM: {path}")
    return build_record_store(build_tree(tokenize_file(path)))
