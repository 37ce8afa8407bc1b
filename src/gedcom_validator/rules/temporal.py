"""
Chronology rules: US03, US04, US08.

A comparison the date comparator cannot resolve (missing or unparsable
date) never produces a finding.
"""

from __future__ import annotations

from typing import List, Optional

from gedcom_validator.dates import is_after, is_before
from gedcom_validator.logging import get_logger
from gedcom_validator.rules.finding import Finding, make_finding, resolve_placeholder
from gedcom_validator.store import RecordStore

log = get_logger(__name__)


def birth_before_death(store: RecordStore, *, placeholder: Optional[str] = None) -> List[Finding]:
    """US03: an individual must not be born after their death."""
    missing = resolve_placeholder(placeholder)
    findings: List[Finding] = []

    for ind in store.individuals.values():
        if not is_after(ind.birth, ind.death):
            continue
        findings.append(
            make_finding(
                "US03",
                entity_ids=(ind.id,),
                explanation=f"{ind.id} was born after death",
                dates=(ind.birth, ind.death),
                individual_id=ind.id,
                name=ind.name if ind.name is not None else missing,
                birth=ind.birth,
                death=ind.death,
            )
        )

    return findings


def marriage_before_divorce(store: RecordStore, *, placeholder: Optional[str] = None) -> List[Finding]:
    """US04: a family's marriage must not come after its divorce."""
    missing = resolve_placeholder(placeholder)
    findings: List[Finding] = []

    for fam in store.families.values():
        if not is_after(fam.marriage_date, fam.divorce_date):
            continue
        findings.append(
            make_finding(
                "US04",
                entity_ids=tuple(i for i in (fam.id, fam.husband_id, fam.wife_id) if i),
                explanation=f"{fam.id} marriage date is after divorce date",
                dates=(fam.marriage_date, fam.divorce_date),
                family_id=fam.id,
                husband_id=fam.husband_id or missing,
                husband_name=store.display_name(fam.husband_id, missing),
                wife_id=fam.wife_id or missing,
                wife_name=store.display_name(fam.wife_id, missing),
                marriage=fam.marriage_date,
                divorce=fam.divorce_date,
            )
        )

    return findings


def birth_before_marriage_of_parent(
    store: RecordStore, *, placeholder: Optional[str] = None
) -> List[Finding]:
    """US08: children should not be born before their parents' marriage."""
    missing = resolve_placeholder(placeholder)
    findings: List[Finding] = []

    for fam in store.families.values():
        if not fam.marriage_date:
            continue
        for child_id in fam.children:
            child = store.get_individual(child_id)
            if child is None:
                log.warning(f"Family {fam.id} lists unknown child {child_id}")
                continue
            if not is_before(child.birth, fam.marriage_date):
                continue
            findings.append(
                make_finding(
                    "US08",
                    entity_ids=(fam.id, child.id),
                    explanation=f"{child.id} has been born before parents' marriage",
                    dates=(child.birth, fam.marriage_date),
                    family_id=fam.id,
                    child_id=child.id,
                    child_name=child.name if child.name is not None else missing,
                    birth=child.birth,
                    marriage=fam.marriage_date,
                )
            )

    return findings
