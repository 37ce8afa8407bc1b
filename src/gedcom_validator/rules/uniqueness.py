from __future__ import annotations

from itertools import permutations
from typing import List, Optional

from gedcom_validator.rules.finding import Finding, make_finding, resolve_placeholder
from gedcom_validator.store import Family, RecordStore


def _comparable(fam: Family) -> bool:
    return bool(fam.husband_id and fam.wife_id and fam.marriage_date)


def _same_spouses_and_marriage(a: Family, b: Family) -> bool:
    return (
        a.husband_id == b.husband_id
        and a.wife_id == b.wife_id
        and a.marriage_date == b.marriage_date
    )


def unique_families_by_spouses(
    store: RecordStore, *, placeholder: Optional[str] = None
) -> List[Finding]:
    """
    US24: no two families share husband, wife and marriage date.

    Every duplicate pair is reported twice, once from each family's side.
    Ordered pairs are walked in store order and the inner family is named
    first, so families F1, F2 yield (F2, F1) then (F1, F2).
    """
    missing = resolve_placeholder(placeholder)
    candidates = [fam for fam in store.families.values() if _comparable(fam)]
    findings: List[Finding] = []

    for outer, inner in permutations(candidates, 2):
        if outer.id == inner.id or not _same_spouses_and_marriage(outer, inner):
            continue
        findings.append(
            make_finding(
                "US24",
                entity_ids=(inner.id, outer.id),
                explanation=f"{inner.id} and {outer.id} have same spouses and marriage dates",
                dates=(inner.marriage_date,),
                family_id=inner.id,
                husband_name=store.display_name(inner.husband_id, missing),
                wife_name=store.display_name(inner.wife_id, missing),
                other_family_id=outer.id,
                other_husband_name=store.display_name(outer.husband_id, missing),
                other_wife_name=store.display_name(outer.wife_id, missing),
                marriage=inner.marriage_date,
            )
        )

    return findings
