from __future__ import annotations

from typing import List, Optional

from gedcom_validator.rules.finding import Finding, make_finding
from gedcom_validator.store import RecordStore


def male_last_name(store: RecordStore, *, placeholder: Optional[str] = None) -> List[Finding]:
    """
    US16: male children carry the husband's last name.

    One finding per mismatching son, so a family with two mismatching sons
    is reported twice. With no husband name the expected surname is unset
    and any son with a surname mismatches.
    """
    findings: List[Finding] = []

    for fam in store.families.values():
        husband = store.get_individual(fam.husband_id)
        expected = husband.surname if husband is not None else None

        for child_id in fam.children:
            child = store.get_individual(child_id)
            if child is None or not child.is_male:
                continue
            surname = child.surname
            if surname is None or surname == expected:
                continue
            findings.append(
                make_finding(
                    "US16",
                    entity_ids=(fam.id, child.id),
                    explanation=(
                        f"{child.id} last name {surname!r} differs from "
                        f"family last name {expected!r}"
                    ),
                    family_id=fam.id,
                    child_id=child.id,
                    expected_surname=expected,
                    surname=surname,
                )
            )

    return findings
