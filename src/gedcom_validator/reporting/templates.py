"""
Report templates, one per rule code.

Downstream consumers diff report files verbatim, so each template is kept
exactly as historically emitted, including the trailing space on most
headers and the extra blank line some rules end with.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Optional

from gedcom_validator.core.exceptions import UnknownRuleError


@dataclass(frozen=True, slots=True)
class ReportTemplate:
    code: str
    label: str
    scope: Optional[str]  # "INDIVIDUAL" | "FAMILY" | None
    text: str

    def render(self, fields) -> str:
        return self.text.format(**fields)


REPORT_TEMPLATES: Dict[str, ReportTemplate] = {
    t.code: t
    for t in (
        ReportTemplate(
            code="US03",
            label="Birth Before Death",
            scope="INDIVIDUAL",
            text=(
                "ERROR:INDIVIDUAL: User Story US03: Birth Before Death \n"
                "Individual: {individual_id} - {name} was born after death\n"
                "DOB: {birth} DOD: {death}\n"
                "\n"
            ),
        ),
        ReportTemplate(
            code="US04",
            label="Marriage Before Divorce",
            scope="FAMILY",
            text=(
                "ERROR:FAMILY: User Story US04: Marriage Before Divorce \n"
                "Family: {family_id}\n"
                "Individual: {husband_id}: {husband_name}{wife_id}: {wife_name}"
                " marriage date is before divorce date.\n"
                "Marriage Date: {marriage} Divorce Date: {divorce}\n"
                "\n"
            ),
        ),
        ReportTemplate(
            code="US08",
            label="Birth Before Marriage Date",
            scope=None,
            text=(
                "ERROR: User Story US08: Birth Before Marriage Date \n"
                "Family ID: {family_id}\n"
                "Individual: {child_id}: {child_name} Has been born before parents' marriage\n"
                "DOB: {birth} Parents Marriage Date: {marriage}\n"
                "\n"
                "\n"
            ),
        ),
        ReportTemplate(
            code="US16",
            label="Male last name",
            scope=None,
            text=(
                "ERROR: User Story US16:Male last name \n"
                "Family ID: {family_id}   family members don't have same last name \n"
                "\n"
                "\n"
            ),
        ),
        ReportTemplate(
            code="US24",
            label="Unique Families By Spouse",
            scope=None,
            text=(
                "ERROR: User Story US24: Unique Families By Spouse :\n"
                "{family_id}: Husbund Name: {husband_name},Wife Name: {wife_name}"
                " and {other_family_id}: Husbund Name: {other_husband_name},"
                "Wife Name: {other_wife_name}\n"
                " have same spouses and marriage dates :{marriage}\n"
                "\n"
            ),
        ),
    )
}


def get_template(code: str) -> ReportTemplate:
    try:
        return REPORT_TEMPLATES[code]
    except KeyError:
        raise UnknownRuleError(f"No report template for rule {code!r}") from None
