"""
Rule catalog and sequential runner.

Rules are independent pure functions over a ``RecordStore``. ``run_rules``
invokes them one after another against the same snapshot and hands each
rule's findings to the reporter before the next rule starts, so report
text follows invocation order.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, Iterable, List, Optional

from gedcom_validator.core.exceptions import UnknownRuleError
from gedcom_validator.logging import get_logger
from gedcom_validator.rules.finding import Finding
from gedcom_validator.rules.naming import male_last_name
from gedcom_validator.rules.temporal import (
    birth_before_death,
    birth_before_marriage_of_parent,
    marriage_before_divorce,
)
from gedcom_validator.rules.uniqueness import unique_families_by_spouses
from gedcom_validator.store import RecordStore

log = get_logger(__name__)

RuleFunc = Callable[..., List[Finding]]


@dataclass(frozen=True, slots=True)
class Rule:
    code: str
    name: str
    func: RuleFunc

    def __call__(self, store: RecordStore, **kwargs) -> List[Finding]:
        return self.func(store, **kwargs)


RULES: Dict[str, Rule] = {
    r.code: r
    for r in (
        Rule("US03", "birth_before_death", birth_before_death),
        Rule("US04", "marriage_before_divorce", marriage_before_divorce),
        Rule("US08", "birth_before_marriage_of_parent", birth_before_marriage_of_parent),
        Rule("US16", "male_last_name", male_last_name),
        Rule("US24", "unique_families_by_spouses", unique_families_by_spouses),
    )
}


def get_rule(code: str) -> Rule:
    key = code.strip().upper()
    try:
        return RULES[key]
    except KeyError:
        known = ", ".join(RULES)
        raise UnknownRuleError(f"Unknown rule {code!r} (known: {known})") from None


def run_rules(
    store: RecordStore,
    reporter=None,
    codes: Optional[Iterable[str]] = None,
    *,
    placeholder: Optional[str] = None,
) -> List[Finding]:
    """Run ``codes`` (default: whole catalog) in order; return all findings."""
    selected = [get_rule(c) for c in codes] if codes else list(RULES.values())
    all_findings: List[Finding] = []

    for rule in selected:
        findings = rule(store, placeholder=placeholder)
        log.info(f"{rule.code} {rule.name}: {len(findings)} finding(s)")
        if reporter is not None:
            reporter.report_all(findings)
        all_findings.extend(findings)

    return all_findings
