from __future__ import annotations

from .catalog import RULES, Rule, get_rule, run_rules
from .finding import Finding, make_finding
from .naming import male_last_name
from .temporal import birth_before_death, birth_before_marriage_of_parent, marriage_before_divorce
from .uniqueness import unique_families_by_spouses

__all__ = [
    "RULES",
    "Finding",
    "Rule",
    "birth_before_death",
    "birth_before_marriage_of_parent",
    "get_rule",
    "make_finding",
    "male_last_name",
    "marriage_before_divorce",
    "run_rules",
    "unique_families_by_spouses",
]
