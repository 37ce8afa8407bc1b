from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Mapping, Optional, Tuple

from gedcom_validator.config import get_config
from gedcom_validator.reporting.templates import get_template


@dataclass(frozen=True, slots=True)
class Finding:
    """
    A single rule violation, not yet rendered.

    ``fields`` holds every value the rule's report template needs; names are
    already resolved (or replaced by the missing-name placeholder). It is
    read-only and left out of equality and hashing.
    """
    code: str
    label: str
    scope: Optional[str]
    entity_ids: Tuple[str, ...]
    explanation: str
    dates: Tuple[str, ...] = ()
    fields: Mapping[str, Any] = field(default_factory=dict, compare=False)

    def __post_init__(self):
        if not isinstance(self.fields, MappingProxyType):
            object.__setattr__(self, "fields", MappingProxyType(dict(self.fields)))


def make_finding(
    code: str,
    *,
    entity_ids,
    explanation: str,
    dates=(),
    **fields: Any,
) -> Finding:
    template = get_template(code)
    return Finding(
        code=code,
        label=template.label,
        scope=template.scope,
        entity_ids=tuple(entity_ids),
        explanation=explanation,
        dates=tuple(dates),
        fields=fields,
    )


def resolve_placeholder(placeholder: Optional[str]) -> str:
    return get_config().missing_name if placeholder is None else placeholder
