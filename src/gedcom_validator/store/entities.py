from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Iterable, Iterator, Mapping, NewType, Optional, Tuple

from gedcom_validator.core.exceptions import RecordNotFoundError
from gedcom_validator.logging import get_logger

log = get_logger(__name__)

IndividualId = NewType("IndividualId", str)
FamilyId = NewType("FamilyId", str)

SEX_MALE = "male"
SEX_FEMALE = "female"


# -----------------------------
# Entities
# -----------------------------

@dataclass(frozen=True, slots=True)
class Individual:
    id: IndividualId
    name: Optional[str] = None
    sex: Optional[str] = None  # "male" | "female" | None
    birth: Optional[str] = None  # MM/DD/YYYY
    death: Optional[str] = None

    @property
    def surname(self) -> Optional[str]:
        return surname_of(self.name)

    @property
    def is_male(self) -> bool:
        return self.sex == SEX_MALE


@dataclass(frozen=True, slots=True)
class Family:
    id: FamilyId
    husband_id: Optional[IndividualId] = None
    wife_id: Optional[IndividualId] = None
    marriage_date: Optional[str] = None
    divorce_date: Optional[str] = None
    children: Tuple[IndividualId, ...] = field(default_factory=tuple)

    def __post_init__(self):
        # Accept any iterable of ids but always store a tuple.
        if not isinstance(self.children, tuple):
            object.__setattr__(self, "children", tuple(self.children))

    def spouse_refs(self) -> Iterator[Tuple[str, IndividualId]]:
        if self.husband_id:
            yield "husband", self.husband_id
        if self.wife_id:
            yield "wife", self.wife_id


def surname_of(name: Optional[str]) -> Optional[str]:
    """Last whitespace-delimited token of a full name."""
    if not name:
        return None
    tokens = name.split()
    return tokens[-1] if tokens else None


# -----------------------------
# Record store
# -----------------------------

class RecordStore:
    """
    Read-only snapshot of individuals and families for one validation pass.

    Both maps keep insertion order, which is the order rules iterate and
    therefore the order findings are reported.
    """

    __slots__ = ("_individuals", "_families")

    def __init__(
        self,
        individuals: Iterable[Individual] = (),
        families: Iterable[Family] = (),
    ):
        self._individuals: Mapping[IndividualId, Individual] = MappingProxyType(
            {ind.id: ind for ind in individuals}
        )
        self._families: Mapping[FamilyId, Family] = MappingProxyType(
            {fam.id: fam for fam in families}
        )

    @classmethod
    def from_maps(
        cls,
        individuals: Mapping[str, Individual],
        families: Mapping[str, Family],
    ) -> "RecordStore":
        return cls(individuals.values(), families.values())

    @property
    def individuals(self) -> Mapping[IndividualId, Individual]:
        return self._individuals

    @property
    def families(self) -> Mapping[FamilyId, Family]:
        return self._families

    def get_individual(self, individual_id: Optional[str]) -> Optional[Individual]:
        if not individual_id:
            return None
        return self._individuals.get(individual_id)

    def get_family(self, family_id: Optional[str]) -> Optional[Family]:
        if not family_id:
            return None
        return self._families.get(family_id)

    def contains_individual(self, individual_id: Optional[str]) -> bool:
        return bool(individual_id) and individual_id in self._individuals

    def require_individual(self, individual_id: str) -> Individual:
        ind = self.get_individual(individual_id)
        if ind is None:
            raise RecordNotFoundError(f"Individual not found: {individual_id}")
        return ind

    def display_name(self, individual_id: Optional[str], placeholder: str) -> str:
        """
        Name to print for ``individual_id``.

        Falls back to ``placeholder`` when the id is unset, the individual has
        no name, or the id does not resolve. Only the last case is logged.
        """
        if not individual_id:
            return placeholder
        ind = self._individuals.get(individual_id)
        if ind is None:
            log.warning(f"Dangling individual reference: {individual_id}")
            return placeholder
        return ind.name if ind.name is not None else placeholder

    def dangling_references(self) -> Iterator[Tuple[FamilyId, str, IndividualId]]:
        for fam in self._families.values():
            for role, ref in fam.spouse_refs():
                if ref not in self._individuals:
                    yield fam.id, role, ref
            for child_id in fam.children:
                if child_id not in self._individuals:
                    yield fam.id, "child", child_id

    def __repr__(self) -> str:  # pragma: no cover - cosmetic
        return (
            f"<RecordStore individuals={len(self._individuals)} "
            f"families={len(self._families)}>"
        )
