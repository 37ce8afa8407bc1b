from __future__ import annotations

from .entities import (
    SEX_FEMALE,
    SEX_MALE,
    Family,
    FamilyId,
    Individual,
    IndividualId,
    RecordStore,
    surname_of,
)

__all__ = [
    "SEX_FEMALE",
    "SEX_MALE",
    "Family",
    "FamilyId",
    "Individual",
    "IndividualId",
    "RecordStore",
    "surname_of",
]
