import datetime as dt
from typing import ClassVar, FrozenSet

from .base import CamelModel, OwnedRecord, RecordPatch


class ChronicConditionBase(CamelModel):
    condition: str
    diagnosis_date: dt.date | None = None
    severity: str | None = None
    notes: str | None = None


class ChronicConditionCreate(ChronicConditionBase):
    pass


class ChronicConditionUpdate(RecordPatch):
    required_fields: ClassVar[FrozenSet[str]] = frozenset({"condition"})

    condition: str | None = None
    diagnosis_date: dt.date | None = None
    severity: str | None = None
    notes: str | None = None


class ChronicCondition(OwnedRecord, ChronicConditionBase):
    pass


class AllergyBase(CamelModel):
    type: str
    name: str
    severity: str | None = None
    reaction: str | None = None
    notes: str | None = None


class AllergyCreate(AllergyBase):
    pass


class AllergyUpdate(RecordPatch):
    required_fields: ClassVar[FrozenSet[str]] = frozenset({"type", "name"})

    type: str | None = None
    name: str | None = None
    severity: str | None = None
    reaction: str | None = None
    notes: str | None = None


class Allergy(OwnedRecord, AllergyBase):
    pass
