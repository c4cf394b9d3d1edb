import datetime as dt
from typing import ClassVar, FrozenSet

from .base import CamelModel, OwnedRecord, RecordPatch


class InsuranceBase(CamelModel):
    provider: str
    policy_number: str
    group_number: str | None = None
    coverage_type: str
    start_date: dt.date
    end_date: dt.date | None = None
    is_active: bool = True


class InsuranceCreate(InsuranceBase):
    pass


class InsuranceUpdate(RecordPatch):
    required_fields: ClassVar[FrozenSet[str]] = frozenset({"provider", "policy_number", "coverage_type", "start_date", "is_active"})

    provider: str | None = None
    policy_number: str | None = None
    group_number: str | None = None
    coverage_type: str | None = None
    start_date: dt.date | None = None
    end_date: dt.date | None = None
    is_active: bool | None = None


class Insurance(OwnedRecord, InsuranceBase):
    pass
