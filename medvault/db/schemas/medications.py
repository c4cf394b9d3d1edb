import datetime as dt
from typing import ClassVar, FrozenSet

from .base import CamelModel, OwnedRecord, RecordPatch


class CurrentMedicationBase(CamelModel):
    name: str
    dosage: str
    frequency: str
    start_date: dt.date
    end_date: dt.date | None = None
    prescribed_by: str | None = None
    notes: str | None = None


class CurrentMedicationCreate(CurrentMedicationBase):
    pass


class CurrentMedicationUpdate(RecordPatch):
    required_fields: ClassVar[FrozenSet[str]] = frozenset({"name", "dosage", "frequency", "start_date"})

    name: str | None = None
    dosage: str | None = None
    frequency: str | None = None
    start_date: dt.date | None = None
    end_date: dt.date | None = None
    prescribed_by: str | None = None
    notes: str | None = None


class CurrentMedication(OwnedRecord, CurrentMedicationBase):
    pass


class PrescriptionBase(CamelModel):
    doctor_name: str
    medication: str
    dosage: str
    frequency: str
    start_date: dt.date
    end_date: dt.date | None = None
    refills: int = 0
    notes: str | None = None


class PrescriptionCreate(PrescriptionBase):
    pass


class PrescriptionUpdate(RecordPatch):
    required_fields: ClassVar[FrozenSet[str]] = frozenset({"doctor_name", "medication", "dosage", "frequency", "start_date", "refills", "status"})

    doctor_name: str | None = None
    medication: str | None = None
    dosage: str | None = None
    frequency: str | None = None
    start_date: dt.date | None = None
    end_date: dt.date | None = None
    refills: int | None = None
    notes: str | None = None
    status: str | None = None


class Prescription(OwnedRecord, PrescriptionBase):
    status: str
