import datetime as dt
from typing import ClassVar, FrozenSet

from .base import CamelModel, OwnedRecord, RecordPatch


class AppointmentBase(CamelModel):
    doctor_name: str
    hospital_name: str | None = None
    date: dt.date
    time: str
    type: str
    notes: str | None = None


class AppointmentCreate(AppointmentBase):
    pass


class AppointmentUpdate(RecordPatch):
    required_fields: ClassVar[FrozenSet[str]] = frozenset({"doctor_name", "date", "time", "type", "status"})

    doctor_name: str | None = None
    hospital_name: str | None = None
    date: dt.date | None = None
    time: str | None = None
    type: str | None = None
    notes: str | None = None
    status: str | None = None


class Appointment(OwnedRecord, AppointmentBase):
    status: str


class MedicalRecordBase(CamelModel):
    record_type: str
    title: str
    description: str | None = None
    date: dt.date
    doctor_name: str | None = None
    hospital_name: str | None = None
    file_url: str | None = None


class MedicalRecordCreate(MedicalRecordBase):
    pass


class MedicalRecordUpdate(RecordPatch):
    required_fields: ClassVar[FrozenSet[str]] = frozenset({"record_type", "title", "date"})

    record_type: str | None = None
    title: str | None = None
    description: str | None = None
    date: dt.date | None = None
    doctor_name: str | None = None
    hospital_name: str | None = None
    file_url: str | None = None


class MedicalRecord(OwnedRecord, MedicalRecordBase):
    pass
