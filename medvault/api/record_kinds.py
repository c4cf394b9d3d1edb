"""
Registry of owner-scoped record kinds.

Each ``RecordKind`` names the procedures it exposes, the schemas that validate
them, and how its list is ordered. ``medvault.api.records`` turns every entry
into one router with the same four procedures.
"""
from dataclasses import dataclass, field
from typing import Any, Mapping, Type

from pydantic import BaseModel

from medvault.db import models, schemas
from medvault.db.repositories import OwnedRecordRepository
from medvault.db.schemas import RecordPatch


@dataclass(frozen=True)
class RecordKind:
    name: str
    plural: str
    model: Any
    create_schema: Type[BaseModel]
    update_schema: Type[RecordPatch]
    read_schema: Type[BaseModel]
    sort_key: str = "created_at"
    descending: bool = True
    server_defaults: Mapping[str, Any] = field(default_factory=dict)

    @property
    def tag(self) -> str:
        return self.plural[0].lower() + self.plural[1:]

    def repository(self) -> OwnedRecordRepository:
        return OwnedRecordRepository(
            self.model,
            sort_key=self.sort_key,
            descending=self.descending,
            server_defaults=self.server_defaults,
        )


CHRONIC_CONDITION = RecordKind(
    name="ChronicCondition",
    plural="ChronicConditions",
    model=models.ChronicCondition,
    create_schema=schemas.ChronicConditionCreate,
    update_schema=schemas.ChronicConditionUpdate,
    read_schema=schemas.ChronicCondition,
)

ALLERGY = RecordKind(
    name="Allergy",
    plural="Allergies",
    model=models.Allergy,
    create_schema=schemas.AllergyCreate,
    update_schema=schemas.AllergyUpdate,
    read_schema=schemas.Allergy,
)

CURRENT_MEDICATION = RecordKind(
    name="CurrentMedication",
    plural="CurrentMedications",
    model=models.CurrentMedication,
    create_schema=schemas.CurrentMedicationCreate,
    update_schema=schemas.CurrentMedicationUpdate,
    read_schema=schemas.CurrentMedication,
)

INSURANCE = RecordKind(
    name="Insurance",
    plural="Insurances",
    model=models.Insurance,
    create_schema=schemas.InsuranceCreate,
    update_schema=schemas.InsuranceUpdate,
    read_schema=schemas.Insurance,
)

APPOINTMENT = RecordKind(
    name="Appointment",
    plural="Appointments",
    model=models.Appointment,
    create_schema=schemas.AppointmentCreate,
    update_schema=schemas.AppointmentUpdate,
    read_schema=schemas.Appointment,
    # Upcoming visits first
    sort_key="date",
    descending=False,
    server_defaults={"status": models.APPOINTMENT_STATUS_SCHEDULED},
)

MEDICAL_RECORD = RecordKind(
    name="MedicalRecord",
    plural="MedicalRecords",
    model=models.MedicalRecord,
    create_schema=schemas.MedicalRecordCreate,
    update_schema=schemas.MedicalRecordUpdate,
    read_schema=schemas.MedicalRecord,
    sort_key="date",
)

PRESCRIPTION = RecordKind(
    name="Prescription",
    plural="Prescriptions",
    model=models.Prescription,
    create_schema=schemas.PrescriptionCreate,
    update_schema=schemas.PrescriptionUpdate,
    read_schema=schemas.Prescription,
    sort_key="start_date",
    server_defaults={"status": models.PRESCRIPTION_STATUS_ACTIVE},
)

RECORD_KINDS = (
    CHRONIC_CONDITION,
    ALLERGY,
    CURRENT_MEDICATION,
    INSURANCE,
    APPOINTMENT,
    MEDICAL_RECORD,
    PRESCRIPTION,
)
