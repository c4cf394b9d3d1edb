"""
Domain-split Pydantic schemas, re-exported from one place.
"""

from .base import CamelModel, Patch, RecordPatch, OwnedRecord
from .users import MedicalProfile, MedicalProfileUpdate
from .conditions import (
    ChronicConditionBase,
    ChronicConditionCreate,
    ChronicConditionUpdate,
    ChronicCondition,
    AllergyBase,
    AllergyCreate,
    AllergyUpdate,
    Allergy,
)
from .medications import (
    CurrentMedicationBase,
    CurrentMedicationCreate,
    CurrentMedicationUpdate,
    CurrentMedication,
    PrescriptionBase,
    PrescriptionCreate,
    PrescriptionUpdate,
    Prescription,
)
from .insurance import InsuranceBase, InsuranceCreate, InsuranceUpdate, Insurance
from .visits import (
    AppointmentBase,
    AppointmentCreate,
    AppointmentUpdate,
    Appointment,
    MedicalRecordBase,
    MedicalRecordCreate,
    MedicalRecordUpdate,
    MedicalRecord,
)

__all__ = [
    # base
    "CamelModel",
    "Patch",
    "RecordPatch",
    "OwnedRecord",
    # profile
    "MedicalProfile",
    "MedicalProfileUpdate",
    # conditions / allergies
    "ChronicConditionBase",
    "ChronicConditionCreate",
    "ChronicConditionUpdate",
    "ChronicCondition",
    "AllergyBase",
    "AllergyCreate",
    "AllergyUpdate",
    "Allergy",
    # medications / prescriptions
    "CurrentMedicationBase",
    "CurrentMedicationCreate",
    "CurrentMedicationUpdate",
    "CurrentMedication",
    "PrescriptionBase",
    "PrescriptionCreate",
    "PrescriptionUpdate",
    "Prescription",
    # insurance
    "InsuranceBase",
    "InsuranceCreate",
    "InsuranceUpdate",
    "Insurance",
    # visits
    "AppointmentBase",
    "AppointmentCreate",
    "AppointmentUpdate",
    "Appointment",
    "MedicalRecordBase",
    "MedicalRecordCreate",
    "MedicalRecordUpdate",
    "MedicalRecord",
]
