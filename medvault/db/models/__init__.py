"""
Domain-split SQLAlchemy models.

Exposes `Base`, `now_utc` and all ORM classes from a single import point.
"""

from .base import Base, now_utc, OwnedRecordMixin

from .users import User
from .conditions import ChronicCondition, Allergy
from .medications import CurrentMedication, Prescription, PRESCRIPTION_STATUS_ACTIVE
from .insurance import Insurance
from .visits import Appointment, MedicalRecord, APPOINTMENT_STATUS_SCHEDULED

__all__ = [
    # base
    "Base",
    "now_utc",
    "OwnedRecordMixin",
    # users
    "User",
    # owned records
    "ChronicCondition",
    "Allergy",
    "CurrentMedication",
    "Prescription",
    "Insurance",
    "Appointment",
    "MedicalRecord",
    # server-assigned statuses
    "PRESCRIPTION_STATUS_ACTIVE",
    "APPOINTMENT_STATUS_SCHEDULED",
]
