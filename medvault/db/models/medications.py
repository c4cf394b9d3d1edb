from sqlalchemy import Column, Date, Index, Integer, String, Text
from .base import Base, OwnedRecordMixin

PRESCRIPTION_STATUS_ACTIVE = 'Active'


class CurrentMedication(OwnedRecordMixin, Base):
    __tablename__ = 'current_medications'
    name = Column(String, nullable=False)
    dosage = Column(String, nullable=False)
    frequency = Column(String, nullable=False)
    start_date = Column(Date, nullable=False)
    end_date = Column(Date, nullable=True)
    prescribed_by = Column(String, nullable=True)
    notes = Column(Text, nullable=True)

    __table_args__ = (
        Index('idx_current_medications_owner_created', 'owner_id', 'created_at'),
    )


class Prescription(OwnedRecordMixin, Base):
    __tablename__ = 'prescriptions'
    doctor_name = Column(String, nullable=False)
    medication = Column(String, nullable=False)
    dosage = Column(String, nullable=False)
    frequency = Column(String, nullable=False)
    start_date = Column(Date, nullable=False)
    end_date = Column(Date, nullable=True)
    refills = Column(Integer, nullable=False, default=0)
    notes = Column(Text, nullable=True)
    status = Column(String, nullable=False, default=PRESCRIPTION_STATUS_ACTIVE)

    __table_args__ = (
        Index('idx_prescriptions_owner_start_date', 'owner_id', 'start_date'),
    )
