from sqlalchemy import Column, Date, Index, String, Text
from .base import Base, OwnedRecordMixin

APPOINTMENT_STATUS_SCHEDULED = 'Scheduled'


class Appointment(OwnedRecordMixin, Base):
    __tablename__ = 'appointments'
    doctor_name = Column(String, nullable=False)
    hospital_name = Column(String, nullable=True)
    date = Column(Date, nullable=False)
    # Free-form wall clock time as entered, e.g. "10:00"
    time = Column(String, nullable=False)
    type = Column(String, nullable=False)
    notes = Column(Text, nullable=True)
    status = Column(String, nullable=False, default=APPOINTMENT_STATUS_SCHEDULED)

    __table_args__ = (
        Index('idx_appointments_owner_date', 'owner_id', 'date'),
    )


class MedicalRecord(OwnedRecordMixin, Base):
    __tablename__ = 'medical_records'
    record_type = Column(String, nullable=False)
    title = Column(String, nullable=False)
    description = Column(Text, nullable=True)
    date = Column(Date, nullable=False)
    doctor_name = Column(String, nullable=True)
    hospital_name = Column(String, nullable=True)
    file_url = Column(Text, nullable=True)

    __table_args__ = (
        Index('idx_medical_records_owner_date', 'owner_id', 'date'),
    )
