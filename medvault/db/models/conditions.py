from sqlalchemy import Column, Date, Index, String, Text
from .base import Base, OwnedRecordMixin


class ChronicCondition(OwnedRecordMixin, Base):
    __tablename__ = 'chronic_conditions'
    condition = Column(String, nullable=False)
    diagnosis_date = Column(Date, nullable=True)
    severity = Column(String, nullable=True)
    notes = Column(Text, nullable=True)

    __table_args__ = (
        Index('idx_chronic_conditions_owner_created', 'owner_id', 'created_at'),
    )


class Allergy(OwnedRecordMixin, Base):
    __tablename__ = 'allergies'
    type = Column(String, nullable=False)
    name = Column(String, nullable=False)
    severity = Column(String, nullable=True)
    reaction = Column(Text, nullable=True)
    notes = Column(Text, nullable=True)

    __table_args__ = (
        Index('idx_allergies_owner_created', 'owner_id', 'created_at'),
    )
