from sqlalchemy import Boolean, Column, Date, Index, String
from .base import Base, OwnedRecordMixin


class Insurance(OwnedRecordMixin, Base):
    __tablename__ = 'insurances'
    provider = Column(String, nullable=False)
    policy_number = Column(String, nullable=False)
    group_number = Column(String, nullable=True)
    coverage_type = Column(String, nullable=False)
    start_date = Column(Date, nullable=False)
    end_date = Column(Date, nullable=True)
    is_active = Column(Boolean, nullable=False, default=True)

    __table_args__ = (
        Index('idx_insurances_owner_created', 'owner_id', 'created_at'),
    )
