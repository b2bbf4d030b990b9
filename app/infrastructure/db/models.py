"""
Database Models (SQLAlchemy ORM)
Insert-only audit tables - NO UPDATES, NO DELETES
"""

from sqlalchemy import Column, Integer, String, Float, DateTime, Enum as SQLEnum, Index

from app.domain.models import FatigueLevel
from app.infrastructure.db.database import Base
from app.utils.time import now_local_naive


class FatigueAssessmentModel(Base):
    """Pre-shift fatigue assessment - AUDIT RECORD"""
    __tablename__ = "fatigue_assessment"

    id = Column(Integer, primary_key=True, autoincrement=True)

    # Inputs as submitted
    sleep_last_24 = Column(Float, nullable=False)
    sleep_previous_24 = Column(Float, nullable=False)
    wake_time = Column(String(5), nullable=False)
    work_start_time = Column(String(5), nullable=False)

    # Result at work start (projection is not stored)
    score = Column(Integer, nullable=False)
    level = Column(
        SQLEnum(FatigueLevel, name="fatiguelevel", values_callable=lambda e: [m.value for m in e]),
        nullable=False,
    )
    total_sleep_48 = Column(Float, nullable=False)
    hours_awake = Column(Float, nullable=False)

    created_at = Column(DateTime, nullable=False, default=now_local_naive)

    __table_args__ = (
        Index('ix_fatigue_assessment_created_at', 'created_at'),
        Index('ix_fatigue_assessment_level', 'level', 'created_at'),
    )
