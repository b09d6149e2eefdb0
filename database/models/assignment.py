import uuid

from sqlalchemy import Column, Text, TIMESTAMP, ForeignKey, Boolean, Numeric, Index, func
from sqlalchemy.sql import text as sql_text
from sqlalchemy.dialects.postgresql import UUID

from .base import Base


class CaregiverAssignment(Base):
    """
    A caregiver assigned to a family.

    idempotency_key is optional; when present it is unique, so a repeated
    trigger carrying the same key cannot create a second row.
    """
    __tablename__ = 'caregiver_assignments'

    id = Column(UUID(as_uuid=False), primary_key=True, default=lambda: str(uuid.uuid4()))
    family_user_id = Column(UUID(as_uuid=False), ForeignKey('profiles.id', ondelete='CASCADE'), nullable=False)
    caregiver_id = Column(UUID(as_uuid=False), ForeignKey('profiles.id', ondelete='CASCADE'), nullable=False)

    assignment_type = Column(Text, nullable=False, default='automatic')  # automatic|manual|care_team
    match_score = Column(Numeric(3, 2))
    shift_compatibility_score = Column(Numeric(3, 2))
    match_explanation = Column(Text)

    status = Column(Text, nullable=False, default='active')
    is_active = Column(Boolean, nullable=False, default=True)
    trigger_type = Column(Text)
    idempotency_key = Column(Text, unique=True, nullable=True)
    notes = Column(Text)

    created_at = Column(TIMESTAMP(timezone=True), nullable=False, server_default=sql_text("timezone('UTC', now())"))
    updated_at = Column(TIMESTAMP(timezone=True), nullable=False, server_default=sql_text("timezone('UTC', now())"), onupdate=func.now())

    __table_args__ = (
        Index('idx_assignments_family', 'family_user_id', 'is_active'),
        Index('idx_assignments_caregiver', 'caregiver_id', 'is_active'),
    )
