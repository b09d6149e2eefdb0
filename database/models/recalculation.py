import uuid

from sqlalchemy import Column, Text, TIMESTAMP, ForeignKey, Integer, Index
from sqlalchemy.sql import text as sql_text
from sqlalchemy.dialects.postgresql import UUID

from .base import Base


class MatchRecalculationLog(Base):
    """
    One row per availability-driven recalculation run.
    """
    __tablename__ = 'match_recalculation_log'

    id = Column(UUID(as_uuid=False), primary_key=True, default=lambda: str(uuid.uuid4()))
    caregiver_id = Column(UUID(as_uuid=False), ForeignKey('profiles.id', ondelete='CASCADE'), nullable=False)
    recalculation_type = Column(Text, nullable=False)
    status = Column(Text, nullable=False, default='processing')  # processing|completed|failed
    assignments_created = Column(Integer, default=0)
    assignments_removed = Column(Integer, default=0)
    error_message = Column(Text)

    created_at = Column(TIMESTAMP(timezone=True), nullable=False, server_default=sql_text("timezone('UTC', now())"))
    processed_at = Column(TIMESTAMP(timezone=True))

    __table_args__ = (
        Index('idx_recalc_log_caregiver', 'caregiver_id'),
        Index('idx_recalc_log_status', 'status'),
    )


class AdminCommunication(Base):
    """
    Messages sent to users by the platform (admin_id null for automatic ones).
    """
    __tablename__ = 'admin_communications'

    id = Column(UUID(as_uuid=False), primary_key=True, default=lambda: str(uuid.uuid4()))
    admin_id = Column(UUID(as_uuid=False), nullable=True)
    target_user_id = Column(UUID(as_uuid=False), ForeignKey('profiles.id', ondelete='CASCADE'), nullable=False)
    message_type = Column(Text, nullable=False)
    custom_message = Column(Text)
    sent_at = Column(TIMESTAMP(timezone=True), nullable=False, server_default=sql_text("timezone('UTC', now())"))

    __table_args__ = (
        Index('idx_admin_comms_target', 'target_user_id'),
    )
