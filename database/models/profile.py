import uuid

from sqlalchemy import Column, Text, TIMESTAMP, ForeignKey, Boolean, Numeric, Index, func
from sqlalchemy.sql import text as sql_text
from sqlalchemy.dialects.postgresql import UUID, JSONB
from sqlalchemy.orm import relationship

from .base import Base


def _new_id() -> str:
    return str(uuid.uuid4())


class Profile(Base):
    """
    User profile for both families and professional caregivers.

    Caregiver-only columns (hourly_rate, availability, ...) stay null
    for family rows.
    """
    __tablename__ = 'profiles'

    id = Column(UUID(as_uuid=False), primary_key=True, default=_new_id)
    role = Column(Text, nullable=False)  # family|professional
    full_name = Column(Text)

    # Care types requested (family) or specialties offered (professional)
    care_types = Column(JSONB, default=list)

    # Professional fields
    professional_type = Column(Text)
    years_of_experience = Column(Text)  # free text, e.g. "5+ years"
    hourly_rate = Column(Numeric(8, 2))
    availability = Column(JSONB, default=list)  # shift tags

    # Readiness / eligibility
    profile_complete = Column(Boolean, nullable=False, default=False)
    available_for_matching = Column(Boolean, nullable=False, default=False)

    created_at = Column(TIMESTAMP(timezone=True), nullable=False, server_default=sql_text("timezone('UTC', now())"))
    updated_at = Column(TIMESTAMP(timezone=True), nullable=False, server_default=sql_text("timezone('UTC', now())"), onupdate=func.now())

    care_needs = relationship("CareNeedsFamily", back_populates="profile", uselist=False, cascade="all, delete-orphan")

    __table_args__ = (
        Index('idx_profiles_role', 'role'),
        Index('idx_profiles_matching', 'role', 'available_for_matching'),
        Index('idx_profiles_complete', 'role', 'profile_complete'),
    )


class CareNeedsFamily(Base):
    """
    A family's care needs, one row per family profile.
    """
    __tablename__ = 'care_needs_family'

    id = Column(UUID(as_uuid=False), primary_key=True, default=_new_id)
    profile_id = Column(UUID(as_uuid=False), ForeignKey('profiles.id', ondelete='CASCADE'), nullable=False, unique=True)

    care_types = Column(JSONB, default=list)
    special_needs = Column(Text)
    # Comma-separated shift tags or a JSON-encoded array
    care_schedule = Column(Text)
    budget_preference = Column(Text)  # under_15|15_20|20_25|25_30|30_plus|not_sure
    caregiver_type = Column(Text)  # professional|nurse|specialized|companion

    created_at = Column(TIMESTAMP(timezone=True), nullable=False, server_default=sql_text("timezone('UTC', now())"))
    updated_at = Column(TIMESTAMP(timezone=True), nullable=False, server_default=sql_text("timezone('UTC', now())"), onupdate=func.now())

    profile = relationship("Profile", back_populates="care_needs")
