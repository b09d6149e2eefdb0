#!/usr/bin/env python3
"""
Request models for API endpoints.
"""

from pydantic import BaseModel, Field
from typing import Optional


class AutomaticAssignmentRequest(BaseModel):
    """Request to assign the best caregiver to a family."""
    family_user_id: str = Field(..., min_length=1, description="Family profile id")
    trigger_type: Optional[str] = Field(
        None,
        description="What triggered the assignment (defaults to 'manual'); echoed back only"
    )
    idempotency_key: Optional[str] = Field(
        None,
        description="Optional key; repeated requests with the same key return the first assignment"
    )


class AvailabilityChangeRequest(BaseModel):
    """Notification that a caregiver's matching availability changed."""
    previous_status: Optional[bool] = Field(None, description="Availability before the change")
    new_status: bool = Field(..., description="Availability after the change")
    caregiver_name: Optional[str] = Field(None, description="Display name used in notifications")


class MatchValidationRequest(BaseModel):
    """Request to validate a proposed family/caregiver pairing."""
    family_user_id: str = Field(..., min_length=1)
    caregiver_id: str = Field(..., min_length=1)
    min_score: Optional[float] = Field(None, ge=0, le=1, description="Minimum acceptable match score (0-1)")
    allow_override: bool = Field(False, description="Accept the match despite issues")
