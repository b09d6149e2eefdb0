#!/usr/bin/env python3
"""
Response models for API endpoints.
"""

from pydantic import BaseModel, ConfigDict, Field
from typing import List, Optional, Dict


class AutomaticAssignmentResponse(BaseModel):
    """Result of an automatic assignment request.

    Informational outcomes (no caregivers, no suitable matches) carry
    ``message`` and no assignment fields.
    """
    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "success": True,
                "assignment_id": "550e8400-e29b-41d4-a716-446655440000",
                "family_user_id": "6ba7b810-9dad-11d1-80b4-00c04fd430c8",
                "caregiver_id": "6ba7b811-9dad-11d1-80b4-00c04fd430c8",
                "match_score": 0.92,
                "shift_compatibility_score": 1.0,
                "explanation": "Care type match: 100%, Experience match: 100%, "
                               "Budget match: 67%, Schedule match: 100%",
                "total_matches_evaluated": 12,
                "trigger_type": "manual"
            }
        }
    )

    success: bool = True
    message: Optional[str] = None
    assignment_id: Optional[str] = None
    family_user_id: str
    caregiver_id: Optional[str] = None
    match_score: Optional[float] = Field(None, ge=0, le=1)
    shift_compatibility_score: Optional[float] = Field(None, ge=0, le=1)
    explanation: Optional[str] = None
    total_matches_evaluated: int = 0
    trigger_type: str


class PresentedMatchResponse(BaseModel):
    """A caregiver in a family's ranked match list."""
    caregiver_id: str
    full_name: str
    match_score: float = Field(ge=0, le=1)
    shift_compatibility_score: float = Field(ge=0, le=1)
    affinity_score: int = Field(ge=0, le=100, description="Per-pair tie-breaker, not derived from profile data")
    display_score: int = Field(ge=0, le=100)
    is_premium: bool = False
    explanation: str = ""


class FamilyMatchesResponse(BaseModel):
    success: bool = True
    family_user_id: str
    best_only: bool
    count: int
    matches: List[PresentedMatchResponse]


class RecalculationResponse(BaseModel):
    success: bool = True
    message: str
    caregiver_id: str
    log_id: Optional[str] = None
    assignments_created: int = 0
    assignments_removed: int = 0
    families_evaluated: int = 0
    failed_families: List[str] = Field(default_factory=list)


class MatchValidationResponse(BaseModel):
    success: bool = True
    is_valid: bool
    score: float = Field(ge=0, le=1)
    issues: List[str] = Field(default_factory=list)
    recommendations: List[str] = Field(default_factory=list)
    components: Dict[str, float] = Field(default_factory=dict)
