#!/usr/bin/env python3
"""
Match endpoints - ranked caregiver lists and match validation.
"""

import logging
from fastapi import APIRouter, Depends, Query

from ..dependencies import get_matching_service
from ..services.matching_service import MatchingApiService
from ..models.requests import MatchValidationRequest
from ..models.responses import FamilyMatchesResponse, MatchValidationResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["matches"])


@router.get("/families/{family_user_id}/matches", response_model=FamilyMatchesResponse)
def get_family_matches(
    family_user_id: str,
    best_only: bool = Query(default=True, description="Return only the top match"),
    service: MatchingApiService = Depends(get_matching_service)
):
    """
    Get ranked caregiver matches for a family.

    Candidates are limited to caregivers that are ready for matching.
    """
    return service.family_matches(family_user_id, best_only=best_only)


@router.post("/matches/validate", response_model=MatchValidationResponse)
def validate_match(
    request: MatchValidationRequest,
    service: MatchingApiService = Depends(get_matching_service)
):
    """
    Validate a proposed family/caregiver pairing before assigning it.
    """
    return service.validate(request)
