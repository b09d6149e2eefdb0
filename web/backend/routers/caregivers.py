#!/usr/bin/env python3
"""
Caregiver endpoints - react to availability changes.
"""

import logging
from fastapi import APIRouter, Depends

from ..dependencies import get_matching_service
from ..services.matching_service import MatchingApiService
from ..models.requests import AvailabilityChangeRequest
from ..models.responses import RecalculationResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/caregivers", tags=["caregivers"])


@router.post("/{caregiver_id}/availability", response_model=RecalculationResponse)
def caregiver_availability_changed(
    caregiver_id: str,
    request: AvailabilityChangeRequest,
    service: MatchingApiService = Depends(get_matching_service)
):
    """
    Recalculate assignments after a caregiver's availability changed.

    Becoming available creates assignments for well-matched families;
    becoming unavailable deactivates the caregiver's assignments.
    """
    return service.availability_changed(caregiver_id, request)
