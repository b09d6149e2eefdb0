#!/usr/bin/env python3
"""
Assignment endpoints - automatic caregiver assignment.
"""

import logging
from fastapi import APIRouter, Depends

from ..dependencies import get_matching_service
from ..services.matching_service import MatchingApiService
from ..models.requests import AutomaticAssignmentRequest
from ..models.responses import AutomaticAssignmentResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/assignments", tags=["assignments"])


@router.post(
    "/automatic",
    response_model=AutomaticAssignmentResponse,
    response_model_exclude_none=True
)
def automatic_caregiver_assignment(
    request: AutomaticAssignmentRequest,
    service: MatchingApiService = Depends(get_matching_service)
):
    """
    Assign the best-matching caregiver to a family.

    Scores every complete caregiver, keeps matches above the threshold and
    persists an assignment for the top one. Returns 200 with a message
    when there are no caregivers or no suitable matches, 404 when the
    family does not exist.
    """
    return service.assign(request)
