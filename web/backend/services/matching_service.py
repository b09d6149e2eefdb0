#!/usr/bin/env python3
"""
Matching service - maps API requests onto the core matching services.
"""

import logging
from typing import Optional

from core.config_loader import MatchingConfig
from core.scorer import MatchScorer
from core.matcher import (
    AssignmentService,
    MatchPresenter,
    RecalculationService,
    MatchQualityValidator,
    MatchingStore,
)
from ..models.requests import (
    AutomaticAssignmentRequest,
    AvailabilityChangeRequest,
    MatchValidationRequest
)
from ..models.responses import (
    AutomaticAssignmentResponse,
    FamilyMatchesResponse,
    PresentedMatchResponse,
    RecalculationResponse,
    MatchValidationResponse
)

logger = logging.getLogger(__name__)


class MatchingApiService:
    """Service for the matching endpoints of one request."""

    def __init__(self, store: MatchingStore, config: Optional[MatchingConfig] = None):
        self.store = store
        self.config = config or MatchingConfig()
        self.scorer = MatchScorer(self.config.scorer)
        self._presenter: Optional[MatchPresenter] = None

    @property
    def presenter(self) -> MatchPresenter:
        if self._presenter is None:
            self._presenter = MatchPresenter(self.store, self.scorer, self.config.presenter)
        return self._presenter

    def assign(self, request: AutomaticAssignmentRequest) -> AutomaticAssignmentResponse:
        """
        Run automatic assignment for a family.

        Raises:
            FamilyNotFoundError: If the family does not exist.
            PersistenceError: If the assignment could not be saved.
        """
        service = AssignmentService(self.store, self.scorer, self.config.assignment)
        outcome = service.assign_best_caregiver(
            request.family_user_id,
            trigger_type=request.trigger_type,
            idempotency_key=request.idempotency_key
        )

        if not outcome.assigned:
            return AutomaticAssignmentResponse(
                success=True,
                message=outcome.message,
                family_user_id=outcome.family_user_id,
                total_matches_evaluated=outcome.total_matches_evaluated,
                trigger_type=outcome.trigger_type
            )

        assignment = outcome.assignment
        return AutomaticAssignmentResponse(
            success=True,
            assignment_id=assignment.id,
            family_user_id=outcome.family_user_id,
            caregiver_id=assignment.caregiver_id,
            match_score=assignment.match_score,
            shift_compatibility_score=assignment.shift_compatibility_score,
            explanation=assignment.match_explanation,
            total_matches_evaluated=outcome.total_matches_evaluated,
            trigger_type=outcome.trigger_type
        )

    def family_matches(self, family_user_id: str, best_only: bool = True) -> FamilyMatchesResponse:
        matches = self.presenter.get_matches(family_user_id, best_only=best_only)
        items = [
            PresentedMatchResponse(
                caregiver_id=m.caregiver_id,
                full_name=m.full_name,
                match_score=m.match_score,
                shift_compatibility_score=m.shift_compatibility_score,
                affinity_score=m.affinity_score,
                display_score=m.display_score,
                is_premium=m.is_premium,
                explanation=m.explanation
            )
            for m in matches
        ]
        return FamilyMatchesResponse(
            success=True,
            family_user_id=family_user_id,
            best_only=best_only,
            count=len(items),
            matches=items
        )

    def availability_changed(
        self,
        caregiver_id: str,
        request: AvailabilityChangeRequest
    ) -> RecalculationResponse:
        service = RecalculationService(self.store, self.scorer, self.config.recalculation)
        summary = service.on_availability_change(
            caregiver_id,
            previous_status=request.previous_status,
            new_status=request.new_status,
            caregiver_name=request.caregiver_name
        )
        return RecalculationResponse(
            success=True,
            message=f"Match recalculation completed for {summary.caregiver_name}",
            caregiver_id=caregiver_id,
            log_id=summary.log_id,
            assignments_created=summary.assignments_created,
            assignments_removed=summary.assignments_removed,
            families_evaluated=summary.families_evaluated,
            failed_families=summary.failed_families
        )

    def validate(self, request: MatchValidationRequest) -> MatchValidationResponse:
        validator = MatchQualityValidator(self.store, self.scorer, self.config.validation)
        result = validator.validate_match(
            request.family_user_id,
            request.caregiver_id,
            min_score=request.min_score,
            allow_override=request.allow_override
        )
        return MatchValidationResponse(
            success=True,
            is_valid=result.is_valid,
            score=result.score,
            issues=result.issues,
            recommendations=result.recommendations,
            components=result.components
        )
