#!/usr/bin/env python3
"""
Match Quality Validator - Checks a proposed family/caregiver pairing.

Used before a manual assignment. Combines the unified match score with
caregiver availability and current workload, and turns weak spots into
issues and recommendations. Issues make a match invalid unless the
caller explicitly overrides.
"""

from typing import Optional
import logging

from core.config_loader import ValidationConfig
from core.scorer import MatchScorer
from core.matcher.ports import MatchingStore
from core.matcher.dto import MatchValidationResult

logger = logging.getLogger(__name__)


class MatchQualityValidator:

    def __init__(
        self,
        store: MatchingStore,
        scorer: Optional[MatchScorer] = None,
        config: Optional[ValidationConfig] = None
    ):
        self.store = store
        self.scorer = scorer or MatchScorer()
        self.config = config or ValidationConfig()

    def workload_score(self, active_assignments: int) -> float:
        max_assignments = self.config.max_active_assignments
        if max_assignments <= 0 or active_assignments >= max_assignments:
            return 0.0
        return (max_assignments - active_assignments) / max_assignments

    def validate_match(
        self,
        family_user_id: str,
        caregiver_id: str,
        min_score: Optional[float] = None,
        allow_override: bool = False
    ) -> MatchValidationResult:
        min_score = self.config.min_score if min_score is None else min_score
        result = MatchValidationResult()

        family = self.store.get_family_profile(family_user_id)
        caregiver = self.store.get_caregiver_profile(caregiver_id)
        if family is None or caregiver is None:
            result.is_valid = False
            result.issues.append('Family or caregiver not found')
            return result

        if not caregiver.available_for_matching:
            result.issues.append('Caregiver is not available for matching')

        match = self.scorer.score(family, caregiver)
        parts = match.components
        issue_threshold = self.config.component_issue_threshold

        if parts.care_type < issue_threshold:
            result.issues.append('Low care type compatibility')
        if parts.schedule < issue_threshold:
            result.issues.append('Poor schedule compatibility')

        active = self.store.get_active_assignments_for_caregiver(caregiver_id)
        workload = self.workload_score(len(active))
        if workload < issue_threshold:
            result.issues.append('Caregiver may be overloaded')

        result.score = match.match_score
        result.components = dict(parts.as_dict(), workload=round(workload, 2))

        if result.score < min_score:
            result.issues.append(
                f"Match score ({round(result.score * 100)}%) below minimum threshold "
                f"({round(min_score * 100)}%)"
            )

        result.recommendations = self._recommendations(result.score, parts.as_dict(), workload)

        if result.issues and not allow_override:
            result.is_valid = False
        elif result.issues:
            result.is_valid = True
            result.recommendations.insert(
                0, 'This match was manually overridden despite validation issues'
            )

        logger.info(
            f"Validated match family={family_user_id} caregiver={caregiver_id}: "
            f"valid={result.is_valid}, score={result.score:.2f}, issues={len(result.issues)}"
        )
        return result

    def _recommendations(self, overall: float, parts: dict, workload: float):
        threshold = self.config.component_recommendation_threshold
        recommendations = []

        if overall < self.config.overall_recommendation_threshold:
            recommendations.append('Consider finding a better match with higher compatibility')
        if parts['care_type'] < threshold:
            recommendations.append('Verify caregiver has necessary skills for required care types')
        if parts['schedule'] < threshold:
            recommendations.append('Discuss schedule flexibility with both parties')
        if parts['budget'] < threshold:
            recommendations.append("Review the caregiver's rate against the family's budget")
        if parts['experience'] < threshold:
            recommendations.append('Confirm the caregiver has enough experience for the requested care')
        if workload < self.config.component_issue_threshold:
            recommendations.append('Caregiver may be overloaded - consider workload distribution')

        if not recommendations:
            recommendations.append('This appears to be a good match - proceed with confidence')
        return recommendations
