#!/usr/bin/env python3
"""
Scoring Service - Weighted compatibility between a family and a caregiver.

Combines four sub-scores into a single match score:
- Care type (0.30)
- Experience (0.20)
- Budget (0.25)
- Schedule (0.25)

The schedule sub-score is also reported on its own as the shift
compatibility score. Scoring is pure: profiles are never mutated and
no datastore access happens here.
"""

from typing import List, Optional, Iterable
import logging

from core.config_loader import ScorerConfig
from core.scorer.models import (
    FamilyNeedsProfile, CaregiverProfile, MatchResult, ScoreComponents
)
from core.scorer import components
from core.scorer.normalize import parse_tag_list, to_number, clamp

logger = logging.getLogger(__name__)

EXPLANATION_LABELS = (
    ('care_type', 'Care type match'),
    ('experience', 'Experience match'),
    ('budget', 'Budget match'),
    ('schedule', 'Schedule match'),
)


def build_explanation(parts: ScoreComponents) -> str:
    """Percentages per sub-score in fixed order, comma-separated."""
    values = parts.as_dict()
    return ", ".join(
        f"{label}: {round(values[key] * 100)}%"
        for key, label in EXPLANATION_LABELS
    )


class MatchScorer:
    """
    Scores family/caregiver pairs.

    Used by automatic assignment, the family-facing match list,
    availability recalculation and match validation so all of them
    agree on the same numbers.
    """

    def __init__(self, config: Optional[ScorerConfig] = None):
        self.config = config or ScorerConfig()

    def calculate_components(
        self,
        family: FamilyNeedsProfile,
        caregiver: CaregiverProfile
    ) -> ScoreComponents:
        care_type = components.calculate_care_type_score(
            parse_tag_list(family.care_types),
            parse_tag_list(caregiver.specialties),
            self.config
        )
        experience = components.calculate_experience_score(
            to_number(caregiver.years_of_experience),
            family.caregiver_type,
            self.config
        )
        budget = components.calculate_budget_score(
            to_number(caregiver.hourly_rate),
            family.budget_preference,
            self.config
        )
        schedule = components.calculate_schedule_score(
            parse_tag_list(family.schedule),
            parse_tag_list(caregiver.availability),
            self.config
        )
        return ScoreComponents(
            care_type=care_type,
            experience=experience,
            budget=budget,
            schedule=schedule
        )

    def combine(self, parts: ScoreComponents) -> float:
        """Weighted sum of sub-scores, clamped to [0, 1]."""
        weights = self.config.weights
        total = (
            weights.care_type * parts.care_type
            + weights.experience * parts.experience
            + weights.budget * parts.budget
            + weights.schedule * parts.schedule
        )
        return clamp(total)

    def score(
        self,
        family: FamilyNeedsProfile,
        caregiver: CaregiverProfile
    ) -> MatchResult:
        """Compute the MatchResult for one family/caregiver pair."""
        parts = self.calculate_components(family, caregiver)
        match_score = round(self.combine(parts), 2)
        shift_score = round(clamp(parts.schedule), 2)

        logger.debug(
            f"Caregiver {caregiver.caregiver_id} vs family {family.family_user_id}: "
            f"care={parts.care_type:.2f}, exp={parts.experience:.2f}, "
            f"budget={parts.budget:.2f}, schedule={parts.schedule:.2f}, "
            f"overall={match_score:.2f}"
        )

        return MatchResult(
            caregiver_id=caregiver.caregiver_id,
            match_score=match_score,
            shift_compatibility_score=shift_score,
            explanation=build_explanation(parts),
            components=parts
        )

    def score_candidates(
        self,
        family: FamilyNeedsProfile,
        caregivers: Iterable[CaregiverProfile]
    ) -> List[MatchResult]:
        """Score every caregiver, in input order."""
        return [self.score(family, caregiver) for caregiver in caregivers]


def calculate_match_score(
    family: FamilyNeedsProfile,
    caregiver: CaregiverProfile,
    config: Optional[ScorerConfig] = None
) -> MatchResult:
    """Score a single pair with the given (or default) configuration."""
    return MatchScorer(config).score(family, caregiver)
