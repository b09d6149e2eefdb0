#!/usr/bin/env python3
"""
Assignment Service - Automatic caregiver assignment for a family.

Flow for one invocation:
1. Load the family's needs profile (missing -> FamilyNotFoundError)
2. Load every complete professional caregiver
3. Score each pair, keep scores above the threshold, sort descending
4. Persist a single assignment for the top match

Nothing is written before step 4, and step 4 is one store call.
No retries are attempted.
"""

from typing import List, Optional, Iterable
import logging

from core.config_loader import AssignmentConfig
from core.scorer import MatchScorer, MatchResult
from core.matcher.ports import MatchingStore
from core.matcher.dto import NewAssignment, AssignmentOutcome, AssignmentStatus
from core.matcher.exceptions import FamilyNotFoundError, PersistenceError

logger = logging.getLogger(__name__)


def rank_matches(matches: Iterable[MatchResult], min_match_score: float) -> List[MatchResult]:
    """Drop matches at or below the threshold and sort the rest by score.

    The sort is stable, so equal scores keep the order the candidates
    came back from the datastore.
    """
    eligible = [m for m in matches if m.match_score > min_match_score]
    eligible.sort(key=lambda m: m.match_score, reverse=True)
    return eligible


class AssignmentService:
    """
    Picks and persists the best caregiver for a family.

    Concurrent invocations for the same family are not coordinated;
    pass an idempotency key to collapse repeated triggers into one
    assignment.
    """

    def __init__(
        self,
        store: MatchingStore,
        scorer: Optional[MatchScorer] = None,
        config: Optional[AssignmentConfig] = None
    ):
        self.store = store
        self.scorer = scorer or MatchScorer()
        self.config = config or AssignmentConfig()

    def assign_best_caregiver(
        self,
        family_user_id: str,
        trigger_type: Optional[str] = None,
        idempotency_key: Optional[str] = None
    ) -> AssignmentOutcome:
        """Run one automatic assignment pass for a family.

        Args:
            family_user_id: Family profile id
            trigger_type: Free-form trigger label, only logged and echoed back
            idempotency_key: Optional key; repeated calls with the same key
                return the assignment created by the first call

        Returns:
            AssignmentOutcome; status is ASSIGNED, NO_CAREGIVERS or
            NO_SUITABLE_MATCHES

        Raises:
            FamilyNotFoundError: if the family profile does not exist
            PersistenceError: if the assignment write fails
        """
        trigger_type = trigger_type or self.config.default_trigger_type
        logger.info(f"Automatic assignment for family {family_user_id} (trigger={trigger_type})")

        family = self.store.get_family_profile(family_user_id)
        if family is None:
            logger.warning(f"Family user {family_user_id} not found")
            raise FamilyNotFoundError(family_user_id)

        caregivers = self.store.get_complete_caregivers()
        if not caregivers:
            logger.info("No caregivers available for matching")
            return AssignmentOutcome(
                status=AssignmentStatus.NO_CAREGIVERS,
                family_user_id=family_user_id,
                trigger_type=trigger_type,
                message="No caregivers available"
            )

        scored = self.scorer.score_candidates(family, caregivers)
        matches = rank_matches(scored, self.config.min_match_score)
        logger.info(
            f"Evaluated {len(scored)} caregivers for family {family_user_id}, "
            f"{len(matches)} above threshold {self.config.min_match_score}"
        )

        if not matches:
            return AssignmentOutcome(
                status=AssignmentStatus.NO_SUITABLE_MATCHES,
                family_user_id=family_user_id,
                trigger_type=trigger_type,
                message="No suitable matches found",
                total_matches_evaluated=len(scored)
            )

        top = matches[0]
        new_assignment = NewAssignment(
            family_user_id=family_user_id,
            caregiver_id=top.caregiver_id,
            match_score=top.match_score,
            shift_compatibility_score=top.shift_compatibility_score,
            match_explanation=top.explanation,
            assignment_type=self.config.assignment_type,
            trigger_type=trigger_type,
            idempotency_key=idempotency_key
        )

        try:
            assignment = self.store.create_assignment(new_assignment)
        except PersistenceError as e:
            logger.error(f"Failed to persist assignment for family {family_user_id}: {e}")
            raise

        logger.info(
            f"Assigned caregiver {top.caregiver_id} to family {family_user_id} "
            f"(score={top.match_score:.2f}, assignment={assignment.id})"
        )

        return AssignmentOutcome(
            status=AssignmentStatus.ASSIGNED,
            family_user_id=family_user_id,
            trigger_type=trigger_type,
            message="Caregiver assigned",
            total_matches_evaluated=len(scored),
            matches=matches,
            assignment=assignment,
            top_match=top
        )
