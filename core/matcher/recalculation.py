#!/usr/bin/env python3
"""
Availability Recalculation - Keep assignments in step with caregiver availability.

When a caregiver becomes available, every family not already assigned
to them is scored and an automatic assignment is created for each pair
at or above the recalculation threshold. When a caregiver becomes
unavailable, their active assignments are deactivated. Affected
families are notified either way, and each run is recorded in the
recalculation log. A failed run discards its partial work but still
leaves a 'failed' log entry behind.
"""

from typing import Optional
import logging

from core.config_loader import RecalculationConfig
from core.scorer import MatchScorer
from core.matcher.ports import MatchingStore
from core.matcher.dto import NewAssignment, RecalculationSummary
from core.matcher.exceptions import CaregiverNotFoundError

logger = logging.getLogger(__name__)

RECALCULATION_TYPE = 'availability_change'


class RecalculationService:
    """Recalculates assignments after a caregiver availability change."""

    def __init__(
        self,
        store: MatchingStore,
        scorer: Optional[MatchScorer] = None,
        config: Optional[RecalculationConfig] = None
    ):
        self.store = store
        self.scorer = scorer or MatchScorer()
        self.config = config or RecalculationConfig()

    def on_availability_change(
        self,
        caregiver_id: str,
        previous_status: Optional[bool],
        new_status: Optional[bool],
        caregiver_name: Optional[str] = None
    ) -> RecalculationSummary:
        caregiver_name = caregiver_name or caregiver_id
        logger.info(
            f"Recalculating matches for caregiver {caregiver_name}: "
            f"{previous_status} -> {new_status}"
        )

        log_id = self.store.start_recalculation_log(caregiver_id, RECALCULATION_TYPE)
        summary = RecalculationSummary(
            caregiver_id=caregiver_id,
            caregiver_name=caregiver_name,
            log_id=log_id
        )

        try:
            if new_status is True:
                self._assign_new_families(summary)
            elif new_status is False:
                self._release_families(summary)
        except Exception as e:
            logger.error(f"Match recalculation failed for caregiver {caregiver_id}: {e}", exc_info=True)
            try:
                self.store.record_recalculation_failure(
                    log_id, caregiver_id, RECALCULATION_TYPE, error_message=str(e)
                )
            except Exception as log_error:
                logger.error(f"Could not record failed recalculation {log_id}: {log_error}")
            raise

        self.store.finish_recalculation_log(
            log_id,
            status='completed',
            assignments_created=summary.assignments_created,
            assignments_removed=summary.assignments_removed
        )
        logger.info(
            f"Recalculation completed for {caregiver_name}: "
            f"created={summary.assignments_created}, removed={summary.assignments_removed}"
        )
        return summary

    def _assign_new_families(self, summary: RecalculationSummary) -> None:
        caregiver = self.store.get_caregiver_profile(summary.caregiver_id)
        if caregiver is None:
            raise CaregiverNotFoundError(summary.caregiver_id)

        existing = self.store.get_active_assignments_for_caregiver(summary.caregiver_id)
        excluded = sorted({a.family_user_id for a in existing})
        logger.info(f"Found {len(excluded)} families already assigned to this caregiver")

        families = self.store.list_family_profiles(exclude_ids=excluded)
        summary.families_evaluated = len(families)

        for family in families:
            try:
                result = self.scorer.score(family, caregiver)
                if result.match_score < self.config.min_match_score:
                    continue

                self.store.create_assignment(NewAssignment(
                    family_user_id=family.family_user_id,
                    caregiver_id=summary.caregiver_id,
                    match_score=result.match_score,
                    shift_compatibility_score=result.shift_compatibility_score,
                    match_explanation=result.explanation,
                    assignment_type='automatic',
                    trigger_type=RECALCULATION_TYPE,
                    notes=(
                        f"Created via availability change "
                        f"({summary.caregiver_name} became available)"
                    )
                ))
                summary.assignments_created += 1

                if self.config.notify_families:
                    self.store.notify_family(
                        family.family_user_id,
                        'new_match_available',
                        f"New caregiver match available: {summary.caregiver_name} "
                        f"(Match score: {round(result.match_score * 100)}%)"
                    )
            except Exception as e:
                logger.error(f"Error processing family {family.family_user_id}: {e}")
                summary.failed_families.append(family.family_user_id)

    def _release_families(self, summary: RecalculationSummary) -> None:
        deactivated = self.store.deactivate_assignments_for_caregiver(
            summary.caregiver_id,
            notes=(
                f"Deactivated due to caregiver availability change "
                f"({summary.caregiver_name} became unavailable)"
            )
        )
        summary.assignments_removed = len(deactivated)
        logger.info(f"Deactivated {summary.assignments_removed} assignments")

        if not self.config.notify_families:
            return

        for assignment in deactivated:
            self.store.notify_family(
                assignment.family_user_id,
                'caregiver_unavailable',
                f"Caregiver {summary.caregiver_name} is no longer available. "
                f"We're finding alternative matches for you."
            )
