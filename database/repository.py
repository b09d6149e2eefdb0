import logging
from typing import List, Optional

from sqlalchemy.orm import Session
from sqlalchemy.exc import SQLAlchemyError, IntegrityError

from core.matcher.ports import MatchingStore
from core.matcher.dto import NewAssignment, AssignmentDTO
from core.matcher.exceptions import PersistenceError, IdempotencyConflictError
from core.scorer.models import FamilyNeedsProfile, CaregiverProfile
from core.scorer.normalize import parse_tag_list, to_number
from database.models import Profile, CaregiverAssignment
from database.repositories import (
    ProfileRepository, AssignmentRepository, RecalculationRepository
)

logger = logging.getLogger(__name__)


def family_from_row(profile: Profile) -> FamilyNeedsProfile:
    needs = profile.care_needs
    care_types = parse_tag_list(needs.care_types if needs is not None else None)
    if not care_types:
        care_types = parse_tag_list(profile.care_types)

    return FamilyNeedsProfile(
        family_user_id=str(profile.id),
        care_types=care_types,
        special_needs=(needs.special_needs if needs is not None else None) or "",
        schedule=(needs.care_schedule if needs is not None else None) or "",
        budget_preference=needs.budget_preference if needs is not None else None,
        caregiver_type=needs.caregiver_type if needs is not None else None
    )


def caregiver_from_row(profile: Profile) -> CaregiverProfile:
    return CaregiverProfile(
        caregiver_id=str(profile.id),
        full_name=profile.full_name or "",
        specialties=parse_tag_list(profile.care_types),
        years_of_experience=to_number(profile.years_of_experience),
        hourly_rate=to_number(profile.hourly_rate),
        availability=parse_tag_list(profile.availability),
        is_complete=bool(profile.profile_complete),
        available_for_matching=bool(profile.available_for_matching)
    )


def assignment_from_row(record: CaregiverAssignment) -> AssignmentDTO:
    return AssignmentDTO(
        id=str(record.id),
        family_user_id=str(record.family_user_id),
        caregiver_id=str(record.caregiver_id),
        assignment_type=record.assignment_type,
        match_score=to_number(record.match_score),
        shift_compatibility_score=to_number(record.shift_compatibility_score),
        match_explanation=record.match_explanation or "",
        status=record.status,
        is_active=bool(record.is_active),
        trigger_type=record.trigger_type,
        idempotency_key=record.idempotency_key,
        created_at=record.created_at
    )


def _replayed(assignment: NewAssignment, existing: CaregiverAssignment) -> AssignmentDTO:
    if str(existing.family_user_id) != assignment.family_user_id:
        raise IdempotencyConflictError(assignment.idempotency_key)
    return assignment_from_row(existing)


class MatchingRepository(MatchingStore):
    """
    SQLAlchemy-backed MatchingStore.

    Groups the per-table repositories behind one session and converts
    ORM rows to DTOs so results stay usable after the session closes.
    Commit/rollback is left to the unit of work, except for failed
    recalculation log entries, which are committed on their own.
    """

    def __init__(self, db: Session):
        self.db = db
        self.profiles = ProfileRepository(db)
        self.assignments = AssignmentRepository(db)
        self.recalculation = RecalculationRepository(db)

    def get_family_profile(self, family_user_id: str) -> Optional[FamilyNeedsProfile]:
        profile = self.profiles.get_family(family_user_id)
        if profile is None:
            return None
        return family_from_row(profile)

    def get_caregiver_profile(self, caregiver_id: str) -> Optional[CaregiverProfile]:
        profile = self.profiles.get_professional(caregiver_id)
        if profile is None:
            return None
        return caregiver_from_row(profile)

    def get_complete_caregivers(self, limit: Optional[int] = None) -> List[CaregiverProfile]:
        rows = self.profiles.get_professionals(complete_only=True, limit=limit)
        return [caregiver_from_row(r) for r in rows]

    def get_available_caregivers(self, limit: Optional[int] = None) -> List[CaregiverProfile]:
        rows = self.profiles.get_professionals(available_only=True, limit=limit)
        return [caregiver_from_row(r) for r in rows]

    def list_family_profiles(self, exclude_ids: Optional[List[str]] = None) -> List[FamilyNeedsProfile]:
        return [family_from_row(r) for r in self.profiles.list_families(exclude_ids)]

    def create_assignment(self, assignment: NewAssignment) -> AssignmentDTO:
        key = assignment.idempotency_key
        try:
            if key:
                existing = self.assignments.get_by_idempotency_key(key)
                if existing is not None:
                    logger.info(f"Assignment with idempotency key {key} already exists ({existing.id})")
                    return _replayed(assignment, existing)

            with self.db.begin_nested():
                record = self.assignments.create_assignment(
                    family_user_id=assignment.family_user_id,
                    caregiver_id=assignment.caregiver_id,
                    assignment_type=assignment.assignment_type,
                    match_score=assignment.match_score,
                    shift_compatibility_score=assignment.shift_compatibility_score,
                    match_explanation=assignment.match_explanation,
                    status=assignment.status,
                    trigger_type=assignment.trigger_type,
                    idempotency_key=key,
                    notes=assignment.notes
                )
            self.db.refresh(record)
            return assignment_from_row(record)
        except IntegrityError as e:
            # Concurrent insert with the same key won the race
            if key:
                existing = self.assignments.get_by_idempotency_key(key)
                if existing is not None:
                    return _replayed(assignment, existing)
            raise PersistenceError(str(e.orig) if e.orig is not None else str(e)) from e
        except SQLAlchemyError as e:
            raise PersistenceError(str(e)) from e

    def get_active_assignments_for_caregiver(self, caregiver_id: str) -> List[AssignmentDTO]:
        return [assignment_from_row(r) for r in self.assignments.get_active_for_caregiver(caregiver_id)]

    def deactivate_assignments_for_caregiver(self, caregiver_id: str, notes: str) -> List[AssignmentDTO]:
        try:
            rows = self.assignments.deactivate_for_caregiver(caregiver_id, notes)
        except SQLAlchemyError as e:
            raise PersistenceError(str(e)) from e
        return [assignment_from_row(r) for r in rows]

    def start_recalculation_log(self, caregiver_id: str, recalculation_type: str) -> str:
        entry = self.recalculation.create_log(caregiver_id, recalculation_type)
        return str(entry.id)

    def finish_recalculation_log(
        self,
        log_id: str,
        status: str,
        assignments_created: int = 0,
        assignments_removed: int = 0,
        error_message: Optional[str] = None
    ) -> None:
        self.recalculation.finish_log(
            log_id,
            status=status,
            assignments_created=assignments_created,
            assignments_removed=assignments_removed,
            error_message=error_message
        )

    def record_recalculation_failure(
        self,
        log_id: str,
        caregiver_id: str,
        recalculation_type: str,
        error_message: str
    ) -> None:
        # Commits on its own so the entry outlives the caller's rollback
        try:
            self.db.rollback()
            self.recalculation.add_failed_log(log_id, caregiver_id, recalculation_type, error_message)
            self.db.commit()
        except SQLAlchemyError as e:
            self.db.rollback()
            raise PersistenceError(str(e)) from e

    def notify_family(self, family_user_id: str, message_type: str, message: str) -> None:
        self.recalculation.add_communication(family_user_id, message_type, message)
