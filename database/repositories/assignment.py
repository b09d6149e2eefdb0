import logging
from typing import List, Optional
from sqlalchemy import select, func

from database.models import CaregiverAssignment
from database.repositories.base import BaseRepository

logger = logging.getLogger(__name__)


class AssignmentRepository(BaseRepository):
    def get_by_idempotency_key(self, idempotency_key: str) -> Optional[CaregiverAssignment]:
        stmt = select(CaregiverAssignment).where(
            CaregiverAssignment.idempotency_key == idempotency_key
        )
        return self._one_or_none(stmt)

    def create_assignment(
        self,
        family_user_id: str,
        caregiver_id: str,
        assignment_type: str,
        match_score: float,
        shift_compatibility_score: float,
        match_explanation: str,
        status: str = 'active',
        trigger_type: Optional[str] = None,
        idempotency_key: Optional[str] = None,
        notes: Optional[str] = None
    ) -> CaregiverAssignment:
        record = CaregiverAssignment(
            family_user_id=family_user_id,
            caregiver_id=caregiver_id,
            assignment_type=assignment_type,
            match_score=match_score,
            shift_compatibility_score=shift_compatibility_score,
            match_explanation=match_explanation,
            status=status,
            is_active=True,
            trigger_type=trigger_type,
            idempotency_key=idempotency_key,
            notes=notes
        )
        return self._add(record)

    def get_active_for_caregiver(self, caregiver_id: str) -> List[CaregiverAssignment]:
        stmt = select(CaregiverAssignment).where(
            CaregiverAssignment.caregiver_id == caregiver_id,
            CaregiverAssignment.is_active.is_(True)
        )
        return self._all(stmt)

    def deactivate_for_caregiver(self, caregiver_id: str, notes: str) -> List[CaregiverAssignment]:
        assignments = self.get_active_for_caregiver(caregiver_id)

        for assignment in assignments:
            assignment.is_active = False
            assignment.status = 'inactive'
            assignment.notes = notes
            assignment.updated_at = func.now()

        if assignments:
            self.db.flush()
            logger.info(f"Deactivated {len(assignments)} assignments for caregiver {caregiver_id}")

        return assignments
