"""
Matching Store Interface - Persistence port for the matching services.

The services receive a MatchingStore explicitly instead of reaching
for a global database client. The SQLAlchemy implementation lives in
database.repository.MatchingRepository; tests use an in-memory fake.
"""
from abc import ABC, abstractmethod
from typing import List, Optional

from core.scorer.models import FamilyNeedsProfile, CaregiverProfile
from core.matcher.dto import NewAssignment, AssignmentDTO


class MatchingStore(ABC):
    """
    Abstract interface for the datastore behind matching.
    """

    @abstractmethod
    def get_family_profile(self, family_user_id: str) -> Optional[FamilyNeedsProfile]:
        """Return the family's needs profile, or None if there is no such family."""
        pass

    @abstractmethod
    def get_complete_caregivers(self, limit: Optional[int] = None) -> List[CaregiverProfile]:
        """Professional caregivers whose profile completeness flag is set."""
        pass

    @abstractmethod
    def get_available_caregivers(self, limit: Optional[int] = None) -> List[CaregiverProfile]:
        """Professional caregivers flagged as available for matching."""
        pass

    @abstractmethod
    def get_caregiver_profile(self, caregiver_id: str) -> Optional[CaregiverProfile]:
        pass

    @abstractmethod
    def list_family_profiles(self, exclude_ids: Optional[List[str]] = None) -> List[FamilyNeedsProfile]:
        pass

    @abstractmethod
    def create_assignment(self, assignment: NewAssignment) -> AssignmentDTO:
        """
        Persist one assignment atomically.

        When ``assignment.idempotency_key`` is set and an assignment with
        that key exists, the existing record is returned instead.

        Raises:
            PersistenceError: if the write fails
        """
        pass

    @abstractmethod
    def get_active_assignments_for_caregiver(self, caregiver_id: str) -> List[AssignmentDTO]:
        pass

    @abstractmethod
    def deactivate_assignments_for_caregiver(self, caregiver_id: str, notes: str) -> List[AssignmentDTO]:
        """Mark all active assignments of a caregiver inactive and return them."""
        pass

    @abstractmethod
    def start_recalculation_log(self, caregiver_id: str, recalculation_type: str) -> str:
        """Open a log entry in 'processing' state and return its id."""
        pass

    @abstractmethod
    def finish_recalculation_log(
        self,
        log_id: str,
        status: str,
        assignments_created: int = 0,
        assignments_removed: int = 0,
        error_message: Optional[str] = None
    ) -> None:
        pass

    @abstractmethod
    def record_recalculation_failure(
        self,
        log_id: str,
        caregiver_id: str,
        recalculation_type: str,
        error_message: str
    ) -> None:
        """
        Durably mark a recalculation run as failed.

        Work written since the run started is discarded, so the entry
        records no created or removed assignments. The entry must survive
        the caller rolling back its own transaction afterwards.
        """
        pass

    @abstractmethod
    def notify_family(self, family_user_id: str, message_type: str, message: str) -> None:
        pass
