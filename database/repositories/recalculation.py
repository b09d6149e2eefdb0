import logging
from typing import Optional
from sqlalchemy import select, func

from database.models import MatchRecalculationLog, AdminCommunication
from database.repositories.base import BaseRepository

logger = logging.getLogger(__name__)


class RecalculationRepository(BaseRepository):
    def create_log(self, caregiver_id: str, recalculation_type: str) -> MatchRecalculationLog:
        entry = MatchRecalculationLog(
            caregiver_id=caregiver_id,
            recalculation_type=recalculation_type,
            status='processing'
        )
        return self._add(entry)

    def finish_log(
        self,
        log_id: str,
        status: str,
        assignments_created: int = 0,
        assignments_removed: int = 0,
        error_message: Optional[str] = None
    ) -> Optional[MatchRecalculationLog]:
        stmt = select(MatchRecalculationLog).where(MatchRecalculationLog.id == log_id)
        entry = self._one_or_none(stmt)
        if entry is None:
            logger.warning(f"Recalculation log {log_id} not found")
            return None

        entry.status = status
        entry.assignments_created = assignments_created
        entry.assignments_removed = assignments_removed
        entry.error_message = error_message
        entry.processed_at = func.now()
        self.db.flush()
        return entry

    def add_failed_log(
        self,
        log_id: str,
        caregiver_id: str,
        recalculation_type: str,
        error_message: str
    ) -> MatchRecalculationLog:
        entry = MatchRecalculationLog(
            id=log_id,
            caregiver_id=caregiver_id,
            recalculation_type=recalculation_type,
            status='failed',
            assignments_created=0,
            assignments_removed=0,
            error_message=error_message,
            processed_at=func.now()
        )
        return self._add(entry)

    def add_communication(
        self,
        target_user_id: str,
        message_type: str,
        custom_message: str,
        admin_id: Optional[str] = None
    ) -> AdminCommunication:
        message = AdminCommunication(
            admin_id=admin_id,
            target_user_id=target_user_id,
            message_type=message_type,
            custom_message=custom_message
        )
        return self._add(message, flush=False)
