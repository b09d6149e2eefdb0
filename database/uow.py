import contextlib
import logging
from typing import Callable, Optional

from sqlalchemy.orm import Session

from database.database import SessionLocal
from database.repository import MatchingRepository

logger = logging.getLogger(__name__)


@contextlib.contextmanager
def matching_uow(session_factory: Optional[Callable[[], Session]] = None):
    """Transaction scope for one matching operation.

    Yields a MatchingRepository (the MatchingStore the services take)
    bound to a fresh Session. Everything the operation wrote, including
    recalculation log entries and family notifications, commits together
    or not at all.

    Usage:
        with matching_uow() as store:
            outcome = AssignmentService(store).assign_best_caregiver(family_id)
    """
    session = (session_factory or SessionLocal)()
    try:
        yield MatchingRepository(session)
        session.commit()
    except Exception as e:
        logger.warning(f"Rolling back matching transaction: {e}")
        session.rollback()
        raise
    finally:
        session.close()
