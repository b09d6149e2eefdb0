from typing import Any, List, Optional

from sqlalchemy.orm import Session
from sqlalchemy import Select


class BaseRepository:
    """Shared session handling for the matching repositories.

    Repositories only add and flush; commit and rollback belong to the
    unit of work that owns the session.
    """

    def __init__(self, db: Session):
        self.db = db

    def _one_or_none(self, stmt: Select) -> Optional[Any]:
        return self.db.execute(stmt).scalar_one_or_none()

    def _all(self, stmt: Select) -> List[Any]:
        return list(self.db.execute(stmt).scalars().all())

    def _add(self, instance: Any, flush: bool = True) -> Any:
        self.db.add(instance)
        if flush:
            self.db.flush()
        return instance
