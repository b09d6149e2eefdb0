import logging
from typing import List, Optional
from sqlalchemy import select
from sqlalchemy.orm import selectinload

from database.models import Profile
from database.repositories.base import BaseRepository

logger = logging.getLogger(__name__)

ROLE_FAMILY = 'family'
ROLE_PROFESSIONAL = 'professional'


class ProfileRepository(BaseRepository):
    def get_family(self, family_user_id: str) -> Optional[Profile]:
        stmt = (
            select(Profile)
            .options(selectinload(Profile.care_needs))
            .where(
                Profile.id == family_user_id,
                Profile.role == ROLE_FAMILY
            )
        )
        return self._one_or_none(stmt)

    def get_professional(self, caregiver_id: str) -> Optional[Profile]:
        stmt = select(Profile).where(
            Profile.id == caregiver_id,
            Profile.role == ROLE_PROFESSIONAL
        )
        return self._one_or_none(stmt)

    def get_professionals(
        self,
        complete_only: bool = False,
        available_only: bool = False,
        limit: Optional[int] = None
    ) -> List[Profile]:
        stmt = select(Profile).where(Profile.role == ROLE_PROFESSIONAL)

        if complete_only:
            stmt = stmt.where(Profile.profile_complete.is_(True))
        if available_only:
            stmt = stmt.where(Profile.available_for_matching.is_(True))

        # Insertion order keeps tie-breaking stable between runs
        stmt = stmt.order_by(Profile.created_at, Profile.id)

        if limit:
            stmt = stmt.limit(limit)
        return self._all(stmt)

    def list_families(self, exclude_ids: Optional[List[str]] = None) -> List[Profile]:
        stmt = (
            select(Profile)
            .options(selectinload(Profile.care_needs))
            .where(Profile.role == ROLE_FAMILY)
        )
        if exclude_ids:
            stmt = stmt.where(Profile.id.notin_(exclude_ids))
        stmt = stmt.order_by(Profile.created_at, Profile.id)
        return self._all(stmt)
