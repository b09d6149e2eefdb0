from database.repositories.base import BaseRepository
from database.repositories.profile import ProfileRepository
from database.repositories.assignment import AssignmentRepository
from database.repositories.recalculation import RecalculationRepository

__all__ = [
    'BaseRepository',
    'ProfileRepository',
    'AssignmentRepository',
    'RecalculationRepository',
]
