from .base import Base
from .profile import Profile, CareNeedsFamily
from .assignment import CaregiverAssignment
from .recalculation import MatchRecalculationLog, AdminCommunication

__all__ = [
    'Base',
    'Profile',
    'CareNeedsFamily',
    'CaregiverAssignment',
    'MatchRecalculationLog',
    'AdminCommunication',
]
