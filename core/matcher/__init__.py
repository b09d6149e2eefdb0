"""Matcher Module - Assignment, presentation, recalculation and validation of matches."""
from core.matcher.dto import (
    NewAssignment, AssignmentDTO, AssignmentOutcome, AssignmentStatus,
    PresentedMatch, RecalculationSummary, MatchValidationResult
)
from core.matcher.exceptions import (
    MatchingError, FamilyNotFoundError, CaregiverNotFoundError, PersistenceError,
    IdempotencyConflictError
)
from core.matcher.ports import MatchingStore
from core.matcher.service import AssignmentService, rank_matches
from core.matcher.presenter import MatchPresenter, affinity_hash, is_ready_for_matching
from core.matcher.recalculation import RecalculationService
from core.matcher.validator import MatchQualityValidator

__all__ = [
    'AssignmentService', 'MatchPresenter', 'RecalculationService', 'MatchQualityValidator',
    'MatchingStore', 'rank_matches', 'affinity_hash', 'is_ready_for_matching',
    'NewAssignment', 'AssignmentDTO', 'AssignmentOutcome', 'AssignmentStatus',
    'PresentedMatch', 'RecalculationSummary', 'MatchValidationResult',
    'MatchingError', 'FamilyNotFoundError', 'CaregiverNotFoundError', 'PersistenceError',
    'IdempotencyConflictError',
]
