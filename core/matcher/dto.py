"""Data Transfer Objects for the matching services.

DTOs carry data across the persistence port, so services never hold
ORM objects after the unit of work that loaded them has closed.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Optional

from core.scorer.models import MatchResult


@dataclass
class NewAssignment:
    """Assignment to be written by MatchingStore.create_assignment."""
    family_user_id: str
    caregiver_id: str
    match_score: float
    shift_compatibility_score: float
    match_explanation: str
    assignment_type: str = "automatic"
    trigger_type: str = "manual"
    status: str = "active"
    idempotency_key: Optional[str] = None
    notes: Optional[str] = None


@dataclass
class AssignmentDTO:
    """A persisted caregiver assignment."""
    id: str
    family_user_id: str
    caregiver_id: str
    assignment_type: str
    match_score: float
    shift_compatibility_score: float
    match_explanation: str = ""
    status: str = "active"
    is_active: bool = True
    trigger_type: Optional[str] = None
    idempotency_key: Optional[str] = None
    created_at: Optional[datetime] = None


class AssignmentStatus:
    ASSIGNED = "assigned"
    NO_CAREGIVERS = "no_caregivers"
    NO_SUITABLE_MATCHES = "no_suitable_matches"


@dataclass
class AssignmentOutcome:
    """Result of one automatic assignment attempt."""
    status: str
    family_user_id: str
    trigger_type: str
    message: str = ""
    total_matches_evaluated: int = 0
    matches: List[MatchResult] = field(default_factory=list)
    assignment: Optional[AssignmentDTO] = None
    top_match: Optional[MatchResult] = None

    @property
    def assigned(self) -> bool:
        return self.status == AssignmentStatus.ASSIGNED


@dataclass
class PresentedMatch:
    """A caregiver ranked for display to a family.

    ``affinity_score`` is a deterministic per-pair value derived from the
    ids, not from profile data. It only breaks ranking ties (or feeds
    ``display_score`` in blended mode).
    """
    caregiver_id: str
    full_name: str
    match_score: float
    shift_compatibility_score: float
    affinity_score: int
    display_score: int
    is_premium: bool
    explanation: str = ""


@dataclass
class RecalculationSummary:
    caregiver_id: str
    caregiver_name: str
    log_id: Optional[str] = None
    assignments_created: int = 0
    assignments_removed: int = 0
    families_evaluated: int = 0
    failed_families: List[str] = field(default_factory=list)


@dataclass
class MatchValidationResult:
    is_valid: bool = True
    score: float = 0.0
    issues: List[str] = field(default_factory=list)
    recommendations: List[str] = field(default_factory=list)
    components: dict = field(default_factory=dict)
