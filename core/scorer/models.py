#!/usr/bin/env python3
"""
Scoring Models - Profile snapshots and scoring results.
"""

from typing import List, Optional, Union
from dataclasses import dataclass, field


@dataclass
class FamilyNeedsProfile:
    """A family's stated care requirements, read-only during a scoring pass."""
    family_user_id: str
    care_types: List[str] = field(default_factory=list)
    special_needs: str = ""
    # Comma-separated shift tags, a JSON-encoded array, or a list
    schedule: Union[str, List[str], None] = ""
    budget_preference: Optional[str] = None
    caregiver_type: Optional[str] = None


@dataclass
class CaregiverProfile:
    """A professional caregiver's qualifications and availability."""
    caregiver_id: str
    full_name: str = ""
    specialties: List[str] = field(default_factory=list)
    years_of_experience: float = 0.0
    hourly_rate: float = 0.0
    availability: List[str] = field(default_factory=list)
    is_complete: bool = False
    available_for_matching: bool = False


@dataclass
class ScoreComponents:
    """The four normalized sub-scores, each in [0, 1]."""
    care_type: float = 0.0
    experience: float = 0.0
    budget: float = 0.0
    schedule: float = 0.0

    def as_dict(self):
        return {
            'care_type': self.care_type,
            'experience': self.experience,
            'budget': self.budget,
            'schedule': self.schedule,
        }


@dataclass
class MatchResult:
    """Compatibility between one family and one caregiver."""
    caregiver_id: str
    match_score: float = 0.0
    shift_compatibility_score: float = 0.0
    explanation: str = ""
    components: ScoreComponents = field(default_factory=ScoreComponents)
