#!/usr/bin/env python3
"""
Scoring Module - Family/caregiver compatibility scoring.

Public API:
- MatchScorer: Weighted four-component scorer
- calculate_match_score: Convenience wrapper for a single pair
- FamilyNeedsProfile, CaregiverProfile, MatchResult, ScoreComponents

Layout:

- models.py: Data structures for profiles and results
- normalize.py: Tag list and number parsing for loosely-typed rows
- components.py: Care type, experience, budget and schedule sub-scores
- service.py: MatchScorer orchestrator and explanation builder
"""

from core.scorer.models import (
    FamilyNeedsProfile, CaregiverProfile, MatchResult, ScoreComponents
)
from core.scorer.service import MatchScorer, calculate_match_score

__all__ = [
    'MatchScorer', 'calculate_match_score',
    'FamilyNeedsProfile', 'CaregiverProfile', 'MatchResult', 'ScoreComponents'
]
