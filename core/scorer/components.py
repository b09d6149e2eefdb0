#!/usr/bin/env python3
"""
Sub-score Calculations - The four normalized components of a match score.

- Care type: requested care types covered by caregiver specialties
- Experience: caregiver years against a preference-specific minimum
- Budget: caregiver hourly rate against the family's budget bucket
- Schedule: family shift tags covered by caregiver availability

Every function returns a value in [0, 1]. Empty inputs produce the
neutral score instead of zero.
"""

from typing import Iterable, List, Optional
import logging

from core.config_loader import ScorerConfig
from core.scorer.normalize import clamp

logger = logging.getLogger(__name__)


def _contains_either_way(a: str, b: str) -> bool:
    """Case-insensitive substring containment in either direction."""
    a = a.lower()
    b = b.lower()
    return a in b or b in a


def _covered_fraction(wanted: List[str], offered: List[str]) -> float:
    matched = 0
    for item in wanted:
        if any(_contains_either_way(item, candidate) for candidate in offered):
            matched += 1
    return matched / len(wanted)


def calculate_care_type_score(
    requested: Iterable[str],
    specialties: Iterable[str],
    config: ScorerConfig
) -> float:
    """Fraction of requested care types matched by some specialty."""
    requested = list(requested or [])
    specialties = list(specialties or [])

    if not requested or not specialties:
        return config.neutral_score

    return clamp(_covered_fraction(requested, specialties))


def calculate_experience_score(
    years: float,
    caregiver_type: Optional[str],
    config: ScorerConfig
) -> float:
    """1.0 at or above the minimum years for the preference, linear below."""
    threshold = config.experience_thresholds.get(
        (caregiver_type or '').lower(),
        config.default_experience_threshold
    )
    if threshold <= 0 or years >= threshold:
        return 1.0
    return clamp(years / threshold)


def calculate_budget_score(
    hourly_rate: float,
    budget_preference: Optional[str],
    config: ScorerConfig
) -> float:
    """1.0 inside the bucket's rate band, decaying linearly from its centre."""
    band = config.budget_bands.get((budget_preference or '').lower())
    if band is None:
        # "not_sure" and unknown or missing buckets
        if budget_preference and budget_preference != 'not_sure':
            logger.debug(f"Unknown budget bucket '{budget_preference}', using unsure score")
        return config.budget_unsure_score

    if band.contains(hourly_rate):
        return 1.0

    if config.budget_decay_width <= 0:
        return 0.0
    distance = abs(hourly_rate - band.center)
    return clamp(1.0 - distance / config.budget_decay_width)


def calculate_schedule_score(
    family_shifts: Iterable[str],
    caregiver_availability: Iterable[str],
    config: ScorerConfig
) -> float:
    """Fraction of family shift tags matched by caregiver availability."""
    family_shifts = list(family_shifts or [])
    caregiver_availability = list(caregiver_availability or [])

    if not family_shifts or not caregiver_availability:
        return config.neutral_score

    return clamp(_covered_fraction(family_shifts, caregiver_availability))
