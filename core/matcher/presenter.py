#!/usr/bin/env python3
"""
Match Presenter - Ranked caregiver list shown to a family.

Candidates come from the readiness-gated pool (available for matching
and passing is_ready_for_matching), capped at a configured bound. Each
candidate gets:

- match_score: the unified MatchScorer result (0-1)
- shift_compatibility_score: tag overlap with a bonus for open-ended
  availability such as "flexible" or "24_7_care" (0-1)
- affinity_score: a deterministic per-pair value in [75, 99] derived
  from the two ids, plus a premium flag from the same hash
- display_score: affinity * 0.6 + shift compatibility * 40 (0-100)

Results are memoized per presenter instance, so switching between the
best-only and full views does not rescore.
"""

from typing import Dict, List, Optional, Iterable, Callable
import logging

from core.config_loader import PresenterConfig
from core.scorer import MatchScorer, FamilyNeedsProfile, CaregiverProfile
from core.scorer.normalize import parse_tag_list, clamp
from core.matcher.ports import MatchingStore
from core.matcher.dto import PresentedMatch

logger = logging.getLogger(__name__)

_INT32 = 2 ** 32


def _to_int32(value: int) -> int:
    value %= _INT32
    if value >= 2 ** 31:
        value -= _INT32
    return value


def affinity_hash(caregiver_id: str, family_user_id: str) -> int:
    """Rolling hash (h * 31 + char code) of both ids, made non-negative.

    Only the shift is done in 32-bit signed arithmetic; the running sum is
    not wrapped, so long ids can yield values above 2**31.
    """
    h = 0
    for ch in f"{caregiver_id}{family_user_id}":
        h = _to_int32(_to_int32(h) << 5) - h + ord(ch)
    return abs(h)


def is_ready_for_matching(caregiver: CaregiverProfile) -> bool:
    """Readiness gate for the presenter candidate pool."""
    if not caregiver.available_for_matching:
        return False
    if not (caregiver.full_name or '').strip():
        return False
    return bool(parse_tag_list(caregiver.specialties) or parse_tag_list(caregiver.availability))


def calculate_shift_compatibility(
    family_shifts: Iterable[str],
    caregiver_shifts: Iterable[str],
    config: PresenterConfig,
    neutral_score: float = 0.5
) -> float:
    """Direct shift tag overlap plus a bonus for open-ended availability tags."""
    family_shifts = [s.lower() for s in parse_tag_list(list(family_shifts or []))]
    caregiver_shifts = [s.lower() for s in parse_tag_list(list(caregiver_shifts or []))]

    if not family_shifts or not caregiver_shifts:
        return neutral_score

    offered = set(caregiver_shifts)
    overlap = sum(1 for shift in family_shifts if shift in offered) / len(family_shifts)
    bonus = sum(config.shift_bonus for tag in config.bonus_shift_tags if tag.lower() in offered)
    return clamp(overlap + bonus)


class MatchPresenter:
    """
    Produces the ranked list of caregivers for a family's match view.

    One presenter instance corresponds to one view lifetime; its cache is
    never invalidated and goes away with the instance.
    """

    def __init__(
        self,
        store: MatchingStore,
        scorer: Optional[MatchScorer] = None,
        config: Optional[PresenterConfig] = None,
        readiness_check: Callable[[CaregiverProfile], bool] = is_ready_for_matching
    ):
        self.store = store
        self.scorer = scorer or MatchScorer()
        self.config = config or PresenterConfig()
        self.readiness_check = readiness_check
        self._cache: Dict[str, List[PresentedMatch]] = {}

    def get_matches(self, family_user_id: str, best_only: bool = True) -> List[PresentedMatch]:
        """Ranked matches for a family; a single entry when ``best_only``."""
        ranked = self._cache.get(family_user_id)
        if ranked is None:
            ranked = self._rank(family_user_id)
            self._cache[family_user_id] = ranked
        else:
            logger.debug(f"Using cached matches for family {family_user_id}")

        if best_only:
            return ranked[:1]
        return list(ranked)

    def _load_family(self, family_user_id: str) -> FamilyNeedsProfile:
        try:
            family = self.store.get_family_profile(family_user_id)
        except Exception as e:
            logger.warning(f"Could not load care needs for family {family_user_id}, using defaults: {e}")
            family = None
        if family is None:
            return FamilyNeedsProfile(family_user_id=family_user_id)
        return family

    def _rank(self, family_user_id: str) -> List[PresentedMatch]:
        family = self._load_family(family_user_id)

        # bound applies to ready caregivers, so fetch the whole available pool
        candidates = self.store.get_available_caregivers()
        ready = [c for c in candidates if self.readiness_check(c)]
        ready = ready[:self.config.candidate_limit]
        logger.info(f"Presenting {len(ready)} ready caregivers for family {family_user_id}")

        presented = [self._present(family, caregiver) for caregiver in ready]

        if self.config.ranking == "blended":
            presented.sort(key=lambda p: p.display_score, reverse=True)
        else:
            presented.sort(key=lambda p: (p.match_score, p.affinity_score), reverse=True)
        return presented

    def _present(self, family: FamilyNeedsProfile, caregiver: CaregiverProfile) -> PresentedMatch:
        result = self.scorer.score(family, caregiver)

        h = affinity_hash(caregiver.caregiver_id, family.family_user_id)
        span = self.config.affinity_max - self.config.affinity_min + 1
        affinity = self.config.affinity_min + h % span
        is_premium = h % 10 < self.config.premium_buckets

        shift = round(calculate_shift_compatibility(
            parse_tag_list(family.schedule),
            caregiver.availability,
            self.config,
            neutral_score=self.scorer.config.neutral_score
        ), 2)
        display = round(clamp(
            affinity * self.config.affinity_weight + shift * 100 * self.config.shift_weight,
            0.0, 100.0
        ))

        return PresentedMatch(
            caregiver_id=caregiver.caregiver_id,
            full_name=caregiver.full_name or 'Professional Caregiver',
            match_score=result.match_score,
            shift_compatibility_score=shift,
            affinity_score=affinity,
            display_score=int(display),
            is_premium=is_premium,
            explanation=result.explanation
        )
