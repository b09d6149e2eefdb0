#!/usr/bin/env python3
"""
Unit tests for the match quality validator.
"""

import unittest

from core.config_loader import ValidationConfig
from core.scorer import FamilyNeedsProfile, CaregiverProfile
from core.matcher import MatchQualityValidator, NewAssignment
from tests.mocks.matching_mocks import InMemoryMatchingStore


def _family():
    return FamilyNeedsProfile(
        family_user_id="fam-1",
        care_types=["elderly care", "dementia"],
        schedule="weekday_mornings,weekday_evenings",
        budget_preference="20_25",
        caregiver_type="professional"
    )


def _caregiver(caregiver_id="cg-strong", **overrides):
    fields = dict(
        caregiver_id=caregiver_id,
        full_name="Alice Strong",
        specialties=["Elderly Care", "Dementia Care"],
        years_of_experience=6,
        hourly_rate=22,
        availability=["weekday_mornings", "weekday_evenings"],
        is_complete=True,
        available_for_matching=True
    )
    fields.update(overrides)
    return CaregiverProfile(**fields)


class TestWorkloadScore(unittest.TestCase):

    def test_workload_score(self):
        validator = MatchQualityValidator(InMemoryMatchingStore())
        self.assertEqual(validator.workload_score(0), 1.0)
        self.assertAlmostEqual(validator.workload_score(1), 0.8)
        self.assertEqual(validator.workload_score(5), 0.0)
        self.assertEqual(validator.workload_score(9), 0.0)

    def test_zero_capacity(self):
        validator = MatchQualityValidator(
            InMemoryMatchingStore(), config=ValidationConfig(max_active_assignments=0)
        )
        self.assertEqual(validator.workload_score(0), 0.0)


class TestMatchQualityValidator(unittest.TestCase):

    def setUp(self):
        self.store = InMemoryMatchingStore(
            families=[_family()],
            caregivers=[
                _caregiver(),
                _caregiver(
                    "cg-weak",
                    full_name="Bob Weak",
                    specialties=["pet sitting"],
                    years_of_experience=0,
                    hourly_rate=60,
                    availability=["weekend_nights"]
                ),
            ]
        )
        self.validator = MatchQualityValidator(self.store)

    def _add_assignments(self, count, caregiver_id="cg-strong"):
        for i in range(count):
            self.store.create_assignment(NewAssignment(
                family_user_id=f"other-{i}",
                caregiver_id=caregiver_id,
                match_score=0.8,
                shift_compatibility_score=0.8,
                match_explanation=""
            ))

    def test_good_match(self):
        result = self.validator.validate_match("fam-1", "cg-strong")

        self.assertTrue(result.is_valid)
        self.assertEqual(result.score, 1.0)
        self.assertEqual(result.issues, [])
        self.assertEqual(
            result.recommendations,
            ['This appears to be a good match - proceed with confidence']
        )
        self.assertEqual(result.components['workload'], 1.0)
        self.assertEqual(result.components['care_type'], 1.0)

    def test_missing_family_or_caregiver(self):
        for family_id, caregiver_id in (("nobody", "cg-strong"), ("fam-1", "nobody")):
            result = self.validator.validate_match(family_id, caregiver_id)
            self.assertFalse(result.is_valid)
            self.assertEqual(result.issues, ['Family or caregiver not found'])

    def test_weak_match_collects_issues(self):
        result = self.validator.validate_match("fam-1", "cg-weak")

        self.assertFalse(result.is_valid)
        self.assertIn('Low care type compatibility', result.issues)
        self.assertIn('Poor schedule compatibility', result.issues)
        self.assertIn('Match score (0%) below minimum threshold (60%)', result.issues)
        self.assertIn(
            'Consider finding a better match with higher compatibility',
            result.recommendations
        )

    def test_override_accepts_match_with_warning(self):
        result = self.validator.validate_match("fam-1", "cg-weak", allow_override=True)

        self.assertTrue(result.is_valid)
        self.assertTrue(result.issues)
        self.assertEqual(
            result.recommendations[0],
            'This match was manually overridden despite validation issues'
        )

    def test_overloaded_caregiver(self):
        self._add_assignments(3)

        result = self.validator.validate_match("fam-1", "cg-strong")

        self.assertFalse(result.is_valid)
        self.assertEqual(result.issues, ['Caregiver may be overloaded'])
        self.assertAlmostEqual(result.components['workload'], 0.4)

    def test_unavailable_caregiver(self):
        self.store.caregivers[0].available_for_matching = False

        result = self.validator.validate_match("fam-1", "cg-strong")

        self.assertFalse(result.is_valid)
        self.assertEqual(result.issues, ['Caregiver is not available for matching'])

    def test_custom_min_score(self):
        result = self.validator.validate_match("fam-1", "cg-strong", min_score=1.0)
        self.assertTrue(result.is_valid)


if __name__ == "__main__":
    unittest.main()
