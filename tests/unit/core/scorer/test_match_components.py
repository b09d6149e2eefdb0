#!/usr/bin/env python3
"""
Unit tests for the four match sub-scores.
"""

import unittest

from core.config_loader import ScorerConfig, BudgetBand
from core.scorer.components import (
    calculate_care_type_score,
    calculate_experience_score,
    calculate_budget_score,
    calculate_schedule_score,
)


class TestCareTypeScore(unittest.TestCase):

    def setUp(self):
        self.config = ScorerConfig()

    def test_all_requested_types_matched(self):
        score = calculate_care_type_score(
            ["Dementia Care"], ["Alzheimer's Care", "Dementia Care"], self.config
        )
        self.assertEqual(score, 1.0)

    def test_no_requested_type_matched(self):
        score = calculate_care_type_score(["dementia"], ["pet sitting"], self.config)
        self.assertEqual(score, 0.0)

    def test_partial_match_is_fraction_of_requested(self):
        score = calculate_care_type_score(
            ["elderly care", "wound care", "dementia"],
            ["Elderly Care", "dementia support"],
            self.config
        )
        self.assertAlmostEqual(score, 2 / 3)

    def test_containment_works_in_both_directions(self):
        # Specialty inside the request and request inside the specialty
        self.assertEqual(
            calculate_care_type_score(["dementia care"], ["Dementia"], self.config), 1.0
        )
        self.assertEqual(
            calculate_care_type_score(["dementia"], ["Dementia Care"], self.config), 1.0
        )

    def test_empty_side_returns_neutral(self):
        self.assertEqual(calculate_care_type_score([], ["Dementia Care"], self.config), 0.5)
        self.assertEqual(calculate_care_type_score(["Dementia Care"], [], self.config), 0.5)
        self.assertEqual(calculate_care_type_score(None, None, self.config), 0.5)

    def test_neutral_score_is_configurable(self):
        config = ScorerConfig(neutral_score=0.4)
        self.assertEqual(calculate_care_type_score([], ["x"], config), 0.4)


class TestExperienceScore(unittest.TestCase):

    def setUp(self):
        self.config = ScorerConfig()

    def test_nurse_thresholds(self):
        self.assertEqual(calculate_experience_score(5, 'nurse', self.config), 1.0)
        self.assertEqual(calculate_experience_score(2.5, 'nurse', self.config), 0.5)

    def test_above_threshold_is_capped(self):
        self.assertEqual(calculate_experience_score(30, 'specialized', self.config), 1.0)

    def test_preference_is_case_insensitive(self):
        self.assertEqual(calculate_experience_score(1.5, 'Professional', self.config), 0.5)

    def test_unknown_or_missing_preference_uses_default(self):
        self.assertEqual(calculate_experience_score(1, None, self.config), 0.5)
        self.assertEqual(calculate_experience_score(1, 'au_pair', self.config), 0.5)
        self.assertEqual(calculate_experience_score(2, None, self.config), 1.0)

    def test_zero_years(self):
        self.assertEqual(calculate_experience_score(0, 'companion', self.config), 0.0)


class TestBudgetScore(unittest.TestCase):

    def setUp(self):
        self.config = ScorerConfig()

    def test_band_centre_scores_full(self):
        self.assertEqual(calculate_budget_score(22.5, '20_25', self.config), 1.0)

    def test_inside_band_scores_full(self):
        self.assertEqual(calculate_budget_score(20, '20_25', self.config), 1.0)
        self.assertEqual(calculate_budget_score(25, '20_25', self.config), 1.0)

    def test_decay_width_from_centre_floors_at_zero(self):
        self.assertEqual(calculate_budget_score(30, '20_25', self.config), 0.0)
        self.assertEqual(calculate_budget_score(80, '20_25', self.config), 0.0)

    def test_linear_decay_outside_band(self):
        # centre 17.5, distance 3.75
        self.assertAlmostEqual(calculate_budget_score(21.25, '15_20', self.config), 0.5)

    def test_open_ended_band(self):
        self.assertEqual(calculate_budget_score(45, '30_plus', self.config), 1.0)
        self.assertAlmostEqual(calculate_budget_score(26.25, '30_plus', self.config), 0.5)

    def test_not_sure_and_unknown_buckets(self):
        self.assertEqual(calculate_budget_score(22, 'not_sure', self.config), 0.7)
        self.assertEqual(calculate_budget_score(22, None, self.config), 0.7)
        self.assertEqual(calculate_budget_score(22, 'cheap', self.config), 0.7)

    def test_custom_bands(self):
        config = ScorerConfig(budget_bands={'low': BudgetBand(low=0, high=10)})
        self.assertEqual(calculate_budget_score(8, 'low', config), 1.0)
        self.assertEqual(calculate_budget_score(8, '20_25', config), 0.7)


class TestScheduleScore(unittest.TestCase):

    def setUp(self):
        self.config = ScorerConfig()

    def test_full_tag_match(self):
        score = calculate_schedule_score(
            ["weekday_mornings"], ["weekday_mornings", "weekends"], self.config
        )
        self.assertEqual(score, 1.0)

    def test_partial_tag_match(self):
        score = calculate_schedule_score(
            ["weekday_mornings", "overnight"], ["Weekday_Mornings"], self.config
        )
        self.assertEqual(score, 0.5)

    def test_empty_side_returns_neutral(self):
        self.assertEqual(calculate_schedule_score([], ["weekends"], self.config), 0.5)
        self.assertEqual(calculate_schedule_score(["weekends"], [], self.config), 0.5)


if __name__ == "__main__":
    unittest.main()
