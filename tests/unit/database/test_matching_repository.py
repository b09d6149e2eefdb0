#!/usr/bin/env python3
"""
Unit tests for MatchingRepository: row mapping and the assignment write.
"""

import unittest
from decimal import Decimal
from unittest.mock import MagicMock

from sqlalchemy.exc import IntegrityError, OperationalError

from core.matcher import NewAssignment, PersistenceError, IdempotencyConflictError
from database.models import Profile, CareNeedsFamily, CaregiverAssignment
from database.repository import (
    MatchingRepository, family_from_row, caregiver_from_row, assignment_from_row
)


def _assignment_row(**overrides):
    fields = dict(
        id="asg-1",
        family_user_id="fam-1",
        caregiver_id="cg-1",
        assignment_type="automatic",
        match_score=Decimal("0.92"),
        shift_compatibility_score=Decimal("1.00"),
        match_explanation="Care type match: 100%",
        status="active",
        is_active=True,
        trigger_type="manual",
        idempotency_key="evt-1"
    )
    fields.update(overrides)
    return CaregiverAssignment(**fields)


def _new_assignment(key="evt-1"):
    return NewAssignment(
        family_user_id="fam-1",
        caregiver_id="cg-1",
        match_score=0.92,
        shift_compatibility_score=1.0,
        match_explanation="Care type match: 100%",
        idempotency_key=key
    )


class TestRowMapping(unittest.TestCase):

    def test_family_from_row_prefers_care_needs(self):
        profile = Profile(id="fam-1", role="family", care_types=["companionship"])
        profile.care_needs = CareNeedsFamily(
            care_types='["Dementia Care"]',
            care_schedule="weekday_mornings",
            budget_preference="20_25",
            caregiver_type="nurse"
        )

        family = family_from_row(profile)

        self.assertEqual(family.family_user_id, "fam-1")
        self.assertEqual(family.care_types, ["Dementia Care"])
        self.assertEqual(family.schedule, "weekday_mornings")
        self.assertEqual(family.budget_preference, "20_25")
        self.assertEqual(family.caregiver_type, "nurse")
        self.assertEqual(family.special_needs, "")

    def test_family_without_care_needs_row(self):
        profile = Profile(id="fam-2", role="family", care_types=["companionship"])

        family = family_from_row(profile)

        self.assertEqual(family.care_types, ["companionship"])
        self.assertEqual(family.schedule, "")
        self.assertIsNone(family.budget_preference)

    def test_caregiver_from_row_normalizes_fields(self):
        profile = Profile(
            id="cg-1",
            role="professional",
            full_name="Maria Lopez",
            care_types="Dementia Care, Companionship",
            years_of_experience="5+ years",
            hourly_rate=Decimal("22.50"),
            availability=["weekday_mornings"],
            profile_complete=True,
            available_for_matching=None
        )

        caregiver = caregiver_from_row(profile)

        self.assertEqual(caregiver.specialties, ["Dementia Care", "Companionship"])
        self.assertEqual(caregiver.years_of_experience, 5.0)
        self.assertEqual(caregiver.hourly_rate, 22.5)
        self.assertTrue(caregiver.is_complete)
        self.assertFalse(caregiver.available_for_matching)

    def test_assignment_from_row(self):
        dto = assignment_from_row(_assignment_row())

        self.assertEqual(dto.id, "asg-1")
        self.assertEqual(dto.match_score, 0.92)
        self.assertEqual(dto.shift_compatibility_score, 1.0)
        self.assertEqual(dto.idempotency_key, "evt-1")


class TestCreateAssignment(unittest.TestCase):

    def setUp(self):
        self.mock_db = MagicMock()
        self.repo = MatchingRepository(self.mock_db)
        self.repo.assignments = MagicMock()

    def test_inserts_inside_savepoint(self):
        self.repo.assignments.get_by_idempotency_key.return_value = None
        self.repo.assignments.create_assignment.return_value = _assignment_row()

        dto = self.repo.create_assignment(_new_assignment())

        self.assertEqual(dto.id, "asg-1")
        self.mock_db.begin_nested.assert_called_once()
        self.mock_db.refresh.assert_called_once()
        kwargs = self.repo.assignments.create_assignment.call_args.kwargs
        self.assertEqual(kwargs['idempotency_key'], "evt-1")
        self.assertEqual(kwargs['assignment_type'], "automatic")

    def test_existing_key_returns_existing_record(self):
        self.repo.assignments.get_by_idempotency_key.return_value = _assignment_row(id="asg-old")

        dto = self.repo.create_assignment(_new_assignment())

        self.assertEqual(dto.id, "asg-old")
        self.repo.assignments.create_assignment.assert_not_called()

    def test_without_key_skips_lookup(self):
        self.repo.assignments.create_assignment.return_value = _assignment_row(idempotency_key=None)

        self.repo.create_assignment(_new_assignment(key=None))

        self.repo.assignments.get_by_idempotency_key.assert_not_called()

    def test_concurrent_insert_with_same_key(self):
        self.repo.assignments.get_by_idempotency_key.side_effect = [None, _assignment_row(id="asg-race")]
        self.repo.assignments.create_assignment.side_effect = IntegrityError(
            "INSERT", {}, Exception("duplicate key value")
        )

        dto = self.repo.create_assignment(_new_assignment())

        self.assertEqual(dto.id, "asg-race")

    def test_existing_key_for_another_family_conflicts(self):
        self.repo.assignments.get_by_idempotency_key.return_value = _assignment_row(family_user_id="fam-2")

        with self.assertRaises(IdempotencyConflictError):
            self.repo.create_assignment(_new_assignment())

        self.repo.assignments.create_assignment.assert_not_called()

    def test_concurrent_insert_for_another_family_conflicts(self):
        self.repo.assignments.get_by_idempotency_key.side_effect = [
            None, _assignment_row(id="asg-race", family_user_id="fam-2")
        ]
        self.repo.assignments.create_assignment.side_effect = IntegrityError(
            "INSERT", {}, Exception("duplicate key value")
        )

        with self.assertRaises(IdempotencyConflictError):
            self.repo.create_assignment(_new_assignment())

    def test_integrity_error_without_key(self):
        self.repo.assignments.create_assignment.side_effect = IntegrityError(
            "INSERT", {}, Exception("violates foreign key constraint")
        )

        with self.assertRaises(PersistenceError) as ctx:
            self.repo.create_assignment(_new_assignment(key=None))

        self.assertEqual(str(ctx.exception), "violates foreign key constraint")

    def test_database_error_becomes_persistence_error(self):
        self.repo.assignments.get_by_idempotency_key.return_value = None
        self.repo.assignments.create_assignment.side_effect = OperationalError(
            "INSERT", {}, Exception("server closed the connection")
        )

        with self.assertRaises(PersistenceError) as ctx:
            self.repo.create_assignment(_new_assignment())

        self.assertIn("server closed the connection", str(ctx.exception))


class TestStoreDelegation(unittest.TestCase):

    def setUp(self):
        self.mock_db = MagicMock()
        self.repo = MatchingRepository(self.mock_db)
        self.repo.profiles = MagicMock()
        self.repo.recalculation = MagicMock()

    def test_missing_family(self):
        self.repo.profiles.get_family.return_value = None
        self.assertIsNone(self.repo.get_family_profile("fam-x"))

    def test_complete_caregivers(self):
        self.repo.profiles.get_professionals.return_value = [
            Profile(id="cg-1", role="professional", full_name="A", profile_complete=True)
        ]

        caregivers = self.repo.get_complete_caregivers()

        self.repo.profiles.get_professionals.assert_called_once_with(complete_only=True, limit=None)
        self.assertEqual([c.caregiver_id for c in caregivers], ["cg-1"])

    def test_notify_family_writes_communication(self):
        self.repo.notify_family("fam-1", "caregiver_unavailable", "msg")
        self.repo.recalculation.add_communication.assert_called_once_with(
            "fam-1", "caregiver_unavailable", "msg"
        )

    def test_failed_recalculation_rolls_back_then_commits(self):
        def check_order(*args):
            self.mock_db.rollback.assert_called_once()
            self.mock_db.commit.assert_not_called()

        self.repo.recalculation.add_failed_log.side_effect = check_order

        self.repo.record_recalculation_failure("log-1", "cg-1", "availability_change", "boom")

        self.repo.recalculation.add_failed_log.assert_called_once_with(
            "log-1", "cg-1", "availability_change", "boom"
        )
        self.mock_db.commit.assert_called_once()

    def test_failed_recalculation_commit_error(self):
        self.mock_db.commit.side_effect = OperationalError("COMMIT", {}, Exception("connection lost"))

        with self.assertRaises(PersistenceError):
            self.repo.record_recalculation_failure("log-1", "cg-1", "availability_change", "boom")

        self.assertEqual(self.mock_db.rollback.call_count, 2)


if __name__ == "__main__":
    unittest.main()
