"""
Pytest configuration and fixtures.

This file provides pytest-specific configuration and fixtures.
For standard test utilities, see tests/__init__.py
"""

import pytest

from core.scorer import FamilyNeedsProfile, CaregiverProfile
from tests.mocks.matching_mocks import InMemoryMatchingStore


def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line(
        "markers", "db: marks tests as requiring database (deselect with '-m \"not db\"')"
    )


@pytest.fixture
def family():
    """A family whose needs a well-qualified caregiver can fully cover."""
    return FamilyNeedsProfile(
        family_user_id="fam-1",
        care_types=["elderly care", "dementia"],
        schedule="weekday_mornings,weekday_evenings",
        budget_preference="20_25",
        caregiver_type="professional"
    )


@pytest.fixture
def strong_caregiver():
    return CaregiverProfile(
        caregiver_id="cg-strong",
        full_name="Alice Strong",
        specialties=["Elderly Care", "Dementia Care"],
        years_of_experience=6,
        hourly_rate=22,
        availability=["weekday_mornings", "weekday_evenings"],
        is_complete=True,
        available_for_matching=True
    )


@pytest.fixture
def weak_caregiver():
    return CaregiverProfile(
        caregiver_id="cg-weak",
        full_name="Bob Weak",
        specialties=["pet sitting"],
        years_of_experience=0,
        hourly_rate=60,
        availability=["weekend_nights"],
        is_complete=True,
        available_for_matching=True
    )


@pytest.fixture
def store(family, strong_caregiver, weak_caregiver):
    """In-memory store seeded with one family and two caregivers."""
    return InMemoryMatchingStore(
        families=[family],
        caregivers=[weak_caregiver, strong_caregiver]
    )
