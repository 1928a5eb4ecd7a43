# tests/conftest.py
from __future__ import annotations
from datetime import date

import pytest

from rookies.common import settings as s
from rookies.domain.entities.person import Person
from rookies.domain.enums import Gender
from rookies.services.people.memory import sample_people


@pytest.fixture(autouse=True)
def _test_settings(monkeypatch):
    """Run every test against a fresh, memory-backed settings object."""
    monkeypatch.setenv("APP_ENV", "test")
    monkeypatch.setenv("PERSON_STORE", "memory")
    s.get_settings.cache_clear()
    yield
    s.get_settings.cache_clear()


@pytest.fixture()
def people() -> list[Person]:
    """The two sample rookies: (1) Long Bao, (2) Hung Ngo Quoc."""
    return sample_people()


@pytest.fixture()
def new_person() -> Person:
    return Person(
        id=3,
        first_name="Nhien",
        last_name="Hao",
        gender=Gender.male,
        date_of_birth=date(1995, 1, 16),
        birth_place="Bac Ninh",
        phone_number="0946616194",
        is_graduated=False,
    )
