import pytest
from dataclasses import replace

from rookies.domain.errors import DuplicatePersonError

# `store` comes from tests/services/conftest.py (seeded with the sample rookies)


def test_get_all_ordered_by_id(store):
    assert [p.id for p in store.get_all()] == [1, 2]


def test_get_one(store):
    assert store.get_one(1).full_name == "Bao Long"
    assert store.get_one(42) is None


def test_create_assigns_next_id(store, new_person):
    created = store.create(replace(new_person, id=None))
    assert created.id == 3
    assert store.get_one(3).full_name == "Hao Nhien"


def test_create_keeps_given_id(store, new_person):
    created = store.create(replace(new_person, id=10))
    assert created.id == 10
    assert [p.id for p in store.get_all()] == [1, 2, 10]


def test_create_rejects_duplicate_id(store, people):
    with pytest.raises(DuplicatePersonError) as exc:
        store.create(people[0])
    assert exc.value.person_id == 1


def test_update(store, people):
    assert store.update(replace(people[1], is_graduated=True)) is True
    assert store.get_one(2).is_graduated is True
    assert store.update(replace(people[1], id=99)) is False


def test_delete(store):
    assert store.delete(1) is True
    assert store.delete(1) is False
    assert [p.id for p in store.get_all()] == [2]


def test_returned_people_are_copies(store):
    p = store.get_one(1)
    p.birth_place = "elsewhere"
    assert store.get_one(1).birth_place == "Bac Ninh"
