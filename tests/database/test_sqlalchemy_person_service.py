# tests/database/test_sqlalchemy_person_service.py
from dataclasses import replace

import pytest

from rookies.domain.errors import DuplicatePersonError
from rookies.services.people.database import SqlAlchemyPersonService


@pytest.fixture()
def service(db, people) -> SqlAlchemyPersonService:
    svc = SqlAlchemyPersonService(db)
    for p in people:
        svc.create(p)
    return svc


def test_get_all_and_get_one(service):
    everyone = service.get_all()
    assert [p.full_name for p in everyone] == ["Bao Long", "Ngo Quoc Hung"]
    assert service.get_one(1).phone_number == "0946616194"
    assert service.get_one(404) is None


def test_create_assigns_id(service, new_person):
    created = service.create(replace(new_person, id=None))
    assert created.id is not None
    assert service.get_one(created.id).full_name == "Hao Nhien"


def test_create_duplicate_id(service, people):
    with pytest.raises(DuplicatePersonError):
        service.create(people[0])


def test_update(service, people):
    assert service.update(replace(people[0], is_graduated=True)) is True
    assert service.get_one(1).is_graduated is True
    assert service.update(replace(people[0], id=404)) is False
    assert service.update(replace(people[0], id=None)) is False


def test_delete(service):
    assert service.delete(2) is True
    assert service.delete(2) is False
    assert [p.id for p in service.get_all()] == [1]


def test_seed_only_fills_an_empty_table(db, people):
    svc = SqlAlchemyPersonService(db)
    assert svc.seed(people) == 2
    assert [p.full_name for p in svc.get_all()] == ["Bao Long", "Ngo Quoc Hung"]

    assert svc.seed(people) == 0
    assert len(svc.get_all()) == 2
