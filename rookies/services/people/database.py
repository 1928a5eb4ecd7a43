# rookies/services/people/database.py
from __future__ import annotations

from typing import Iterable, List, Optional

from sqlalchemy.orm import Session

from rookies.database.repos._mapping import to_domain_person, to_row_fields
from rookies.database.repos.people_repo import SqlAlchemyPeopleRepo
from rookies.domain.entities.person import Person
from rookies.domain.errors import DuplicatePersonError


class SqlAlchemyPersonService:
    """
    Person service backed by the `people` table.
    Never commits; the caller owns the transaction.
    """

    def __init__(self, db: Session):
        self.db = db
        self.repo = SqlAlchemyPeopleRepo(db)

    def get_all(self) -> List[Person]:
        return [to_domain_person(r) for r in self.repo.list_all()]

    def get_one(self, person_id: int) -> Optional[Person]:
        row = self.repo.get(person_id)
        return to_domain_person(row) if row is not None else None

    def create(self, person: Person) -> Person:
        if person.id is not None and self.repo.get(person.id) is not None:
            raise DuplicatePersonError(person.id)
        row = self.repo.add(person_id=person.id, **to_row_fields(person))
        return to_domain_person(row)

    def update(self, person: Person) -> bool:
        if person.id is None:
            return False
        return self.repo.update(person.id, **to_row_fields(person)) is not None

    def delete(self, person_id: int) -> bool:
        return self.repo.delete(person_id)

    def seed(self, people: Iterable[Person]) -> int:
        """Insert `people` only into an empty table; returns how many were added."""
        if self.repo.list_all():
            return 0
        added = 0
        for p in people:
            self.create(p)
            added += 1
        return added
