# rookies/services/people/memory.py
from __future__ import annotations

import threading
from dataclasses import replace
from datetime import date
from typing import Dict, Iterable, List, Optional

from rookies.domain.entities.person import Person
from rookies.domain.enums import Gender
from rookies.domain.errors import DuplicatePersonError


def sample_people() -> List[Person]:
    return [
        Person(
            id=1,
            first_name="Long",
            last_name="Bao",
            gender=Gender.male,
            date_of_birth=date(1994, 1, 16),
            birth_place="Bac Ninh",
            phone_number="0946616194",
            is_graduated=False,
        ),
        Person(
            id=2,
            first_name="Hung",
            last_name="Ngo Quoc",
            gender=Gender.male,
            date_of_birth=date(1991, 3, 7),
            birth_place="Hai Phong",
            phone_number="0946616194",
            is_graduated=False,
        ),
    ]


class InMemoryPersonService:
    """
    Process-local person store. Callers always get copies, so mutating a
    returned Person never changes the store.
    """

    def __init__(self, people: Iterable[Person] = ()) -> None:
        self._lock = threading.Lock()
        self._people: Dict[int, Person] = {}
        for p in people:
            self.create(p)

    def get_all(self) -> List[Person]:
        with self._lock:
            return [replace(self._people[k]) for k in sorted(self._people)]

    def get_one(self, person_id: int) -> Optional[Person]:
        with self._lock:
            p = self._people.get(person_id)
            return replace(p) if p is not None else None

    def create(self, person: Person) -> Person:
        with self._lock:
            if person.id is None:
                new_id = max(self._people, default=0) + 1
            elif person.id in self._people:
                raise DuplicatePersonError(person.id)
            else:
                new_id = person.id
            stored = replace(person, id=new_id)
            self._people[new_id] = stored
            return replace(stored)

    def update(self, person: Person) -> bool:
        with self._lock:
            if person.id not in self._people:
                return False
            self._people[person.id] = replace(person)
            return True

    def delete(self, person_id: int) -> bool:
        with self._lock:
            return self._people.pop(person_id, None) is not None
