from __future__ import annotations
from typing import List, Optional, Protocol
from rookies.domain.entities.person import Person

class PersonServicePort(Protocol):
    def get_all(self) -> List[Person]: ...
    def get_one(self, person_id: int) -> Optional[Person]: ...
    # assigns an id when person.id is None; raises DuplicatePersonError on id clash
    def create(self, person: Person) -> Person: ...
    def update(self, person: Person) -> bool: ...
    def delete(self, person_id: int) -> bool: ...
