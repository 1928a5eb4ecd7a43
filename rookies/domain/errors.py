# rookies/domain/errors.py
from __future__ import annotations


class PersonServiceError(Exception):
    """Base class for failures raised by person-service implementations."""


class DuplicatePersonError(PersonServiceError):
    def __init__(self, person_id: int):
        super().__init__(f"Person with id {person_id} already exists")
        self.person_id = person_id
