# rookies/services/mappers/person.py
from __future__ import annotations

from rookies.domain.entities.person import Person
from rookies.services.schemas.people import PersonForm


def to_domain_from_form(f: PersonForm) -> Person:
    return Person(
        id=f.id,
        first_name=f.first_name,
        last_name=f.last_name,
        gender=f.gender,
        date_of_birth=f.date_of_birth,
        birth_place=f.birth_place,
        phone_number=f.phone_number,
        is_graduated=f.is_graduated,
    )
