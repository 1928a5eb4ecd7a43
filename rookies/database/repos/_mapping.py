# rookies/database/repos/_mapping.py
from __future__ import annotations
from typing import Any, Dict

from rookies.database.models.person import Person as DBPerson
from rookies.domain.entities.person import Person as DomainPerson


def to_domain_person(row: DBPerson) -> DomainPerson:
    return DomainPerson(
        id=row.id,
        first_name=row.first_name,
        last_name=row.last_name,
        gender=row.gender,
        date_of_birth=row.date_of_birth,
        birth_place=row.birth_place,
        phone_number=row.phone_number,
        is_graduated=bool(row.is_graduated),
    )


def to_row_fields(p: DomainPerson) -> Dict[str, Any]:
    """Column values for a domain person (id excluded)."""
    return {
        "first_name": p.first_name,
        "last_name": p.last_name,
        "gender": p.gender,
        "date_of_birth": p.date_of_birth,
        "birth_place": p.birth_place,
        "phone_number": p.phone_number,
        "is_graduated": p.is_graduated,
    }
