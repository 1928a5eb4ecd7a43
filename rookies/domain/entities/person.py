# rookies/domain/entities/person.py
from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional

from rookies.domain.enums.gender import Gender


@dataclass
class Person:
    """
    A rookie record. `id` is assigned by the store; everything else is
    supplied by the caller.
    """
    id: Optional[int] = None
    first_name: str = ""      # required
    last_name: str = ""       # required
    gender: Gender = Gender.other
    date_of_birth: Optional[date] = None
    birth_place: str = ""
    phone_number: str = ""
    is_graduated: bool = False

    def __post_init__(self):
        if not self.first_name or not self.first_name.strip():
            raise ValueError("Person.first_name is required")
        if not self.last_name or not self.last_name.strip():
            raise ValueError("Person.last_name is required")
        if not isinstance(self.gender, Gender):
            self.gender = Gender(self.gender)

    @property
    def full_name(self) -> str:
        # last name first: first_name="Long", last_name="Bao" -> "Bao Long"
        return f"{self.last_name} {self.first_name}"

    def age_on(self, day: date) -> Optional[int]:
        if self.date_of_birth is None:
            return None
        dob = self.date_of_birth
        years = day.year - dob.year
        if (day.month, day.day) < (dob.month, dob.day):
            years -= 1
        return years
