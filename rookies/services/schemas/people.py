# rookies/services/schemas/people.py
from __future__ import annotations

from datetime import date
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from rookies.domain.enums import Gender


class PersonForm(BaseModel):
    """Bound create/edit form. Field names match the HTML form inputs."""
    model_config = ConfigDict(from_attributes=True, str_strip_whitespace=True)

    id: Optional[int] = Field(default=None, ge=1)
    first_name: str = Field(..., min_length=1, max_length=50)
    last_name: str = Field(..., min_length=1, max_length=50)
    gender: Gender
    date_of_birth: date
    birth_place: str = Field(default="", max_length=100)
    phone_number: str = Field(..., pattern=r"^\+?[0-9]{8,15}$")
    is_graduated: bool = False

    @field_validator("date_of_birth")
    @classmethod
    def _in_the_past(cls, v: date) -> date:
        if v >= date.today():
            raise ValueError("date of birth must be in the past")
        return v
