from __future__ import annotations
from enum import StrEnum

class Gender(StrEnum):
    male = "Male"
    female = "Female"
    other = "Other"
