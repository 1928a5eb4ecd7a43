# rookies/database/models/person.py
from __future__ import annotations

from datetime import date
from typing import Optional

from sqlalchemy import Boolean, Date, Enum as SAEnum, Index, String, false
from sqlalchemy.orm import Mapped, mapped_column

from rookies.database.core.main import Base
from rookies.database.core.service_object import ServiceObject
from rookies.domain.enums import Gender


class Person(ServiceObject, Base):
    """
    Persisted rookie. Column names mirror the domain entity one-to-one.
    """
    __tablename__ = "people"
    __table_args__ = (
        Index("ix_people_last_first", "last_name", "first_name"),
    )

    first_name: Mapped[str] = mapped_column(String(50), nullable=False)
    last_name: Mapped[str] = mapped_column(String(50), nullable=False)
    gender: Mapped[Gender] = mapped_column(
        SAEnum(Gender, name="gender"),
        nullable=False,
        default=Gender.other,
    )
    date_of_birth: Mapped[Optional[date]] = mapped_column(Date)
    birth_place: Mapped[str] = mapped_column(String(100), nullable=False, default="")
    phone_number: Mapped[str] = mapped_column(String(20), nullable=False, default="")
    is_graduated: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False, server_default=false())

    def __repr__(self) -> str:
        return f"<Person id={self.id} name={self.last_name!r} {self.first_name!r}>"
