from __future__ import annotations
from datetime import date
from typing import Optional, List

from sqlalchemy import select
from sqlalchemy.orm import Session

from rookies.database.models.person import Person as DBPerson
from rookies.domain.enums import Gender


class SqlAlchemyPeopleRepo:
    def __init__(self, session: Session) -> None:
        self.db = session

    def get(self, person_id: int) -> Optional[DBPerson]:
        return self.db.get(DBPerson, person_id)

    def list_all(self) -> List[DBPerson]:
        stmt = select(DBPerson).order_by(DBPerson.id.asc())
        return list(self.db.execute(stmt).scalars().all())

    def add(
        self,
        *,
        first_name: str,
        last_name: str,
        gender: Gender,
        date_of_birth: Optional[date] = None,
        birth_place: str = "",
        phone_number: str = "",
        is_graduated: bool = False,
        person_id: Optional[int] = None,
    ) -> DBPerson:
        obj = DBPerson(
            first_name=first_name,
            last_name=last_name,
            gender=gender,
            date_of_birth=date_of_birth,
            birth_place=birth_place,
            phone_number=phone_number,
            is_graduated=is_graduated,
        )
        if person_id is not None:
            obj.id = person_id
        self.db.add(obj)
        self.db.flush()  # ensure id
        return obj

    def update(self, person_id: int, **fields) -> Optional[DBPerson]:
        obj = self.get(person_id)
        if not obj:
            return None
        for name, value in fields.items():
            if not hasattr(DBPerson, name):
                raise AttributeError(f"Unknown Person column: {name}")
            setattr(obj, name, value)
        self.db.flush()
        return obj

    def delete(self, person_id: int) -> bool:
        obj = self.get(person_id)
        if not obj:
            return False
        self.db.delete(obj)
        self.db.flush()
        return True
