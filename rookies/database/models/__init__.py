# rookies/database/models/__init__.py

from rookies.database.core.main import Base
from rookies.database.models.person import Person

__all__ = [
    "Base",
    "Person",
]
