# rookies/services/api/deps.py
from __future__ import annotations
import logging
from functools import lru_cache
from typing import Generator

from fastapi import Depends

from rookies.common.logging import get_logger
from rookies.common.settings import get_settings
from rookies.database.core.main import get_sessionmaker
from rookies.domain.ports.person_service import PersonServicePort
from rookies.services.controllers.rookies import RookiesController
from rookies.services.people.database import SqlAlchemyPersonService
from rookies.services.people.memory import InMemoryPersonService, sample_people


@lru_cache(maxsize=1)
def get_memory_person_service() -> InMemoryPersonService:
    """Process-wide in-memory store, seeded once when configured to."""
    people = sample_people() if get_settings().seed_sample_data else []
    return InMemoryPersonService(people)


def get_person_service() -> Generator[PersonServicePort, None, None]:
    """
    Provide the configured PersonServicePort.
    For the database store, one session and one transaction span the request.
    """
    if get_settings().person_store == "memory":
        yield get_memory_person_service()
        return

    db = get_sessionmaker()()
    try:
        # Session.begin() commits on normal exit, rolls back if an exception bubbles out
        with db.begin():
            yield SqlAlchemyPersonService(db)
    finally:
        db.close()


def get_controller_logger() -> logging.Logger:
    return get_logger(RookiesController.__module__)


def get_rookies_controller(
    service: PersonServicePort = Depends(get_person_service),
    logger: logging.Logger = Depends(get_controller_logger),
) -> RookiesController:
    return RookiesController(logger, service)
