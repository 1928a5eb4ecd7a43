# tests/services/conftest.py
from __future__ import annotations
import pytest
from starlette.testclient import TestClient

from rookies.services.api.app import create_app
from rookies.services.api.deps import get_person_service
from rookies.services.people.memory import InMemoryPersonService


@pytest.fixture()
def store(people) -> InMemoryPersonService:
    return InMemoryPersonService(people)


@pytest.fixture()
def api_client(store):
    """
    A TestClient whose `get_person_service` dependency is overridden to
    yield this test's own in-memory store, so requests in one test share
    state and nothing leaks between tests.
    """
    app = create_app()

    def _override():
        yield store

    app.dependency_overrides[get_person_service] = _override

    try:
        with TestClient(app) as client:
            yield client
    finally:
        app.dependency_overrides.clear()
