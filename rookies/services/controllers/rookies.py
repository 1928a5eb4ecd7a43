# rookies/services/controllers/rookies.py
from __future__ import annotations

import logging
from typing import Optional

from rookies.domain.ports.person_service import PersonServicePort
from rookies.services.controllers.results import (
    ActionResult,
    BadRequestResult,
    NotFoundResult,
    RedirectResult,
    ViewResult,
)
from rookies.services.mappers.person import to_domain_from_form
from rookies.services.schemas.people import PersonForm
from rookies.services.validation import ModelState

INDEX = "Index"
RESULT = "Result"

MISSING_MODEL_MESSAGE = "A person is required."


class RookiesController:
    """
    Person CRUD actions. Build one per request: `model_state` belongs to
    the request whose input was bound into it.

    Every action returns an ActionResult; misses and invalid input are
    results, not exceptions. Errors raised by the service propagate.
    """

    def __init__(self, logger: logging.Logger, service: PersonServicePort):
        self._logger = logger
        self._service = service
        self.model_state = ModelState()

    # ---- read ----

    def index(self) -> ActionResult:
        people = self._service.get_all()
        self._logger.info("Listing %d people", len(people))
        return ViewResult("index", people)

    def detail(self, person_id: int) -> ActionResult:
        person = self._service.get_one(person_id)
        if person is None:
            self._logger.warning("Person %s not found", person_id)
            return NotFoundResult()
        return ViewResult("detail", person)

    def result(self, name: Optional[str] = None) -> ActionResult:
        return ViewResult("result", name)

    # ---- create ----

    def create_form(self) -> ActionResult:
        return ViewResult("create", None)

    def create(self, model: Optional[PersonForm]) -> ActionResult:
        invalid = self._reject_invalid(model, "create")
        if invalid is not None:
            return invalid

        created = self._service.create(to_domain_from_form(model))
        self._logger.info("Created person %s (%s)", created.id, created.full_name)
        return RedirectResult(INDEX)

    # ---- edit ----

    def edit_form(self, person_id: int) -> ActionResult:
        person = self._service.get_one(person_id)
        if person is None:
            self._logger.warning("Person %s not found for edit", person_id)
            return NotFoundResult()
        return ViewResult("edit", person)

    def edit(self, model: Optional[PersonForm]) -> ActionResult:
        invalid = self._reject_invalid(model, "edit")
        if invalid is not None:
            return invalid

        if model.id is None or self._service.get_one(model.id) is None:
            self._logger.warning("Person %s not found for edit", model.id)
            return NotFoundResult()

        self._service.update(to_domain_from_form(model))
        self._logger.info("Updated person %s", model.id)
        return RedirectResult(INDEX)

    # ---- delete ----

    def delete_confirm(self, person_id: int) -> ActionResult:
        person = self._service.get_one(person_id)
        if person is None:
            self._logger.warning("Person %s not found for delete", person_id)
            return NotFoundResult()
        return ViewResult("delete", person)

    def delete(self, person_id: int) -> ActionResult:
        person = self._service.get_one(person_id)
        if person is None:
            self._logger.warning("Person %s not found for delete", person_id)
            return NotFoundResult()

        # the outcome flag is logged only; the redirect happens either way
        deleted = self._service.delete(person_id)
        self._logger.info("Deleted person %s: %s", person_id, deleted)
        return RedirectResult(RESULT, {"name": person.full_name})

    # ---- helpers ----

    def _reject_invalid(self, model: Optional[PersonForm], action: str) -> Optional[BadRequestResult]:
        if model is None and self.model_state.is_valid:
            self.model_state.add_model_error("", MISSING_MODEL_MESSAGE)
        if self.model_state.is_valid:
            return None
        errors = self.model_state.to_errors()
        self._logger.warning("Rejected %s: invalid model %s", action, errors)
        return BadRequestResult(errors)
