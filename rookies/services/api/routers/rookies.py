# rookies/services/api/routers/rookies.py
from __future__ import annotations

from typing import Any, Dict, Optional

from fastapi import APIRouter, Depends, Path, Query, Request
from fastapi.responses import HTMLResponse, Response

from rookies.common.settings import get_settings
from rookies.services.api.deps import get_rookies_controller
from rookies.services.api.templating import to_response
from rookies.services.controllers.results import ActionResult
from rookies.services.controllers.rookies import INDEX, RESULT, RookiesController
from rookies.services.schemas.people import PersonForm
from rookies.services.validation import bind_model

cfg = get_settings()
router = APIRouter(prefix=f"{cfg.api.prefix}/rookies", tags=["rookies"])

# controller action name -> route name
_ROUTES = {
    INDEX: "rookies_index",
    RESULT: "rookies_result",
}


# ---- helpers ----

def _respond(request: Request, result: ActionResult) -> Response:
    return to_response(request, result, folder="rookies", routes=_ROUTES)


async def _form_data(request: Request) -> Dict[str, Any]:
    form = await request.form()
    return {k: v for k, v in form.items() if isinstance(v, str)}


# ---- list / result (static paths first) ----

@router.get("", response_class=HTMLResponse, name="rookies_index")
def index(
    request: Request,
    controller: RookiesController = Depends(get_rookies_controller),
) -> Response:
    return _respond(request, controller.index())


@router.get("/result", response_class=HTMLResponse, name="rookies_result")
def result(
    request: Request,
    name: Optional[str] = Query(None, description="Full name of the deleted person"),
    controller: RookiesController = Depends(get_rookies_controller),
) -> Response:
    return _respond(request, controller.result(name))


# ---- create ----

@router.get("/create", response_class=HTMLResponse, name="rookies_create_form")
def create_form(
    request: Request,
    controller: RookiesController = Depends(get_rookies_controller),
) -> Response:
    return _respond(request, controller.create_form())


@router.post("/create", name="rookies_create")
def create(
    request: Request,
    data: Dict[str, Any] = Depends(_form_data),
    controller: RookiesController = Depends(get_rookies_controller),
) -> Response:
    model = bind_model(PersonForm, data, controller.model_state)
    return _respond(request, controller.create(model))


# ---- detail ----

@router.get("/{person_id}", response_class=HTMLResponse, name="rookies_detail")
def detail(
    request: Request,
    person_id: int = Path(..., ge=1),
    controller: RookiesController = Depends(get_rookies_controller),
) -> Response:
    return _respond(request, controller.detail(person_id))


# ---- edit ----

@router.get("/{person_id}/edit", response_class=HTMLResponse, name="rookies_edit_form")
def edit_form(
    request: Request,
    person_id: int = Path(..., ge=1),
    controller: RookiesController = Depends(get_rookies_controller),
) -> Response:
    return _respond(request, controller.edit_form(person_id))


@router.post("/{person_id}/edit", name="rookies_edit")
def edit(
    request: Request,
    person_id: int = Path(..., ge=1),
    data: Dict[str, Any] = Depends(_form_data),
    controller: RookiesController = Depends(get_rookies_controller),
) -> Response:
    # the path decides which record is edited, never the form body
    data["id"] = str(person_id)
    model = bind_model(PersonForm, data, controller.model_state)
    return _respond(request, controller.edit(model))


# ---- delete ----

@router.get("/{person_id}/delete", response_class=HTMLResponse, name="rookies_delete_confirm")
def delete_confirm(
    request: Request,
    person_id: int = Path(..., ge=1),
    controller: RookiesController = Depends(get_rookies_controller),
) -> Response:
    return _respond(request, controller.delete_confirm(person_id))


@router.post("/{person_id}/delete", name="rookies_delete")
def delete(
    request: Request,
    person_id: int = Path(..., ge=1),
    controller: RookiesController = Depends(get_rookies_controller),
) -> Response:
    return _respond(request, controller.delete(person_id))
