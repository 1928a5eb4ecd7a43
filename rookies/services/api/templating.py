"""
Template rendering and ActionResult -> HTTP response translation
"""
from __future__ import annotations

from functools import lru_cache
from http import HTTPStatus
from typing import Dict

from fastapi import Request
from fastapi.responses import JSONResponse, RedirectResponse, Response
from fastapi.templating import Jinja2Templates

from rookies.common.settings import get_settings
from rookies.services.controllers.results import (
    ActionResult,
    BadRequestResult,
    NotFoundResult,
    RedirectResult,
    ViewResult,
)


@lru_cache(maxsize=1)
def get_templates() -> Jinja2Templates:
    return Jinja2Templates(directory=str(get_settings().templates_dir))


def to_response(
    request: Request,
    result: ActionResult,
    *,
    folder: str,
    routes: Dict[str, str],
) -> Response:
    """
    Turn a controller result into a response.
    `routes` maps controller action names to route names for redirects.
    """
    if isinstance(result, ViewResult):
        return get_templates().TemplateResponse(
            request,
            f"{folder}/{result.view_name}.html",
            {"model": result.model, "app_name": get_settings().app_name},
        )
    if isinstance(result, RedirectResult):
        url = request.url_for(routes[result.action_name])
        if result.route_values:
            url = url.include_query_params(**result.route_values)
        return RedirectResponse(str(url), status_code=HTTPStatus.SEE_OTHER)
    if isinstance(result, NotFoundResult):
        return Response(status_code=HTTPStatus.NOT_FOUND)
    if isinstance(result, BadRequestResult):
        return JSONResponse(status_code=HTTPStatus.BAD_REQUEST, content=result.errors)
    raise TypeError(f"Unsupported action result: {result!r}")
