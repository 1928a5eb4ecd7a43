# rookies/services/controllers/results.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Union


@dataclass(frozen=True)
class ViewResult:
    """Render `view_name` with `model`."""
    view_name: str
    model: Any = None


@dataclass(frozen=True)
class RedirectResult:
    """Redirect to another controller action; route values become query params."""
    action_name: str
    route_values: Dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class NotFoundResult:
    """Nothing to show; rendered as an empty 404."""


@dataclass(frozen=True)
class BadRequestResult:
    errors: Dict[str, List[str]]


ActionResult = Union[ViewResult, RedirectResult, NotFoundResult, BadRequestResult]
