# rookies/services/validation.py
from __future__ import annotations

from typing import Any, Dict, List, Mapping, Optional, Type, TypeVar

from pydantic import BaseModel, ValidationError

M = TypeVar("M", bound=BaseModel)


class ModelState:
    """
    Validation state of a bound request: field key -> error messages.
    Keys and messages are kept exactly as they were added.
    """

    def __init__(self) -> None:
        self._errors: Dict[str, List[str]] = {}

    def add_model_error(self, key: str, message: str) -> None:
        self._errors.setdefault(key, []).append(message)

    @property
    def is_valid(self) -> bool:
        return not self._errors

    def to_errors(self) -> Dict[str, List[str]]:
        """Serializable copy of the error mapping."""
        return {k: list(v) for k, v in self._errors.items()}

    def __contains__(self, key: object) -> bool:
        return key in self._errors

    def __len__(self) -> int:
        return len(self._errors)

    def __repr__(self) -> str:
        return f"<ModelState errors={self._errors!r}>"


def _error_key(loc: tuple) -> str:
    return ".".join(str(p) for p in loc)


def bind_model(schema: Type[M], data: Mapping[str, Any], state: ModelState) -> Optional[M]:
    """
    Validate raw form data against `schema`. Blank strings count as missing
    values. Errors go into `state`; returns None when binding failed.
    """
    cleaned = {
        k: v for k, v in data.items()
        if not (isinstance(v, str) and not v.strip())
    }
    try:
        return schema.model_validate(cleaned)
    except ValidationError as exc:
        for err in exc.errors():
            state.add_model_error(_error_key(err["loc"]), err["msg"])
        return None
