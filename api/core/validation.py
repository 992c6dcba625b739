"""
Presence checks for update bodies.
"""

from __future__ import annotations

from typing import Any, Sequence

from pydantic import BaseModel

from .errors import ValidationFailed


def require_fields(payload: BaseModel | None, fields: Sequence[str], message: str) -> dict[str, Any]:
    """
    Return the named fields from `payload`, or raise ValidationFailed when any
    of them is absent or falsy. `0` and `""` count as missing.
    """
    values = payload.model_dump() if payload is not None else {}
    if any(not values.get(name) for name in fields):
        raise ValidationFailed(message)
    return {name: values[name] for name in fields}
