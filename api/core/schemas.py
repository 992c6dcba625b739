"""
Response envelopes shared by every entity router.

Routes return plain dicts; these models only describe the payloads in the
OpenAPI document.
"""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, Field, create_model


class StatusMessage(BaseModel):
    status: Literal["success"] = "success"
    message: str


class ValidationErrorBody(BaseModel):
    status: Literal["error"] = "error"
    message: str = Field(..., examples=["All fields are required"])


class NotFoundBody(BaseModel):
    status: Literal["not_found"] = "not_found"
    message: str = Field(..., examples=["Record not found"])


class ServiceErrorBody(BaseModel):
    status: Literal["error"] = "error"
    error: str = Field(..., examples=["connection refused"])


def list_envelope(model_name: str, count_field: str, record: type[BaseModel]) -> type[BaseModel]:
    return create_model(
        model_name,
        **{
            count_field: (int, Field(..., examples=[2])),
            "data": (list[record], ...),
        },
    )


def detail_envelope(model_name: str, record: type[BaseModel]) -> type[BaseModel]:
    return create_model(model_name, data=(list[record], ...))


def updated_envelope(model_name: str, record: type[BaseModel]) -> type[BaseModel]:
    return create_model(
        model_name,
        status=(Literal["success"], "success"),
        message=(str, ...),
        updated_data=(record, ...),
    )


def error_responses(*codes: int) -> dict[int | str, dict[str, Any]]:
    known = {
        400: {"model": ValidationErrorBody, "description": "Missing or invalid parameters"},
        404: {"model": NotFoundBody, "description": "Record not found"},
        500: {"model": ServiceErrorBody, "description": "Service error"},
    }
    return {code: known[code] for code in codes}
