"""
Daycare API endpoints.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, Path

from core.db import Database
from core.dependencies import get_db
from core.errors import NotFound
from core.schemas import StatusMessage, error_responses
from core.validation import require_fields

from . import repository, schemas

router = APIRouter()

NOT_FOUND_MESSAGE = "Daycare not found"
REQUIRED_FIELDS = ("name", "address", "phone", "email")


@router.get(
    "/get_daycares",
    summary="Get all daycares",
    description="Returns all daycare centers from the database.",
    responses={200: {"model": schemas.DaycareList}, **error_responses(500)},
)
async def get_daycares(db: Database = Depends(get_db)) -> dict:
    total = await repository.count_daycares(db)
    rows = await repository.list_daycares(db)
    return {"daycares_count": total, "data": rows}


@router.get(
    "/get_daycare/{daycare_id}",
    summary="Get daycare by ID",
    description="Retrieve a specific daycare record by its unique ID.",
    responses={200: {"model": schemas.DaycareDetail}, **error_responses(404, 500)},
)
async def get_daycare(
    daycare_id: int = Path(..., description="Daycare ID", examples=[1]),
    db: Database = Depends(get_db),
) -> dict:
    row = await repository.get_daycare(db, daycare_id)
    if row is None:
        raise NotFound(NOT_FOUND_MESSAGE)
    return {"data": [row]}


@router.put(
    "/update_daycare/{daycare_id}",
    summary="Update daycare by ID",
    description="Updates an existing daycare record in the database by its unique ID.",
    responses={200: {"model": schemas.DaycareUpdated}, **error_responses(400, 404, 500)},
)
async def update_daycare(
    daycare_id: int = Path(..., description="Daycare ID", examples=[1]),
    payload: schemas.DaycareUpdate | None = None,
    db: Database = Depends(get_db),
) -> dict:
    fields = require_fields(
        payload,
        REQUIRED_FIELDS,
        "All fields (name, address, phone, email) are required",
    )
    row = await repository.update_daycare(db, daycare_id, **fields)
    if row is None:
        raise NotFound(NOT_FOUND_MESSAGE)
    return {
        "status": "success",
        "message": "Daycare updated successfully",
        "updated_data": row,
    }


@router.delete(
    "/delete_daycare/{daycare_id}",
    summary="Delete daycare by ID",
    description=(
        "Permanently removes a daycare record from the database using its unique ID. "
        "Its classrooms and children are removed with it."
    ),
    responses={200: {"model": StatusMessage}, **error_responses(404, 500)},
)
async def delete_daycare(
    daycare_id: int = Path(..., description="Daycare ID", examples=[1]),
    db: Database = Depends(get_db),
) -> dict:
    deleted = await repository.delete_daycare(db, daycare_id)
    if not deleted:
        raise NotFound(NOT_FOUND_MESSAGE)
    return {"status": "success", "message": "Daycare deleted successfully"}
