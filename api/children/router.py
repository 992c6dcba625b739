"""
Child API endpoints.
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

NOT_FOUND_MESSAGE = "Child not found"
REQUIRED_FIELDS = ("name", "date_of_birth", "classroom_id", "daycare_id")


@router.get(
    "/get_children",
    summary="Get all children",
    description="Returns all children in the database.",
    responses={200: {"model": schemas.ChildList}, **error_responses(500)},
)
async def get_children(db: Database = Depends(get_db)) -> dict:
    total = await repository.count_children(db)
    rows = await repository.list_children(db)
    return {"children_count": total, "data": rows}


@router.get(
    "/get_child/{child_id}",
    summary="Get child by ID",
    responses={200: {"model": schemas.ChildDetail}, **error_responses(404, 500)},
)
async def get_child(
    child_id: int = Path(..., description="Child ID", examples=[1]),
    db: Database = Depends(get_db),
) -> dict:
    row = await repository.get_child(db, child_id)
    if row is None:
        raise NotFound(NOT_FOUND_MESSAGE)
    return {"data": [row]}


@router.put(
    "/update_child/{child_id}",
    summary="Update child by ID",
    description="Updates name, date of birth, classroom and daycare of a child.",
    responses={200: {"model": schemas.ChildUpdated}, **error_responses(400, 404, 500)},
)
async def update_child(
    child_id: int = Path(..., description="Child ID", examples=[1]),
    payload: schemas.ChildUpdate | None = None,
    db: Database = Depends(get_db),
) -> dict:
    fields = require_fields(payload, REQUIRED_FIELDS, "All fields are required")
    row = await repository.update_child(db, child_id, **fields)
    if row is None:
        raise NotFound(NOT_FOUND_MESSAGE)
    return {
        "status": "success",
        "message": "Child updated successfully",
        "updated_data": row,
    }


@router.delete(
    "/delete_child/{child_id}",
    summary="Delete child by ID",
    description="Removes a child and their enrollments.",
    responses={200: {"model": StatusMessage}, **error_responses(404, 500)},
)
async def delete_child(
    child_id: int = Path(..., description="Child ID", examples=[1]),
    db: Database = Depends(get_db),
) -> dict:
    deleted = await repository.delete_child(db, child_id)
    if not deleted:
        raise NotFound(NOT_FOUND_MESSAGE)
    return {"status": "success", "message": "Child deleted successfully"}
