"""
Classroom API endpoints.
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

NOT_FOUND_MESSAGE = "Classroom not found"


@router.get(
    "/get_classrooms",
    summary="Get all classrooms",
    description="Returns all classrooms from the database.",
    responses={200: {"model": schemas.ClassroomList}, **error_responses(500)},
)
async def get_classrooms(db: Database = Depends(get_db)) -> dict:
    total = await repository.count_classrooms(db)
    rows = await repository.list_classrooms(db)
    return {"classrooms_count": total, "data": rows}


@router.get(
    "/get_classroom/{classroom_id}",
    summary="Get classroom by ID",
    description="Retrieve a specific classroom record by ID.",
    responses={200: {"model": schemas.ClassroomDetail}, **error_responses(404, 500)},
)
async def get_classroom(
    classroom_id: int = Path(..., description="Classroom ID", examples=[1]),
    db: Database = Depends(get_db),
) -> dict:
    row = await repository.get_classroom(db, classroom_id)
    if row is None:
        raise NotFound(NOT_FOUND_MESSAGE)
    return {"data": [row]}


@router.put(
    "/update_classroom/{classroom_id}",
    summary="Update classroom by ID",
    description="Updates the name and daycare of an existing classroom.",
    responses={200: {"model": schemas.ClassroomUpdated}, **error_responses(400, 404, 500)},
)
async def update_classroom(
    classroom_id: int = Path(..., description="Classroom ID", examples=[1]),
    payload: schemas.ClassroomUpdate | None = None,
    db: Database = Depends(get_db),
) -> dict:
    fields = require_fields(payload, ("name", "daycare_id"), "Both name and daycare_id are required")
    row = await repository.update_classroom(db, classroom_id, **fields)
    if row is None:
        raise NotFound(NOT_FOUND_MESSAGE)
    return {
        "status": "success",
        "message": "Classroom updated successfully",
        "updated_data": row,
    }


@router.delete(
    "/delete_classroom/{classroom_id}",
    summary="Delete classroom by ID",
    description=(
        "Removes a classroom. Children assigned to it are kept "
        "and their classroom_id is cleared."
    ),
    responses={200: {"model": StatusMessage}, **error_responses(404, 500)},
)
async def delete_classroom(
    classroom_id: int = Path(..., description="Classroom ID", examples=[1]),
    db: Database = Depends(get_db),
) -> dict:
    deleted = await repository.delete_classroom(db, classroom_id)
    if not deleted:
        raise NotFound(NOT_FOUND_MESSAGE)
    return {"status": "success", "message": "Classroom deleted successfully"}
