"""
Enrollment API endpoints.
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

NOT_FOUND_MESSAGE = "Enrollment not found"


@router.get(
    "/get_enrollments",
    summary="Get all enrollments",
    description="Returns every child-parent enrollment link.",
    responses={200: {"model": schemas.EnrollmentList}, **error_responses(500)},
)
async def get_enrollments(db: Database = Depends(get_db)) -> dict:
    total = await repository.count_enrollments(db)
    rows = await repository.list_enrollments(db)
    return {"enrollments_count": total, "data": rows}


@router.get(
    "/get_enrollment/{enrollment_id}",
    summary="Get enrollment by ID",
    description="Retrieve a specific enrollment record from the database by its unique ID.",
    responses={200: {"model": schemas.EnrollmentDetail}, **error_responses(404, 500)},
)
async def get_enrollment(
    enrollment_id: int = Path(..., description="Enrollment ID", examples=[1]),
    db: Database = Depends(get_db),
) -> dict:
    row = await repository.get_enrollment(db, enrollment_id)
    if row is None:
        raise NotFound(NOT_FOUND_MESSAGE)
    return {"data": [row]}


@router.put(
    "/update_enrollment/{enrollment_id}",
    summary="Update enrollment by ID",
    description="Re-links an enrollment to another child and parent.",
    responses={200: {"model": schemas.EnrollmentUpdated}, **error_responses(400, 404, 500)},
)
async def update_enrollment(
    enrollment_id: int = Path(..., description="Enrollment ID", examples=[1]),
    payload: schemas.EnrollmentUpdate | None = None,
    db: Database = Depends(get_db),
) -> dict:
    fields = require_fields(payload, ("child_id", "parent_id"), "Both child_id and parent_id are required")
    row = await repository.update_enrollment(db, enrollment_id, **fields)
    if row is None:
        raise NotFound(NOT_FOUND_MESSAGE)
    return {
        "status": "success",
        "message": "Enrollment updated successfully",
        "updated_data": row,
    }


@router.delete(
    "/delete_enrollment/{enrollment_id}",
    summary="Delete enrollment by ID",
    responses={200: {"model": StatusMessage}, **error_responses(404, 500)},
)
async def delete_enrollment(
    enrollment_id: int = Path(..., description="Enrollment ID", examples=[1]),
    db: Database = Depends(get_db),
) -> dict:
    deleted = await repository.delete_enrollment(db, enrollment_id)
    if not deleted:
        raise NotFound(NOT_FOUND_MESSAGE)
    return {"status": "success", "message": "Enrollment deleted successfully"}
