"""
Parent API endpoints.
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

NOT_FOUND_MESSAGE = "Parent not found"


@router.get(
    "/get_parents",
    summary="Get all parents",
    description="Returns all parents in the database.",
    responses={200: {"model": schemas.ParentList}, **error_responses(500)},
)
async def get_parents(db: Database = Depends(get_db)) -> dict:
    total = await repository.count_parents(db)
    rows = await repository.list_parents(db)
    return {"parents_count": total, "data": rows}


@router.get(
    "/get_parent/{parent_id}",
    summary="Get parent by ID",
    responses={200: {"model": schemas.ParentDetail}, **error_responses(404, 500)},
)
async def get_parent(
    parent_id: int = Path(..., description="Parent ID", examples=[1]),
    db: Database = Depends(get_db),
) -> dict:
    row = await repository.get_parent(db, parent_id)
    if row is None:
        raise NotFound(NOT_FOUND_MESSAGE)
    return {"data": [row]}


@router.put(
    "/update_parent/{parent_id}",
    summary="Update parent by ID",
    responses={200: {"model": schemas.ParentUpdated}, **error_responses(400, 404, 500)},
)
async def update_parent(
    parent_id: int = Path(..., description="Parent ID", examples=[1]),
    payload: schemas.ParentUpdate | None = None,
    db: Database = Depends(get_db),
) -> dict:
    fields = require_fields(payload, ("name", "phone", "email"), "All fields are required")
    row = await repository.update_parent(db, parent_id, **fields)
    if row is None:
        raise NotFound(NOT_FOUND_MESSAGE)
    return {
        "status": "success",
        "message": "Parent updated successfully",
        "updated_data": row,
    }


@router.delete(
    "/delete_parent/{parent_id}",
    summary="Delete parent by ID",
    description="Removes a parent and their enrollments.",
    responses={200: {"model": StatusMessage}, **error_responses(404, 500)},
)
async def delete_parent(
    parent_id: int = Path(..., description="Parent ID", examples=[1]),
    db: Database = Depends(get_db),
) -> dict:
    deleted = await repository.delete_parent(db, parent_id)
    if not deleted:
        raise NotFound(NOT_FOUND_MESSAGE)
    return {"status": "success", "message": "Parent deleted successfully"}
