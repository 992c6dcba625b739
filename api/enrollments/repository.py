"""
Enrollment persistence (raw SQL).

An enrollment links one child to one parent. Duplicate (child_id, parent_id)
pairs are allowed.
"""

from __future__ import annotations

from typing import Any

from core.db import Database

_COLUMNS = "id, child_id, parent_id"


async def count_enrollments(db: Database) -> int:
    total = await db.fetch_value("SELECT COUNT(*) AS total_enrollments FROM enrollment")
    return int(total or 0)


async def list_enrollments(db: Database) -> list[dict[str, Any]]:
    return await db.fetch_all(f"SELECT {_COLUMNS} FROM enrollment ORDER BY id ASC")


async def get_enrollment(db: Database, enrollment_id: int) -> dict[str, Any] | None:
    return await db.fetch_one(f"SELECT {_COLUMNS} FROM enrollment WHERE id = $1", enrollment_id)


async def update_enrollment(
    db: Database,
    enrollment_id: int,
    *,
    child_id: int,
    parent_id: int,
) -> dict[str, Any] | None:
    return await db.fetch_one(
        f"""
        UPDATE enrollment
        SET child_id = $1, parent_id = $2
        WHERE id = $3
        RETURNING {_COLUMNS}
        """,
        child_id,
        parent_id,
        enrollment_id,
    )


async def delete_enrollment(db: Database, enrollment_id: int) -> bool:
    row = await db.fetch_one("DELETE FROM enrollment WHERE id = $1 RETURNING id", enrollment_id)
    return row is not None
