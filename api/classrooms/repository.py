"""
Classroom persistence (raw SQL).
"""

from __future__ import annotations

from typing import Any

from core.db import Database

_COLUMNS = "id, name, daycare_id"


async def count_classrooms(db: Database) -> int:
    total = await db.fetch_value("SELECT COUNT(*) AS total_classrooms FROM classroom")
    return int(total or 0)


async def list_classrooms(db: Database) -> list[dict[str, Any]]:
    return await db.fetch_all(f"SELECT {_COLUMNS} FROM classroom ORDER BY id ASC")


async def get_classroom(db: Database, classroom_id: int) -> dict[str, Any] | None:
    return await db.fetch_one(f"SELECT {_COLUMNS} FROM classroom WHERE id = $1", classroom_id)


async def update_classroom(
    db: Database,
    classroom_id: int,
    *,
    name: str,
    daycare_id: int,
) -> dict[str, Any] | None:
    return await db.fetch_one(
        f"""
        UPDATE classroom
        SET name = $1, daycare_id = $2
        WHERE id = $3
        RETURNING {_COLUMNS}
        """,
        name,
        daycare_id,
        classroom_id,
    )


async def delete_classroom(db: Database, classroom_id: int) -> bool:
    """
    Children keep their rows; their classroom_id becomes NULL (ON DELETE SET NULL).
    """
    row = await db.fetch_one("DELETE FROM classroom WHERE id = $1 RETURNING id", classroom_id)
    return row is not None
