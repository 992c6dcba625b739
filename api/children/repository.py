"""
Child persistence (raw SQL).
"""

from __future__ import annotations

from datetime import date
from typing import Any

from core.db import Database

_COLUMNS = "id, name, date_of_birth, classroom_id, daycare_id"


async def count_children(db: Database) -> int:
    total = await db.fetch_value("SELECT COUNT(*) AS total_children FROM child")
    return int(total or 0)


async def list_children(db: Database) -> list[dict[str, Any]]:
    return await db.fetch_all(f"SELECT {_COLUMNS} FROM child ORDER BY id ASC")


async def get_child(db: Database, child_id: int) -> dict[str, Any] | None:
    return await db.fetch_one(f"SELECT {_COLUMNS} FROM child WHERE id = $1", child_id)


async def update_child(
    db: Database,
    child_id: int,
    *,
    name: str,
    date_of_birth: date,
    classroom_id: int,
    daycare_id: int,
) -> dict[str, Any] | None:
    return await db.fetch_one(
        f"""
        UPDATE child
        SET name = $1, date_of_birth = $2, classroom_id = $3, daycare_id = $4
        WHERE id = $5
        RETURNING {_COLUMNS}
        """,
        name,
        date_of_birth,
        classroom_id,
        daycare_id,
        child_id,
    )


async def delete_child(db: Database, child_id: int) -> bool:
    row = await db.fetch_one("DELETE FROM child WHERE id = $1 RETURNING id", child_id)
    return row is not None
