"""
Parent persistence (raw SQL).
"""

from __future__ import annotations

from typing import Any

from core.db import Database

_COLUMNS = "id, name, phone, email"


async def count_parents(db: Database) -> int:
    total = await db.fetch_value("SELECT COUNT(*) AS total_parents FROM parent")
    return int(total or 0)


async def list_parents(db: Database) -> list[dict[str, Any]]:
    return await db.fetch_all(f"SELECT {_COLUMNS} FROM parent ORDER BY id ASC")


async def get_parent(db: Database, parent_id: int) -> dict[str, Any] | None:
    return await db.fetch_one(f"SELECT {_COLUMNS} FROM parent WHERE id = $1", parent_id)


async def update_parent(
    db: Database,
    parent_id: int,
    *,
    name: str,
    phone: str,
    email: str,
) -> dict[str, Any] | None:
    return await db.fetch_one(
        f"""
        UPDATE parent
        SET name = $1, phone = $2, email = $3
        WHERE id = $4
        RETURNING {_COLUMNS}
        """,
        name,
        phone,
        email,
        parent_id,
    )


async def delete_parent(db: Database, parent_id: int) -> bool:
    row = await db.fetch_one("DELETE FROM parent WHERE id = $1 RETURNING id", parent_id)
    return row is not None
