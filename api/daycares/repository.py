"""
Daycare persistence (raw SQL).
"""

from __future__ import annotations

from typing import Any

from core.db import Database

_COLUMNS = "id, name, address, phone, email"


async def count_daycares(db: Database) -> int:
    total = await db.fetch_value("SELECT COUNT(*) AS total_daycares FROM daycare")
    return int(total or 0)


async def list_daycares(db: Database) -> list[dict[str, Any]]:
    return await db.fetch_all(f"SELECT {_COLUMNS} FROM daycare ORDER BY id ASC")


async def get_daycare(db: Database, daycare_id: int) -> dict[str, Any] | None:
    return await db.fetch_one(f"SELECT {_COLUMNS} FROM daycare WHERE id = $1", daycare_id)


async def update_daycare(
    db: Database,
    daycare_id: int,
    *,
    name: str,
    address: str,
    phone: str,
    email: str,
) -> dict[str, Any] | None:
    return await db.fetch_one(
        f"""
        UPDATE daycare
        SET name = $1, address = $2, phone = $3, email = $4
        WHERE id = $5
        RETURNING {_COLUMNS}
        """,
        name,
        address,
        phone,
        email,
        daycare_id,
    )


async def delete_daycare(db: Database, daycare_id: int) -> bool:
    """
    Classrooms and children of the daycare go with it (ON DELETE CASCADE).
    """
    row = await db.fetch_one("DELETE FROM daycare WHERE id = $1 RETURNING id", daycare_id)
    return row is not None
