"""
db/repositories/favorite_repo.py
----------------------------------
CRUD operations for the `favorites` table (schema: db/schema.sql).
"""

from __future__ import annotations

import json
from typing import Any


def insert_favorite(conn, item_type: str, item_id: str, item_data: dict[str, Any]) -> dict:
    sql = """
        INSERT INTO favorites (item_type, item_id, item_data)
        VALUES (%s, %s, %s::jsonb)
        RETURNING id, item_type, item_id, item_data, created_at
    """
    with conn.cursor() as cur:
        cur.execute(sql, (item_type, item_id, json.dumps(item_data)))
        cols = [d[0] for d in cur.description]
        return dict(zip(cols, cur.fetchone()))


def list_favorites(conn) -> list[dict]:
    sql = """
        SELECT id, item_type, item_id, item_data, created_at
        FROM favorites
        ORDER BY created_at DESC, id DESC
    """
    with conn.cursor() as cur:
        cur.execute(sql)
        cols = [d[0] for d in cur.description]
        return [dict(zip(cols, row)) for row in cur.fetchall()]


def delete_favorite(conn, favorite_id: int) -> bool:
    """Returns True if a row was removed."""
    with conn.cursor() as cur:
        cur.execute("DELETE FROM favorites WHERE id = %s", (favorite_id,))
        return cur.rowcount > 0
