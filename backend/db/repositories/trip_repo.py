"""
db/repositories/trip_repo.py
------------------------------
CRUD operations for the `trips` table (schema: db/schema.sql).

Rows carry the request fields plus the generated response; JSONB columns
hold the camelCase wire dicts so a stored trip round-trips unchanged.

All functions accept a psycopg2 connection object.
Commit/rollback is managed by the caller via db.connection.get_conn().
"""

from __future__ import annotations

import json
from typing import Any

_COLUMNS = """
    id, origin, duration, budget, transport_preferences, interests,
    departure_date, trip_days, total_cost, total_travel_time,
    remaining_budget, created_at
"""


def _row_to_dict(cur, row) -> dict:
    cols = [d[0] for d in cur.description]
    return dict(zip(cols, row))


def insert_trip(conn, request: dict[str, Any], response: dict[str, Any]) -> dict:
    """
    Insert a trip. Returns the stored row (id and created_at included).

    request:  TripRequest wire dict (origin, durationDays, maxBudget, ...)
    response: TripResponse wire dict (tripDays, totalCost, ...)
    """
    sql = f"""
        INSERT INTO trips (
            origin, duration, budget, transport_preferences, interests,
            departure_date, trip_days, total_cost, total_travel_time,
            remaining_budget
        ) VALUES (
            %(origin)s, %(duration)s, %(budget)s,
            %(transport_preferences)s::jsonb, %(interests)s::jsonb,
            %(departure_date)s, %(trip_days)s::jsonb, %(total_cost)s,
            %(total_travel_time)s, %(remaining_budget)s
        )
        RETURNING {_COLUMNS}
    """
    params = {
        "origin":                request["origin"],
        "duration":              request["durationDays"],
        "budget":                request["maxBudget"],
        "transport_preferences": json.dumps(request.get("transportPreference", [])),
        "interests":             json.dumps(request.get("interests", [])),
        "departure_date":        request["departureDate"],
        "trip_days":             json.dumps(response.get("tripDays", [])),
        "total_cost":            response["totalCost"],
        "total_travel_time":     response["totalTravelTime"],
        "remaining_budget":      response["remainingBudget"],
    }
    with conn.cursor() as cur:
        cur.execute(sql, params)
        return _row_to_dict(cur, cur.fetchone())


def get_trip(conn, trip_id: int) -> dict | None:
    """Return a single trip row by id, or None if not found."""
    sql = f"SELECT {_COLUMNS} FROM trips WHERE id = %s"
    with conn.cursor() as cur:
        cur.execute(sql, (trip_id,))
        row = cur.fetchone()
        return _row_to_dict(cur, row) if row is not None else None


def list_trips(conn, limit: int = 100) -> list[dict]:
    """Most recent trips first."""
    sql = f"SELECT {_COLUMNS} FROM trips ORDER BY created_at DESC, id DESC LIMIT %s"
    with conn.cursor() as cur:
        cur.execute(sql, (limit,))
        return [_row_to_dict(cur, row) for row in cur.fetchall()]


def delete_trip(conn, trip_id: int) -> bool:
    """Delete a trip. Returns True if a row was removed."""
    with conn.cursor() as cur:
        cur.execute("DELETE FROM trips WHERE id = %s", (trip_id,))
        return cur.rowcount > 0
