"""
modules/storage/trip_store.py
-------------------------------
Saved trips and favourites.

  InMemoryTripStore  : process-local, thread-safe; default backend
  PostgresTripStore  : psycopg2 via db.connection / db.repositories

get_trip_store() returns the process-wide store chosen by
config.TRIP_STORE_BACKEND ("in_memory" | "postgres").

Trips are stored exactly as generated; the store never recomputes them.
"""

from __future__ import annotations
import copy
import logging
import threading
from abc import ABC, abstractmethod
from datetime import datetime, timezone
from typing import Any, Optional

from schemas.trip import (
    Favorite, SavedTrip, TripRequest, TripResponse,
    trip_day_from_dict, trip_request_to_dict, trip_response_to_dict,
)
import config

logger = logging.getLogger(__name__)


class TripStore(ABC):

    @abstractmethod
    def save_trip(self, request: TripRequest, response: TripResponse) -> SavedTrip: ...

    @abstractmethod
    def list_trips(self) -> list[SavedTrip]: ...

    @abstractmethod
    def get_trip(self, trip_id: int) -> Optional[SavedTrip]: ...

    @abstractmethod
    def delete_trip(self, trip_id: int) -> bool: ...

    @abstractmethod
    def add_favorite(self, item_type: str, item_id: str, item_data: dict[str, Any]) -> Favorite: ...

    @abstractmethod
    def list_favorites(self) -> list[Favorite]: ...

    @abstractmethod
    def delete_favorite(self, favorite_id: int) -> bool: ...


# ---------------------------------------------------------------------------
# In-memory
# ---------------------------------------------------------------------------

class InMemoryTripStore(TripStore):

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._trips: dict[int, SavedTrip] = {}
        self._favorites: dict[int, Favorite] = {}
        self._next_trip_id = 1
        self._next_favorite_id = 1

    def save_trip(self, request: TripRequest, response: TripResponse) -> SavedTrip:
        with self._lock:
            trip = SavedTrip(
                id=self._next_trip_id,
                request=copy.deepcopy(request),
                response=copy.deepcopy(response),
                created_at=datetime.now(timezone.utc),
            )
            self._trips[trip.id] = trip
            self._next_trip_id += 1
        logger.info("Saved trip %d (%s, %d days)", trip.id, request.origin, request.duration_days)
        return trip

    def list_trips(self) -> list[SavedTrip]:
        with self._lock:
            return sorted(self._trips.values(), key=lambda t: t.id, reverse=True)

    def get_trip(self, trip_id: int) -> Optional[SavedTrip]:
        with self._lock:
            return self._trips.get(trip_id)

    def delete_trip(self, trip_id: int) -> bool:
        with self._lock:
            return self._trips.pop(trip_id, None) is not None

    def add_favorite(self, item_type: str, item_id: str, item_data: dict[str, Any]) -> Favorite:
        with self._lock:
            fav = Favorite(
                id=self._next_favorite_id,
                item_type=item_type,
                item_id=item_id,
                item_data=copy.deepcopy(item_data),
                created_at=datetime.now(timezone.utc),
            )
            self._favorites[fav.id] = fav
            self._next_favorite_id += 1
        return fav

    def list_favorites(self) -> list[Favorite]:
        with self._lock:
            return sorted(self._favorites.values(), key=lambda f: f.id, reverse=True)

    def delete_favorite(self, favorite_id: int) -> bool:
        with self._lock:
            return self._favorites.pop(favorite_id, None) is not None


# ---------------------------------------------------------------------------
# PostgreSQL
# ---------------------------------------------------------------------------

def _saved_trip_from_row(row: dict) -> SavedTrip:
    return SavedTrip(
        id=row["id"],
        request=TripRequest(
            origin=row["origin"],
            duration_days=row["duration"],
            max_budget=row["budget"],
            transport_preference=list(row["transport_preferences"] or []),
            interests=list(row["interests"] or []),
            departure_date=row["departure_date"],
        ),
        response=TripResponse(
            trip_days=[trip_day_from_dict(d) for d in row["trip_days"] or []],
            total_cost=row["total_cost"],
            total_travel_time=row["total_travel_time"],
            remaining_budget=row["remaining_budget"],
        ),
        created_at=row["created_at"],
    )


def _favorite_from_row(row: dict) -> Favorite:
    return Favorite(
        id=row["id"],
        item_type=row["item_type"],
        item_id=row["item_id"],
        item_data=row["item_data"] or {},
        created_at=row["created_at"],
    )


class PostgresTripStore(TripStore):

    def __init__(self) -> None:
        from db.connection import get_conn
        from db.repositories import favorite_repo, trip_repo
        self._get_conn = get_conn
        self._trips = trip_repo
        self._favorites = favorite_repo

    def save_trip(self, request: TripRequest, response: TripResponse) -> SavedTrip:
        with self._get_conn() as conn:
            row = self._trips.insert_trip(
                conn, trip_request_to_dict(request), trip_response_to_dict(response),
            )
        return _saved_trip_from_row(row)

    def list_trips(self) -> list[SavedTrip]:
        with self._get_conn() as conn:
            return [_saved_trip_from_row(r) for r in self._trips.list_trips(conn)]

    def get_trip(self, trip_id: int) -> Optional[SavedTrip]:
        with self._get_conn() as conn:
            row = self._trips.get_trip(conn, trip_id)
        return _saved_trip_from_row(row) if row else None

    def delete_trip(self, trip_id: int) -> bool:
        with self._get_conn() as conn:
            return self._trips.delete_trip(conn, trip_id)

    def add_favorite(self, item_type: str, item_id: str, item_data: dict[str, Any]) -> Favorite:
        with self._get_conn() as conn:
            return _favorite_from_row(self._favorites.insert_favorite(conn, item_type, item_id, item_data))

    def list_favorites(self) -> list[Favorite]:
        with self._get_conn() as conn:
            return [_favorite_from_row(r) for r in self._favorites.list_favorites(conn)]

    def delete_favorite(self, favorite_id: int) -> bool:
        with self._get_conn() as conn:
            return self._favorites.delete_favorite(conn, favorite_id)


# ── Process-wide store ─────────────────────────────────────────────────────────

_store: TripStore | None = None


def get_trip_store() -> TripStore:
    global _store
    if _store is None:
        backend = config.TRIP_STORE_BACKEND.lower()
        if backend == "postgres":
            _store = PostgresTripStore()
        elif backend == "in_memory":
            _store = InMemoryTripStore()
        else:
            raise ValueError(f"Unknown TRIP_STORE_BACKEND {config.TRIP_STORE_BACKEND!r}")
        logger.info("Trip store backend: %s", backend)
    return _store
