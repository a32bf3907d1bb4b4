"""
api/routes/trips.py
--------------------
POST   /v1/trips/recommend   generate an itinerary
POST   /v1/trips/estimate    rough cost range before generating
GET    /v1/trips             saved trips, newest first
POST   /v1/trips             save a generated trip
GET    /v1/trips/{trip_id}
DELETE /v1/trips/{trip_id}

Every /recommend call builds a fresh TripPlanner: planner state (visited
POIs, rotation cursors, sticky-city counters) must never be shared between
requests.
"""

from __future__ import annotations

from typing import Any, Optional

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel, Field

from api.deps import catalog_dep, event_logger_dep, trip_store_dep
from schemas.trip import (
    saved_trip_to_dict, trip_request_from_dict, trip_response_from_dict,
    trip_response_to_dict,
)
from modules.planning.budget_planner import estimate_trip_cost
from modules.planning.trip_insights import cost_breakdown, trip_summary
from modules.planning.trip_planner import TripPlanner
from modules.storage.trip_store import TripStore
from modules.validation import validate_trip_request, validate_trip_response

router = APIRouter()


# ── Request schemas ────────────────────────────────────────────────────────────
# Fields are loose: range/emptiness checks live in
# validate_trip_request so the caller gets every problem in one list.

class TripRequestBody(BaseModel):
    origin: str = ""
    durationDays: Optional[int] = None
    maxBudget: Optional[float] = None
    transportPreference: list[str] = Field(default_factory=list)
    interests: list[str] = Field(default_factory=list)
    departureDate: str = ""


class SaveTripBody(BaseModel):
    request: TripRequestBody
    trip: dict[str, Any]


def _validated(body: TripRequestBody) -> dict:
    payload = body.model_dump()
    result = validate_trip_request(payload)
    if not result:
        raise HTTPException(status_code=422, detail={"errors": result.errors})
    return payload


# ── Endpoints ──────────────────────────────────────────────────────────────────

@router.post("/recommend", summary="Generate a multi-city itinerary")
def recommend_trip(
    body: TripRequestBody,
    catalog=Depends(catalog_dep),
    event_logger=Depends(event_logger_dep),
) -> dict:
    request = trip_request_from_dict(_validated(body))
    response = TripPlanner(catalog, event_logger=event_logger).generate(request)

    out = trip_response_to_dict(response)
    breakdown = cost_breakdown(response)
    out["summary"] = trip_summary(response)
    out["costBreakdown"] = {
        "transport":  breakdown.transport,
        "activities": breakdown.activities,
        "total":      breakdown.total,
    }
    out["warnings"] = validate_trip_response(response).errors
    return out


@router.post("/estimate", summary="Estimate a trip's cost range")
def estimate_trip(body: TripRequestBody) -> dict:
    request = trip_request_from_dict(_validated(body))
    est = estimate_trip_cost(request)
    return {"min": est.min, "max": est.max, "average": est.average}


@router.get("", summary="List saved trips")
def list_trips(store: TripStore = Depends(trip_store_dep)) -> list[dict]:
    return [saved_trip_to_dict(t) for t in store.list_trips()]


@router.post("", status_code=201, summary="Save a generated trip")
def save_trip(body: SaveTripBody, store: TripStore = Depends(trip_store_dep)) -> dict:
    request = trip_request_from_dict(_validated(body.request))
    saved = store.save_trip(request, trip_response_from_dict(body.trip))
    return saved_trip_to_dict(saved)


@router.get("/{trip_id}", summary="Fetch a saved trip")
def get_trip(trip_id: int, store: TripStore = Depends(trip_store_dep)) -> dict:
    trip = store.get_trip(trip_id)
    if trip is None:
        raise HTTPException(status_code=404, detail=f"Trip {trip_id} not found")
    return saved_trip_to_dict(trip)


@router.delete("/{trip_id}", status_code=204, summary="Delete a saved trip")
def delete_trip(trip_id: int, store: TripStore = Depends(trip_store_dep)) -> None:
    if not store.delete_trip(trip_id):
        raise HTTPException(status_code=404, detail=f"Trip {trip_id} not found")
