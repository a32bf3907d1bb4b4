"""
schemas/trip.py
---------------
Dataclass definitions for catalog records, trip requests and the generated
itinerary.

Python attributes are snake_case.  The JSON wire format (HTTP bodies, the
static catalog files, persisted trips) uses the camelCase keys of the public
contract, so every type that crosses the wire has a *_from_dict / *_to_dict
pair below.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Optional


# ── Catalog records ───────────────────────────────────────────────────────────

@dataclass
class TransportOption:
    """One way of travelling along a directional city pair."""
    mode: str = ""                        # "flight" | "train" | "bus" | "car"
    duration_hrs: float = 0.0
    cost: float = 0.0
    departure_time: Optional[str] = None  # e.g. "08:15"
    arrival_time: Optional[str] = None


@dataclass
class Poi:
    """
    A point of interest scoped to one city.

    `id` is unique within a city's POI list only, never globally.
    """
    id: str = ""
    name: str = ""
    category: str = ""
    popularity_score: float = 0.0
    description: Optional[str] = None
    duration: Optional[int] = None        # minutes


@dataclass
class CityMeta:
    """Display metadata for a city; not consulted by the planner."""
    id: str = ""
    name: str = ""
    country: str = ""
    description: Optional[str] = None
    image_url: Optional[str] = None
    latitude: Optional[float] = None
    longitude: Optional[float] = None


# ── Request ───────────────────────────────────────────────────────────────────

@dataclass
class TripRequest:
    origin: str = ""
    duration_days: int = 1
    max_budget: float = 0.0
    transport_preference: list[str] = field(default_factory=list)
    interests: list[str] = field(default_factory=list)
    departure_date: str = ""              # ISO-8601 YYYY-MM-DD


# ── Planner intermediates ─────────────────────────────────────────────────────

@dataclass
class CandidateCity:
    """A reachable, unvisited city together with its best transport option."""
    city: str
    transport: TransportOption


@dataclass
class ScheduledPoi:
    """A POI picked for a day, decorated with its estimated cost."""
    poi: Poi
    cost: int = 0


# ── Itinerary ─────────────────────────────────────────────────────────────────

@dataclass
class TransportLeg:
    from_city: str
    to_city: str
    option: TransportOption


@dataclass
class DayActivity:
    id: str = ""
    name: str = ""
    category: str = ""
    time: str = ""                        # "9:00 AM - 12:00 PM"
    duration: int = 120                   # minutes


@dataclass
class TripDay:
    """
    One day of the trip.

    `transport` is set only on days where the city differs from the previous
    day's city; day 1 never carries one.
    """
    day: int = 1
    city: str = ""
    date: str = ""
    transport: Optional[TransportLeg] = None
    activities: list[DayActivity] = field(default_factory=list)
    daily_cost: float = 0.0


@dataclass
class TripResponse:
    """
    Top-level planner output.

    Invariant: total_cost == max_budget - remaining_budget.  remaining_budget
    may be negative; over-budget trips are valid results.
    """
    trip_days: list[TripDay] = field(default_factory=list)
    total_cost: float = 0.0
    total_travel_time: float = 0.0
    remaining_budget: float = 0.0


# ── Add-ons and persistence ───────────────────────────────────────────────────

@dataclass
class CityRecommendation:
    city_name: str
    recommendations: str
    highlights: list[str] = field(default_factory=list)
    available: bool = True


@dataclass
class SavedTrip:
    id: int
    request: TripRequest
    response: TripResponse
    created_at: datetime


@dataclass
class Favorite:
    id: int
    item_type: str                        # e.g. "city" | "poi" | "trip"
    item_id: str
    item_data: dict = field(default_factory=dict)
    created_at: Optional[datetime] = None


# ── Wire helpers: catalog ─────────────────────────────────────────────────────

def transport_option_from_dict(d: dict[str, Any]) -> TransportOption:
    return TransportOption(
        mode=str(d.get("mode", "")).lower(),
        duration_hrs=float(d.get("durationHrs", 0) or 0),
        cost=d.get("cost", 0) or 0,
        departure_time=d.get("departureTime"),
        arrival_time=d.get("arrivalTime"),
    )


def transport_option_to_dict(o: TransportOption) -> dict[str, Any]:
    out: dict[str, Any] = {
        "mode":        o.mode,
        "durationHrs": o.duration_hrs,
        "cost":        o.cost,
    }
    if o.departure_time is not None:
        out["departureTime"] = o.departure_time
    if o.arrival_time is not None:
        out["arrivalTime"] = o.arrival_time
    return out


def poi_from_dict(d: dict[str, Any]) -> Poi:
    return Poi(
        id=str(d.get("id", "")),
        name=d.get("name", ""),
        category=d.get("category", ""),
        popularity_score=d.get("popularityScore", 0) or 0,
        description=d.get("description"),
        duration=d.get("duration"),
    )


def poi_to_dict(p: Poi) -> dict[str, Any]:
    out: dict[str, Any] = {
        "id":              p.id,
        "name":            p.name,
        "category":        p.category,
        "popularityScore": p.popularity_score,
    }
    if p.description is not None:
        out["description"] = p.description
    if p.duration is not None:
        out["duration"] = p.duration
    return out


def city_meta_from_dict(d: dict[str, Any]) -> CityMeta:
    def _coord(v: Any) -> Optional[float]:
        return float(v) if v not in (None, "") else None

    return CityMeta(
        id=str(d.get("id", d.get("name", ""))),
        name=d.get("name", ""),
        country=d.get("country", ""),
        description=d.get("description"),
        image_url=d.get("imageUrl"),
        latitude=_coord(d.get("latitude")),
        longitude=_coord(d.get("longitude")),
    )


def city_meta_to_dict(c: CityMeta) -> dict[str, Any]:
    return {
        "id":          c.id,
        "name":        c.name,
        "country":     c.country,
        "description": c.description,
        "imageUrl":    c.image_url,
        "latitude":    c.latitude,
        "longitude":   c.longitude,
    }


# ── Wire helpers: request / response ──────────────────────────────────────────

def trip_request_from_dict(d: dict[str, Any]) -> TripRequest:
    """Build a TripRequest from an already-validated camelCase dict."""
    return TripRequest(
        origin=str(d.get("origin", "")).strip(),
        duration_days=int(d.get("durationDays", 1)),
        max_budget=d.get("maxBudget", 0),
        transport_preference=[str(m).lower() for m in d.get("transportPreference", [])],
        interests=[str(i).lower() for i in d.get("interests", [])],
        departure_date=str(d.get("departureDate", "")),
    )


def trip_request_to_dict(r: TripRequest) -> dict[str, Any]:
    return {
        "origin":              r.origin,
        "durationDays":        r.duration_days,
        "maxBudget":           r.max_budget,
        "transportPreference": list(r.transport_preference),
        "interests":           list(r.interests),
        "departureDate":       r.departure_date,
    }


def trip_day_to_dict(day: TripDay) -> dict[str, Any]:
    out: dict[str, Any] = {
        "day":  day.day,
        "city": day.city,
        "date": day.date,
        "activities": [
            {
                "id":       a.id,
                "name":     a.name,
                "category": a.category,
                "time":     a.time,
                "duration": a.duration,
            }
            for a in day.activities
        ],
        "dailyCost": day.daily_cost,
    }
    if day.transport is not None:
        out["transport"] = {
            "from":   day.transport.from_city,
            "to":     day.transport.to_city,
            "option": transport_option_to_dict(day.transport.option),
        }
    return out


def trip_day_from_dict(d: dict[str, Any]) -> TripDay:
    leg = d.get("transport")
    return TripDay(
        day=int(d.get("day", 1)),
        city=d.get("city", ""),
        date=d.get("date", ""),
        transport=TransportLeg(
            from_city=leg.get("from", ""),
            to_city=leg.get("to", ""),
            option=transport_option_from_dict(leg.get("option", {})),
        ) if leg else None,
        activities=[
            DayActivity(
                id=str(a.get("id", "")),
                name=a.get("name", ""),
                category=a.get("category", ""),
                time=a.get("time", ""),
                duration=a.get("duration") or 120,
            )
            for a in d.get("activities", [])
        ],
        daily_cost=d.get("dailyCost", 0),
    )


def trip_response_to_dict(r: TripResponse) -> dict[str, Any]:
    return {
        "tripDays":        [trip_day_to_dict(d) for d in r.trip_days],
        "totalCost":       r.total_cost,
        "totalTravelTime": r.total_travel_time,
        "remainingBudget": r.remaining_budget,
    }


def trip_response_from_dict(d: dict[str, Any]) -> TripResponse:
    return TripResponse(
        trip_days=[trip_day_from_dict(x) for x in d.get("tripDays", [])],
        total_cost=d.get("totalCost", 0),
        total_travel_time=d.get("totalTravelTime", 0),
        remaining_budget=d.get("remainingBudget", 0),
    )


def city_recommendation_to_dict(rec: CityRecommendation) -> dict[str, Any]:
    return {
        "cityName":        rec.city_name,
        "recommendations": rec.recommendations,
        "highlights":      list(rec.highlights),
        "available":       rec.available,
    }


def saved_trip_to_dict(t: SavedTrip) -> dict[str, Any]:
    return {
        "id":        t.id,
        "request":   trip_request_to_dict(t.request),
        "trip":      trip_response_to_dict(t.response),
        "createdAt": t.created_at.isoformat(),
    }


def favorite_to_dict(f: Favorite) -> dict[str, Any]:
    return {
        "id":        f.id,
        "itemType":  f.item_type,
        "itemId":    f.item_id,
        "itemData":  f.item_data,
        "createdAt": f.created_at.isoformat() if f.created_at else None,
    }
