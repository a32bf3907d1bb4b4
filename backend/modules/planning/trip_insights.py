"""
modules/planning/trip_insights.py
-----------------------------------
Read-only summaries over a generated trip or over the catalog.  Used by the
API and CLI for display; none of this feeds back into planning.
"""

from __future__ import annotations
from dataclasses import dataclass

from schemas.trip import TripDay, TripResponse
from modules.planning.city_scoring import category_matches
from modules.tool_usage.catalog_tool import split_route_key
import config


# ── Trip summaries ───────────────────────────────────────────────────────────

def format_city_name(city: str) -> str:
    return city[:1].upper() + city[1:]


def unique_cities(trip_days: list[TripDay]) -> list[str]:
    """Cities in first-visit order."""
    return list(dict.fromkeys(d.city for d in trip_days))


def trip_summary(response: TripResponse) -> str:
    """'Paris (1 day)', 'Paris & Rome (3 days)', 'Paris, Rome & Vienna (5 days)'."""
    cities = [format_city_name(c) for c in unique_cities(response.trip_days)]
    n = len(response.trip_days)
    if not cities:
        return f"Empty trip ({n} days)"
    if len(cities) == 1:
        return f"{cities[0]} ({n} {'day' if n == 1 else 'days'})"
    return f"{', '.join(cities[:-1])} & {cities[-1]} ({n} days)"


@dataclass
class CostBreakdown:
    transport: float
    activities: float
    total: float


def cost_breakdown(response: TripResponse) -> CostBreakdown:
    transport = sum(d.transport.option.cost for d in response.trip_days if d.transport)
    total = sum(d.daily_cost for d in response.trip_days)
    return CostBreakdown(transport=transport, activities=total - transport, total=total)


def total_duration_hours(response: TripResponse) -> int:
    """Travel hours plus scheduled activity time, rounded to whole hours."""
    hours = 0.0
    for d in response.trip_days:
        if d.transport:
            hours += d.transport.option.duration_hrs
        hours += sum(a.duration or config.DEFAULT_ACTIVITY_DURATION_MIN for a in d.activities) / 60
    return round(hours)


# ── Catalog summaries ────────────────────────────────────────────────────────

@dataclass
class PopularRoute:
    from_city: str
    to_city: str
    popularity: float


def popular_routes(catalog) -> list[PopularRoute]:
    """
    Rank routes by a cheap/fast/many-options heuristic:
      (100 - avg_cost/10) + (10 - avg_duration) + 5 × option_count, floored at 0
    """
    routes: list[PopularRoute] = []
    for key, options in catalog.get_transport_routes().items():
        pair = split_route_key(key)
        if pair is None or not options:
            continue
        avg_cost = sum(o.cost for o in options) / len(options)
        avg_dur = sum(o.duration_hrs for o in options) / len(options)
        popularity = (100 - avg_cost / 10) + (10 - avg_dur) + len(options) * 5
        routes.append(PopularRoute(from_city=pair[0], to_city=pair[1], popularity=max(0.0, popularity)))
    return sorted(routes, key=lambda r: r.popularity, reverse=True)


@dataclass
class CityMatch:
    city: str
    score: float
    matching_pois: int


def city_matches(catalog, interests: list[str], cities: list[str] | None = None) -> list[CityMatch]:
    """Cities with at least one interest-matching POI, best first."""
    names = cities if cities is not None else catalog.known_poi_cities()
    out: list[CityMatch] = []
    for city in names:
        matching = [p for p in catalog.get_pois(city) if category_matches(p.category, interests)]
        if matching:
            out.append(CityMatch(
                city=city.lower(),
                score=sum(p.popularity_score or 1 for p in matching),
                matching_pois=len(matching),
            ))
    return sorted(out, key=lambda m: m.score, reverse=True)
