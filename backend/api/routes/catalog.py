"""
api/routes/catalog.py
----------------------
Read-only views of the static catalog.

GET /v1/catalog/cities
GET /v1/catalog/transport
GET /v1/catalog/pois/{city}
GET /v1/catalog/trending-themes
GET /v1/catalog/popular-routes
GET /v1/catalog/city-matches?interests=museums&interests=art
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Query

from api.deps import catalog_dep
from schemas.trip import city_meta_to_dict, poi_to_dict, transport_option_to_dict
from modules.planning.trip_insights import city_matches, popular_routes

router = APIRouter()


@router.get("/cities", summary="City metadata")
def list_cities(catalog=Depends(catalog_dep)) -> list[dict]:
    return [city_meta_to_dict(c) for c in catalog.get_cities()]


@router.get("/transport", summary="All transport routes")
def list_transport(catalog=Depends(catalog_dep)) -> dict:
    return {
        route: [transport_option_to_dict(o) for o in options]
        for route, options in catalog.get_transport_routes().items()
    }


@router.get("/pois/{city}", summary="POIs for one city")
def list_pois(city: str, catalog=Depends(catalog_dep)) -> list[dict]:
    pois = catalog.get_pois(city)
    if not pois:
        raise HTTPException(status_code=404, detail=f"POIs not found for {city!r}")
    return [poi_to_dict(p) for p in pois]


@router.get("/trending-themes", summary="Curated trip themes")
def list_trending_themes(catalog=Depends(catalog_dep)) -> list[dict]:
    return catalog.get_trending_themes()


@router.get("/popular-routes", summary="Routes ranked by cost, speed and choice")
def list_popular_routes(limit: int = Query(10, ge=1, le=100), catalog=Depends(catalog_dep)) -> list[dict]:
    return [
        {"from": r.from_city, "to": r.to_city, "popularity": round(r.popularity, 2)}
        for r in popular_routes(catalog)[:limit]
    ]


@router.get("/city-matches", summary="Cities ranked by interest match")
def list_city_matches(
    interests: list[str] = Query(...),
    catalog=Depends(catalog_dep),
) -> list[dict]:
    return [
        {"city": m.city, "score": m.score, "matchingPois": m.matching_pois}
        for m in city_matches(catalog, [i.lower() for i in interests])
    ]
