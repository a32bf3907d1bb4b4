"""
api/routes/recommendations.py
------------------------------
POST /v1/recommendations/city   local tips for one city
POST /v1/recommendations/trip   local tips for every city on a trip

LLM failures never surface as HTTP errors: the affected city comes back
with available=false.
"""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel, Field

from api.deps import recommender_dep
from api.routes.trips import TripRequestBody
from schemas.trip import (
    city_recommendation_to_dict, trip_request_from_dict, trip_response_from_dict,
)
from modules.recommendation.local_tips import LocalTipsRecommender
from modules.validation import validate_trip_request

router = APIRouter()


class CityTipsBody(BaseModel):
    cityName: str = Field(..., min_length=1)
    userInterests: list[str] = Field(default_factory=list)
    budget: float = Field(0, ge=0)
    duration: int = Field(1, ge=1)


class TripTipsBody(BaseModel):
    request: TripRequestBody
    trip: dict[str, Any]


@router.post("/city", summary="Local tips for one city")
def city_tips(
    body: CityTipsBody,
    recommender: LocalTipsRecommender = Depends(recommender_dep),
) -> dict:
    rec = recommender.recommend(body.cityName, body.userInterests, body.budget, body.duration)
    return city_recommendation_to_dict(rec)


@router.post("/trip", summary="Local tips for each city on a trip")
def trip_tips(
    body: TripTipsBody,
    recommender: LocalTipsRecommender = Depends(recommender_dep),
) -> dict:
    payload = body.request.model_dump()
    result = validate_trip_request(payload)
    if not result:
        raise HTTPException(status_code=422, detail={"errors": result.errors})
    recs = recommender.recommend_for_trip(
        trip_response_from_dict(body.trip), trip_request_from_dict(payload),
    )
    return {city: city_recommendation_to_dict(r) for city, r in recs.items()}
