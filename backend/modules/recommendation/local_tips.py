"""
modules/recommendation/local_tips.py
--------------------------------------
LLM-generated "local tips" for each city on a finished itinerary.

This runs after planning and never influences it.  Any failure for a city
(LLM error, empty answer) degrades to an unavailable recommendation for that
city only; the other cities and the itinerary itself are unaffected.

Optional Redis cache (config.RECOMMENDATION_CACHE_ENABLED); cache errors are
logged and skipped.
"""

from __future__ import annotations
import logging
import re
from typing import Any

import redis

from schemas.trip import (
    CityRecommendation, TripRequest, TripResponse, city_recommendation_to_dict,
)
from modules.planning.trip_insights import format_city_name, unique_cities
from db import redis_client
import config

logger = logging.getLogger(__name__)

UNAVAILABLE_TEXT = "Recommendations unavailable for {city} right now."

_LIST_ITEM = re.compile(r"^([1-9]\.|[•\-*])")
_LIST_PREFIX = re.compile(r"^[1-9]\.|^[•\-*]\s*")

_PROMPT_TMPL = """You are a highly knowledgeable local travel expert.

A user is planning a trip with these preferences:
- City: {city}
- Duration: {duration} days total trip
- Budget for the whole trip: {currency} {budget:g} (context only)
- Interests: {interests}

The user already has a basic itinerary with major attractions. Please provide ADDITIONAL and COMPLEMENTARY recommendations for {city}:

1. Local insider perspective - what makes this city special from a local's viewpoint (1-2 sentences).
2. Hidden gems - 3-4 lesser-known places that tourists often miss but locals love.
3. Authentic local experiences - 2-3 activities that give insight into local culture and daily life.
4. Local food discoveries - 3-4 specific restaurants, street food spots or signature dishes.
5. Best neighbourhoods to explore - 2-3 districts with their character and what to do there.
6. Practical local tips - transport hacks, etiquette, timing or money-saving advice.
7. After-hours scene - 2-3 specific nightlife spots with short descriptions.

Guidelines:
- Focus on LOCAL and AUTHENTIC experiences, not typical tourist attractions
- Each recommendation should be SPECIFIC with real names/places
- Keep total response under 300 words
- Write in a friendly, practical tone
- If certain categories don't apply, skip them
"""


def build_prompt(city: str, interests: list[str], budget: float, duration: int) -> str:
    return _PROMPT_TMPL.format(
        city=format_city_name(city),
        duration=duration,
        budget=budget,
        currency=config.CURRENCY_UNIT,
        interests=", ".join(interests) if interests else "general sightseeing",
    )


def extract_highlights(content: str, limit: int = config.RECOMMENDATION_MAX_HIGHLIGHTS) -> list[str]:
    """
    Pull short numbered / bulleted lines out of the answer.  Falls back to
    the first few reasonably long sentences when the text has no list.
    """
    highlights: list[str] = []
    for line in content.splitlines():
        trimmed = line.strip()
        if not _LIST_ITEM.match(trimmed):
            continue
        item = _LIST_PREFIX.sub("", trimmed).strip()
        if 10 < len(item) < 100:
            highlights.append(item)

    if not highlights:
        sentences = content.split(".")[:3]
        return [s.strip() for s in sentences if len(s.strip()) > 20]

    return highlights[:limit]


class LocalTipsRecommender:

    def __init__(self, llm_client: Any, cache_enabled: bool = config.RECOMMENDATION_CACHE_ENABLED) -> None:
        self.llm_client = llm_client
        self.cache_enabled = cache_enabled

    def recommend(
        self,
        city: str,
        interests: list[str],
        budget: float,
        duration: int,
    ) -> CityRecommendation:
        cached = self._cache_get(city, interests, budget, duration)
        if cached is not None:
            return CityRecommendation(
                city_name=cached["cityName"],
                recommendations=cached["recommendations"],
                highlights=list(cached.get("highlights", [])),
            )

        try:
            content = self.llm_client.complete(build_prompt(city, interests, budget, duration))
        except Exception as exc:  # any LLM/transport failure degrades this city only
            logger.warning("Local tips failed for %s: %s", city, exc)
            return self._unavailable(city)

        if not content or not content.strip():
            logger.warning("Local tips for %s came back empty", city)
            return self._unavailable(city)

        rec = CityRecommendation(
            city_name=city,
            recommendations=content.strip(),
            highlights=extract_highlights(content),
        )
        self._cache_set(city, interests, budget, duration, rec)
        return rec

    def recommend_for_trip(self, response: TripResponse, request: TripRequest) -> dict[str, CityRecommendation]:
        """One recommendation per distinct city on the trip, in visit order."""
        return {
            city: self.recommend(city, request.interests, request.max_budget, request.duration_days)
            for city in unique_cities(response.trip_days)
        }

    # ── internals ─────────────────────────────────────────────────────────

    @staticmethod
    def _unavailable(city: str) -> CityRecommendation:
        return CityRecommendation(
            city_name=city,
            recommendations=UNAVAILABLE_TEXT.format(city=format_city_name(city)),
            highlights=[],
            available=False,
        )

    def _cache_get(self, city: str, interests: list[str], budget: float, duration: int) -> dict | None:
        if not self.cache_enabled:
            return None
        try:
            return redis_client.get_cached_tips(city, interests, budget, duration)
        except redis.RedisError as exc:
            logger.warning("Tips cache read failed for %s: %s", city, exc)
            return None

    def _cache_set(
        self, city: str, interests: list[str], budget: float, duration: int, rec: CityRecommendation,
    ) -> None:
        if not self.cache_enabled:
            return
        try:
            redis_client.set_cached_tips(city, interests, budget, duration, city_recommendation_to_dict(rec))
        except redis.RedisError as exc:
            logger.warning("Tips cache write failed for %s: %s", city, exc)
