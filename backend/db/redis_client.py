"""
db/redis_client.py
-------------------
redis-py client: singleton plus helpers for the local-tips cache.

Key schema:

  tips:{city}:{interests}:{budget}:{duration}
       Type : String (JSON-encoded CityRecommendation dict)
       TTL  : RECOMMENDATION_CACHE_TTL  (default 86,400 s = 24 hours)
       interests is the sorted, comma-joined, lowercase interest list;
       budget and duration are part of the prompt, so they key the entry too

Environment variables (set in config.py):
    REDIS_HOST        default: localhost
    REDIS_PORT        default: 6379
    REDIS_DB          default: 0
    REDIS_PASSWORD    default: ""  (empty = no auth)
    RECOMMENDATION_CACHE_TTL  default: 86400
"""

from __future__ import annotations

import json
from typing import Any

import redis

import config

# Module-level singleton; initialised lazily on first call to get_redis()
_client: redis.Redis | None = None


def get_redis() -> redis.Redis:
    """Return the singleton Redis client, creating it on first call."""
    global _client
    if _client is None:
        kwargs: dict[str, Any] = {
            "host":             config.REDIS_HOST,
            "port":             config.REDIS_PORT,
            "db":               config.REDIS_DB,
            "decode_responses": True,   # return str, not bytes
        }
        if config.REDIS_PASSWORD:
            kwargs["password"] = config.REDIS_PASSWORD
        _client = redis.Redis(**kwargs)
    return _client


# ── Local-tips cache ───────────────────────────────────────────────────────────

def tips_key(city: str, interests: list[str], budget: float, duration: int) -> str:
    joined = ",".join(sorted({i.strip().lower() for i in interests if i.strip()}))
    return f"tips:{city.strip().lower()}:{joined}:{budget:g}:{duration}"


def get_cached_tips(city: str, interests: list[str], budget: float, duration: int) -> dict | None:
    """Return the cached recommendation dict, or None on cache miss."""
    val = get_redis().get(tips_key(city, interests, budget, duration))
    return json.loads(val) if val is not None else None


def set_cached_tips(
    city: str, interests: list[str], budget: float, duration: int, payload: dict,
) -> None:
    """Write one recommendation with RECOMMENDATION_CACHE_TTL expiry."""
    get_redis().setex(
        tips_key(city, interests, budget, duration),
        config.RECOMMENDATION_CACHE_TTL,
        json.dumps(payload, ensure_ascii=False),
    )
