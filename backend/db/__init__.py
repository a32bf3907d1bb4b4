"""
db/
----
Storage access layer.

  PostgreSQL (psycopg2): saved trips and favourites
    tables: trips, favorites
    schema: db/schema.sql
    apply:  python scripts/run_migrations.py

  Redis (redis-py): local-tips cache
    tips:{city}:{interests}:{budget}:{duration}  TTL = RECOMMENDATION_CACHE_TTL (24 h)

Public exports (import from here for convenience):
    from db import get_conn, get_redis
    from db.repositories import trip_repo, favorite_repo
"""

from db.connection import get_conn, close_pool
from db.redis_client import get_redis

__all__ = ["get_conn", "close_pool", "get_redis"]
