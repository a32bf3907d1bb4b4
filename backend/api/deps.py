"""
api/deps.py
-----------
FastAPI dependency providers.  Tests swap these out through
app.dependency_overrides.
"""
from __future__ import annotations

from functools import lru_cache

from llm import get_llm_client
from modules.observability.logger import StructuredLogger
from modules.recommendation.local_tips import LocalTipsRecommender
from modules.storage.trip_store import TripStore, get_trip_store
from modules.tool_usage.catalog_tool import get_catalog
import config


def catalog_dep():
    return get_catalog()


def trip_store_dep() -> TripStore:
    return get_trip_store()


@lru_cache(maxsize=1)
def _recommender() -> LocalTipsRecommender:
    return LocalTipsRecommender(get_llm_client())


def recommender_dep() -> LocalTipsRecommender:
    return _recommender()


@lru_cache(maxsize=1)
def _event_logger() -> StructuredLogger:
    return StructuredLogger()


def event_logger_dep() -> StructuredLogger | None:
    return _event_logger() if config.TRIP_EVENT_LOG_ENABLED else None
