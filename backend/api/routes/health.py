"""
api/routes/health.py
--------------------
Health-check endpoint for load balancers and container probes.
"""
from __future__ import annotations

from fastapi import APIRouter

import config

router = APIRouter()


@router.get("/health", summary="Health check")
def health() -> dict:
    """Returns 200 OK when the service is running."""
    return {
        "status": "ok",
        "service": "tripplanner-backend",
        "trip_store": config.TRIP_STORE_BACKEND,
        "llm": "stub" if config.USE_STUB_LLM else config.LLM_PROVIDER,
    }
