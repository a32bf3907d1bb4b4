"""
api/server.py
-------------
FastAPI application entry point.

Run dev server:
    cd backend
    uvicorn api.server:app --reload --port 8000

Endpoints:
    GET    /v1/health
    POST   /v1/trips/recommend
    POST   /v1/trips/estimate
    GET    /v1/trips              POST /v1/trips
    GET    /v1/trips/{id}         DELETE /v1/trips/{id}
    GET    /v1/favorites          POST /v1/favorites
    DELETE /v1/favorites/{id}
    GET    /v1/catalog/{cities,transport,pois/{city},trending-themes,
                        popular-routes,city-matches}
    POST   /v1/recommendations/city
    POST   /v1/recommendations/trip
"""
from __future__ import annotations

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from api.routes import catalog, favorites, health, recommendations, trips
from modules.observability.logger import configure_logging
import config

configure_logging()


@asynccontextmanager
async def lifespan(_app: FastAPI):
    yield
    if config.TRIP_STORE_BACKEND.lower() == "postgres":
        from db.connection import close_pool
        close_pool()


app = FastAPI(
    lifespan=lifespan,
    title="Trip Planner API",
    version="1.0.0",
    description=(
        "Greedy day-by-day multi-city itinerary planner over a static "
        "city / transport / POI catalog, with optional LLM local tips."
    ),
    docs_url="/docs",
    redoc_url="/redoc",
)

# Allow the web frontend (any origin during development)
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router,          prefix="/v1",                 tags=["Health"])
app.include_router(trips.router,           prefix="/v1/trips",           tags=["Trips"])
app.include_router(favorites.router,       prefix="/v1/favorites",       tags=["Favorites"])
app.include_router(catalog.router,         prefix="/v1/catalog",         tags=["Catalog"])
app.include_router(recommendations.router, prefix="/v1/recommendations", tags=["Recommendations"])


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("api.server:app", host="0.0.0.0", port=8000, reload=True)
