"""
api/routes/favorites.py
------------------------
GET    /v1/favorites
POST   /v1/favorites
DELETE /v1/favorites/{favorite_id}
"""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel, Field

from api.deps import trip_store_dep
from schemas.trip import favorite_to_dict
from modules.storage.trip_store import TripStore

router = APIRouter()


class FavoriteBody(BaseModel):
    itemType: str = Field(..., min_length=1, description="city | poi | trip")
    itemId: str = Field(..., min_length=1)
    itemData: dict[str, Any] = Field(default_factory=dict)


@router.get("", summary="List favourites")
def list_favorites(store: TripStore = Depends(trip_store_dep)) -> list[dict]:
    return [favorite_to_dict(f) for f in store.list_favorites()]


@router.post("", status_code=201, summary="Add a favourite")
def add_favorite(body: FavoriteBody, store: TripStore = Depends(trip_store_dep)) -> dict:
    return favorite_to_dict(store.add_favorite(body.itemType, body.itemId, body.itemData))


@router.delete("/{favorite_id}", status_code=204, summary="Remove a favourite")
def delete_favorite(favorite_id: int, store: TripStore = Depends(trip_store_dep)) -> None:
    if not store.delete_favorite(favorite_id):
        raise HTTPException(status_code=404, detail=f"Favorite {favorite_id} not found")
