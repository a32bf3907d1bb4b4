# tests/test_api.py

import pytest
from fastapi.testclient import TestClient

from api import deps
from api.server import app
from llm import StubLLMClient
from modules.recommendation.local_tips import LocalTipsRecommender
from modules.storage.trip_store import InMemoryTripStore

from conftest import make_catalog


TRIP_BODY = {
    "origin": "Paris",
    "durationDays": 3,
    "maxBudget": 1000,
    "transportPreference": ["train", "flight"],
    "interests": ["museums"],
    "departureDate": "2024-06-01",
}


@pytest.fixture
def client():
    store = InMemoryTripStore()
    catalog = make_catalog()
    app.dependency_overrides[deps.catalog_dep] = lambda: catalog
    app.dependency_overrides[deps.trip_store_dep] = lambda: store
    app.dependency_overrides[deps.recommender_dep] = lambda: LocalTipsRecommender(StubLLMClient(), cache_enabled=False)
    app.dependency_overrides[deps.event_logger_dep] = lambda: None
    yield TestClient(app)
    app.dependency_overrides.clear()


def test_health(client):
    r = client.get("/v1/health")
    assert r.status_code == 200
    assert r.json()["status"] == "ok"


def test_recommend_trip(client):
    r = client.post("/v1/trips/recommend", json=TRIP_BODY)
    assert r.status_code == 200
    data = r.json()
    assert len(data["tripDays"]) == 3
    assert data["tripDays"][0]["city"] == "paris"
    assert "transport" not in data["tripDays"][0]
    assert data["totalCost"] == pytest.approx(1000 - data["remainingBudget"])
    assert data["costBreakdown"]["total"] == pytest.approx(data["totalCost"])
    assert data["summary"].endswith("(3 days)")


def test_recommend_rejects_invalid_request(client):
    r = client.post("/v1/trips/recommend", json={**TRIP_BODY, "durationDays": 0})
    assert r.status_code == 422
    assert r.json()["detail"]["errors"] == ["Duration must be between 1 and 30 days"]


def test_estimate(client):
    r = client.post("/v1/trips/estimate", json={**TRIP_BODY, "transportPreference": ["train"]})
    assert r.status_code == 200
    assert r.json() == {"min": 352, "max": 688, "average": 520}


def test_saved_trip_lifecycle(client):
    trip = client.post("/v1/trips/recommend", json=TRIP_BODY).json()

    r = client.post("/v1/trips", json={"request": TRIP_BODY, "trip": trip})
    assert r.status_code == 201
    trip_id = r.json()["id"]
    assert r.json()["trip"]["tripDays"] == trip["tripDays"]

    assert [t["id"] for t in client.get("/v1/trips").json()] == [trip_id]
    assert client.get(f"/v1/trips/{trip_id}").json()["request"]["origin"] == "Paris"

    assert client.delete(f"/v1/trips/{trip_id}").status_code == 204
    assert client.get(f"/v1/trips/{trip_id}").status_code == 404
    assert client.delete(f"/v1/trips/{trip_id}").status_code == 404


def test_favorites(client):
    r = client.post("/v1/favorites", json={"itemType": "city", "itemId": "rome", "itemData": {"name": "Rome"}})
    assert r.status_code == 201
    fav_id = r.json()["id"]
    assert client.get("/v1/favorites").json()[0]["itemId"] == "rome"
    assert client.delete(f"/v1/favorites/{fav_id}").status_code == 204
    assert client.delete(f"/v1/favorites/{fav_id}").status_code == 404


def test_catalog_pois(client):
    assert len(client.get("/v1/catalog/pois/Paris").json()) == 5
    assert client.get("/v1/catalog/pois/atlantis").status_code == 404


def test_catalog_city_matches(client):
    r = client.get("/v1/catalog/city-matches", params={"interests": ["history"]})
    assert [m["city"] for m in r.json()] == ["rome", "london", "paris"]


def test_catalog_popular_routes(client):
    routes = client.get("/v1/catalog/popular-routes").json()
    assert len(routes) == 4
    assert routes[0]["from"] == "paris" and routes[0]["to"] == "london"


def test_city_tips(client):
    r = client.post("/v1/recommendations/city", json={"cityName": "vienna", "userInterests": ["art"]})
    assert r.status_code == 200
    assert r.json()["available"] is True
    assert len(r.json()["highlights"]) == 5


def test_trip_tips(client):
    trip = client.post("/v1/trips/recommend", json=TRIP_BODY).json()
    r = client.post("/v1/recommendations/trip", json={"request": TRIP_BODY, "trip": trip})
    assert r.status_code == 200
    assert list(r.json())[0] == "paris"


def test_recommend_rejects_infinite_budget(client):
    raw = (
        '{"origin": "Paris", "durationDays": 3, "maxBudget": Infinity,'
        ' "transportPreference": ["train"], "interests": ["museums"],'
        ' "departureDate": "2024-06-01"}'
    )
    r = client.post("/v1/trips/recommend", content=raw, headers={"Content-Type": "application/json"})
    assert r.status_code == 422
    assert r.json()["detail"]["errors"][0].startswith("Budget must be a number")
