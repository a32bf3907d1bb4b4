# tests/test_trip_store.py

import pytest

from schemas.trip import TripDay, TripRequest, TripResponse
from modules.storage.trip_store import InMemoryTripStore


@pytest.fixture
def store():
    return InMemoryTripStore()


def _trip(city="paris"):
    req = TripRequest(origin=city, duration_days=1, max_budget=500,
                      transport_preference=["train"], interests=["art"], departure_date="2024-06-01")
    resp = TripResponse(trip_days=[TripDay(day=1, city=city, date="2024-06-01")],
                        total_cost=40, remaining_budget=460)
    return req, resp


def test_save_and_fetch(store):
    saved = store.save_trip(*_trip())
    assert saved.id == 1
    assert store.get_trip(1).response.remaining_budget == 460
    assert store.get_trip(2) is None


def test_list_is_newest_first(store):
    store.save_trip(*_trip("paris"))
    store.save_trip(*_trip("rome"))
    assert [t.request.origin for t in store.list_trips()] == ["rome", "paris"]


def test_saved_trip_is_a_copy(store):
    req, resp = _trip()
    store.save_trip(req, resp)
    resp.trip_days[0].city = "changed"
    assert store.get_trip(1).response.trip_days[0].city == "paris"


def test_delete_trip(store):
    store.save_trip(*_trip())
    assert store.delete_trip(1)
    assert not store.delete_trip(1)
    assert store.list_trips() == []


def test_favorites(store):
    a = store.add_favorite("city", "paris", {"name": "Paris"})
    b = store.add_favorite("poi", "p1", {})
    assert (a.id, b.id) == (1, 2)
    assert [f.item_id for f in store.list_favorites()] == ["p1", "paris"]
    assert store.delete_favorite(1)
    assert not store.delete_favorite(1)
    assert [f.id for f in store.list_favorites()] == [2]
