# tests/test_local_tips.py

from db import redis_client
from db.redis_client import tips_key
from llm import StubLLMClient
from schemas.trip import TripDay, TripRequest, TripResponse
from modules.recommendation.local_tips import (
    LocalTipsRecommender, build_prompt, extract_highlights,
)


class FailingClient:
    def complete(self, prompt):
        raise RuntimeError("quota exceeded")


class EmptyClient:
    def complete(self, prompt):
        return "   "


class RecordingClient:
    def __init__(self):
        self.prompts = []

    def complete(self, prompt):
        self.prompts.append(prompt)
        if "Rome" in prompt:
            raise RuntimeError("timeout")
        return "1. Eat where the locals queue at lunchtime"


def test_stub_client_gives_highlights():
    rec = LocalTipsRecommender(StubLLMClient(), cache_enabled=False).recommend("paris", ["food"], 1000, 3)
    assert rec.available
    assert rec.city_name == "paris"
    assert len(rec.highlights) == 5
    assert rec.highlights[0].startswith("Walk the old market streets")


def test_llm_failure_degrades():
    rec = LocalTipsRecommender(FailingClient(), cache_enabled=False).recommend("paris", ["food"], 1000, 3)
    assert not rec.available
    assert rec.recommendations == "Recommendations unavailable for Paris right now."
    assert rec.highlights == []


def test_empty_answer_degrades():
    rec = LocalTipsRecommender(EmptyClient(), cache_enabled=False).recommend("rome", [], 500, 2)
    assert not rec.available


def test_trip_tips_fail_per_city_only():
    client = RecordingClient()
    resp = TripResponse(trip_days=[
        TripDay(day=1, city="paris"), TripDay(day=2, city="rome"), TripDay(day=3, city="paris"),
    ])
    req = TripRequest(origin="paris", duration_days=3, max_budget=1000, interests=["food"])

    recs = LocalTipsRecommender(client, cache_enabled=False).recommend_for_trip(resp, req)

    assert list(recs) == ["paris", "rome"]
    assert recs["paris"].available
    assert not recs["rome"].available
    assert len(client.prompts) == 2


def test_prompt_mentions_city_and_interests():
    prompt = build_prompt("vienna", ["art", "food"], 800, 4)
    assert "City: Vienna" in prompt
    assert "Interests: art, food" in prompt
    assert "4 days" in prompt


def test_prompt_without_interests():
    assert "general sightseeing" in build_prompt("vienna", [], 800, 4)


def test_highlights_from_numbered_and_bulleted_lines():
    text = (
        "Intro line that is not a list item.\n"
        "1. Visit the riverside flea market on Sundays\n"
        "- Short\n"
        "• Grab a coffee at the tiny kiosk by the station\n"
        "* Ride the funicular at sunset for the views\n"
    )
    assert extract_highlights(text) == [
        "Visit the riverside flea market on Sundays",
        "Grab a coffee at the tiny kiosk by the station",
        "Ride the funicular at sunset for the views",
    ]


def test_highlights_are_capped():
    text = "\n".join(f"{i}. Highlight number {i} is worth a visit" for i in range(1, 9))
    assert len(extract_highlights(text, limit=5)) == 5


def test_highlights_fall_back_to_sentences():
    text = "This city has wonderful food everywhere. Short. Another long sentence about the river walks."
    assert extract_highlights(text) == [
        "This city has wonderful food everywhere",
        "Another long sentence about the river walks",
    ]


class CountingClient:
    def __init__(self):
        self.calls = 0

    def complete(self, prompt):
        self.calls += 1
        return f"1. Tip number {self.calls} for this particular trip"


def test_tips_cache_key_includes_budget_and_duration():
    base = tips_key("Paris", ["food", "art"], 1000, 3)
    assert base == "tips:paris:art,food:1000:3"
    assert tips_key("paris", ["art", "food"], 500, 3) != base
    assert tips_key("paris", ["art", "food"], 1000, 7) != base


def test_cached_tips_are_not_shared_across_budgets(monkeypatch):
    cache = {}
    monkeypatch.setattr(
        redis_client, "get_cached_tips",
        lambda city, interests, budget, duration: cache.get(tips_key(city, interests, budget, duration)),
    )
    monkeypatch.setattr(
        redis_client, "set_cached_tips",
        lambda city, interests, budget, duration, payload: cache.__setitem__(
            tips_key(city, interests, budget, duration), payload,
        ),
    )
    client = CountingClient()
    recommender = LocalTipsRecommender(client, cache_enabled=True)

    first = recommender.recommend("paris", ["food"], 1000, 3)
    again = recommender.recommend("paris", ["food"], 1000, 3)
    other = recommender.recommend("paris", ["food"], 300, 3)

    assert client.calls == 2
    assert again.recommendations == first.recommendations
    assert other.recommendations != first.recommendations
