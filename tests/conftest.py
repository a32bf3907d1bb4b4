# tests/conftest.py

import random

import pytest

from schemas.trip import Poi, TransportOption
from modules.tool_usage.catalog_tool import InMemoryCatalog


class FixedRandom(random.Random):
    """random() always returns `value`; shuffle keeps order."""

    def __init__(self, value=0.5):
        super().__init__(0)
        self.value = value

    def random(self):
        return self.value

    def shuffle(self, x):
        return None


def _opt(mode, hrs, cost):
    return TransportOption(mode=mode, duration_hrs=hrs, cost=cost)


def make_catalog():
    return InMemoryCatalog(
        transport_routes={
            "Paris→London": [_opt("train", 2.5, 120), _opt("flight", 1.2, 95), _opt("bus", 8.5, 35)],
            "Paris→Rome":   [_opt("flight", 2.0, 110), _opt("train", 11.0, 160)],
            "London→Rome":  [_opt("flight", 2.5, 100)],
            "Rome→Paris":   [_opt("train", 11.0, 150)],
        },
        pois={
            "paris": [
                Poi(id="p1", name="Louvre Museum", category="museums", popularity_score=10),
                Poi(id="p2", name="Musée d'Orsay", category="museums", popularity_score=9),
                Poi(id="p3", name="Eiffel Tower", category="architecture", popularity_score=10),
                Poi(id="p4", name="Notre-Dame", category="history", popularity_score=8),
                Poi(id="p5", name="Marais Food Walk", category="food", popularity_score=7),
            ],
            # ids overlap with Paris
            "london": [
                Poi(id="p1", name="British Museum", category="museums", popularity_score=10),
                Poi(id="p2", name="Tower of London", category="history", popularity_score=9),
                Poi(id="p3", name="London Eye", category="entertainment", popularity_score=7),
            ],
            "rome": [
                Poi(id="r1", name="Colosseum", category="history", popularity_score=10),
                Poi(id="r2", name="Vatican Museums", category="museums", popularity_score=10),
            ],
        },
        trending_themes=[{"id": "art-lovers", "name": "Art Lovers"}],
    )


@pytest.fixture
def catalog():
    return make_catalog()


@pytest.fixture
def rng():
    return random.Random(42)


@pytest.fixture
def fixed_rng():
    return FixedRandom(0.5)
