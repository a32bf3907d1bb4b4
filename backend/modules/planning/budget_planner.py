"""
modules/planning/budget_planner.py
------------------------------------
Activity cost estimation and up-front trip cost ranges.

Entry points
------------
  CostEstimator.estimate_cost() : per-POI cost used by the day loop.
  estimate_trip_cost()          : rough min/avg/max for a request, shown
                                  before an itinerary is generated.

All monetary amounts are in config.CURRENCY_UNIT (EUR by default).
"""

from __future__ import annotations

import math
import random
from dataclasses import dataclass

from schemas.trip import TripRequest


# ── Per-category base cost for one activity ──────────────────────────────────
CATEGORY_BASE_COST: dict[str, float] = {
    "museums":       15,
    "art":           12,
    "history":       10,
    "architecture":   5,
    "food":          25,
    "shopping":       0,
    "nature":         0,
    "nightlife":     30,
    "entertainment": 20,
}
_DEFAULT_BASE_COST = 15
_NOISE_SPAN = 10          # uniform noise in [-5, +5)

# ── Trip-level estimate inputs ───────────────────────────────────────────────
_DAILY_SPEND_BUDGET = 80
_MODE_AVG_LEG_COST: dict[str, float] = {
    "bus":    30,
    "train":  80,
    "flight": 120,
    "car":    60,
}
_DEFAULT_LEG_COST = 80
_MIN_TRANSPORT_FACTOR = 0.7
_MAX_TRANSPORT_FACTOR = 1.3


class CostEstimator:
    """
    Assigns a pseudo-random cost to a POI from its category.

    Pass a seeded random.Random for reproducible output.
    """

    def __init__(self, rng: random.Random | None = None) -> None:
        self.rng = rng or random.Random()

    def estimate_cost(self, category: str) -> int:
        base = CATEGORY_BASE_COST.get((category or "").strip().lower(), _DEFAULT_BASE_COST)
        noisy = base + self.rng.random() * _NOISE_SPAN - _NOISE_SPAN / 2
        # Free categories would otherwise dip below zero.
        return max(0, math.floor(noisy))


@dataclass
class TripCostEstimate:
    min: int
    max: int
    average: int


def estimate_trip_cost(request: TripRequest) -> TripCostEstimate:
    """
    Rough spend range for a trip before planning it.

    Assumes one transport leg per day after the first, priced at the mean
    of the preferred modes, plus a fixed daily spend.
    """
    modes = request.transport_preference
    if modes:
        avg_leg = sum(_MODE_AVG_LEG_COST.get(m.lower(), _DEFAULT_LEG_COST) for m in modes) / len(modes)
    else:
        avg_leg = _DEFAULT_LEG_COST

    legs = max(1, request.duration_days - 1)
    transport_total = avg_leg * legs
    daily_total = _DAILY_SPEND_BUDGET * request.duration_days

    low = daily_total + transport_total * _MIN_TRANSPORT_FACTOR
    high = daily_total * 2 + transport_total * _MAX_TRANSPORT_FACTOR
    return TripCostEstimate(
        min=round(low),
        max=round(high),
        average=round((low + high) / 2),
    )
