# tests/test_budget_planner.py

import random

from schemas.trip import TripRequest
from modules.planning.budget_planner import CostEstimator, estimate_trip_cost
from modules.planning.time_slots import slot_for

from conftest import FixedRandom


def test_cost_noise_bounds():
    est = CostEstimator(random.Random(7))
    costs = [est.estimate_cost("museums") for _ in range(200)]
    assert all(isinstance(c, int) for c in costs)
    assert min(costs) >= 10
    assert max(costs) <= 19


def test_cost_extremes():
    assert CostEstimator(FixedRandom(0.0)).estimate_cost("museums") == 10
    assert CostEstimator(FixedRandom(0.999)).estimate_cost("museums") == 19


def test_free_categories_never_go_negative():
    est = CostEstimator(FixedRandom(0.0))
    assert est.estimate_cost("shopping") == 0
    assert est.estimate_cost("nature") == 0


def test_unknown_category_uses_default_base():
    assert CostEstimator(FixedRandom(0.5)).estimate_cost("spa") == 15
    assert CostEstimator(FixedRandom(0.5)).estimate_cost("  FOOD ") == 25


def test_trip_estimate_for_train_trip():
    est = estimate_trip_cost(TripRequest(origin="paris", duration_days=3, max_budget=1000,
                                         transport_preference=["train"], interests=["museums"],
                                         departure_date="2024-06-01"))
    assert (est.min, est.max, est.average) == (352, 688, 520)


def test_trip_estimate_single_day_defaults():
    est = estimate_trip_cost(TripRequest(origin="paris", duration_days=1, max_budget=1000))
    assert (est.min, est.max, est.average) == (136, 264, 200)


def test_time_slots():
    assert slot_for(0) == "9:00 AM - 12:00 PM"
    assert slot_for(1) == "1:00 PM - 3:00 PM"
    assert slot_for(2) == "4:00 PM - 6:00 PM"


def test_out_of_range_slot_falls_back_to_first():
    assert slot_for(3) == "9:00 AM - 12:00 PM"
    assert slot_for(-1) == "9:00 AM - 12:00 PM"
