# tests/test_activity_selector.py

from modules.planning.activity_selector import ActivitySelector
from modules.planning.budget_planner import CostEstimator


def _ids(scheduled):
    return {s.poi.id for s in scheduled}


def test_interest_matches_first_then_popularity(catalog, rng):
    picked = ActivitySelector(catalog, rng=rng).select_activities("paris", ["museums"], set(), 1)
    # both museums, then the most popular remaining POI
    assert _ids(picked) == {"p1", "p2", "p3"}


def test_visited_pois_are_skipped_while_unvisited_remain(catalog, rng):
    visited = {("paris", "p1"), ("paris", "p2")}
    picked = ActivitySelector(catalog, rng=rng).select_activities("paris", ["museums"], visited, 2)
    assert _ids(picked) == {"p3", "p4", "p5"}


def test_visited_pois_are_scoped_by_city(catalog, rng):
    # London's p1/p2 share ids with Paris museums
    visited = {("london", "p1"), ("london", "p2")}
    picked = ActivitySelector(catalog, rng=rng).select_activities("paris", ["museums"], visited, 1)
    assert {"p1", "p2"} <= _ids(picked)


def test_rotation_advances_through_exhausted_city(catalog, fixed_rng):
    selector = ActivitySelector(catalog, rng=fixed_rng)
    visited = {("paris", pid) for pid in ("p1", "p2", "p3", "p4", "p5")}

    first = selector.select_activities("paris", ["museums"], visited, 3)
    second = selector.select_activities("paris", ["museums"], visited, 4)

    assert [s.poi.id for s in first] == ["p1", "p2", "p3"]
    assert [s.poi.id for s in second] == ["p4", "p5", "p1"]
    assert selector.rotation_index["paris"] == 6

    selector.reset()
    assert selector.rotation_index == {}


def test_no_duplicates_within_a_day(catalog, rng):
    visited = {("paris", "p1")}
    picked = ActivitySelector(catalog, rng=rng).select_activities("paris", ["museums", "history"], visited, 1)
    ids = [s.poi.id for s in picked]
    assert len(ids) == len(set(ids)) == 3


def test_small_city_returns_fewer_activities(catalog, rng):
    picked = ActivitySelector(catalog, rng=rng).select_activities("rome", ["food"], set(), 1)
    assert _ids(picked) == {"r1", "r2"}


def test_unknown_city_returns_nothing(catalog, rng):
    assert ActivitySelector(catalog, rng=rng).select_activities("atlantis", ["museums"], set(), 1) == []


def test_costs_come_from_estimator(catalog, fixed_rng):
    selector = ActivitySelector(catalog, cost_estimator=CostEstimator(fixed_rng), rng=fixed_rng)
    picked = selector.select_activities("paris", ["museums"], set(), 1)
    costs = {s.poi.id: s.cost for s in picked}
    # random() == 0.5 → no noise
    assert costs == {"p1": 15, "p2": 15, "p3": 5}
