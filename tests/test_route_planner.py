# tests/test_route_planner.py

from schemas.trip import TransportOption
from modules.planning.route_planner import RoutePlanner, route_score
from modules.tool_usage.catalog_tool import InMemoryCatalog


def test_route_score_weighs_hours():
    assert route_score(TransportOption(mode="train", duration_hrs=2.5, cost=120)) == 145


def test_candidates_follow_catalog_order(catalog):
    cands = RoutePlanner(catalog).find_candidates("paris", {"paris"}, ["train"], 1000)
    assert [c.city for c in cands] == ["london", "rome"]
    assert all(c.transport.mode == "train" for c in cands)


def test_picks_lowest_cost_plus_weighted_hours(catalog):
    cands = RoutePlanner(catalog).find_candidates("paris", {"paris"}, ["train", "flight", "bus"], 1000)
    london = next(c for c in cands if c.city == "london")
    # train 145, flight 107, bus 120
    assert london.transport.mode == "flight"


def test_transport_capped_at_share_of_remaining_budget(catalog):
    # cap = 0.3 × 200 = 60 → only the 35 bus survives
    cands = RoutePlanner(catalog).find_candidates("paris", {"paris"}, ["train", "flight", "bus"], 200)
    assert len(cands) == 1
    assert cands[0].city == "london"
    assert cands[0].transport.mode == "bus"


def test_visited_destinations_are_excluded(catalog):
    cands = RoutePlanner(catalog).find_candidates("paris", {"paris", "London"}, ["train", "flight"], 1000)
    assert [c.city for c in cands] == ["rome"]


def test_current_city_is_case_insensitive(catalog):
    cands = RoutePlanner(catalog).find_candidates("  PARIS ", {"paris"}, ["TRAIN"], 1000)
    assert [c.city for c in cands] == ["london", "rome"]


def test_negative_budget_yields_no_candidates(catalog):
    assert RoutePlanner(catalog).find_candidates("paris", {"paris"}, ["train", "flight", "bus"], -10) == []


def test_no_allowed_mode_yields_no_candidates(catalog):
    assert RoutePlanner(catalog).find_candidates("paris", {"paris"}, ["car"], 1000) == []


def test_malformed_route_keys_are_skipped():
    cat = InMemoryCatalog(transport_routes={
        "ParisLondon": [TransportOption(mode="train", duration_hrs=1, cost=10)],
        "Paris→Rome→Vienna": [TransportOption(mode="train", duration_hrs=1, cost=10)],
        "Paris→Berlin": [TransportOption(mode="train", duration_hrs=1, cost=10)],
    })
    cands = RoutePlanner(cat).find_candidates("paris", set(), ["train"], 1000)
    assert [c.city for c in cands] == ["berlin"]


def test_equal_scores_keep_first_option():
    cat = InMemoryCatalog(transport_routes={
        "Paris→Lyon": [
            TransportOption(mode="train", duration_hrs=2, cost=40),
            TransportOption(mode="bus", duration_hrs=1, cost=50),
        ],
    })
    cands = RoutePlanner(cat).find_candidates("paris", set(), ["train", "bus"], 1000)
    assert cands[0].transport.mode == "train"
