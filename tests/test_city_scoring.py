# tests/test_city_scoring.py

from schemas.trip import CandidateCity, Poi, TransportOption
from modules.planning.city_scoring import CityScorer, category_matches, interest_score


def _cand(city):
    return CandidateCity(city=city, transport=TransportOption(mode="train", duration_hrs=1, cost=10))


def test_category_match_is_case_insensitive_substring():
    assert category_matches("Art Museums", ["museum"])
    assert category_matches("street art", ["ART"])
    assert not category_matches("food", ["museums"])
    assert not category_matches("food", [])


def test_missing_popularity_counts_as_one():
    pois = [
        Poi(id="a", category="museums", popularity_score=0),
        Poi(id="b", category="museums", popularity_score=4),
        Poi(id="c", category="food", popularity_score=9),
    ]
    assert interest_score(pois, ["museums"]) == 5


def test_highest_score_wins(catalog):
    best = CityScorer(catalog).score_candidates([_cand("london"), _cand("rome")], ["history"])
    # london 9 + 50, rome 10 + 50
    assert best.city == "rome"


def test_tie_keeps_first_candidate(catalog):
    best = CityScorer(catalog).score_candidates([_cand("london"), _cand("rome")], ["museums"])
    assert best.city == "london"


def test_exploration_bonus_applies_without_matches(catalog):
    scores = CityScorer(catalog).score_all([_cand("rome"), _cand("atlantis")], ["nightlife"])
    assert [s.total for s in scores] == [50, 50]
    assert [s.interest_score for s in scores] == [0, 0]


def test_no_candidates_returns_none(catalog):
    assert CityScorer(catalog).score_candidates([], ["museums"]) is None
