"""
modules/planning/city_scoring.py
----------------------------------
Ranks candidate destination cities by how well their POIs match the
traveller's interests.

  score(city) = Σ popularity_score (1 if absent) over POIs whose category
                matches any interest   +   EXPLORATION_BONUS

The bonus is larger than typical POI score sums, so moving
on to a new city beats staying put.  Strictly highest score wins; ties keep
the first candidate encountered.
"""

from __future__ import annotations
import logging
from dataclasses import dataclass
from typing import Iterable, Optional

from schemas.trip import CandidateCity, Poi
import config

logger = logging.getLogger(__name__)


def category_matches(category: str, interests: Iterable[str]) -> bool:
    """True if any interest is a case-insensitive substring of the category."""
    cat = (category or "").lower()
    return any(i and i.lower() in cat for i in interests)


def interest_score(pois: list[Poi], interests: Iterable[str]) -> float:
    """Σ popularity over interest-matching POIs (missing/zero popularity counts as 1)."""
    interests = list(interests)
    return sum(
        (p.popularity_score or 1)
        for p in pois
        if category_matches(p.category, interests)
    )


@dataclass
class CityScore:
    """Score breakdown for one candidate city."""
    candidate: CandidateCity
    interest_score: float
    total: float


class CityScorer:

    def __init__(self, catalog, exploration_bonus: float = config.EXPLORATION_BONUS) -> None:
        self.catalog = catalog
        self.exploration_bonus = exploration_bonus

    def score_all(self, candidates: list[CandidateCity], interests: list[str]) -> list[CityScore]:
        """Score every candidate; order is preserved."""
        scores = []
        for c in candidates:
            s = interest_score(self.catalog.get_pois(c.city), interests)
            scores.append(CityScore(candidate=c, interest_score=s, total=s + self.exploration_bonus))
        return scores

    def score_candidates(
        self,
        candidates: list[CandidateCity],
        interests: list[str],
    ) -> Optional[CandidateCity]:
        best: Optional[CityScore] = None
        for s in self.score_all(candidates, interests):
            if best is None or s.total > best.total:
                best = s
        if best is not None:
            logger.debug("Best city %s (score %.1f)", best.candidate.city, best.total)
        return best.candidate if best else None
