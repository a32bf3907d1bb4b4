"""
modules/planning/activity_selector.py
---------------------------------------
Picks up to ACTIVITIES_PER_DAY POIs for one day in one city.

Phases (each fills only the slots still open):
  1. Interest  : interest-matching, not yet visited, by popularity desc
  2. Popularity: any not yet visited, by popularity desc
  3. Rotation  : whole city list (visited included) minus today's picks,
                  read as a circular window starting at the city's rotation
                  cursor; the cursor advances by the number of slots filled
  4. Shuffle   : the assembled list is permuted, then truncated

Visited POIs are tracked as (city, poi_id) pairs because POI ids are only
unique within a city.  Rotation cursors live on the selector instance, so a
selector must never outlive one trip generation.
"""

from __future__ import annotations
import logging
import random

from schemas.trip import Poi, ScheduledPoi
from modules.planning.budget_planner import CostEstimator
from modules.planning.city_scoring import category_matches
import config

logger = logging.getLogger(__name__)

VisitedPois = set[tuple[str, str]]


def _by_popularity(pois: list[Poi]) -> list[Poi]:
    return sorted(pois, key=lambda p: p.popularity_score or 0, reverse=True)


class ActivitySelector:

    def __init__(
        self,
        catalog,
        cost_estimator: CostEstimator | None = None,
        rng: random.Random | None = None,
        per_day: int = config.ACTIVITIES_PER_DAY,
    ) -> None:
        self.catalog = catalog
        self.rng = rng or random.Random()
        self.cost_estimator = cost_estimator or CostEstimator(self.rng)
        self.per_day = per_day
        self.rotation_index: dict[str, int] = {}

    def reset(self) -> None:
        """Forget rotation cursors (start of a new trip)."""
        self.rotation_index.clear()

    def select_activities(
        self,
        city: str,
        interests: list[str],
        visited_pois: VisitedPois,
        day_number: int,
    ) -> list[ScheduledPoi]:
        city_key = city.strip().lower()
        city_pois = self.catalog.get_pois(city_key)
        selected: list[Poi] = []
        chosen_ids: set[str] = set()

        def _take(pool: list[Poi]) -> int:
            added = 0
            for poi in pool:
                if len(selected) >= self.per_day:
                    break
                if poi.id in chosen_ids:
                    continue
                selected.append(poi)
                chosen_ids.add(poi.id)
                added += 1
            return added

        def _unvisited(p: Poi) -> bool:
            return (city_key, p.id) not in visited_pois

        # ── Phase 1: interest ─────────────────────────────────────────────────
        _take(_by_popularity([
            p for p in city_pois
            if _unvisited(p) and category_matches(p.category, interests)
        ]))

        # ── Phase 2: popularity ───────────────────────────────────────────────
        if len(selected) < self.per_day:
            _take(_by_popularity([
                p for p in city_pois
                if _unvisited(p) and p.id not in chosen_ids
            ]))

        # ── Phase 3: rotation ─────────────────────────────────────────────────
        if len(selected) < self.per_day:
            remaining = [p for p in city_pois if p.id not in chosen_ids]
            if remaining:
                cursor = self.rotation_index.get(city_key, 0)
                start = cursor % len(remaining)
                window = remaining[start:] + remaining[:start]
                filled = _take(window)
                self.rotation_index[city_key] = cursor + filled
                logger.debug(
                    "Day %d %s: rotation filled %d slot(s) from offset %d",
                    day_number, city_key, filled, start,
                )

        # ── Phase 4: shuffle ──────────────────────────────────────────────────
        self.rng.shuffle(selected)
        selected = selected[: self.per_day]

        if len(selected) < self.per_day:
            logger.info(
                "Day %d %s: only %d activity(ies) available",
                day_number, city_key, len(selected),
            )

        return [
            ScheduledPoi(poi=p, cost=self.cost_estimator.estimate_cost(p.category))
            for p in selected
        ]
