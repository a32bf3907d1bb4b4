"""
modules/planning/route_planner.py
-----------------------------------
Candidate routing for the day loop: which unvisited cities can be reached
from the current city today, and by which transport option.

Rules per route "Origin→Destination":
  1. origin equals the current city (case-insensitive)
  2. destination is not already visited
  3. keep options with mode ∈ allowed modes
     AND cost ≤ TRANSPORT_BUDGET_CAP × remaining budget
  4. among survivors pick the lowest  cost + duration_hrs × DURATION_WEIGHT
     (ties keep catalog order)

One CandidateCity per reachable destination, in catalog order.  The search is
greedy and local: no multi-hop or budget-optimal routing.
"""

from __future__ import annotations
import logging
from typing import Iterable

from schemas.trip import CandidateCity, TransportOption
from modules.tool_usage.catalog_tool import split_route_key
import config

logger = logging.getLogger(__name__)


def route_score(option: TransportOption, duration_weight: float = config.DURATION_WEIGHT) -> float:
    """Lower is better: one hour of travel weighs like `duration_weight` currency units."""
    return option.cost + option.duration_hrs * duration_weight


class RoutePlanner:
    """Enumerates reachable, affordable, unvisited cities from the catalog."""

    def __init__(
        self,
        catalog,
        budget_cap: float = config.TRANSPORT_BUDGET_CAP,
        duration_weight: float = config.DURATION_WEIGHT,
    ) -> None:
        self.catalog = catalog
        self.budget_cap = budget_cap
        self.duration_weight = duration_weight

    def find_candidates(
        self,
        current_city: str,
        visited: set[str],
        modes: Iterable[str],
        remaining_budget: float,
    ) -> list[CandidateCity]:
        origin = current_city.strip().lower()
        allowed = {m.lower() for m in modes}
        max_cost = remaining_budget * self.budget_cap
        visited_lc = {v.lower() for v in visited}

        candidates: list[CandidateCity] = []
        for route, options in self.catalog.get_transport_routes().items():
            pair = split_route_key(route)
            if pair is None:
                logger.warning("Skipping malformed route key %r", route)
                continue
            src, dst = pair
            if src != origin or dst in visited_lc:
                continue

            valid = [o for o in options if o.mode.lower() in allowed and o.cost <= max_cost]
            if not valid:
                continue

            # min() keeps the first of equal scores
            best = min(valid, key=lambda o: route_score(o, self.duration_weight))
            candidates.append(CandidateCity(city=dst, transport=best))

        logger.debug(
            "Candidates from %s (modes=%s, cap=%.2f): %s",
            origin, sorted(allowed), max_cost, [c.city for c in candidates],
        )
        return candidates
