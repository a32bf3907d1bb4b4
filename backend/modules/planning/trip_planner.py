"""
modules/planning/trip_planner.py
----------------------------------
Greedy, day-by-day multi-city itinerary builder.

Each day d ∈ 1..duration_days:
  1. date = departure_date + (d-1) days
  2. choose today's transport-mode filter (sticky-city widening, see below)
  3. d > 1: RoutePlanner → CityScorer; relocate on success
  4. update the same-city streak
  5. ActivitySelector fills the day; costs are deducted from the budget
  6. emit a TripDay

Sticky-city widening:
  On trips of MIN_DAYS_FOR_FLEXIBILITY+ days, once the traveller has stayed
  STICKY_CITY_THRESHOLD+ consecutive days in one city, the mode filter is
  widened to every catalog mode for that day only.  This fires once per
  stuck episode; the next successful relocation re-arms it.

The loop always runs exactly duration_days iterations.  A negative
remaining budget is a valid end state: transport is capped per leg, but
activity costs are deducted without any feasibility check.

One TripPlanner owns one run's mutable state.  Build a fresh planner per
request; generate() also resets state on entry.
"""

from __future__ import annotations
import logging
import random
import uuid
from dataclasses import dataclass, field
from datetime import date, timedelta
from typing import Optional

from schemas.trip import (
    DayActivity, TransportLeg, TransportOption, TripDay, TripRequest, TripResponse,
)
from modules.planning.activity_selector import ActivitySelector
from modules.planning.budget_planner import CostEstimator
from modules.planning.city_scoring import CityScorer
from modules.planning.route_planner import RoutePlanner
from modules.planning.time_slots import slot_for
from modules.observability.logger import StructuredLogger
import config

logger = logging.getLogger(__name__)


@dataclass
class RunState:
    """Mutable state for one itinerary generation."""
    current_city: str
    remaining_budget: float
    total_travel_time: float = 0.0
    visited_cities: set[str] = field(default_factory=set)
    visited_pois: set[tuple[str, str]] = field(default_factory=set)   # (city, poi_id)
    consecutive_days_in_same_city: int = 0
    flexible_transport_activated: bool = False


class TripPlanner:
    """
    Composes RoutePlanner, CityScorer, ActivitySelector and CostEstimator
    into a complete trip.
    """

    def __init__(
        self,
        catalog,
        rng: random.Random | None = None,
        event_logger: StructuredLogger | None = None,
    ) -> None:
        self.catalog = catalog
        self.rng = rng or random.Random()
        self.event_logger = event_logger
        self.router = RoutePlanner(catalog)
        self.scorer = CityScorer(catalog)
        self.selector = ActivitySelector(catalog, CostEstimator(self.rng), self.rng)
        self.state: Optional[RunState] = None
        self.run_id: str = ""

    # ── Public entry point ────────────────────────────────────────────────────

    def generate(self, request: TripRequest) -> TripResponse:
        """
        Build the itinerary for an already-validated request.

        Returns:
            TripResponse with exactly request.duration_days TripDays.
        """
        origin = request.origin.strip().lower()
        self.selector.reset()
        self.run_id = uuid.uuid4().hex
        self.state = state = RunState(
            current_city=origin,
            remaining_budget=request.max_budget,
            visited_cities={origin},
        )
        start = date.fromisoformat(request.departure_date)
        preferred_modes = list(request.transport_preference)

        self._event("trip_start", {
            "origin": origin,
            "duration_days": request.duration_days,
            "max_budget": request.max_budget,
            "modes": preferred_modes,
            "interests": list(request.interests),
        })

        trip_days: list[TripDay] = []
        for day in range(1, request.duration_days + 1):
            current_date = start + timedelta(days=day - 1)
            modes = self._modes_for_day(day, request.duration_days, preferred_modes)

            next_city = state.current_city
            transport: Optional[TransportOption] = None

            # ── Relocation ────────────────────────────────────────────────────
            if day > 1:
                candidates = self.router.find_candidates(
                    state.current_city, state.visited_cities, modes, state.remaining_budget,
                )
                best = self.scorer.score_candidates(candidates, request.interests) if candidates else None
                if best is not None:
                    next_city = best.city
                    transport = best.transport
                    state.remaining_budget -= transport.cost
                    state.total_travel_time += transport.duration_hrs
                    state.visited_cities.add(next_city)
                    state.flexible_transport_activated = False

            if next_city == state.current_city:
                state.consecutive_days_in_same_city += 1
            else:
                state.consecutive_days_in_same_city = 0

            # ── Activities ────────────────────────────────────────────────────
            scheduled = self.selector.select_activities(
                next_city, request.interests, state.visited_pois, day,
            )
            for s in scheduled:
                state.visited_pois.add((next_city, s.poi.id))
            activity_cost = sum(s.cost for s in scheduled)
            state.remaining_budget -= activity_cost

            transport_cost = transport.cost if transport else 0
            trip_day = TripDay(
                day=day,
                city=next_city,
                date=current_date.isoformat(),
                transport=TransportLeg(
                    from_city=state.current_city, to_city=next_city, option=transport,
                ) if transport else None,
                activities=[
                    DayActivity(
                        id=s.poi.id,
                        name=s.poi.name,
                        category=s.poi.category,
                        time=slot_for(i),
                        duration=s.poi.duration or config.DEFAULT_ACTIVITY_DURATION_MIN,
                    )
                    for i, s in enumerate(scheduled)
                ],
                daily_cost=activity_cost + transport_cost,
            )
            trip_days.append(trip_day)

            self._event("day_planned", {
                "day": day,
                "city": next_city,
                "relocated": transport is not None,
                "modes": modes,
                "activities": [s.poi.id for s in scheduled],
                "daily_cost": trip_day.daily_cost,
                "remaining_budget": state.remaining_budget,
            })
            state.current_city = next_city

        response = TripResponse(
            trip_days=trip_days,
            total_cost=request.max_budget - state.remaining_budget,
            total_travel_time=state.total_travel_time,
            remaining_budget=state.remaining_budget,
        )
        if response.remaining_budget < 0:
            logger.info("Trip from %s ends %.2f over budget", origin, -response.remaining_budget)
        self._event("trip_complete", {
            "cities": sorted(state.visited_cities),
            "total_cost": response.total_cost,
            "remaining_budget": response.remaining_budget,
        })
        if self.event_logger is not None:
            self.event_logger.close(self.run_id)
        return response

    # ── Internals ─────────────────────────────────────────────────────────────

    def _modes_for_day(self, day: int, duration_days: int, preferred: list[str]) -> list[str]:
        state = self.state
        if (
            duration_days >= config.MIN_DAYS_FOR_FLEXIBILITY
            and state.consecutive_days_in_same_city >= config.STICKY_CITY_THRESHOLD
            and not state.flexible_transport_activated
        ):
            state.flexible_transport_activated = True
            logger.info(
                "Day %d: stuck in %s for %d days, widening transport modes",
                day, state.current_city, state.consecutive_days_in_same_city,
            )
            return list(config.ALL_TRANSPORT_MODES)
        return list(preferred)

    def _event(self, event_type: str, payload: dict) -> None:
        if self.event_logger is not None:
            self.event_logger.log(self.run_id, event_type, payload)
