"""
modules/validation/request_validator.py
-----------------------------------------
Guards applied before and after the planner runs.

  Trip request (camelCase dict, as received over HTTP):
    ✓ origin non-empty
    ✓ durationDays integer in [1, 30]
    ✓ maxBudget finite number, >= 100
    ✓ transportPreference non-empty, every mode known
    ✓ interests non-empty
    ✓ departureDate present and ISO-8601

  Trip response (advisory, never blocks a result):
    ✓ at least one day
    ✓ totalCost >= 0, remainingBudget >= 0
    ✓ every day has a city, a date and at least one activity

Usage:
    from modules.validation import validate_trip_request

    result = validate_trip_request(body)
    if not result:
        return {"errors": result.errors}
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from datetime import date
from typing import Any

from schemas.trip import TripResponse
import config


# ── Result dataclass ───────────────────────────────────────────────────────────

@dataclass
class ValidationResult:
    """
    Outcome of a single validation run.

    Attributes:
        valid:  True iff there are zero errors.
        errors: Human-readable list of failure reasons.
        record: The input record (for logging purposes).
    """
    valid: bool
    errors: list[str] = field(default_factory=list)
    record: Any = field(default=None, repr=False)

    def __bool__(self) -> bool:
        return self.valid


def _is_number(v: Any) -> bool:
    """Finite int or float; bools, NaN and infinities are rejected."""
    if isinstance(v, bool) or not isinstance(v, (int, float)):
        return False
    return isinstance(v, int) or math.isfinite(v)


# ── Request validation ─────────────────────────────────────────────────────────

def validate_trip_request(record: dict[str, Any]) -> ValidationResult:
    """Validate a trip request body.  A passing request yields an empty error list."""
    errors: list[str] = []

    # ── Origin ─────────────────────────────────────────────────────────────
    origin = record.get("origin")
    if not origin or not str(origin).strip():
        errors.append("Origin city is required")

    # ── Duration ───────────────────────────────────────────────────────────
    duration = record.get("durationDays")
    if duration is None or not _is_number(duration) or int(duration) != duration:
        errors.append(
            f"Duration must be a whole number of days between "
            f"{config.MIN_DURATION_DAYS} and {config.MAX_DURATION_DAYS} (got {duration!r})"
        )
    elif not (config.MIN_DURATION_DAYS <= duration <= config.MAX_DURATION_DAYS):
        errors.append(
            f"Duration must be between {config.MIN_DURATION_DAYS} and "
            f"{config.MAX_DURATION_DAYS} days"
        )

    # ── Budget ─────────────────────────────────────────────────────────────
    budget = record.get("maxBudget")
    if budget is None or not _is_number(budget):
        errors.append(f"Budget must be a number (got {budget!r})")
    elif budget < config.MIN_BUDGET:
        errors.append(f"Budget must be at least {config.MIN_BUDGET:g} {config.CURRENCY_UNIT}")

    # ── Transport ──────────────────────────────────────────────────────────
    modes = record.get("transportPreference") or []
    if not modes:
        errors.append("At least one transport option must be selected")
    else:
        unknown = sorted({str(m) for m in modes if str(m).lower() not in config.ALL_TRANSPORT_MODES})
        if unknown:
            errors.append(
                f"Unknown transport option(s): {', '.join(unknown)} "
                f"(expected any of {', '.join(config.ALL_TRANSPORT_MODES)})"
            )

    # ── Interests ──────────────────────────────────────────────────────────
    interests = record.get("interests") or []
    if not interests or not any(str(i).strip() for i in interests):
        errors.append("At least one interest must be selected")

    # ── Departure date ─────────────────────────────────────────────────────
    dep = record.get("departureDate")
    if not dep:
        errors.append("Departure date is required")
    else:
        try:
            date.fromisoformat(str(dep))
        except ValueError:
            errors.append(f"departureDate={dep!r} is not a valid ISO-8601 date (YYYY-MM-DD)")

    return ValidationResult(valid=len(errors) == 0, errors=errors, record=record)


# ── Response validation ────────────────────────────────────────────────────────

def validate_trip_response(response: TripResponse) -> ValidationResult:
    """
    Sanity-check a generated trip.  Over-budget and thin days are reported
    as warnings for the caller to display; the trip itself stays valid.
    """
    errors: list[str] = []

    if not response.trip_days:
        errors.append("Trip must have at least one day")

    if response.total_cost < 0:
        errors.append("Total cost cannot be negative")

    if response.remaining_budget < 0:
        errors.append("Trip exceeds budget")

    for i, day in enumerate(response.trip_days, start=1):
        if not day.city:
            errors.append(f"Day {i} is missing city information")
        if not day.date:
            errors.append(f"Day {i} is missing date information")
        if not day.activities:
            errors.append(f"Day {i} has no activities planned")

    return ValidationResult(valid=len(errors) == 0, errors=errors, record=response)
