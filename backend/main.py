"""
main.py
--------
Command-line entry point: validate a trip request, generate the itinerary,
and print it.

Run:
  python main.py --origin paris --days 3 --budget 1000 \
      --transport train --interest museums --date 2024-06-01

  --transport and --interest may be repeated.  --seed makes activity
  ordering and costs reproducible; --tips adds local recommendations for
  every city on the trip (stub text unless USE_STUB_LLM=false).

Exit codes:
  0 : itinerary printed
  2 : request failed validation
"""

from __future__ import annotations
import argparse
import json
import random
import sys

from schemas.trip import (
    city_recommendation_to_dict, trip_request_from_dict, trip_response_to_dict,
)
from modules.observability.logger import StructuredLogger, configure_logging
from modules.planning.budget_planner import estimate_trip_cost
from modules.planning.trip_insights import cost_breakdown, total_duration_hours, trip_summary
from modules.planning.trip_planner import TripPlanner
from modules.tool_usage.catalog_tool import get_catalog
from modules.validation import validate_trip_request, validate_trip_response
import config


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Plan a multi-city trip.")
    parser.add_argument("--origin", required=True, help="Starting city, e.g. paris")
    parser.add_argument("--days", type=int, required=True, help="Trip length in days")
    parser.add_argument("--budget", type=float, required=True,
                        help=f"Total budget in {config.CURRENCY_UNIT}")
    parser.add_argument("--transport", action="append", default=[],
                        help="Allowed transport mode (repeatable)")
    parser.add_argument("--interest", action="append", default=[],
                        help="Interest category (repeatable)")
    parser.add_argument("--date", required=True, help="Departure date, YYYY-MM-DD")
    parser.add_argument("--seed", type=int, default=None, help="Random seed")
    parser.add_argument("--tips", action="store_true", help="Include local tips per city")
    return parser.parse_args(argv)


def run_pipeline(args: argparse.Namespace) -> int:
    record = {
        "origin":              args.origin,
        "durationDays":        args.days,
        "maxBudget":           args.budget,
        "transportPreference": args.transport,
        "interests":           args.interest,
        "departureDate":       args.date,
    }

    # ── Validation ────────────────────────────────────────────────────────────
    result = validate_trip_request(record)
    if not result:
        for err in result.errors:
            print(f"  [✗] {err}", file=sys.stderr)
        return 2
    request = trip_request_from_dict(record)

    est = estimate_trip_cost(request)
    print(f"[Estimate] {est.min}-{est.max} {config.CURRENCY_UNIT} (avg {est.average})",
          file=sys.stderr)

    # ── Planning ──────────────────────────────────────────────────────────────
    rng = random.Random(args.seed) if args.seed is not None else None
    event_logger = StructuredLogger() if config.TRIP_EVENT_LOG_ENABLED else None
    planner = TripPlanner(get_catalog(), rng=rng, event_logger=event_logger)
    response = planner.generate(request)

    out = trip_response_to_dict(response)
    warnings = validate_trip_response(response).errors
    if warnings:
        out["warnings"] = warnings

    # ── Local tips ────────────────────────────────────────────────────────────
    if args.tips:
        from llm import get_llm_client
        from modules.recommendation.local_tips import LocalTipsRecommender

        recs = LocalTipsRecommender(get_llm_client()).recommend_for_trip(response, request)
        out["localTips"] = {city: city_recommendation_to_dict(r) for city, r in recs.items()}

    print(json.dumps(out, indent=2, ensure_ascii=False))

    breakdown = cost_breakdown(response)
    print(
        f"[Trip] {trip_summary(response)} | transport {breakdown.transport:.0f}"
        f" + activities {breakdown.activities:.0f} = {breakdown.total:.0f} {config.CURRENCY_UNIT}"
        f" | ~{total_duration_hours(response)}h | remaining {response.remaining_budget:.0f}",
        file=sys.stderr,
    )
    return 0


def main(argv: list[str] | None = None) -> int:
    configure_logging()
    return run_pipeline(_parse_args(argv))


if __name__ == "__main__":
    sys.exit(main())
