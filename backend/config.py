"""
config.py
---------
Central configuration for the trip planner backend.
All secrets loaded from environment variables, never hard-coded.
"""

import os
from pathlib import Path

from dotenv import load_dotenv

# Load .env from the backend directory (if it exists) so env vars in that file
# are picked up by os.getenv() below.  Won't override vars already set in the shell.
_env_path = Path(__file__).parent / ".env"
if _env_path.exists():
    load_dotenv(_env_path, override=False)

# ── Planner tunables ──────────────────────────────────────────────────────────
# Greedy day-loop constants.  These are product knobs, not derived values.
TRANSPORT_BUDGET_CAP: float = float(os.getenv("TRANSPORT_BUDGET_CAP", "0.3"))   # max share of remaining budget per leg
DURATION_WEIGHT: float      = float(os.getenv("DURATION_WEIGHT",      "10"))    # route score = cost + hrs × weight
EXPLORATION_BONUS: float    = float(os.getenv("EXPLORATION_BONUS",    "50"))    # added to every candidate city score
ACTIVITIES_PER_DAY: int     = int(os.getenv("ACTIVITIES_PER_DAY",     "3"))
MIN_DAYS_FOR_FLEXIBILITY: int = int(os.getenv("MIN_DAYS_FOR_FLEXIBILITY", "4"))
STICKY_CITY_THRESHOLD: int    = int(os.getenv("STICKY_CITY_THRESHOLD",    "2"))
DEFAULT_ACTIVITY_DURATION_MIN: int = int(os.getenv("DEFAULT_ACTIVITY_DURATION_MIN", "120"))

# Every mode the catalog knows about; used when the sticky-city rule widens
# the user's transport preference for a single day.
ALL_TRANSPORT_MODES: list[str] = ["flight", "train", "bus", "car"]

# ── Request limits ────────────────────────────────────────────────────────────
MIN_BUDGET: float      = float(os.getenv("MIN_BUDGET", "100"))
MIN_DURATION_DAYS: int = 1
MAX_DURATION_DAYS: int = int(os.getenv("MAX_DURATION_DAYS", "30"))
CURRENCY_UNIT: str     = os.getenv("CURRENCY_UNIT", "EUR")

# ── Static catalog ────────────────────────────────────────────────────────────
# Directory holding transportOptions.json, cities.json, pois_<city>.json
CATALOG_DATA_DIR: str         = os.getenv("CATALOG_DATA_DIR", str(Path(__file__).parent / "data"))
CATALOG_READ_RETRIES: int     = int(os.getenv("CATALOG_READ_RETRIES", "3"))
CATALOG_RETRY_DELAY_S: float  = float(os.getenv("CATALOG_RETRY_DELAY_S", "0.2"))

# ── LLM (local tips) ──────────────────────────────────────────────────────────
LLM_PROVIDER: str   = os.getenv("LLM_PROVIDER", "google")
LLM_MODEL_NAME: str = os.getenv("LLM_MODEL_NAME", "gemini-2.0-flash")
LLM_API_KEY: str    = os.getenv("GEMINI_API_KEY", "")

# Stub mode returns canned tips; no external API calls are made.
# Set USE_STUB_LLM=false and supply GEMINI_API_KEY to enable real responses.
USE_STUB_LLM: bool = os.getenv("USE_STUB_LLM", "true").lower() in ("1", "true", "yes")

RECOMMENDATION_MAX_HIGHLIGHTS: int = int(os.getenv("RECOMMENDATION_MAX_HIGHLIGHTS", "5"))
RECOMMENDATION_CACHE_ENABLED: bool = os.getenv("RECOMMENDATION_CACHE_ENABLED", "false").lower() in ("1", "true", "yes")
RECOMMENDATION_CACHE_TTL: int      = int(os.getenv("RECOMMENDATION_CACHE_TTL", "86400"))   # 24 hours

# ── Trip storage ──────────────────────────────────────────────────────────────
# "in_memory" | "postgres"
TRIP_STORE_BACKEND: str = os.getenv("TRIP_STORE_BACKEND", "in_memory")

# ── PostgreSQL ────────────────────────────────────────────────────────────────
# Schema defined in db/schema.sql
# Apply with: python scripts/run_migrations.py
POSTGRES_HOST: str     = os.getenv("POSTGRES_HOST",     "localhost")
POSTGRES_PORT: int     = int(os.getenv("POSTGRES_PORT", "5432"))
POSTGRES_DB: str       = os.getenv("POSTGRES_DB",       "tripplanner")
POSTGRES_USER: str     = os.getenv("POSTGRES_USER",     "tripplanner_user")
POSTGRES_PASSWORD: str = os.getenv("POSTGRES_PASSWORD", "tripplanner_pass")
POSTGRES_MIN_CONN: int = int(os.getenv("POSTGRES_MIN_CONN", "1"))
POSTGRES_MAX_CONN: int = int(os.getenv("POSTGRES_MAX_CONN", "10"))

# ── Redis ─────────────────────────────────────────────────────────────────────
REDIS_HOST: str     = os.getenv("REDIS_HOST",     "localhost")
REDIS_PORT: int     = int(os.getenv("REDIS_PORT", "6379"))
REDIS_DB: int       = int(os.getenv("REDIS_DB",   "0"))
REDIS_PASSWORD: str = os.getenv("REDIS_PASSWORD", "")

# ── Observability ─────────────────────────────────────────────────────────────
LOG_LEVEL: str              = os.getenv("LOG_LEVEL", "INFO")
TRIP_EVENT_LOG_ENABLED: bool = os.getenv("TRIP_EVENT_LOG_ENABLED", "false").lower() in ("1", "true", "yes")
LOGS_DIR: str               = os.getenv("LOGS_DIR", str(Path(__file__).parent / "logs"))
