"""
modules/tool_usage/catalog_tool.py
------------------------------------
Read-only access to the static travel catalog:

  transportOptions.json   {"Paris→Rome": [TransportOption, ...], ...}
  cities.json             [CityMeta, ...]
  pois_<city>.json        [Poi, ...]           (one file per lowercase city)
  trendingThemes.json     [{...}, ...]         (display only)

Files are parsed once and memoised; the catalog is shared by every planner
run and is never mutated after load.

Error model:
  - missing POI file           → [] (catalog miss, not an error)
  - missing routes/cities file → {} / [] with a warning
  - transient OSError          → retried CATALOG_READ_RETRIES times
  - malformed JSON             → CatalogError
"""

from __future__ import annotations
import json
import logging
import threading
import time
from pathlib import Path
from typing import Any

from schemas.trip import (
    CityMeta, Poi, TransportOption,
    city_meta_from_dict, poi_from_dict, transport_option_from_dict,
)
import config

logger = logging.getLogger(__name__)

ROUTE_SEPARATOR = "→"

_ROUTES_FILE   = "transportOptions.json"
_CITIES_FILE   = "cities.json"
_THEMES_FILE   = "trendingThemes.json"
_POI_FILE_TMPL = "pois_{city}.json"


class CatalogError(RuntimeError):
    """Raised when a catalog file exists but cannot be parsed."""


def split_route_key(route: str) -> tuple[str, str] | None:
    """'Paris→Rome' → ('paris', 'rome'); None if the key is malformed."""
    parts = route.split(ROUTE_SEPARATOR)
    if len(parts) != 2 or not parts[0].strip() or not parts[1].strip():
        return None
    return parts[0].strip().lower(), parts[1].strip().lower()


# ---------------------------------------------------------------------------
# In-memory catalog
# ---------------------------------------------------------------------------

class InMemoryCatalog:
    """
    Catalog over plain Python data.  POI lists are keyed by lowercase city
    name; lookups are case-insensitive.
    """

    def __init__(
        self,
        transport_routes: dict[str, list[TransportOption]] | None = None,
        pois: dict[str, list[Poi]] | None = None,
        cities: list[CityMeta] | None = None,
        trending_themes: list[dict] | None = None,
    ) -> None:
        self._routes = dict(transport_routes or {})
        self._pois = {k.lower(): list(v) for k, v in (pois or {}).items()}
        self._cities = list(cities or [])
        self._themes = list(trending_themes or [])

    def get_transport_routes(self) -> dict[str, list[TransportOption]]:
        return self._routes

    def get_pois(self, city: str) -> list[Poi]:
        return self._pois.get(city.strip().lower(), [])

    def get_cities(self) -> list[CityMeta]:
        return self._cities

    def get_trending_themes(self) -> list[dict]:
        return self._themes

    def known_poi_cities(self) -> list[str]:
        return list(self._pois)


# ---------------------------------------------------------------------------
# CatalogTool: JSON files on disk
# ---------------------------------------------------------------------------

class CatalogTool:
    """Loads the catalog from JSON files under `data_dir`."""

    def __init__(
        self,
        data_dir: Path | str | None = None,
        retries: int = config.CATALOG_READ_RETRIES,
        retry_delay_s: float = config.CATALOG_RETRY_DELAY_S,
    ) -> None:
        self.data_dir = Path(data_dir or config.CATALOG_DATA_DIR)
        self.retries = max(1, retries)
        self.retry_delay_s = retry_delay_s
        self._lock = threading.Lock()
        self._routes: dict[str, list[TransportOption]] | None = None
        self._cities: list[CityMeta] | None = None
        self._themes: list[dict] | None = None
        self._pois: dict[str, list[Poi]] = {}

    # ── public API ────────────────────────────────────────────────────────

    def get_transport_routes(self) -> dict[str, list[TransportOption]]:
        with self._lock:
            if self._routes is None:
                raw = self._load_json(_ROUTES_FILE, default={})
                self._routes = {
                    route: [transport_option_from_dict(o) for o in options]
                    for route, options in raw.items()
                }
                logger.info("Loaded %d transport routes from %s", len(self._routes), self.data_dir)
            return self._routes

    def get_pois(self, city: str) -> list[Poi]:
        key = city.strip().lower()
        with self._lock:
            if key not in self._pois:
                raw = self._load_json(_POI_FILE_TMPL.format(city=key), default=[])
                self._pois[key] = [poi_from_dict(p) for p in raw]
            return self._pois[key]

    def get_cities(self) -> list[CityMeta]:
        with self._lock:
            if self._cities is None:
                raw = self._load_json(_CITIES_FILE, default=[])
                self._cities = [city_meta_from_dict(c) for c in raw]
            return self._cities

    def get_trending_themes(self) -> list[dict]:
        with self._lock:
            if self._themes is None:
                self._themes = list(self._load_json(_THEMES_FILE, default=[]))
            return self._themes

    def known_poi_cities(self) -> list[str]:
        """Lowercase names of every city that ships a POI file."""
        prefix, suffix = "pois_", ".json"
        return sorted(
            p.name[len(prefix):-len(suffix)]
            for p in self.data_dir.glob("pois_*.json")
        )

    # ── internals ─────────────────────────────────────────────────────────

    def _load_json(self, filename: str, default: Any) -> Any:
        path = self.data_dir / filename
        if not path.exists():
            logger.debug("Catalog file %s not found, treating as empty", path)
            return default

        text = self._read_with_retry(path)
        try:
            return json.loads(text)
        except json.JSONDecodeError as exc:
            raise CatalogError(f"Malformed catalog file {path}: {exc}") from exc

    def _read_with_retry(self, path: Path) -> str:
        last_exc: OSError | None = None
        for attempt in range(1, self.retries + 1):
            try:
                return path.read_text(encoding="utf-8")
            except OSError as exc:
                last_exc = exc
                logger.warning(
                    "Catalog read failed (%s), attempt %d/%d: %s",
                    path.name, attempt, self.retries, exc,
                )
                if attempt < self.retries:
                    time.sleep(self.retry_delay_s * attempt)
        raise CatalogError(f"Could not read catalog file {path}") from last_exc


# ── Shared default instance ───────────────────────────────────────────────────

_default_catalog: CatalogTool | None = None


def get_catalog() -> CatalogTool:
    """Return the process-wide read-only catalog, creating it on first call."""
    global _default_catalog
    if _default_catalog is None:
        _default_catalog = CatalogTool()
    return _default_catalog
