"""
Trip-run event log: append-only JSONL, one object per line.

Usage:
    from modules.observability.logger import StructuredLogger

    events = StructuredLogger()
    events.log(run_id, "day_planned", {"day": 2, "city": "rome"})

Each planner run writes to  <LOGS_DIR>/<run_id>.jsonl.  Plain diagnostic
logging goes through the stdlib `logging` module; call configure_logging()
once from an entry point.
"""

from __future__ import annotations

import json
import logging
import os
import threading
from datetime import datetime, timezone
from pathlib import Path
from typing import IO

import config

_LOG_FORMAT = "%(asctime)s %(levelname)-7s %(name)s: %(message)s"


def configure_logging(level: str | None = None) -> None:
    """Set up root logging for the server / CLI entry points."""
    logging.basicConfig(
        level=(level or config.LOG_LEVEL).upper(),
        format=_LOG_FORMAT,
    )


class StructuredLogger:
    """Thread-safe, append-only JSONL logger keyed by planner run id."""

    def __init__(self, logs_dir: Path | str | None = None) -> None:
        self._logs_dir = Path(logs_dir or config.LOGS_DIR)
        self._lock = threading.Lock()
        self._handles: dict[str, IO[str]] = {}

    # ── public API ────────────────────────────────────────────────────────

    def log(self, run_id: str, event_type: str, payload: dict) -> None:
        """Append one structured JSON record to ``<run_id>.jsonl``."""
        record = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "run_id": run_id,
            "event_type": event_type,
            "payload": payload,
        }
        line = json.dumps(record, default=str, ensure_ascii=False) + "\n"

        with self._lock:
            fh = self._handles.get(run_id)
            if fh is None:
                fh = self._open(run_id)
            fh.write(line)
            fh.flush()

    def close(self, run_id: str | None = None) -> None:
        """Close one or all open file handles."""
        with self._lock:
            if run_id:
                fh = self._handles.pop(run_id, None)
                if fh:
                    fh.close()
            else:
                for fh in self._handles.values():
                    fh.close()
                self._handles.clear()

    def path_for(self, run_id: str) -> Path:
        return self._logs_dir / f"{run_id}.jsonl"

    # ── internals ─────────────────────────────────────────────────────────

    def _open(self, run_id: str) -> IO[str]:
        os.makedirs(self._logs_dir, exist_ok=True)
        fh = open(self.path_for(run_id), "a", encoding="utf-8")  # noqa: SIM115
        self._handles[run_id] = fh
        return fh
