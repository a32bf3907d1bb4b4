#!/usr/bin/env python
"""
scripts/run_migrations.py
--------------------------
Applies db/schema.sql (trips, favorites) to the configured Postgres database.

Usage:
    python scripts/run_migrations.py [--dry-run]

Exit codes:
    0: schema applied (or dry-run completed)
    1: connection failed or SQL error

Connection settings come from config.py (POSTGRES_HOST, POSTGRES_PORT,
POSTGRES_DB, POSTGRES_USER, POSTGRES_PASSWORD), the same ones the
PostgresTripStore pool uses.

All statements run in one transaction, and every statement is
IF NOT EXISTS, so re-running is harmless.
"""

from __future__ import annotations

import argparse
import pathlib
import re
import sys

# Add the backend directory to sys.path so that config is importable
_BACKEND_DIR = pathlib.Path(__file__).resolve().parent.parent
sys.path.insert(0, str(_BACKEND_DIR))

import psycopg2

import config
from db.connection import connect_kwargs


_SQL_FILE = _BACKEND_DIR / "db" / "schema.sql"


def _read_sql() -> str:
    if not _SQL_FILE.exists():
        raise FileNotFoundError(f"SQL file not found: {_SQL_FILE}")
    return _SQL_FILE.read_text(encoding="utf-8")


def _strip_comments(sql: str) -> str:
    """Drop /* ... */ blocks and -- line comments."""
    sql = re.sub(r"/\*.*?\*/", "", sql, flags=re.DOTALL)
    return re.sub(r"--[^\n]*", "", sql)


def _split_statements(sql: str) -> list[str]:
    return [s.strip() for s in sql.split(";") if s.strip()]


def run(dry_run: bool = False) -> None:
    statements = _split_statements(_strip_comments(_read_sql()))

    print(f"[migrations] SQL file   : {_SQL_FILE}")
    print(f"[migrations] Statements : {len(statements)}")
    print(f"[migrations] Target DB  : {config.POSTGRES_DB} @ "
          f"{config.POSTGRES_HOST}:{config.POSTGRES_PORT}")

    if dry_run:
        print("[migrations] DRY-RUN, nothing applied.")
        for i, stmt in enumerate(statements, 1):
            preview = stmt[:80].replace("\n", " ")
            print(f"  [{i:03d}] {preview}...")
        return

    conn = psycopg2.connect(**connect_kwargs())
    conn.autocommit = False
    try:
        with conn.cursor() as cur:
            for i, stmt in enumerate(statements, 1):
                try:
                    cur.execute(stmt)
                except psycopg2.Error as exc:
                    print(f"  [✗] Statement {i} failed: {exc.pgerror or exc}")
                    raise
                print(f"  [✓] {stmt[:60].replace(chr(10), ' ')}")
        conn.commit()
        print(f"[migrations] Done, {len(statements)} statements applied.")
    except Exception:
        conn.rollback()
        print("[migrations] ROLLED BACK due to error.")
        raise
    finally:
        conn.close()


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Apply the trips/favorites schema.")
    parser.add_argument(
        "--dry-run", action="store_true",
        help="Print statements without executing them.",
    )
    args = parser.parse_args()
    try:
        run(dry_run=args.dry_run)
    except Exception as exc:
        print(f"[migrations] ERROR: {exc}", file=sys.stderr)
        sys.exit(1)
