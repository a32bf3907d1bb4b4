"""
db/connection.py
-----------------
psycopg2 ThreadedConnectionPool singleton, shared across the process.
Only used when TRIP_STORE_BACKEND=postgres.

Usage:
    from db.connection import get_conn

    with get_conn() as conn:
        trip_repo.list_trips(conn)

The context manager borrows a connection from the pool, commits on clean
exit, rolls back on exception, and returns the connection to the pool.

Environment variables (set in config.py):
    POSTGRES_HOST / PORT / DB / USER / PASSWORD
    POSTGRES_MIN_CONN   default: 1
    POSTGRES_MAX_CONN   default: 10
"""

from __future__ import annotations

from contextlib import contextmanager
from typing import Iterator

import psycopg2
import psycopg2.extensions
import psycopg2.pool

import config

# Module-level singleton; initialised lazily on first call to get_conn()
_pool: psycopg2.pool.ThreadedConnectionPool | None = None


def connect_kwargs() -> dict:
    """psycopg2 connection parameters from config (shared with run_migrations)."""
    return {
        "host":     config.POSTGRES_HOST,
        "port":     config.POSTGRES_PORT,
        "dbname":   config.POSTGRES_DB,
        "user":     config.POSTGRES_USER,
        "password": config.POSTGRES_PASSWORD,
    }


def get_pool() -> psycopg2.pool.ThreadedConnectionPool:
    """Return the singleton connection pool, creating it on first call."""
    global _pool
    if _pool is None or _pool.closed:
        _pool = psycopg2.pool.ThreadedConnectionPool(
            minconn=config.POSTGRES_MIN_CONN,
            maxconn=config.POSTGRES_MAX_CONN,
            **connect_kwargs(),
        )
    return _pool


@contextmanager
def get_conn() -> Iterator[psycopg2.extensions.connection]:
    """
    Borrow a connection: commit on success, roll back and re-raise on error,
    always hand it back to the pool.
    """
    pool = get_pool()
    conn = pool.getconn()
    try:
        yield conn
        conn.commit()
    except Exception:
        conn.rollback()
        raise
    finally:
        pool.putconn(conn)


def close_pool() -> None:
    """Close all connections in the pool (call at application shutdown)."""
    global _pool
    if _pool and not _pool.closed:
        _pool.closeall()
    _pool = None
