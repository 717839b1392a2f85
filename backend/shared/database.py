"""
PostgreSQL connection pool.

Wraps a psycopg2 ThreadedConnectionPool. A connection is borrowed for a
single statement and returned right after it commits or fails; no
transaction spans more than one statement.
"""

import logging
import threading
from contextlib import contextmanager
from typing import Any, Callable, Iterator, Optional, Sequence

import psycopg2
from psycopg2.extras import RealDictCursor
from psycopg2.pool import PoolError, ThreadedConnectionPool

from .config import Settings
from .exceptions import DatabaseError

logger = logging.getLogger(__name__)

Params = Optional[Sequence[Any]]


class Database:
    """
    Connection pool for the relational store.

    Connections are opened lazily, so constructing a Database never
    touches the network. In production the connection is encrypted
    without verifying the server certificate (managed hosts use
    self-signed chains); elsewhere TLS is off.

    psycopg2 pools fail as soon as every connection is in use, so
    borrowers first take a slot from a semaphore sized to the pool and
    wait up to acquire_timeout seconds (forever when None) for one.
    """

    def __init__(
        self,
        dsn: str,
        *,
        production: bool = False,
        min_connections: int = 0,
        max_connections: int = 20,
        acquire_timeout: Optional[float] = None,
    ) -> None:
        self._pool = ThreadedConnectionPool(
            min_connections,
            max_connections,
            dsn,
            sslmode="require" if production else "disable",
        )
        self._slots = threading.BoundedSemaphore(max_connections)
        self._acquire_timeout = acquire_timeout
        self._closed = False

    @contextmanager
    def connection(self) -> Iterator[Any]:
        """Borrow a pooled connection, committing on success."""
        if not self._slots.acquire(timeout=self._acquire_timeout):
            raise PoolError("timed out waiting for a free connection")
        try:
            conn = self._pool.getconn()
            try:
                yield conn
                conn.commit()
            except Exception:
                if not conn.closed:
                    conn.rollback()
                raise
            finally:
                self._pool.putconn(conn, close=bool(conn.closed))
        finally:
            self._slots.release()

    def _run(self, query: str, params: Params, fetch: Callable[[Any], Any]) -> Any:
        try:
            with self.connection() as conn:
                with conn.cursor(cursor_factory=RealDictCursor) as cur:
                    cur.execute(query, params)
                    return fetch(cur)
        except psycopg2.Error as e:
            statement = " ".join(query.split())[:80]
            logger.warning("Query failed with %s: %s", e.__class__.__name__, statement)
            raise DatabaseError() from e

    def fetch_one(self, query: str, params: Params = None) -> Optional[dict[str, Any]]:
        """Run a query and return its first row, or None."""
        row = self._run(query, params, lambda cur: cur.fetchone())
        return dict(row) if row is not None else None

    def fetch_all(self, query: str, params: Params = None) -> list[dict[str, Any]]:
        """Run a query and return every row."""
        rows = self._run(query, params, lambda cur: cur.fetchall())
        return [dict(row) for row in rows]

    def execute(self, query: str, params: Params = None) -> None:
        """Run a statement that returns no rows."""
        self._run(query, params, lambda cur: None)

    def ping(self) -> dict[str, Any]:
        """Ask the server for its current time."""
        row = self.fetch_one("SELECT NOW() AS now")
        return row or {}

    def close(self) -> None:
        """Close every pooled connection."""
        if not self._closed:
            self._pool.closeall()
            self._closed = True


def create_database(settings: Settings) -> Database:
    """
    Build the connection pool from settings.

    Raises:
        RuntimeError: If DATABASE_URL is not configured
    """
    if not settings.database_url:
        raise RuntimeError(
            "Database configuration missing. "
            "Set the DATABASE_URL environment variable."
        )
    return Database(
        settings.database_url,
        production=settings.is_production,
        min_connections=settings.database_pool_min,
        max_connections=settings.database_pool_max,
        acquire_timeout=settings.database_pool_timeout,
    )
