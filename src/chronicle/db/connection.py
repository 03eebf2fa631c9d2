"""Database connection utilities for the Supabase Postgres instance."""

from __future__ import annotations

from contextlib import contextmanager
from typing import Iterator, Optional

from psycopg2 import connect
from psycopg2.extensions import connection as PsycopgConnection
from psycopg2.pool import SimpleConnectionPool

from chronicle.config.settings import get_settings

DEFAULT_MIN_CONNECTIONS = 1
DEFAULT_MAX_CONNECTIONS = 5
APPLICATION_NAME = "chronicle"


class DatabasePool:
    """Thin wrapper around psycopg2's SimpleConnectionPool with commit/rollback handling."""

    def __init__(
        self,
        dsn: str,
        *,
        min_connections: int = DEFAULT_MIN_CONNECTIONS,
        max_connections: int = DEFAULT_MAX_CONNECTIONS,
    ) -> None:
        self._pool = SimpleConnectionPool(
            min_connections,
            max_connections,
            dsn,
            application_name=APPLICATION_NAME,
        )

    @contextmanager
    def connection(self) -> Iterator[PsycopgConnection]:
        """Yield a pooled connection, committing on success and rolling back on error."""

        conn = self._pool.getconn()
        try:
            yield conn
            conn.commit()
        except Exception:  # pragma: no cover - re-raised after rollback
            conn.rollback()
            raise
        finally:
            self._pool.putconn(conn)

    def close(self) -> None:
        self._pool.closeall()


_pool: Optional[DatabasePool] = None


def _ensure_pool() -> DatabasePool:
    global _pool
    if _pool is None:
        _pool = DatabasePool(str(get_settings().database_url))
    return _pool


@contextmanager
def get_connection() -> Iterator[PsycopgConnection]:
    """Provide a pooled database connection as a context manager.

    This is the default :class:`chronicle.db.ConnectionFactory` handed to repositories.
    """

    with _ensure_pool().connection() as conn:
        yield conn


def close_pool() -> None:
    """Close the shared pool, if one was opened."""

    global _pool
    if _pool is not None:
        _pool.close()
        _pool = None


def connection_from_dsn(dsn: str) -> PsycopgConnection:
    """Open a standalone, unpooled connection (diagnostics and scripts)."""

    return connect(dsn, application_name=APPLICATION_NAME)


__all__ = ["DatabasePool", "close_pool", "connection_from_dsn", "get_connection"]
