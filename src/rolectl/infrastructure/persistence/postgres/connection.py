"""PostgreSQL connection pool."""

from collections.abc import Iterator
from contextlib import contextmanager

import psycopg
from psycopg import Connection, IsolationLevel
from psycopg_pool import ConnectionPool

from rolectl.domain.exceptions import StoreUnavailable


def _configure(conn: Connection) -> None:
    conn.isolation_level = IsolationLevel.SERIALIZABLE


def create_pool(conninfo: str, min_size: int = 1, max_size: int = 4) -> ConnectionPool:
    """Create connection pool.

    Pool is created with open=False. Caller must call pool.open() before use
    and pool.close() when done (the CLI does both around each invocation).
    Every connection runs at SERIALIZABLE isolation.
    """
    return ConnectionPool(
        conninfo=conninfo,
        min_size=min_size,
        max_size=max_size,
        configure=_configure,
        open=False,
    )


@contextmanager
def translate_errors(action: str) -> Iterator[None]:
    """Re-raise driver and pool errors as StoreUnavailable."""
    try:
        yield
    except psycopg.Error as e:
        raise StoreUnavailable(f"PostgreSQL error while {action}: {e}") from e
