"""PostgreSQL Unit of Work implementation."""

from collections.abc import Iterator
from contextlib import contextmanager

from psycopg_pool import ConnectionPool

from rolectl.infrastructure.permission.postgres_registry import PostgresPermissionRegistry
from rolectl.infrastructure.persistence.postgres.connection import translate_errors
from rolectl.infrastructure.persistence.postgres.role_repository import (
    PostgresRoleRepository,
)


class PostgresUnitOfWork:
    """PostgreSQL Unit of Work - one connection, one transaction.

    With ``validate_permissions`` the unit also exposes a permission registry
    reading ``permission_definition`` over the same connection, so validation
    never waits for a second pooled connection.
    """

    def __init__(self, pool: ConnectionPool, validate_permissions: bool = False) -> None:
        self._pool = pool
        self._validate_permissions = validate_permissions
        self._conn: object | None = None
        self._conn_cm: object | None = None
        self._permissions: PostgresPermissionRegistry | None = None

    def __enter__(self) -> "PostgresUnitOfWork":
        self._conn_cm = self._pool.connection()
        with translate_errors("connecting"):
            self._conn = self._conn_cm.__enter__()
        self._roles = PostgresRoleRepository(self._conn)
        if self._validate_permissions:
            self._permissions = PostgresPermissionRegistry(self._conn)
        return self

    def __exit__(self, exc_type: object, exc_val: object, exc_tb: object) -> None:
        # Rollback on error is the factory's job; the pool discards broken connections.
        if self._conn_cm:
            self._conn_cm.__exit__(exc_type, exc_val, exc_tb)

    @property
    def roles(self) -> PostgresRoleRepository:
        return self._roles

    @property
    def permissions(self) -> PostgresPermissionRegistry | None:
        return self._permissions

    def commit(self) -> None:
        if self._conn:
            with translate_errors("committing"):
                self._conn.commit()

    def rollback(self) -> None:
        if not self._conn or self._conn.broken:
            return
        with translate_errors("rolling back"):
            self._conn.rollback()


def create_uow_factory(pool: ConnectionPool, validate_permissions: bool = False) -> object:
    """Create UnitOfWork factory (context manager)."""

    @contextmanager
    def factory() -> Iterator[PostgresUnitOfWork]:
        uow = PostgresUnitOfWork(pool, validate_permissions=validate_permissions)
        with uow:
            try:
                yield uow
                uow.commit()
            except BaseException:
                uow.rollback()
                raise

    return factory
