"""In-memory Unit of Work implementation."""

from collections.abc import Iterator
from contextlib import contextmanager
from copy import deepcopy

from rolectl.domain.entities import Role
from rolectl.infrastructure.persistence.memory.role_repository import (
    InMemoryRoleRepository,
)


class InMemoryUnitOfWork:
    """Works on a snapshot of the shared dict; commit publishes it."""

    def __init__(self, roles: dict[str, Role]) -> None:
        self._shared = roles
        self._working: dict[str, Role] = {}
        self._roles: InMemoryRoleRepository | None = None

    def __enter__(self) -> "InMemoryUnitOfWork":
        self._working = deepcopy(self._shared)
        self._roles = InMemoryRoleRepository(self._working)
        return self

    def __exit__(self, exc_type: object, exc_val: object, exc_tb: object) -> None:
        if exc_type:
            self.rollback()

    @property
    def roles(self) -> InMemoryRoleRepository:
        return self._roles

    @property
    def permissions(self) -> None:
        return None

    def commit(self) -> None:
        self._shared.clear()
        self._shared.update(self._working)

    def rollback(self) -> None:
        self._working.clear()
        self._working.update(deepcopy(self._shared))


def create_uow_factory(roles: dict[str, Role] | None = None) -> object:
    """Create UnitOfWork factory (context manager) over one shared dict."""
    shared: dict[str, Role] = roles if roles is not None else {}

    @contextmanager
    def factory() -> Iterator[InMemoryUnitOfWork]:
        uow = InMemoryUnitOfWork(shared)
        with uow:
            try:
                yield uow
                uow.commit()
            except BaseException:
                uow.rollback()
                raise

    return factory
