"""Unit of Work port - transactional boundary."""

from collections.abc import Iterator
from typing import Protocol

from rolectl.application.ports.permission_registry import PermissionRegistry
from rolectl.application.ports.repositories.role_repository import RoleRepository


class UnitOfWork(Protocol):
    """Unit of Work - manages transaction and repository access."""

    @property
    def roles(self) -> RoleRepository: ...

    @property
    def permissions(self) -> PermissionRegistry | None:
        """Registry read inside this transaction, or None when the store has none."""
        ...

    def commit(self) -> None: ...

    def rollback(self) -> None: ...


class UnitOfWorkFactory(Protocol):
    """Factory for creating UnitOfWork instances (context manager)."""

    def __call__(self) -> Iterator[UnitOfWork]: ...
