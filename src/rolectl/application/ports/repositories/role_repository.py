"""Role repository port."""

from typing import Protocol

from rolectl.domain.entities import Role


class RoleRepository(Protocol):
    """Port for role persistence (the role store)."""

    def get(self, role_id: str) -> Role | None: ...

    def get_all(self) -> list[Role]:
        """All roles ordered by id ascending."""
        ...

    def put(self, role: Role) -> None:
        """Insert or replace role."""
        ...

    def delete(self, role_id: str) -> None:
        """Delete role; raise NotFound if it does not exist."""
        ...
