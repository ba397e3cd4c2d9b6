"""In-memory role repository implementation."""

from copy import deepcopy

from rolectl.domain.entities import Role
from rolectl.domain.exceptions import NotFound


class InMemoryRoleRepository:
    """Role repository over a dict shared with the owning unit of work.

    Roles are copied on the way in and out so callers never alias stored state.
    """

    def __init__(self, roles: dict[str, Role]) -> None:
        self._roles = roles

    def get(self, role_id: str) -> Role | None:
        role = self._roles.get(role_id)
        return deepcopy(role) if role else None

    def get_all(self) -> list[Role]:
        return [deepcopy(self._roles[k]) for k in sorted(self._roles)]

    def put(self, role: Role) -> None:
        self._roles[role.id] = deepcopy(role)

    def delete(self, role_id: str) -> None:
        if self._roles.pop(role_id, None) is None:
            raise NotFound("Role", role_id)
