"""JSON file role repository implementation."""

from rolectl.domain.entities import Role
from rolectl.domain.exceptions import NotFound


def role_from_record(record: dict) -> Role:
    return Role(
        id=record["id"],
        label=record["label"],
        permissions=set(record.get("permissions") or []),
    )


def role_to_record(role: Role) -> dict:
    return {
        "id": role.id,
        "label": role.label,
        "permissions": role.sorted_permissions(),
    }


class JsonFileRoleRepository:
    """Role repository over the decoded document held by the unit of work."""

    def __init__(self, records: dict[str, dict]) -> None:
        self._records = records
        self.changed = False

    def get(self, role_id: str) -> Role | None:
        record = self._records.get(role_id)
        if not record:
            return None
        return role_from_record(record)

    def get_all(self) -> list[Role]:
        return [role_from_record(self._records[k]) for k in sorted(self._records)]

    def put(self, role: Role) -> None:
        self._records[role.id] = role_to_record(role)
        self.changed = True

    def delete(self, role_id: str) -> None:
        if self._records.pop(role_id, None) is None:
            raise NotFound("Role", role_id)
        self.changed = True
