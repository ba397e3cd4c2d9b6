"""RoleManager - single entry point for role operations."""

from collections.abc import Iterable

from rolectl.application.ports import (
    CacheInvalidator,
    NotificationSink,
    PermissionRegistry,
)
from rolectl.application.use_cases.role.create_role import CreateRoleUseCase
from rolectl.application.use_cases.role.delete_role import DeleteRoleUseCase
from rolectl.application.use_cases.role.grant_permissions import GrantPermissionsUseCase
from rolectl.application.use_cases.role.list_roles import ListRolesUseCase
from rolectl.application.use_cases.role.revoke_permissions import (
    RevokePermissionsUseCase,
)
from rolectl.domain.entities import Role


class RoleManager:
    """CRUD and permission grants over roles.

    Persistence goes through the unit of work factory; permission validation
    and cache invalidation are optional collaborators.
    """

    def __init__(
        self,
        unit_of_work_factory: type,
        notification_sink: NotificationSink,
        permission_registry: PermissionRegistry | None = None,
        cache_invalidator: CacheInvalidator | None = None,
    ) -> None:
        self._create = CreateRoleUseCase(unit_of_work_factory, notification_sink)
        self._delete = DeleteRoleUseCase(unit_of_work_factory, notification_sink)
        self._grant = GrantPermissionsUseCase(
            unit_of_work_factory,
            notification_sink,
            permission_registry=permission_registry,
            cache_invalidator=cache_invalidator,
        )
        self._revoke = RevokePermissionsUseCase(
            unit_of_work_factory,
            notification_sink,
            permission_registry=permission_registry,
            cache_invalidator=cache_invalidator,
        )
        self._list = ListRolesUseCase(unit_of_work_factory)

    def create(self, role_id: str, label: str | None = None) -> Role:
        return self._create.execute(role_id, label)

    def delete(self, role_id: str) -> None:
        self._delete.execute(role_id)

    def grant_permissions(self, role_id: str, permissions: Iterable[str]) -> Role:
        return self._grant.execute(role_id, permissions)

    def revoke_permissions(self, role_id: str, permissions: Iterable[str]) -> Role:
        return self._revoke.execute(role_id, permissions)

    def list_roles(self) -> list[Role]:
        return self._list.execute()
