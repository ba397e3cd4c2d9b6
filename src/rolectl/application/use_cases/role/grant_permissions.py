"""Grant permissions use case."""

import logging
from collections.abc import Iterable

from rolectl.application.ports import (
    CacheInvalidator,
    NotificationSink,
    PermissionRegistry,
)
from rolectl.application.use_cases.role.permission_validation import prepare_permissions
from rolectl.domain.entities import Role
from rolectl.domain.exceptions import NotFound

logger = logging.getLogger(__name__)


class GrantPermissionsUseCase:
    """Add permissions to a role (set union)."""

    def __init__(
        self,
        unit_of_work_factory: type,
        notification_sink: NotificationSink,
        permission_registry: PermissionRegistry | None = None,
        cache_invalidator: CacheInvalidator | None = None,
    ) -> None:
        self._uow_factory = unit_of_work_factory
        self._notifications = notification_sink
        self._registry = permission_registry
        self._cache = cache_invalidator

    def execute(self, role_id: str, permissions: Iterable[str]) -> Role:
        """Grant permissions. Already held permissions are left as they are."""
        role_id = Role.normalize_id(role_id)
        with self._uow_factory() as uow:
            role = uow.roles.get(role_id)
            if role is None:
                raise NotFound("Role", role_id)
            names = prepare_permissions(
                permissions,
                self._registry if self._registry is not None else uow.permissions,
            )
            role.grant(names)
            uow.roles.put(role)

        logger.info("Granted %s to role %s", names, role_id)
        self._notifications.success(f'Added "{",".join(names)}" to "{role_id}"')
        if self._cache is not None:
            self._cache.invalidate(role_id)
        return role
