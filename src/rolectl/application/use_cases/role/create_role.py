"""Create role use case."""

import logging

from rolectl.application.ports import NotificationSink
from rolectl.domain.entities import Role
from rolectl.domain.exceptions import AlreadyExists

logger = logging.getLogger(__name__)


class CreateRoleUseCase:
    """Create a new role with no permissions."""

    def __init__(
        self,
        unit_of_work_factory: type,
        notification_sink: NotificationSink,
    ) -> None:
        self._uow_factory = unit_of_work_factory
        self._notifications = notification_sink

    def execute(self, role_id: str, label: str | None = None) -> Role:
        """Create role. Label defaults to the machine name with a capital first letter."""
        role_id = Role.normalize_id(role_id)
        role = Role(
            id=role_id,
            label=label or Role.default_label(role_id),
        )
        with self._uow_factory() as uow:
            if uow.roles.get(role_id) is not None:
                raise AlreadyExists("Role", role_id)
            uow.roles.put(role)

        logger.info("Created role %s", role_id)
        self._notifications.success(f'Created "{role_id}"')
        return role
