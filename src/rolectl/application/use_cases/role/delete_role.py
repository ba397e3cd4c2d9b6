"""Delete role use case."""

import logging

from rolectl.application.ports import NotificationSink
from rolectl.domain.entities import Role
from rolectl.domain.exceptions import NotFound

logger = logging.getLogger(__name__)


class DeleteRoleUseCase:
    """Permanently delete a role."""

    def __init__(
        self,
        unit_of_work_factory: type,
        notification_sink: NotificationSink,
    ) -> None:
        self._uow_factory = unit_of_work_factory
        self._notifications = notification_sink

    def execute(self, role_id: str) -> None:
        role_id = Role.normalize_id(role_id)
        with self._uow_factory() as uow:
            if uow.roles.get(role_id) is None:
                raise NotFound("Role", role_id)
            uow.roles.delete(role_id)

        logger.info("Deleted role %s", role_id)
        self._notifications.success(f'Deleted "{role_id}"')
