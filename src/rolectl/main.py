"""Application entry point and composition root."""

import logging
from collections.abc import Iterator
from contextlib import contextmanager

from rolectl.application.ports import NotificationSink, PermissionRegistry
from rolectl.application.role_manager import RoleManager
from rolectl.config import Settings
from rolectl.domain.exceptions import ValidationError
from rolectl.infrastructure.cache.command_invalidator import CommandCacheInvalidator
from rolectl.infrastructure.permission.yaml_registry import YamlPermissionRegistry
from rolectl.infrastructure.persistence.json_file.unit_of_work import (
    create_uow_factory as create_json_uow_factory,
)
from rolectl.infrastructure.persistence.memory.unit_of_work import (
    create_uow_factory as create_memory_uow_factory,
)
from rolectl.infrastructure.persistence.postgres.connection import create_pool
from rolectl.infrastructure.persistence.postgres.unit_of_work import (
    create_uow_factory as create_postgres_uow_factory,
)

logger = logging.getLogger(__name__)


def main() -> None:
    """CLI entry point."""
    from rolectl.interfaces.cli.app import cli

    cli(prog_name="rolectl")


@contextmanager
def role_manager_context(
    settings: Settings,
    notification_sink: NotificationSink | None = None,
) -> Iterator[RoleManager]:
    """Composition root - build RoleManager with all dependencies.

    Resources opened here (the PostgreSQL pool) are closed on exit.
    """
    if notification_sink is None:
        from rolectl.interfaces.cli.notifications import EchoNotificationSink

        notification_sink = EchoNotificationSink()

    pool = None
    registry: PermissionRegistry | None = None
    if settings.store_backend == "postgres":
        pool = create_pool(
            settings.database_url,
            min_size=settings.pool_min_size,
            max_size=settings.pool_max_size,
        )
        pool.open()
        uow_factory = create_postgres_uow_factory(
            pool,
            validate_permissions=settings.validate_permissions_in_database,
        )
    elif settings.store_backend == "file":
        uow_factory = create_json_uow_factory(settings.store_path)
    else:
        uow_factory = create_memory_uow_factory()
    logger.debug("Using %s role store", settings.store_backend)

    try:
        if settings.permissions_file is not None:
            if pool is not None and settings.validate_permissions_in_database:
                raise ValidationError(
                    "Use either a permissions file or database validation, not both"
                )
            registry = YamlPermissionRegistry.from_file(settings.permissions_file)

        cache_invalidator = (
            CommandCacheInvalidator(
                settings.cache_rebuild_command,
                timeout=settings.cache_rebuild_timeout,
            )
            if settings.cache_rebuild_command
            else None
        )

        yield RoleManager(
            unit_of_work_factory=uow_factory,
            notification_sink=notification_sink,
            permission_registry=registry,
            cache_invalidator=cache_invalidator,
        )
    finally:
        if pool is not None:
            pool.close()
