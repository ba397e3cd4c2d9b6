"""Application ports - interfaces for external adapters."""

from rolectl.application.ports.cache_invalidator import CacheInvalidator
from rolectl.application.ports.notification_sink import NotificationSink
from rolectl.application.ports.permission_registry import PermissionRegistry
from rolectl.application.ports.unit_of_work import UnitOfWork, UnitOfWorkFactory

__all__ = [
    "CacheInvalidator",
    "NotificationSink",
    "PermissionRegistry",
    "UnitOfWork",
    "UnitOfWorkFactory",
]
