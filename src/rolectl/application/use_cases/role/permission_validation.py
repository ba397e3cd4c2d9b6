"""Shared checks for grant/revoke use cases."""

from collections.abc import Iterable

from rolectl.application.ports import PermissionRegistry
from rolectl.domain.exceptions import InvalidPermission, ValidationError
from rolectl.domain.value_objects import normalize_permissions


def prepare_permissions(
    permissions: Iterable[str],
    registry: PermissionRegistry | None,
) -> list[str]:
    """Normalize requested names and validate them all before any change.

    Raises InvalidPermission naming every unknown permission, so a request
    with one bad name applies nothing.
    """
    names = normalize_permissions(permissions)
    if not names:
        raise ValidationError("At least one permission is required")
    if registry is not None:
        unknown = registry.unknown(names)
        if unknown:
            raise InvalidPermission(unknown)
    return names
