"""Domain value objects."""

from rolectl.domain.value_objects.permission_list import (
    normalize_permissions,
    parse_permission_list,
)

__all__ = [
    "normalize_permissions",
    "parse_permission_list",
]
