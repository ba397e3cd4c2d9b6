"""Domain entities."""

from rolectl.domain.entities.role import Role

__all__ = [
    "Role",
]
