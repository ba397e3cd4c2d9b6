"""Repository ports."""

from rolectl.application.ports.repositories.role_repository import RoleRepository

__all__ = [
    "RoleRepository",
]
