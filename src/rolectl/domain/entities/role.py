"""Role entity."""

from dataclasses import dataclass, field

from rolectl.domain.exceptions import ValidationError


@dataclass
class Role:
    """Role - machine name, human-readable label and granted permissions."""

    id: str
    label: str
    permissions: set[str] = field(default_factory=set)

    @staticmethod
    def normalize_id(role_id: str) -> str:
        """Strip surrounding whitespace; an empty machine name is rejected."""
        role_id = role_id.strip()
        if not role_id:
            raise ValidationError("Role machine name must not be empty")
        return role_id

    @staticmethod
    def default_label(role_id: str) -> str:
        """Upper-case the first character of the machine name, keep the rest."""
        return role_id[:1].upper() + role_id[1:]

    def grant(self, permissions: list[str]) -> None:
        self.permissions.update(permissions)

    def revoke(self, permissions: list[str]) -> None:
        self.permissions.difference_update(permissions)

    def sorted_permissions(self) -> list[str]:
        return sorted(self.permissions)
