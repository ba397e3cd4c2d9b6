"""Permission registry port - which permission names exist."""

from typing import Protocol


class PermissionRegistry(Protocol):
    """Port for validating permission names."""

    def is_valid(self, name: str) -> bool: ...

    def unknown(self, names: list[str]) -> list[str]:
        """Names the registry does not know, in the order given."""
        ...
