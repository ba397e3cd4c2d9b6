"""Cache invalidator port."""

from typing import Protocol


class CacheInvalidator(Protocol):
    """Invalidates derived state in the host after permissions change."""

    def invalidate(self, role_id: str) -> None: ...
