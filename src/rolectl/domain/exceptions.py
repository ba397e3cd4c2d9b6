"""Domain exceptions."""


class RoleCtlError(Exception):
    """Base exception for rolectl."""

    pass


class NotFound(RoleCtlError):
    """Requested resource was not found."""

    def __init__(self, kind: str, key: str) -> None:
        super().__init__(f'{kind} "{key}" not found')
        self.kind = kind
        self.key = key


class AlreadyExists(RoleCtlError):
    """Resource with the same key already exists."""

    def __init__(self, kind: str, key: str) -> None:
        super().__init__(f'{kind} "{key}" already exists')
        self.kind = kind
        self.key = key


class InvalidPermission(RoleCtlError):
    """One or more permission names are not recognized."""

    def __init__(self, names: list[str]) -> None:
        joined = ", ".join(f'"{n}"' for n in names)
        super().__init__(f"Unknown permission(s): {joined}")
        self.names = list(names)


class StoreUnavailable(RoleCtlError):
    """Underlying role store failed (I/O, connectivity, serialization)."""

    pass


class ValidationError(RoleCtlError):
    """Validation failed for input data."""

    pass


class CacheInvalidationFailed(RoleCtlError):
    """Permissions were saved but the cache could not be invalidated."""

    pass
