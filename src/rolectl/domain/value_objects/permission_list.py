"""Permission list value object - ordered, de-duplicated permission names."""


def parse_permission_list(value: str) -> list[str]:
    """Split a comma-delimited string into trimmed, non-empty, unique names.

    Order of first appearance is kept so messages echo what the user typed.
    """
    return normalize_permissions(value.split(","))


def normalize_permissions(names) -> list[str]:
    """Trim names, drop empty ones and collapse duplicates (first wins)."""
    seen: dict[str, None] = {}
    for name in names:
        name = name.strip()
        if name:
            seen.setdefault(name, None)
    return list(seen)
