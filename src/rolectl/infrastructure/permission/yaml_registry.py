"""Permission registry loaded from a YAML file."""

from pathlib import Path

import yaml

from rolectl.domain.exceptions import ValidationError


class YamlPermissionRegistry:
    """Known permission names read once from YAML.

    Accepts either a top-level list of names or a mapping with a
    ``permissions`` list::

        permissions:
          - access content
          - post comments
    """

    def __init__(self, names: set[str]) -> None:
        self._names = frozenset(names)

    @classmethod
    def from_file(cls, path: Path | str) -> "YamlPermissionRegistry":
        try:
            with open(path, encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except OSError as e:
            raise ValidationError(f"Cannot read permissions file {path}: {e}") from e
        except yaml.YAMLError as e:
            raise ValidationError(f"Invalid YAML in permissions file {path}: {e}") from e

        if isinstance(data, dict):
            data = data.get("permissions")
        if data is None:
            data = []
        if not isinstance(data, list) or not all(isinstance(n, str) for n in data):
            raise ValidationError(
                f"Permissions file {path} must contain a list of permission names"
            )
        return cls({n.strip() for n in data if n.strip()})

    @property
    def names(self) -> frozenset[str]:
        return self._names

    def is_valid(self, name: str) -> bool:
        return name in self._names

    def unknown(self, names: list[str]) -> list[str]:
        return [n for n in names if n not in self._names]
