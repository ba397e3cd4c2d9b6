"""JSON file Unit of Work implementation."""

import fcntl
import json
import logging
import os
import tempfile
from collections.abc import Iterator
from contextlib import contextmanager, suppress
from pathlib import Path

from rolectl.domain.exceptions import StoreUnavailable
from rolectl.infrastructure.persistence.json_file.role_repository import (
    JsonFileRoleRepository,
)

logger = logging.getLogger(__name__)


class JsonFileUnitOfWork:
    """JSON file Unit of Work - exclusive lock, load on enter, atomic replace on commit.

    The lock is held on a sidecar ``<path>.lock`` file for the lifetime of the
    unit so that concurrent processes serialize whole operations.
    """

    def __init__(self, path: Path) -> None:
        self._path = Path(path)
        self._lock_path = self._path.with_name(self._path.name + ".lock")
        self._lock_file = None
        self._records: dict[str, dict] = {}
        self._roles: JsonFileRoleRepository | None = None

    def __enter__(self) -> "JsonFileUnitOfWork":
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            self._lock_file = open(self._lock_path, "a")
            fcntl.flock(self._lock_file, fcntl.LOCK_EX)
        except OSError as e:
            self._release()
            raise StoreUnavailable(f"Cannot lock role store {self._path}: {e}") from e
        try:
            self._records = self._load()
        except StoreUnavailable:
            self._release()
            raise
        self._roles = JsonFileRoleRepository(self._records)
        return self

    def __exit__(self, exc_type: object, exc_val: object, exc_tb: object) -> None:
        self._release()

    @property
    def roles(self) -> JsonFileRoleRepository:
        return self._roles

    @property
    def permissions(self) -> None:
        return None

    def commit(self) -> None:
        if self._roles is None or not self._roles.changed:
            return
        document = {"roles": [self._records[k] for k in sorted(self._records)]}
        tmp = None
        try:
            fd, tmp = tempfile.mkstemp(
                dir=self._path.parent, prefix=self._path.name, suffix=".tmp"
            )
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(document, f, indent=2, ensure_ascii=False)
                f.write("\n")
            os.replace(tmp, self._path)
        except OSError as e:
            if tmp is not None:
                with suppress(FileNotFoundError):
                    os.unlink(tmp)
            raise StoreUnavailable(f"Cannot write role store {self._path}: {e}") from e
        logger.debug("Wrote %d role(s) to %s", len(self._records), self._path)

    def rollback(self) -> None:
        self._records.clear()

    def _load(self) -> dict[str, dict]:
        if not self._path.exists():
            return {}
        try:
            with open(self._path, encoding="utf-8") as f:
                raw = f.read()
        except OSError as e:
            raise StoreUnavailable(f"Cannot read role store {self._path}: {e}") from e
        if not raw.strip():
            return {}
        try:
            document = json.loads(raw)
            return {r["id"]: r for r in document.get("roles", [])}
        except (ValueError, KeyError, TypeError, AttributeError) as e:
            raise StoreUnavailable(f"Role store {self._path} is corrupt: {e}") from e

    def _release(self) -> None:
        if self._lock_file is not None:
            fcntl.flock(self._lock_file, fcntl.LOCK_UN)
            self._lock_file.close()
            self._lock_file = None


def create_uow_factory(path: Path | str) -> object:
    """Create UnitOfWork factory (context manager) for a JSON file store."""

    @contextmanager
    def factory() -> Iterator[JsonFileUnitOfWork]:
        uow = JsonFileUnitOfWork(Path(path))
        with uow:
            try:
                yield uow
                uow.commit()
            except BaseException:
                uow.rollback()
                raise

    return factory
