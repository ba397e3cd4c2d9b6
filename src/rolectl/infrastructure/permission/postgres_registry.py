"""Permission registry backed by the permission_definition table."""

from psycopg import Connection

from rolectl.infrastructure.persistence.postgres.connection import translate_errors


class PostgresPermissionRegistry:
    """Checks permission names against permission_definition.

    Bound to the connection of the unit of work it belongs to.
    """

    def __init__(self, conn: Connection) -> None:
        self._conn = conn

    def is_valid(self, name: str) -> bool:
        return not self.unknown([name])

    def unknown(self, names: list[str]) -> list[str]:
        with translate_errors("validating permissions"):
            rows = self._conn.execute(
                "SELECT name FROM permission_definition WHERE name = ANY(%s)",
                (list(names),),
            ).fetchall()
        known = {r[0] for r in rows}
        return [n for n in names if n not in known]
