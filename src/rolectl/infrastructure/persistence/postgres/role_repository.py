"""PostgreSQL role repository implementation."""

from psycopg import Connection

from rolectl.domain.entities import Role
from rolectl.domain.exceptions import NotFound
from rolectl.infrastructure.persistence.postgres.connection import translate_errors


class PostgresRoleRepository:
    """Role repository implementation over role and role_permission tables."""

    def __init__(self, conn: Connection) -> None:
        self._conn = conn

    def get(self, role_id: str) -> Role | None:
        """Get role by id."""
        with translate_errors("loading role"):
            r = self._conn.execute(
                "SELECT id, label FROM role WHERE id = %s",
                (role_id,),
            ).fetchone()
            if not r:
                return None
            rows = self._conn.execute(
                "SELECT permission FROM role_permission WHERE role_id = %s",
                (role_id,),
            ).fetchall()
        return Role(id=r[0], label=r[1], permissions={p[0] for p in rows})

    def get_all(self) -> list[Role]:
        """List all roles ordered by id."""
        with translate_errors("listing roles"):
            roles = [
                Role(id=r[0], label=r[1])
                for r in self._conn.execute(
                    "SELECT id, label FROM role ORDER BY id"
                ).fetchall()
            ]
            by_id = {role.id: role for role in roles}
            for role_id, permission in self._conn.execute(
                "SELECT role_id, permission FROM role_permission"
            ).fetchall():
                if role_id in by_id:
                    by_id[role_id].permissions.add(permission)
        return roles

    def put(self, role: Role) -> None:
        """Insert or replace role and its permission set."""
        with translate_errors("saving role"):
            self._conn.execute(
                "INSERT INTO role (id, label) VALUES (%s, %s) "
                "ON CONFLICT (id) DO UPDATE SET label = EXCLUDED.label",
                (role.id, role.label),
            )
            self._conn.execute(
                "DELETE FROM role_permission WHERE role_id = %s",
                (role.id,),
            )
            if role.permissions:
                with self._conn.cursor() as cur:
                    cur.executemany(
                        "INSERT INTO role_permission (role_id, permission) VALUES (%s, %s)",
                        [(role.id, p) for p in role.sorted_permissions()],
                    )

    def delete(self, role_id: str) -> None:
        """Delete role. Permissions go with it (ON DELETE CASCADE)."""
        with translate_errors("deleting role"):
            cur = self._conn.execute(
                "DELETE FROM role WHERE id = %s",
                (role_id,),
            )
        if cur.rowcount == 0:
            raise NotFound("Role", role_id)
