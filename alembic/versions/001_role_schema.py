"""Role schema - role, role_permission, permission_definition.

Revision ID: 001
Revises:
Create Date: 2026-10-19

"""

from collections.abc import Sequence

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = "001"
down_revision: str | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def upgrade() -> None:
    op.create_table(
        "role",
        sa.Column("id", sa.String(64), primary_key=True),
        sa.Column("label", sa.String(255), nullable=False),
    )

    op.create_table(
        "role_permission",
        sa.Column("role_id", sa.String(64), sa.ForeignKey("role.id", ondelete="CASCADE"), primary_key=True),
        sa.Column("permission", sa.String(255), primary_key=True),
    )

    # Known permission names, used when database validation is enabled
    op.create_table(
        "permission_definition",
        sa.Column("name", sa.String(255), primary_key=True),
        sa.Column("description", sa.Text(), nullable=True),
    )


def downgrade() -> None:
    op.drop_table("permission_definition")
    op.drop_table("role_permission")
    op.drop_table("role")
