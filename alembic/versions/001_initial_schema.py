"""Initial schema - role, permission, role_permission.

Revision ID: 001
Revises:
Create Date: 2026-10-18

"""

from collections.abc import Sequence

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = "001"
down_revision: str | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None

SEED_ROLES = ("ADMIN", "SUPERVISOR", "STAFF", "CUSTOMER")


def upgrade() -> None:
    role = op.create_table(
        "role",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("name", sa.String(50), nullable=False),
    )
    op.create_index("ix_role_name", "role", ["name"], unique=True)

    op.create_table(
        "permission",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("name", sa.String(100), nullable=False),
        sa.Column("description", sa.String(255), nullable=True),
    )
    op.create_index("ix_permission_name", "permission", ["name"], unique=True)

    # Composite primary key enforces one row per (role_id, permission_id).
    op.create_table(
        "role_permission",
        sa.Column(
            "role_id",
            sa.Integer(),
            sa.ForeignKey("role.id", ondelete="CASCADE"),
            primary_key=True,
        ),
        sa.Column(
            "permission_id",
            sa.Integer(),
            sa.ForeignKey("permission.id"),
            primary_key=True,
        ),
    )
    op.create_index("ix_role_permission_permission_id", "role_permission", ["permission_id"])

    op.bulk_insert(role, [{"name": name} for name in SEED_ROLES])


def downgrade() -> None:
    op.drop_index("ix_role_permission_permission_id", table_name="role_permission")
    op.drop_table("role_permission")
    op.drop_index("ix_permission_name", table_name="permission")
    op.drop_table("permission")
    op.drop_index("ix_role_name", table_name="role")
    op.drop_table("role")
