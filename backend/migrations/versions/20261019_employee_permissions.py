"""Add employee_permissions table

Revision ID: 20261019_employee_perms
Revises:
Create Date: 2026-10-19
"""

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = "20261019_employee_perms"
down_revision = None
branch_labels = None
depends_on = None


def upgrade():
    op.create_table(
        "employee_permissions",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("email", sa.String(255), nullable=False),
        sa.Column("employee_id", sa.String(64), nullable=True),
        sa.Column("name", sa.String(255), nullable=True),
        sa.Column("permissions", sa.JSON(), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), server_default=sa.text("(CURRENT_TIMESTAMP)"), nullable=False),
        sa.Column("updated_by", sa.String(255), nullable=True),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("email", name="uq_employee_permissions_email"),
        sqlite_autoincrement=True,
    )

    with op.batch_alter_table("employee_permissions", schema=None) as batch_op:
        batch_op.create_index("ix_employee_permissions_email", ["email"], unique=False)


def downgrade():
    with op.batch_alter_table("employee_permissions", schema=None) as batch_op:
        batch_op.drop_index("ix_employee_permissions_email")

    op.drop_table("employee_permissions")
