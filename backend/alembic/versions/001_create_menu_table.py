"""Create menu table

Revision ID: 001
Revises: None
Create Date: 2024-05-01 00:00:00.000000+00:00

What:  Creates the `menu` table holding menu items and snacks.
How:   Column names match the existing camelCase schema (isAvailable,
       createdAt); see aloha/models/menu_item.py.

Rollback: downgrade() drops the table (all items are lost).
"""

from typing import Sequence, Union
from alembic import op
import sqlalchemy as sa

revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "menu",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("description", sa.Text(), nullable=False, server_default=sa.text("''")),
        sa.Column(
            "price",
            sa.Numeric(10, 2),
            nullable=False,
            server_default=sa.text("0"),
        ),
        sa.Column("image", sa.Text(), nullable=True),
        sa.Column(
            "category",
            sa.String(100),
            nullable=False,
            server_default=sa.text("'General'"),
        ),
        sa.Column(
            "isAvailable",
            sa.Boolean(),
            nullable=False,
            server_default=sa.text("true"),
        ),
        sa.Column(
            "createdAt",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("CURRENT_TIMESTAMP"),
        ),
        sa.PrimaryKeyConstraint("id"),
        sqlite_autoincrement=True,
    )

    # Default listing order is newest first
    op.create_index(
        "idx_menu_created_at",
        "menu",
        [sa.text('"createdAt" DESC')],
    )


def downgrade() -> None:
    op.drop_index("idx_menu_created_at", table_name="menu")
    op.drop_table("menu")
