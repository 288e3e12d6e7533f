"""
Taste of Aloha Backend — MenuItem SQLAlchemy Model
===================================================

What:  ORM model for the `menu` table.
Who:   Used by SqlMenuStore for CRUD and by Alembic for schema management.

Table Design:
    - Integer autoincrement id: assigned by the database exactly once.
      sqlite_autoincrement keeps SQLite from handing out a deleted row's id
      again; PostgreSQL sequences never do.
    - Physical column names keep the camelCase used by the existing `menu`
      table (isAvailable, createdAt); Python attributes are snake_case.
    - price: NUMERIC(10,2) read back as float so it serializes as a number.
    - The "snacks" resource is the subset of rows whose category equals
      settings.snack_category; there is no second table.

    Index on createdAt DESC serves the default listing order (newest first).
"""

from datetime import datetime, timezone
from typing import Optional

from sqlalchemy import TIMESTAMP, Boolean, Index, Integer, Numeric, String, Text, text
from sqlalchemy.orm import Mapped, mapped_column

from aloha.database import Base


class MenuItem(Base):
    """
    A dish offered by the restaurant.

    Lifecycle:
        1. Created through POST /api/menu or /api/snacks
        2. Updated in place (partial) through PUT
        3. Hard-deleted through DELETE; ids are not recycled
    """

    __tablename__ = "menu"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    name: Mapped[str] = mapped_column(String(255), nullable=False)

    description: Mapped[str] = mapped_column(
        Text,
        nullable=False,
        default="",
        server_default=text("''"),
    )

    price: Mapped[float] = mapped_column(
        Numeric(10, 2, asdecimal=False),
        nullable=False,
        default=0,
        server_default=text("0"),
    )

    # Image URL; NULL when the item has no picture
    image: Mapped[Optional[str]] = mapped_column(Text, nullable=True, default=None)

    category: Mapped[str] = mapped_column(
        String(100),
        nullable=False,
        default="General",
        server_default=text("'General'"),
    )

    is_available: Mapped[bool] = mapped_column(
        "isAvailable",
        Boolean,
        nullable=False,
        default=True,
        server_default=text("true"),
    )

    # Python-side default so the value is known right after flush
    created_at: Mapped[datetime] = mapped_column(
        "createdAt",
        TIMESTAMP(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
        server_default=text("CURRENT_TIMESTAMP"),
    )

    __table_args__ = (
        Index("idx_menu_created_at", created_at.desc()),
        {"sqlite_autoincrement": True},
    )

    def __repr__(self) -> str:
        return (
            f"<MenuItem(id={self.id}, name='{self.name}', "
            f"category='{self.category}')>"
        )
