"""
Taste of Aloha Backend — SQLAlchemy Menu Store
===============================================

What:  MenuStore backed by the `menu` table through an AsyncSession.
How:   Every write looks the row up first; a missing row is reported as
       None/False, so callers never see driver- or ORM-specific "record not
       found" errors. Writes are flushed; MenuService calls commit() before it
       answers, so a failed COMMIT surfaces as a 500 instead of a
       response for a row that was rolled back.

Query plan:
    list:  SELECT ... [WHERE category = :c] ORDER BY "createdAt" DESC, id DESC
           → idx_menu_created_at
    get:   SELECT ... WHERE id = :id [AND category = :c] → primary key
"""

import logging
from typing import Any, Dict, List, Optional

from sqlalchemy import delete, desc, select, text
from sqlalchemy.ext.asyncio import AsyncSession

from aloha.models.menu_item import MenuItem
from aloha.services.store_base import MenuStore

logger = logging.getLogger(__name__)

# Attributes a caller may write; anything else in `changes` is ignored
WRITABLE_FIELDS = ("name", "description", "price", "image", "category", "is_available")


class SqlMenuStore(MenuStore):
    """Store over one request-scoped AsyncSession."""

    def __init__(self, session: AsyncSession):
        self.session = session

    def _scoped(self, query, category: Optional[str]):
        if category is not None:
            query = query.where(MenuItem.category == category)
        return query

    async def list_items(self, category: Optional[str] = None) -> List[MenuItem]:
        query = self._scoped(select(MenuItem), category).order_by(
            desc(MenuItem.created_at), desc(MenuItem.id)
        )
        result = await self.session.execute(query)
        return list(result.scalars().all())

    async def get_item(
        self, item_id: int, category: Optional[str] = None
    ) -> Optional[MenuItem]:
        query = self._scoped(select(MenuItem).where(MenuItem.id == item_id), category)
        result = await self.session.execute(query)
        return result.scalar_one_or_none()

    async def create_item(self, fields: Dict[str, Any]) -> MenuItem:
        item = MenuItem(**{key: fields[key] for key in WRITABLE_FIELDS if key in fields})
        self.session.add(item)
        # Flush assigns the id without committing the transaction
        await self.session.flush()
        await self.session.refresh(item)
        logger.debug("Inserted menu row %s", item.id)
        return item

    async def update_item(
        self,
        item_id: int,
        changes: Dict[str, Any],
        category: Optional[str] = None,
    ) -> Optional[MenuItem]:
        item = await self.get_item(item_id, category)
        if item is None:
            return None

        for key in WRITABLE_FIELDS:
            if key in changes:
                setattr(item, key, changes[key])
        await self.session.flush()
        await self.session.refresh(item)
        return item

    async def delete_item(self, item_id: int, category: Optional[str] = None) -> bool:
        item = await self.get_item(item_id, category)
        if item is None:
            return False

        await self.session.delete(item)
        await self.session.flush()
        return True

    async def delete_by_name(self, name: str) -> int:
        result = await self.session.execute(delete(MenuItem).where(MenuItem.name == name))
        return result.rowcount or 0

    async def commit(self) -> None:
        await self.session.commit()

    async def ping(self) -> bool:
        await self.session.execute(text("SELECT 1"))
        return True
