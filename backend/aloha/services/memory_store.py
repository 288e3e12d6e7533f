"""
Taste of Aloha Backend — In-Memory Menu Store
==============================================

What:  MenuStore that keeps items in a dict inside the process.
Who:   Selected with STORE_BACKEND=memory (demos, frontend work without a
       database) and used by the test suite.

Ids come from a counter that only moves forward, so an id is never handed
out twice, even after its item was deleted. Contents are lost on restart.
Each operation completes without awaiting anything, so concurrent requests
on one event loop cannot interleave inside an operation.
"""

from datetime import datetime, timezone
from itertools import count
from typing import Any, Dict, List, Optional

from aloha.config import settings
from aloha.models.menu_item import MenuItem
from aloha.services.sql_store import WRITABLE_FIELDS
from aloha.services.store_base import MenuStore


class InMemoryMenuStore(MenuStore):
    """Dict-backed store; items are transient MenuItem instances."""

    def __init__(self):
        self._items: Dict[int, MenuItem] = {}
        self._ids = count(1)

    def _in_scope(self, item: Optional[MenuItem], category: Optional[str]) -> bool:
        return item is not None and (category is None or item.category == category)

    async def list_items(self, category: Optional[str] = None) -> List[MenuItem]:
        items = [item for item in self._items.values() if self._in_scope(item, category)]
        return sorted(items, key=lambda item: (item.created_at, item.id), reverse=True)

    async def get_item(
        self, item_id: int, category: Optional[str] = None
    ) -> Optional[MenuItem]:
        item = self._items.get(item_id)
        return item if self._in_scope(item, category) else None

    async def create_item(self, fields: Dict[str, Any]) -> MenuItem:
        item = MenuItem(
            id=next(self._ids),
            name=fields["name"],
            description=fields.get("description", ""),
            price=fields.get("price", 0.0),
            image=fields.get("image"),
            category=fields.get("category", settings.default_category),
            is_available=fields.get("is_available", True),
            created_at=datetime.now(timezone.utc),
        )
        self._items[item.id] = item
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
        return item

    async def delete_item(self, item_id: int, category: Optional[str] = None) -> bool:
        if await self.get_item(item_id, category) is None:
            return False
        del self._items[item_id]
        return True

    async def delete_by_name(self, name: str) -> int:
        doomed = [item_id for item_id, item in self._items.items() if item.name == name]
        for item_id in doomed:
            del self._items[item_id]
        return len(doomed)

    async def commit(self) -> None:
        # Writes apply immediately
        return None

    async def ping(self) -> bool:
        return True

    def clear(self) -> None:
        """Drop every item. The id counter keeps counting."""
        self._items.clear()


# Process-wide instance used when STORE_BACKEND=memory
memory_store = InMemoryMenuStore()
