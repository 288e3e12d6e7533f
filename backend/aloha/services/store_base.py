"""
Taste of Aloha Backend — Abstract Menu Store Interface
=======================================================

What:  The contract every item store fulfils: create/read/update/delete over
       menu items, optionally scoped to one category.
Why:   Resource handlers receive a store instead of a global, so they run
       unchanged against PostgreSQL, SQLite or the in-memory store.
Who:   Implemented by SqlMenuStore and InMemoryMenuStore; consumed by
       MenuService.

Not-found contract:
    Absence is a return value, never an exception. get/update return None
    and delete returns False when no row with that id exists in scope.
    Any exception a store raises is an unexpected failure.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional

from aloha.models.menu_item import MenuItem


class MenuStore(ABC):
    """
    Persistence operations over the `menu` table.

    The optional `category` argument restricts an operation to rows of that
    category; a row outside it behaves exactly like a missing row.
    """

    @abstractmethod
    async def list_items(self, category: Optional[str] = None) -> List[MenuItem]:
        """
        All items, newest first (created_at desc, then id desc).
        """
        ...

    @abstractmethod
    async def get_item(
        self, item_id: int, category: Optional[str] = None
    ) -> Optional[MenuItem]:
        """The item with this id, or None."""
        ...

    @abstractmethod
    async def create_item(self, fields: Dict[str, Any]) -> MenuItem:
        """
        Insert a normalized record and return it with id and created_at set.

        Args:
            fields: Output of normalize_new_item (all six business fields).
        """
        ...

    @abstractmethod
    async def update_item(
        self,
        item_id: int,
        changes: Dict[str, Any],
        category: Optional[str] = None,
    ) -> Optional[MenuItem]:
        """
        Apply `changes` over the stored values.

        Returns:
            The updated item, or None when the id is absent. id and
            created_at are never modified.
        """
        ...

    @abstractmethod
    async def delete_item(self, item_id: int, category: Optional[str] = None) -> bool:
        """Hard-delete one item. False when the id is absent."""
        ...

    @abstractmethod
    async def delete_by_name(self, name: str) -> int:
        """Delete every item with exactly this name; returns how many went."""
        ...

    @abstractmethod
    async def commit(self) -> None:
        """
        Make every write done so far durable.

        Called by the resource handlers before a write is reported as
        successful; a failure here is a persistence failure.
        """
        ...

    @abstractmethod
    async def ping(self) -> bool:
        """True when the backing store can serve queries."""
        ...
