"""
Taste of Aloha Backend — Menu Service (Resource Handlers)
==========================================================

What:  get-all / get-by-id / create / update / delete for one resource.
How:   Each operation maps the payload (aloha.services.mapping), calls the
       injected MenuStore and turns the outcome into a response model or
       an application exception.
Who:   Called by the route tables in aloha.routes.items.

Outcome translation:
    store returns None / False  → NotFoundError    (404)
    ValidationError from mapping → propagated       (500, message echoed)
    any other store exception    → DatabaseError    (500, reason echoed)

Writes are committed through the store before the response is built; a
failed commit is reported like any other store failure.

Two instances exist: `menu_service` sees the whole table; `snack_service`
is scoped to settings.snack_category, so snack ids outside that category
are not found and snack writes always carry the snack category.

MenuService is stateless; the store is passed on every call.
"""

import logging
from typing import Any, List, Optional

from aloha.config import settings
from aloha.exceptions import DatabaseError, NotFoundError
from aloha.schemas.common import MessageResponse
from aloha.schemas.menu_item import MenuItemResponse
from aloha.services.mapping import normalize_changes, normalize_new_item
from aloha.services.store_base import MenuStore

logger = logging.getLogger(__name__)


class MenuService:
    """
    Business logic for one item resource.

    Args:
        resource: Singular display name used in messages ("Menu item").
        category: When set, every operation is restricted to this category.
    """

    def __init__(self, resource: str, category: Optional[str] = None):
        self.resource = resource
        self.category = category

    @property
    def _plural(self) -> str:
        return f"{self.resource.lower()}s"

    def _failure(self, verb: str, target: str, error: Exception) -> DatabaseError:
        logger.error("Error %s %s: %s", verb, target, str(error), exc_info=True)
        return DatabaseError(
            message=f"Error {verb} {target}",
            reason=str(error) or type(error).__name__,
        )

    async def list_items(self, store: MenuStore) -> List[MenuItemResponse]:
        """
        All items of this resource, newest first.

        Raises:
            DatabaseError: the store failed; no partial list is returned.
        """
        try:
            items = await store.list_items(category=self.category)
        except Exception as e:
            raise self._failure("fetching", self._plural, e)

        logger.debug("Listed %d %s", len(items), self._plural)
        return [MenuItemResponse.model_validate(item) for item in items]

    async def get_item(self, store: MenuStore, item_id: int) -> MenuItemResponse:
        """
        Raises:
            NotFoundError: no item with this id in scope (→ 404)
            DatabaseError: the lookup itself failed (→ 500)
        """
        try:
            item = await store.get_item(item_id, category=self.category)
        except Exception as e:
            raise self._failure("fetching", self.resource.lower(), e)

        if item is None:
            raise NotFoundError(resource=self.resource, resource_id=item_id)
        return MenuItemResponse.model_validate(item)

    async def create_item(self, store: MenuStore, payload: Any) -> MenuItemResponse:
        """
        Normalize the payload, persist it and return the stored record.

        Raises:
            ValidationError: payload cannot be mapped (e.g. no name)
            DatabaseError: the insert failed
        """
        fields = normalize_new_item(payload, default_category=self.category)
        if self.category is not None:
            fields["category"] = self.category

        try:
            item = await store.create_item(fields)
            await store.commit()
        except Exception as e:
            raise self._failure("creating", self.resource.lower(), e)

        logger.info("%s %s created: %s", self.resource, item.id, item.name)
        return MenuItemResponse.model_validate(item)

    async def update_item(
        self, store: MenuStore, item_id: int, payload: Any
    ) -> MenuItemResponse:
        """
        Merge the supplied fields over the stored item.

        Raises:
            ValidationError: payload cannot be mapped
            NotFoundError: no item with this id in scope
            DatabaseError: the update failed
        """
        changes = normalize_changes(payload)
        if self.category is not None:
            changes["category"] = self.category

        try:
            item = await store.update_item(item_id, changes, category=self.category)
            if item is not None:
                await store.commit()
        except Exception as e:
            raise self._failure("updating", self.resource.lower(), e)

        if item is None:
            raise NotFoundError(resource=self.resource, resource_id=item_id)

        logger.info("%s %s updated: %s", self.resource, item_id, sorted(changes))
        return MenuItemResponse.model_validate(item)

    async def delete_item(self, store: MenuStore, item_id: int) -> MessageResponse:
        """
        Hard-delete an item.

        Returns:
            {"message": "<Resource> deleted"}

        Raises:
            NotFoundError: no item with this id in scope
            DatabaseError: the delete failed
        """
        try:
            deleted = await store.delete_item(item_id, category=self.category)
            if deleted:
                await store.commit()
        except Exception as e:
            raise self._failure("deleting", self.resource.lower(), e)

        if not deleted:
            raise NotFoundError(resource=self.resource, resource_id=item_id)

        logger.info("%s %s deleted", self.resource, item_id)
        return MessageResponse(message=f"{self.resource} deleted")


menu_service = MenuService(resource="Menu item")
snack_service = MenuService(resource="Snack", category=settings.snack_category)
