"""
Taste of Aloha Backend — Menu Service Unit Tests
=================================================

What:  Tests for MenuService (the resource handlers).
How:   Uses the in-memory store for behavior and AsyncMock stores for
       failure translation; no HTTP involved.

What we test:
    ✅ Defaults applied on create, generated id returned
    ✅ Not-found outcomes become NotFoundError
    ✅ Store exceptions become DatabaseError with the reason kept
    ✅ ValidationError from mapping propagates untouched
    ✅ Snack service only sees and writes its category
"""

from unittest.mock import AsyncMock, MagicMock

import pytest
from sqlalchemy.exc import SQLAlchemyError

from aloha.exceptions import DatabaseError, NotFoundError, ValidationError
from aloha.services.menu_service import MenuService
from aloha.services.store_base import MenuStore


def failing_store(error: Exception) -> MagicMock:
    store = MagicMock(spec=MenuStore)
    for name in ("list_items", "get_item", "create_item", "update_item", "delete_item"):
        setattr(store, name, AsyncMock(side_effect=error))
    return store


class TestMenuServiceCrud:
    """Happy paths and not-found handling against the in-memory store."""

    def setup_method(self):
        self.service = MenuService(resource="Menu item")

    @pytest.mark.asyncio
    async def test_create_applies_defaults(self, memory_store):
        result = await self.service.create_item(memory_store, {"name": "Spam Musubi"})

        assert result.id == 1
        assert result.price == 0
        assert result.is_available is True
        assert result.description == ""
        assert result.category == "General"

    @pytest.mark.asyncio
    async def test_create_then_get(self, memory_store, malasada):
        created = await self.service.create_item(memory_store, malasada)
        fetched = await self.service.get_item(memory_store, created.id)

        assert fetched == created
        assert fetched.name == "Malasada"
        assert fetched.price == pytest.approx(3.5)

    @pytest.mark.asyncio
    async def test_list_newest_first(self, memory_store):
        for name in ("Poke", "Saimin", "Loco Moco"):
            await self.service.create_item(memory_store, {"name": name})

        result = await self.service.list_items(memory_store)

        assert [item.name for item in result] == ["Loco Moco", "Saimin", "Poke"]

    @pytest.mark.asyncio
    async def test_get_missing_raises_not_found(self, memory_store):
        with pytest.raises(NotFoundError) as exc_info:
            await self.service.get_item(memory_store, 42)
        assert exc_info.value.message == "Menu item not found"
        assert exc_info.value.context["resource_id"] == 42

    @pytest.mark.asyncio
    async def test_update_merges_supplied_fields(self, memory_store, malasada):
        created = await self.service.create_item(memory_store, malasada)

        updated = await self.service.update_item(memory_store, created.id, {"price": "4.25"})

        assert updated.id == created.id
        assert updated.created_at == created.created_at
        assert updated.price == pytest.approx(4.25)
        assert updated.name == "Malasada"
        assert updated.category == "dessert"

    @pytest.mark.asyncio
    async def test_update_missing_raises_not_found(self, memory_store):
        with pytest.raises(NotFoundError):
            await self.service.update_item(memory_store, 7, {"name": "Ghost"})

    @pytest.mark.asyncio
    async def test_delete_then_delete_again(self, memory_store, malasada):
        created = await self.service.create_item(memory_store, malasada)

        result = await self.service.delete_item(memory_store, created.id)
        assert result.message == "Menu item deleted"

        with pytest.raises(NotFoundError):
            await self.service.delete_item(memory_store, created.id)

    @pytest.mark.asyncio
    async def test_invalid_payload_never_reaches_store(self):
        store = failing_store(AssertionError("store must not be called"))

        with pytest.raises(ValidationError):
            await self.service.create_item(store, {"price": 3})
        with pytest.raises(ValidationError):
            await self.service.update_item(store, 1, {"price": "cheap"})


class TestMenuServiceFailures:
    """Unexpected store errors become DatabaseError."""

    def setup_method(self):
        self.service = MenuService(resource="Menu item")

    @pytest.mark.asyncio
    async def test_list_failure(self):
        store = failing_store(SQLAlchemyError("Database connection failed"))

        with pytest.raises(DatabaseError) as exc_info:
            await self.service.list_items(store)

        assert exc_info.value.message == "Error fetching menu items"
        assert exc_info.value.reason == "Database connection failed"

    @pytest.mark.asyncio
    async def test_create_failure(self):
        store = failing_store(RuntimeError("Validation failed"))

        with pytest.raises(DatabaseError) as exc_info:
            await self.service.create_item(store, {"name": "Invalid"})

        assert exc_info.value.message == "Error creating menu item"
        assert exc_info.value.context["reason"] == "Validation failed"

    @pytest.mark.asyncio
    @pytest.mark.parametrize("operation, args, verb", [
        ("get_item", (1,), "fetching"),
        ("update_item", (1, {"name": "x"}), "updating"),
        ("delete_item", (1,), "deleting"),
    ])
    async def test_single_item_failures(self, operation, args, verb):
        store = failing_store(RuntimeError("boom"))

        with pytest.raises(DatabaseError, match=f"Error {verb} menu item"):
            await getattr(self.service, operation)(store, *args)

    @pytest.mark.asyncio
    async def test_reason_falls_back_to_exception_type(self):
        store = failing_store(TimeoutError())

        with pytest.raises(DatabaseError) as exc_info:
            await self.service.list_items(store)

        assert exc_info.value.reason == "TimeoutError"


class TestSnackService:
    """A service scoped to the Snack category."""

    def setup_method(self):
        self.menu = MenuService(resource="Menu item")
        self.snacks = MenuService(resource="Snack", category="Snack")

    @pytest.mark.asyncio
    async def test_create_forces_category(self, memory_store):
        result = await self.snacks.create_item(
            memory_store, {"name": "Arare", "category": "dessert"}
        )
        assert result.category == "Snack"

    @pytest.mark.asyncio
    async def test_lists_only_snacks(self, memory_store):
        await self.menu.create_item(memory_store, {"name": "Loco Moco"})
        await self.snacks.create_item(memory_store, {"name": "Arare"})

        snacks = await self.snacks.list_items(memory_store)
        everything = await self.menu.list_items(memory_store)

        assert [item.name for item in snacks] == ["Arare"]
        assert len(everything) == 2

    @pytest.mark.asyncio
    async def test_menu_item_is_not_a_snack(self, memory_store):
        entree = await self.menu.create_item(memory_store, {"name": "Loco Moco"})

        with pytest.raises(NotFoundError, match="Snack not found"):
            await self.snacks.get_item(memory_store, entree.id)
        with pytest.raises(NotFoundError):
            await self.snacks.delete_item(memory_store, entree.id)

    @pytest.mark.asyncio
    async def test_update_cannot_move_snack_out_of_category(self, memory_store):
        snack = await self.snacks.create_item(memory_store, {"name": "Arare"})

        updated = await self.snacks.update_item(
            memory_store, snack.id, {"category": "General", "price": 2}
        )

        assert updated.category == "Snack"
        assert updated.price == 2

    @pytest.mark.asyncio
    async def test_delete_message(self, memory_store):
        snack = await self.snacks.create_item(memory_store, {"name": "Arare"})
        result = await self.snacks.delete_item(memory_store, snack.id)
        assert result.message == "Snack deleted"


class TestMenuServiceCommit:
    """Writes are only reported once the store has committed them."""

    def setup_method(self):
        self.service = MenuService(resource="Menu item")

    def committing_store(self, memory_store, error=None):
        # Real in-memory behavior, observable commit
        memory_store.commit = AsyncMock(side_effect=error)
        return memory_store

    @pytest.mark.asyncio
    async def test_each_write_commits(self, memory_store, malasada):
        store = self.committing_store(memory_store)

        created = await self.service.create_item(store, malasada)
        await self.service.update_item(store, created.id, {"price": 4})
        await self.service.delete_item(store, created.id)

        assert store.commit.await_count == 3

    @pytest.mark.asyncio
    async def test_reads_and_misses_do_not_commit(self, memory_store):
        store = self.committing_store(memory_store)

        await self.service.list_items(store)
        with pytest.raises(NotFoundError):
            await self.service.update_item(store, 99, {"price": 4})
        with pytest.raises(NotFoundError):
            await self.service.delete_item(store, 99)

        store.commit.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_commit_failure_on_create(self, memory_store):
        store = self.committing_store(memory_store, SQLAlchemyError("disk I/O error"))

        with pytest.raises(DatabaseError) as exc_info:
            await self.service.create_item(store, {"name": "Ghost"})

        assert exc_info.value.message == "Error creating menu item"
        assert exc_info.value.reason == "disk I/O error"

    @pytest.mark.asyncio
    async def test_commit_failure_on_delete(self, memory_store, malasada):
        created = await self.service.create_item(memory_store, malasada)
        store = self.committing_store(memory_store, SQLAlchemyError("locked"))

        with pytest.raises(DatabaseError, match="Error deleting menu item"):
            await self.service.delete_item(store, created.id)
