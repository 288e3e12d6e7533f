"""
Taste of Aloha Backend — Item Route Tables
===========================================

What:  Binds the five CRUD endpoints of an item resource to a MenuService.
How:   build_router() returns an APIRouter for one prefix; main.py mounts it
       twice, at /api/menu (menu_service) and /api/snacks (snack_service).

Endpoints (relative to the prefix):
    GET    /            200 list                  500
    GET    /{item_id}   200 item           404    500
    POST   /            201 created item          500
    PUT    /{item_id}   200 updated item   404    500
    DELETE /{item_id}   200 {"message"}    404    500

Handlers are thin: they pull the store from the dependency, call the
service and set status codes/headers. The collection routes answer with
and without a trailing slash, so neither form is redirected. Bodies are
accepted as plain JSON and validated by the mapping layer, not by FastAPI.
"""

from typing import Any, List

from fastapi import APIRouter, Body, Depends, Response, status

from aloha.dependencies import get_menu_store
from aloha.schemas.common import ErrorResponse, MessageResponse
from aloha.schemas.menu_item import MenuItemResponse
from aloha.services.menu_service import MenuService
from aloha.services.store_base import MenuStore

ITEM_EXAMPLE = {
    "name": "Malasada",
    "description": "Portuguese-style fried dough",
    "price": 3.5,
    "category": "dessert",
}


def build_router(prefix: str, service: MenuService, tag: str) -> APIRouter:
    """
    Create the route table for one item resource.

    Args:
        prefix: Mount path, e.g. "/api/menu".
        service: Resource handlers the routes delegate to.
        tag: OpenAPI tag grouping the endpoints in /docs.
    """
    router = APIRouter(prefix=prefix, tags=[tag])
    name = service.resource.lower()

    errors = {
        500: {"description": "Store or validation failure", "model": ErrorResponse},
    }
    errors_with_404 = {
        404: {"description": f"{service.resource} not found", "model": ErrorResponse},
        **errors,
    }

    @router.get(
        "",
        response_model=List[MenuItemResponse],
        responses=errors,
        summary=f"List all {name}s",
        description="Returns every item, newest first. X-Total-Count carries the count.",
    )
    @router.get("/", response_model=List[MenuItemResponse], include_in_schema=False)
    async def list_items(
        response: Response,
        store: MenuStore = Depends(get_menu_store),
    ) -> List[MenuItemResponse]:
        items = await service.list_items(store)
        response.headers["X-Total-Count"] = str(len(items))
        return items

    @router.get(
        "/{item_id}",
        response_model=MenuItemResponse,
        responses=errors_with_404,
        summary=f"Get a single {name} by id",
    )
    async def get_item(
        item_id: int,
        store: MenuStore = Depends(get_menu_store),
    ) -> MenuItemResponse:
        return await service.get_item(store, item_id)

    @router.post(
        "",
        response_model=MenuItemResponse,
        status_code=status.HTTP_201_CREATED,
        responses=errors,
        summary=f"Create a {name}",
        description=(
            "Only name is required. Defaults: description \"\", price 0, image null, "
            "isAvailable true. Price may be sent as a string."
        ),
    )
    @router.post(
        "/",
        response_model=MenuItemResponse,
        status_code=status.HTTP_201_CREATED,
        include_in_schema=False,
    )
    async def create_item(
        payload: Any = Body(default=None, examples=[ITEM_EXAMPLE]),
        store: MenuStore = Depends(get_menu_store),
    ) -> MenuItemResponse:
        return await service.create_item(store, payload)

    @router.put(
        "/{item_id}",
        response_model=MenuItemResponse,
        responses=errors_with_404,
        summary=f"Update a {name}",
        description="Partial update: omitted fields keep their stored values.",
    )
    async def update_item(
        item_id: int,
        payload: Any = Body(default=None, examples=[{"price": 4.25}]),
        store: MenuStore = Depends(get_menu_store),
    ) -> MenuItemResponse:
        return await service.update_item(store, item_id, payload)

    @router.delete(
        "/{item_id}",
        response_model=MessageResponse,
        responses=errors_with_404,
        summary=f"Delete a {name}",
    )
    async def delete_item(
        item_id: int,
        store: MenuStore = Depends(get_menu_store),
    ) -> MessageResponse:
        return await service.delete_item(store, item_id)

    return router
