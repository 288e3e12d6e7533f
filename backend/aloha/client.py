"""
Taste of Aloha Backend — API Client & List State
=================================================

What:  A small async client for one item resource plus a state holder that
       tracks the fetched list with loading/error flags, the way the web
       app's menu slice does.
How:   MenuApiClient wraps httpx.AsyncClient; ItemListState calls it and
       records failures instead of raising.
Who:   Scripts, integration checks and anything that needs to drive the API
       from Python.

Example:
    async with MenuApiClient("http://localhost:5001", "/api/menu") as api:
        state = ItemListState(api)
        await state.fetch_items()
        if state.error:
            print("could not load menu:", state.error)
"""

import logging
from typing import Any, Dict, List, Optional, Union

import httpx

logger = logging.getLogger(__name__)


class ApiError(Exception):
    """Non-2xx response from the API."""

    def __init__(self, status_code: int, message: str):
        self.status_code = status_code
        self.message = message
        super().__init__(f"{status_code}: {message}")


class MenuApiClient:
    """
    CRUD calls against one resource path ("/api/menu" or "/api/snacks").

    Args:
        base_url_or_client: Server URL, or an httpx.AsyncClient that already
            points at the server (tests pass one built on ASGITransport).
        resource_path: Path of the resource collection.
        timeout: Seconds per request when the client is created here.
    """

    def __init__(
        self,
        base_url_or_client: Union[str, httpx.AsyncClient],
        resource_path: str = "/api/menu",
        timeout: float = 10.0,
    ):
        if isinstance(base_url_or_client, httpx.AsyncClient):
            self._client = base_url_or_client
            self._owns_client = False
        else:
            self._client = httpx.AsyncClient(base_url=base_url_or_client, timeout=timeout)
            self._owns_client = True
        self.resource_path = resource_path.rstrip("/")

    async def __aenter__(self) -> "MenuApiClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    async def _request(self, method: str, path: str = "", **kwargs) -> Any:
        response = await self._client.request(method, f"{self.resource_path}{path}", **kwargs)
        if response.is_error:
            try:
                message = response.json().get("message", response.reason_phrase)
            except ValueError:
                message = response.text or response.reason_phrase
            raise ApiError(response.status_code, message)
        return response.json()

    async def list_items(self) -> List[Dict[str, Any]]:
        return await self._request("GET")

    async def get_item(self, item_id: int) -> Dict[str, Any]:
        return await self._request("GET", f"/{item_id}")

    async def create_item(self, data: Dict[str, Any]) -> Dict[str, Any]:
        return await self._request("POST", json=data)

    async def update_item(self, item_id: int, data: Dict[str, Any]) -> Dict[str, Any]:
        return await self._request("PUT", f"/{item_id}", json=data)

    async def delete_item(self, item_id: int) -> Dict[str, Any]:
        return await self._request("DELETE", f"/{item_id}")


class ItemListState:
    """
    Fetched items plus loading/error flags.

    Every action sets `loading` while its request is in flight and clears
    `error` when it starts. On failure the message lands in `error` and the
    action returns None; the previous items are kept.
    """

    def __init__(self, api: MenuApiClient):
        self.api = api
        self.items: List[Dict[str, Any]] = []
        self.selected_item: Optional[Dict[str, Any]] = None
        self.loading = False
        self.error: Optional[str] = None

    async def _run(self, call, fallback_message: str):
        self.loading = True
        self.error = None
        try:
            return await call
        except (ApiError, httpx.HTTPError) as e:
            self.error = getattr(e, "message", None) or str(e) or fallback_message
            logger.warning("%s: %s", fallback_message, self.error)
            return None
        finally:
            self.loading = False

    async def fetch_items(self) -> Optional[List[Dict[str, Any]]]:
        data = await self._run(self.api.list_items(), "Failed to fetch items")
        if data is not None:
            self.items = data
        return data

    async def fetch_item(self, item_id: int) -> Optional[Dict[str, Any]]:
        data = await self._run(self.api.get_item(item_id), "Failed to fetch item")
        if data is not None:
            self.selected_item = data
        return data

    async def add_item(self, item_data: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        data = await self._run(self.api.create_item(item_data), "Failed to create item")
        if data is not None:
            self.items.append(data)
        return data

    async def edit_item(
        self, item_id: int, item_data: Dict[str, Any]
    ) -> Optional[Dict[str, Any]]:
        data = await self._run(self.api.update_item(item_id, item_data), "Failed to update item")
        if data is None:
            return None

        self.items = [data if item.get("id") == data["id"] else item for item in self.items]
        if self.selected_item and self.selected_item.get("id") == data["id"]:
            self.selected_item = data
        return data

    async def remove_item(self, item_id: int) -> bool:
        data = await self._run(self.api.delete_item(item_id), "Failed to delete item")
        if data is None:
            return False

        self.items = [item for item in self.items if item.get("id") != item_id]
        if self.selected_item and self.selected_item.get("id") == item_id:
            self.selected_item = None
        return True

    def clear_error(self) -> None:
        self.error = None

    def clear_selected_item(self) -> None:
        self.selected_item = None
