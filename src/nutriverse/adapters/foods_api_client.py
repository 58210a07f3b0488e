"""HTTP client for the foods API."""

from dataclasses import dataclass
from typing import Protocol

import httpx

from nutriverse.domain.query import FoodQuery


class FoodsApiClient(Protocol):
    """Interface for talking to a remote foods API."""

    async def list_foods(self, query: FoodQuery) -> list[dict[str, object]]:
        """Return raw food payloads matching the query."""

    async def get_food(self, slug: str) -> dict[str, object]:
        """Return the raw payload for a single food."""

    async def send_action(self, action: str, food_id: str) -> dict[str, object]:
        """Post a food action and return the acknowledgement."""


@dataclass
class HttpxFoodsApiClient(FoodsApiClient):
    """HTTPX-backed foods API client."""

    base_url: str
    http_client: httpx.AsyncClient
    timeout: float = 10

    @classmethod
    def create(cls, base_url: str) -> "HttpxFoodsApiClient":
        """Create a client with a managed httpx session."""
        return cls(base_url=base_url.rstrip("/"), http_client=httpx.AsyncClient())

    async def list_foods(self, query: FoodQuery) -> list[dict[str, object]]:
        """Fetch foods matching the query."""
        response = await self.http_client.get(
            f"{self.base_url}/foods",
            params=query.active_filters(),
            timeout=self.timeout,
        )
        response.raise_for_status()
        return response.json()

    async def get_food(self, slug: str) -> dict[str, object]:
        """Fetch a single food by slug."""
        response = await self.http_client.get(
            f"{self.base_url}/foods/{slug}", timeout=self.timeout
        )
        response.raise_for_status()
        return response.json()

    async def send_action(self, action: str, food_id: str) -> dict[str, object]:
        """Post an action such as ``favorite`` for a food."""
        response = await self.http_client.post(
            f"{self.base_url}/foods",
            json={"action": action, "foodId": food_id},
            timeout=self.timeout,
        )
        response.raise_for_status()
        return response.json()

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self.http_client.aclose()
