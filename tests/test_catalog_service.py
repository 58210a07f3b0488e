"""Tests for the catalog service and its local fallback."""

import asyncio
from dataclasses import dataclass, field

import httpx
import pytest

from nutriverse.api.food_models import serialize_food
from nutriverse.domain.errors import FoodNotFoundError
from nutriverse.domain.query import FoodQuery
from nutriverse.services.catalog import CatalogService
from nutriverse.services.query_engine import run_query

_REQUEST = httpx.Request("GET", "https://nutriverse.test/foods")


@dataclass
class FakeFoodsApiClient:
    """Fake API client backed by payloads or a fixed error."""

    payloads: list[dict[str, object]] = field(default_factory=list)
    error: Exception | None = None
    queries: list[FoodQuery] = field(default_factory=list)

    async def list_foods(self, query: FoodQuery) -> list[dict[str, object]]:
        self.queries.append(query)
        if self.error:
            raise self.error
        return self.payloads

    async def get_food(self, slug: str) -> dict[str, object]:
        if self.error:
            raise self.error
        for payload in self.payloads:
            if payload["slug"] == slug:
                return payload
        raise httpx.HTTPStatusError(
            "not found", request=_REQUEST, response=httpx.Response(404)
        )

    async def send_action(self, action: str, food_id: str) -> dict[str, object]:
        return {"success": True, "message": "Favorite updated"}


def test_list_foods_uses_api_payload(foods, food_service) -> None:
    summer_foods = run_query(foods[:2], FoodQuery(), "summer")
    payloads = [serialize_food(food) for food in summer_foods]
    api_client = FakeFoodsApiClient(payloads=payloads)
    service = CatalogService(api_client=api_client, fallback=food_service)

    results = asyncio.run(service.list_foods(FoodQuery(category="fruit")))

    assert [food.slug for food in results] == ["orange", "kiwi"]
    assert [food.is_in_season for food in results] == [False, False]
    assert api_client.queries == [FoodQuery(category="fruit")]


def test_list_foods_falls_back_to_local_engine(food_service) -> None:
    api_client = FakeFoodsApiClient(error=httpx.ConnectError("down"))
    service = CatalogService(api_client=api_client, fallback=food_service)

    results = asyncio.run(service.list_foods(FoodQuery(search="vitamin c")))

    assert [food.slug for food in results] == ["orange", "kiwi"]
    assert results[0].is_in_season is True


def test_get_food_not_found_is_not_masked(food_service) -> None:
    service = CatalogService(api_client=FakeFoodsApiClient(), fallback=food_service)

    with pytest.raises(FoodNotFoundError):
        asyncio.run(service.get_food("orange"))


def test_get_food_falls_back_on_server_error(food_service) -> None:
    error = httpx.HTTPStatusError(
        "boom", request=_REQUEST, response=httpx.Response(500)
    )
    service = CatalogService(
        api_client=FakeFoodsApiClient(error=error), fallback=food_service
    )

    food = asyncio.run(service.get_food("spinach"))

    assert food.slug == "spinach"
    assert food.is_in_season is False


def test_favorite_foods_filters_by_id(foods, food_service) -> None:
    payloads = [serialize_food(food) for food in foods]
    service = CatalogService(
        api_client=FakeFoodsApiClient(payloads=payloads), fallback=food_service
    )

    results = asyncio.run(service.favorite_foods(["id-basil", "id-orange"]))

    assert [food.slug for food in results] == ["orange", "basil"]


def test_favorite_foods_empty_skips_api(food_service) -> None:
    api_client = FakeFoodsApiClient()
    service = CatalogService(api_client=api_client, fallback=food_service)

    assert asyncio.run(service.favorite_foods([])) == []
    assert api_client.queries == []


def test_favorites_summary_from_api(foods, food_service) -> None:
    payloads = [serialize_food(food) for food in foods]
    service = CatalogService(
        api_client=FakeFoodsApiClient(payloads=payloads), fallback=food_service
    )

    summary = asyncio.run(service.favorites_summary(["id-kiwi", "id-basil"]))

    assert summary is not None
    assert summary.categories == {"fruit": 1, "herb": 1}
    assert summary.most_common_benefit == "digestion"
    assert asyncio.run(service.favorites_summary([])) is None
