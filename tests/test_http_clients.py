"""Tests for HTTP-based adapters."""

import asyncio
import json

import httpx
import pytest

from nutriverse.adapters.foods_api_client import HttpxFoodsApiClient
from nutriverse.domain.query import FoodQuery


def _client(handler) -> HttpxFoodsApiClient:  # type: ignore[no-untyped-def]
    transport = httpx.MockTransport(handler)
    return HttpxFoodsApiClient(
        base_url="https://nutriverse.test",
        http_client=httpx.AsyncClient(transport=transport),
    )


def test_list_foods_sends_active_filters() -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json=[{"slug": "orange"}])

    client = _client(handler)

    result = asyncio.run(
        client.list_foods(FoodQuery(category="fruit", health_goal="immunity"))
    )

    assert result == [{"slug": "orange"}]
    assert seen[0].url.path == "/foods"
    assert dict(seen[0].url.params) == {"category": "fruit", "healthGoal": "immunity"}


def test_get_food_raises_for_missing_slug() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        assert request.url.path == "/foods/durian"
        return httpx.Response(404, json={"error": "Food not found"})

    client = _client(handler)

    with pytest.raises(httpx.HTTPStatusError):
        asyncio.run(client.get_food("durian"))


def test_send_action_posts_camel_case_body() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        assert request.method == "POST"
        assert json.loads(request.content) == {
            "action": "favorite",
            "foodId": "id-orange",
        }
        return httpx.Response(200, json={"success": True, "message": "ok"})

    client = _client(handler)

    result = asyncio.run(client.send_action("favorite", "id-orange"))

    assert result["success"] is True


def test_create_strips_trailing_slash() -> None:
    client = HttpxFoodsApiClient.create("https://nutriverse.test/api/")

    assert client.base_url == "https://nutriverse.test/api"
    asyncio.run(client.close())
