"""Client-side catalog access with a local fallback."""

import logging
from collections.abc import Iterable
from dataclasses import dataclass, replace

import httpx

from nutriverse.adapters.food_records import parse_food
from nutriverse.adapters.foods_api_client import FoodsApiClient
from nutriverse.domain.errors import FoodNotFoundError
from nutriverse.domain.foods import Food
from nutriverse.domain.query import FoodQuery
from nutriverse.services.foods import FoodService
from nutriverse.services.summaries import FavoritesSummary, summarize_favorites

_logger = logging.getLogger(__name__)

_NOT_FOUND = 404


@dataclass
class CatalogService:
    """Reads foods from the API, evaluating queries locally when it fails.

    Both paths go through the same query engine, so filter semantics cannot
    drift between the server and the fallback.
    """

    api_client: FoodsApiClient
    fallback: FoodService

    async def list_foods(self, query: FoodQuery | None = None) -> list[Food]:
        """Return foods matching the query."""
        resolved = query or FoodQuery()
        try:
            payload = await self.api_client.list_foods(resolved)
        except httpx.HTTPError:
            _logger.warning(
                "Foods API unavailable, evaluating query locally",
                extra={"filters": resolved.active_filters()},
                exc_info=True,
            )
            return self.fallback.list_foods(resolved)
        return [_food_from_payload(row) for row in payload]

    async def get_food(self, slug: str) -> Food:
        """Return a single food by slug."""
        try:
            payload = await self.api_client.get_food(slug)
        except httpx.HTTPStatusError as exc:
            if exc.response.status_code == _NOT_FOUND:
                raise FoodNotFoundError(slug) from exc
            _logger.warning("Foods API failed for %s, using local data", slug)
            return self.fallback.get_food(slug)
        except httpx.HTTPError:
            _logger.warning("Foods API unavailable for %s, using local data", slug)
            return self.fallback.get_food(slug)
        return _food_from_payload(payload)

    async def favorite_foods(self, food_ids: Iterable[str]) -> list[Food]:
        """Return the foods for a favorites list, in catalog order."""
        wanted = set(food_ids)
        if not wanted:
            return []
        foods = await self.list_foods()
        return [food for food in foods if food.id in wanted]

    async def favorites_summary(
        self, food_ids: Iterable[str]
    ) -> FavoritesSummary | None:
        """Summarize a favorites list; ``None`` when it is empty."""
        return summarize_favorites(await self.favorite_foods(food_ids))


def _food_from_payload(payload: dict[str, object]) -> Food:
    in_season = payload.get("isInSeason")
    return replace(
        parse_food(payload),
        is_in_season=in_season if isinstance(in_season, bool) else None,
    )
