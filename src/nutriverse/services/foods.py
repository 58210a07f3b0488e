"""Application services for browsing the food catalog."""

import logging
import random
from collections.abc import Callable, Iterable
from dataclasses import dataclass, field
from datetime import date
from typing import Protocol

from nutriverse.domain.errors import InvalidActionError
from nutriverse.domain.foods import (
    CATEGORIES,
    HEALTH_GOALS,
    MINERAL_CODES,
    SEASONS,
    VITAMIN_CODES,
    Food,
)
from nutriverse.domain.query import FoodQuery
from nutriverse.services.query_engine import run_query
from nutriverse.services.seasons import current_season, with_season_flag
from nutriverse.services.summaries import (
    CategorySummary,
    FavoritesSummary,
    FeaturedFoods,
    pick_featured,
    summarize_category,
    summarize_favorites,
)

FAVORITE_ACTION = "favorite"

_logger = logging.getLogger(__name__)


class FoodRepository(Protocol):
    """Read-only access to the food catalog."""

    def all(self) -> list[Food]:
        """Return every food in load order."""

    def by_slug(self, slug: str) -> Food:
        """Return the food with the slug or raise ``FoodNotFoundError``."""

    def by_ids(self, food_ids: Iterable[str]) -> list[Food]:
        """Return foods whose ids are given, in load order."""


@dataclass
class FoodService:
    """Application service for catalog queries."""

    repository: FoodRepository
    today: Callable[[], date] = field(default=date.today)
    rng: random.Random = field(default_factory=random.Random)

    def list_foods(self, query: FoodQuery | None = None) -> list[Food]:
        """Return foods matching the query, ranked when a search term is set."""
        resolved = query or FoodQuery()
        results = run_query(self.repository.all(), resolved, self._season())
        _logger.debug(
            "Food query: filters=%s results=%s",
            resolved.active_filters(),
            len(results),
        )
        return results

    def get_food(self, slug: str) -> Food:
        """Return a single food with its seasonal flag."""
        return with_season_flag(self.repository.by_slug(slug), self._season())

    def get_foods_by_ids(self, food_ids: Iterable[str]) -> list[Food]:
        """Return the foods for a set of ids, such as a favorites list."""
        season = self._season()
        return [
            with_season_flag(food, season)
            for food in self.repository.by_ids(food_ids)
        ]

    def filter_options(self) -> dict[str, list[str]]:
        """Return the values offered by filter controls."""
        return {
            "categories": list(CATEGORIES),
            "vitamins": list(VITAMIN_CODES),
            "minerals": list(MINERAL_CODES),
            "healthGoals": list(HEALTH_GOALS),
            "seasons": list(SEASONS),
        }

    def category_summary(self, category: str) -> CategorySummary | None:
        """Return count and average macros for a category."""
        return summarize_category(self.repository.all(), category)

    def favorites_summary(self, food_ids: Iterable[str]) -> FavoritesSummary | None:
        """Summarize a favorites list; ``None`` when it is empty."""
        return summarize_favorites(self.get_foods_by_ids(food_ids))

    def featured(self) -> FeaturedFoods | None:
        """Pick a food of the day and a few featured foods."""
        season = self._season()
        picked = pick_featured(self.repository.all(), self.rng)
        if picked is None:
            return None
        return FeaturedFoods(
            food_of_the_day=with_season_flag(picked.food_of_the_day, season),
            featured=[with_season_flag(food, season) for food in picked.featured],
        )

    def _season(self) -> str:
        return current_season(self.today())


@dataclass
class FavoriteIntentService:
    """Accepts favorite requests without persisting them server-side."""

    def handle(self, action: object, food_id: object) -> None:
        """Validate a food action request."""
        if action != FAVORITE_ACTION:
            raise InvalidActionError(action)
        _logger.info("Favorite intent received: food_id=%s", food_id)
