"""Aggregate views over groups of foods."""

import math
import random
from collections import Counter
from collections.abc import Sequence
from dataclasses import dataclass

from nutriverse.domain.foods import Food

FEATURED_COUNT = 3


@dataclass(frozen=True)
class CategorySummary:
    """Count and average macros for one category."""

    category: str
    count: int
    avg_calories: int
    avg_fiber: float
    avg_protein: float


@dataclass(frozen=True)
class FavoritesSummary:
    """Overview of a favorites list."""

    categories: dict[str, int]
    avg_calories: int
    most_common_benefit: str | None


@dataclass(frozen=True)
class FeaturedFoods:
    """A food of the day plus a few other highlights."""

    food_of_the_day: Food
    featured: list[Food]


def summarize_category(foods: Sequence[Food], category: str) -> CategorySummary | None:
    """Summarize the foods of a category, or ``None`` when it has none."""
    members = [food for food in foods if food.category == category]
    if not members:
        return None
    return CategorySummary(
        category=category,
        count=len(members),
        avg_calories=int(_round_half_up(_mean(members, "calories"))),
        avg_fiber=_round_half_up(_mean(members, "fiber"), digits=1),
        avg_protein=_round_half_up(_mean(members, "protein"), digits=1),
    )


def summarize_favorites(foods: Sequence[Food]) -> FavoritesSummary | None:
    """Summarize favorite foods, or ``None`` when there are none.

    Ties for the most common benefit go to the one seen first.
    """
    if not foods:
        return None
    categories = Counter(food.category for food in foods)
    benefits = Counter(
        benefit.category for food in foods for benefit in food.benefits
    )
    top = benefits.most_common(1)
    return FavoritesSummary(
        categories=dict(categories),
        avg_calories=int(_round_half_up(_mean(foods, "calories"))),
        most_common_benefit=top[0][0] if top else None,
    )


def pick_featured(
    foods: Sequence[Food], rng: random.Random, count: int = FEATURED_COUNT
) -> FeaturedFoods | None:
    """Pick a food of the day and up to ``count`` other foods."""
    if not foods:
        return None
    food_of_the_day = rng.choice(list(foods))
    others = [food for food in foods if food.id != food_of_the_day.id]
    return FeaturedFoods(
        food_of_the_day=food_of_the_day,
        featured=rng.sample(others, min(count, len(others))),
    )


def _mean(foods: Sequence[Food], macro: str) -> float:
    total = sum(getattr(food.nutritional_facts, macro) for food in foods)
    return total / len(foods)


def _round_half_up(value: float, digits: int = 0) -> float:
    scale = 10**digits
    return math.floor(value * scale + 0.5) / scale
