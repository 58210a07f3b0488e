"""Filtering and relevance ranking over the food catalog.

Every filter is an independent predicate, so the order in which they are
applied never changes the resulting set. Relevance scores only reorder
results; they never drop a record that passed the filters.
"""

from collections.abc import Callable, Iterable, Sequence

from nutriverse.domain.foods import Food
from nutriverse.domain.query import FoodQuery
from nutriverse.services.seasons import with_season_flag

NAME_WEIGHT = 10
SHORT_DESCRIPTION_WEIGHT = 5
TAG_WEIGHT = 3
BENEFIT_CATEGORY_WEIGHT = 4
BENEFIT_DESCRIPTION_WEIGHT = 2
VITAMIN_KEYS_WEIGHT = 3
MINERAL_KEYS_WEIGHT = 3

Predicate = Callable[[Food], bool]


def _contains(text: str, term: str) -> bool:
    return term in text.lower()


def _matches_search(food: Food, term: str) -> bool:
    return (
        _contains(food.name, term)
        or _contains(food.short_description, term)
        or _contains(food.description, term)
        or any(_contains(tag, term) for tag in food.tags)
        or _matches_benefit(food, term)
    )


def _matches_benefit(food: Food, term: str) -> bool:
    return any(
        _contains(benefit.category, term) or _contains(benefit.description, term)
        for benefit in food.benefits
    )


def _matches_nutrient(food: Food, term: str) -> bool:
    facts = food.nutritional_facts
    return any(_contains(key, term) for key in (*facts.vitamins, *facts.minerals))


def _predicates(query: FoodQuery) -> list[Predicate]:
    """Build one predicate per active filter."""
    predicates: list[Predicate] = []
    if query.category:
        category = query.category
        predicates.append(lambda food: food.category == category)
    if query.search:
        term = query.search.lower()
        predicates.append(lambda food: _matches_search(food, term))
    if query.vitamin:
        vitamin = query.vitamin
        predicates.append(
            lambda food: bool(food.nutritional_facts.vitamins.get(vitamin))
        )
    if query.mineral:
        mineral = query.mineral
        predicates.append(
            lambda food: bool(food.nutritional_facts.minerals.get(mineral))
        )
    if query.nutrient:
        nutrient = query.nutrient.lower()
        predicates.append(lambda food: _matches_nutrient(food, nutrient))
    if query.benefit:
        benefit = query.benefit.lower()
        predicates.append(lambda food: _matches_benefit(food, benefit))
    if query.health_goal:
        goal = query.health_goal
        predicates.append(
            lambda food: any(item.category == goal for item in food.benefits)
        )
    if query.season:
        season = query.season
        predicates.append(lambda food: season in food.season)
    return predicates


def matches_query(food: Food, query: FoodQuery) -> bool:
    """Return true when the food passes every active filter."""
    return all(predicate(food) for predicate in _predicates(query))


def filter_foods(foods: Iterable[Food], query: FoodQuery) -> list[Food]:
    """Apply each active filter as its own pass, keeping input order."""
    candidates = list(foods)
    for predicate in _predicates(query):
        candidates = [food for food in candidates if predicate(food)]
    return candidates


def relevance_score(food: Food, term: str) -> int:
    """Return the additive relevance score of a food for a search term."""
    query = term.lower()
    score = 0
    if _contains(food.name, query):
        score += NAME_WEIGHT
    if _contains(food.short_description, query):
        score += SHORT_DESCRIPTION_WEIGHT
    score += TAG_WEIGHT * sum(1 for tag in food.tags if _contains(tag, query))
    for benefit in food.benefits:
        if _contains(benefit.category, query):
            score += BENEFIT_CATEGORY_WEIGHT
        if _contains(benefit.description, query):
            score += BENEFIT_DESCRIPTION_WEIGHT
    facts = food.nutritional_facts
    if _contains(" ".join(facts.vitamins), query):
        score += VITAMIN_KEYS_WEIGHT
    if _contains(" ".join(facts.minerals), query):
        score += MINERAL_KEYS_WEIGHT
    return score


def rank_foods(foods: Sequence[Food], term: str) -> list[Food]:
    """Sort by descending relevance; ties keep their input order."""
    return sorted(foods, key=lambda food: relevance_score(food, term), reverse=True)


def run_query(foods: Iterable[Food], query: FoodQuery, season: str) -> list[Food]:
    """Filter, rank when searching, then attach the seasonal flag."""
    results = filter_foods(foods, query)
    if query.search:
        results = rank_foods(results, query.search)
    return [with_season_flag(food, season) for food in results]
