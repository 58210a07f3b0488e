"""Parsing, validation and in-memory storage for food records."""

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field

from nutriverse.domain.errors import FoodNotFoundError, InvalidFoodDataError
from nutriverse.domain.foods import (
    CATEGORIES,
    HEALTH_GOALS,
    SEASONS,
    Food,
    HealthBenefit,
    NutritionalFacts,
)
from nutriverse.services.foods import FoodRepository

_MACRO_FIELDS = ("calories", "protein", "carbs", "fiber", "sugar", "fat")


@dataclass(frozen=True)
class FoodSnapshot(FoodRepository):
    """Immutable, ordered collection of foods with slug lookup."""

    foods: tuple[Food, ...]
    _slug_index: dict[str, Food] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        validate_foods(self.foods)
        object.__setattr__(
            self, "_slug_index", {food.slug: food for food in self.foods}
        )

    def all(self) -> list[Food]:
        """Return every food in load order."""
        return list(self.foods)

    def by_slug(self, slug: str) -> Food:
        """Return the food with the slug."""
        food = self._slug_index.get(slug)
        if food is None:
            raise FoodNotFoundError(slug)
        return food

    def by_ids(self, food_ids: Iterable[str]) -> list[Food]:
        """Return foods with the given ids, in load order."""
        wanted = set(food_ids)
        return [food for food in self.foods if food.id in wanted]


def validate_foods(foods: Iterable[Food]) -> None:  # noqa: PLR0912
    """Raise ``InvalidFoodDataError`` when records break catalog invariants."""
    slugs: set[str] = set()
    for food in foods:
        if food.slug in slugs:
            raise InvalidFoodDataError(f"Duplicate slug: {food.slug}")
        slugs.add(food.slug)
        if food.category not in CATEGORIES:
            raise InvalidFoodDataError(
                f"Unknown category {food.category!r} for {food.slug}"
            )
        for benefit in food.benefits:
            if benefit.category not in HEALTH_GOALS:
                raise InvalidFoodDataError(
                    f"Unknown benefit category {benefit.category!r} for {food.slug}"
                )
        for season in food.season:
            if season not in SEASONS:
                raise InvalidFoodDataError(
                    f"Unknown season {season!r} for {food.slug}"
                )
        facts = food.nutritional_facts
        for name in _MACRO_FIELDS:
            if getattr(facts, name) < 0:
                raise InvalidFoodDataError(f"Negative {name} for {food.slug}")
        for key, amount in (*facts.vitamins.items(), *facts.minerals.items()):
            if amount is not None and amount < 0:
                raise InvalidFoodDataError(f"Negative {key} for {food.slug}")


def parse_food(row: Mapping[str, object]) -> Food:
    """Parse a raw record into a domain model.

    Accepts the camelCase keys of the bundled JSON file and the snake_case
    column names of database rows.
    """
    if not isinstance(row, Mapping):
        raise InvalidFoodDataError(
            f"Malformed food record: expected an object, got {type(row).__name__}"
        )
    try:
        facts_raw = _pick(row, "nutritionalFacts", "nutritional_facts") or {}
        return Food(
            id=str(row["id"]),
            name=str(row["name"]),
            slug=str(row["slug"]),
            category=str(row["category"]),
            image=str(row.get("image") or ""),
            short_description=str(
                _pick(row, "shortDescription", "short_description") or ""
            ),
            description=str(row.get("description") or ""),
            nutritional_facts=_parse_facts(facts_raw),
            benefits=tuple(
                HealthBenefit(
                    category=str(item["category"]),
                    description=str(item.get("description", "")),
                    icon=str(item.get("icon", "")),
                )
                for item in row.get("benefits") or []
            ),
            tags=tuple(str(tag) for tag in row.get("tags") or []),
            season=tuple(str(season) for season in row.get("season") or []),
            fun_fact=_pick(row, "funFact", "fun_fact"),
        )
    except (KeyError, TypeError, ValueError) as exc:
        raise InvalidFoodDataError(
            f"Malformed food record {row.get('slug', '?')}: {exc}"
        ) from exc


def _parse_facts(raw: Mapping[str, object]) -> NutritionalFacts:
    macros = {name: _number(raw[name]) for name in _MACRO_FIELDS}
    return NutritionalFacts(
        **macros,
        vitamins=_parse_amounts(raw.get("vitamins")),
        minerals=_parse_amounts(raw.get("minerals")),
    )


def _parse_amounts(raw: object) -> dict[str, float | None]:
    if not isinstance(raw, Mapping):
        return {}
    return {
        str(key): _number(value) if value is not None else None
        for key, value in raw.items()
    }


def _number(value: object) -> float:
    """Return a JSON number unchanged, so integers stay integers."""
    if isinstance(value, bool) or not isinstance(value, int | float):
        raise TypeError(f"expected a number, got {value!r}")
    return value


def _pick(row: Mapping[str, object], *keys: str) -> object | None:
    for key in keys:
        if key in row:
            return row[key]
    return None
