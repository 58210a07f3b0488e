"""Shared test fixtures."""

from dataclasses import dataclass, field
from datetime import date

import pytest

from nutriverse.adapters.food_records import FoodSnapshot
from nutriverse.config import Settings
from nutriverse.containers import AppContainer
from nutriverse.domain.foods import Food, HealthBenefit, NutritionalFacts
from nutriverse.services.foods import FavoriteIntentService, FoodService

JANUARY = date(2025, 1, 15)
JULY = date(2025, 7, 15)


def make_food(  # noqa: PLR0913
    slug: str,
    *,
    name: str | None = None,
    category: str = "fruit",
    short_description: str = "",
    description: str = "",
    vitamins: dict[str, float | None] | None = None,
    minerals: dict[str, float | None] | None = None,
    benefits: list[tuple[str, str]] | None = None,
    tags: list[str] | None = None,
    season: list[str] | None = None,
) -> Food:
    """Build a food with sensible defaults for tests."""
    return Food(
        id=f"id-{slug}",
        name=name or slug.title(),
        slug=slug,
        category=category,
        image=f"/images/{slug}.jpg",
        short_description=short_description,
        description=description,
        nutritional_facts=NutritionalFacts(
            calories=50,
            protein=1,
            carbs=10,
            fiber=2,
            sugar=5,
            fat=0.2,
            vitamins=vitamins or {},
            minerals=minerals or {},
        ),
        benefits=tuple(
            HealthBenefit(category=category_, description=text, icon="icon")
            for category_, text in benefits or []
        ),
        tags=tuple(tags or []),
        season=tuple(season or []),
    )


@dataclass
class FixedClock:
    """Clock returning a settable date."""

    current: date = field(default=JANUARY)

    def __call__(self) -> date:
        return self.current


@pytest.fixture
def foods() -> list[Food]:
    return [
        make_food(
            "orange",
            short_description="A juicy citrus fruit packed with vitamin C.",
            description="Oranges are a winter citrus.",
            vitamins={"C": 53.2, "A": 11},
            minerals={"calcium": 40, "potassium": 181},
            benefits=[("immunity", "Vitamin C supports the immune system.")],
            tags=["citrus", "vitamin c"],
            season=["winter", "spring"],
        ),
        make_food(
            "kiwi",
            description="Kiwi has even more vitamin C than citrus fruits.",
            vitamins={"C": 92.7, "K": 40.3},
            minerals={"potassium": 312},
            benefits=[("digestion", "Actinidin helps break down protein.")],
            tags=["tropical"],
            season=["fall", "winter"],
        ),
        make_food(
            "spinach",
            category="vegetable",
            short_description="A leafy green rich in iron.",
            vitamins={"K": 482.9, "A": 469, "C": 0},
            minerals={"iron": 2.7, "magnesium": 79},
            benefits=[
                ("bones", "Vitamin K helps bones absorb calcium."),
                ("eyes", "Lutein protects the eyes."),
            ],
            tags=["leafy greens", "iron"],
            season=["spring", "fall"],
        ),
        make_food(
            "basil",
            category="herb",
            short_description="A fragrant summer herb.",
            vitamins={"K": 414.8},
            minerals={"calcium": 177, "iron": None},
            benefits=[("digestion", "Essential oils soothe the stomach.")],
            tags=["aromatic"],
            season=["summer"],
        ),
        make_food(
            "rosemary",
            category="herb",
            short_description="A woody evergreen herb.",
            vitamins={"A": 146},
            minerals={"calcium": 317, "iron": 6.7},
            benefits=[("hair", "Rosemary oil supports hair growth.")],
            tags=["aromatic", "evergreen"],
            season=["spring", "summer", "fall", "winter"],
        ),
    ]


@pytest.fixture
def food_repository(foods: list[Food]) -> FoodSnapshot:
    return FoodSnapshot(foods=tuple(foods))


@pytest.fixture
def clock() -> FixedClock:
    return FixedClock()


@pytest.fixture
def food_service(food_repository: FoodSnapshot, clock: FixedClock) -> FoodService:
    return FoodService(food_repository, today=clock)


@pytest.fixture
def settings() -> Settings:
    return Settings(environment="test", food_source="json")


@pytest.fixture
def container(
    settings: Settings,
    food_repository: FoodSnapshot,
    food_service: FoodService,
) -> AppContainer:
    return AppContainer(
        settings=settings,
        food_repository=food_repository,
        food_service=food_service,
        favorite_intent_service=FavoriteIntentService(),
    )
