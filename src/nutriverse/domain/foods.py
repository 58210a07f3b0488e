"""Domain models for the food catalog."""

from dataclasses import dataclass, field

CATEGORIES = ("fruit", "vegetable", "herb")
HEALTH_GOALS = (
    "hair",
    "skin",
    "immunity",
    "heart",
    "brain",
    "digestion",
    "bones",
    "energy",
    "weight",
    "eyes",
)
SEASONS = ("spring", "summer", "fall", "winter")
VITAMIN_CODES = ("A", "B1", "B2", "B3", "B6", "B12", "C", "D", "E", "K")
MINERAL_CODES = (
    "calcium",
    "iron",
    "magnesium",
    "phosphorus",
    "potassium",
    "sodium",
    "zinc",
)


@dataclass(frozen=True)
class NutritionalFacts:
    """Macronutrients per 100g plus tracked vitamins and minerals.

    A missing vitamin or mineral key means the nutrient is not tracked,
    which is different from an amount of zero.
    """

    calories: float
    protein: float
    carbs: float
    fiber: float
    sugar: float
    fat: float
    vitamins: dict[str, float | None] = field(default_factory=dict)
    minerals: dict[str, float | None] = field(default_factory=dict)


@dataclass(frozen=True)
class HealthBenefit:
    """A health benefit tied to one health goal."""

    category: str
    description: str
    icon: str


@dataclass(frozen=True)
class Food:
    """A food record from the catalog."""

    id: str
    name: str
    slug: str
    category: str
    image: str
    short_description: str
    description: str
    nutritional_facts: NutritionalFacts
    benefits: tuple[HealthBenefit, ...]
    tags: tuple[str, ...]
    season: tuple[str, ...]
    fun_fact: str | None = None
    is_in_season: bool | None = None
