"""Wire models for the foods API."""

from pydantic import BaseModel, ConfigDict, Field

from nutriverse.domain.foods import Food
from nutriverse.services.summaries import CategorySummary, FeaturedFoods


class FoodActionRequest(BaseModel):
    """Body of ``POST /foods``."""

    model_config = ConfigDict(populate_by_name=True)

    action: str | None = None
    food_id: str | None = Field(default=None, alias="foodId")


class FoodActionResponse(BaseModel):
    """Acknowledgement for a food action."""

    success: bool
    message: str


def serialize_food(food: Food) -> dict[str, object]:
    """Serialize a food using the camelCase keys of the public API."""
    facts = food.nutritional_facts
    payload: dict[str, object] = {
        "id": food.id,
        "name": food.name,
        "slug": food.slug,
        "category": food.category,
        "image": food.image,
        "shortDescription": food.short_description,
        "description": food.description,
        "nutritionalFacts": {
            "calories": facts.calories,
            "protein": facts.protein,
            "carbs": facts.carbs,
            "fiber": facts.fiber,
            "sugar": facts.sugar,
            "fat": facts.fat,
            "vitamins": dict(facts.vitamins),
            "minerals": dict(facts.minerals),
        },
        "benefits": [
            {
                "category": benefit.category,
                "description": benefit.description,
                "icon": benefit.icon,
            }
            for benefit in food.benefits
        ],
        "tags": list(food.tags),
        "season": list(food.season),
    }
    if food.fun_fact is not None:
        payload["funFact"] = food.fun_fact
    if food.is_in_season is not None:
        payload["isInSeason"] = food.is_in_season
    return payload


def serialize_category_summary(summary: CategorySummary) -> dict[str, object]:
    return {
        "category": summary.category,
        "count": summary.count,
        "avgCalories": summary.avg_calories,
        "avgFiber": summary.avg_fiber,
        "avgProtein": summary.avg_protein,
    }


def serialize_featured(featured: FeaturedFoods) -> dict[str, object]:
    return {
        "foodOfTheDay": serialize_food(featured.food_of_the_day),
        "featured": [serialize_food(food) for food in featured.featured],
    }
