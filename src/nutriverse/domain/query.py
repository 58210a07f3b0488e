"""Query model for narrowing the food catalog."""

from collections.abc import Mapping
from dataclasses import dataclass

ALL_CATEGORIES = "all"

_PARAM_NAMES = {
    "category": "category",
    "search": "search",
    "vitamin": "vitamin",
    "mineral": "mineral",
    "health_goal": "healthGoal",
    "season": "season",
    "nutrient": "nutrient",
    "benefit": "benefit",
}


@dataclass(frozen=True)
class FoodQuery:
    """Optional, independently combinable filters plus a free-text term."""

    category: str | None = None
    search: str | None = None
    vitamin: str | None = None
    mineral: str | None = None
    health_goal: str | None = None
    season: str | None = None
    nutrient: str | None = None
    benefit: str | None = None

    def __post_init__(self) -> None:
        for name in _PARAM_NAMES:
            value = getattr(self, name)
            if value is not None and not value.strip():
                object.__setattr__(self, name, None)
        if self.category == ALL_CATEGORIES:
            object.__setattr__(self, "category", None)

    @classmethod
    def from_params(cls, params: Mapping[str, str | None]) -> "FoodQuery":
        """Build a query from wire parameter names such as ``healthGoal``."""
        return cls(
            **{name: params.get(param) for name, param in _PARAM_NAMES.items()}
        )

    def active_filters(self) -> dict[str, str]:
        """Return the non-empty fields keyed by wire parameter name."""
        return {
            param: getattr(self, name)
            for name, param in _PARAM_NAMES.items()
            if getattr(self, name) is not None
        }
