"""Seasonal flag derivation."""

from dataclasses import replace
from datetime import date

from nutriverse.domain.foods import Food

_MONTH_SEASONS = (
    "winter",
    "winter",
    "spring",
    "spring",
    "spring",
    "summer",
    "summer",
    "summer",
    "fall",
    "fall",
    "fall",
    "winter",
)


def season_for_month(month_index: int) -> str:
    """Return the season for a 0-indexed month (0 is January)."""
    if not 0 <= month_index < len(_MONTH_SEASONS):
        raise ValueError(f"Month index out of range: {month_index}")
    return _MONTH_SEASONS[month_index]


def current_season(today: date | None = None) -> str:
    """Return the season label for today, or for the given date."""
    resolved = today or date.today()
    return season_for_month(resolved.month - 1)


def with_season_flag(food: Food, season: str) -> Food:
    """Return a copy of the food with ``is_in_season`` set for the season."""
    return replace(food, is_in_season=season in food.season)
