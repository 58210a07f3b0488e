"""Food repository backed by the bundled JSON dataset."""

import json
import logging
from pathlib import Path

from nutriverse.adapters.food_records import FoodSnapshot, parse_food
from nutriverse.domain.errors import InvalidFoodDataError

DEFAULT_DATA_PATH = Path(__file__).resolve().parents[1] / "data" / "foods.json"

_logger = logging.getLogger(__name__)


class JsonFoodRepository(FoodSnapshot):
    """Loads the catalog from a JSON array file once, at construction."""

    @classmethod
    def from_path(cls, path: Path | str | None = None) -> "JsonFoodRepository":
        """Read and validate the dataset at ``path`` (bundled file by default)."""
        resolved = Path(path) if path else DEFAULT_DATA_PATH
        with resolved.open(encoding="utf-8") as handle:
            payload = json.load(handle)
        if not isinstance(payload, list):
            raise InvalidFoodDataError(f"Expected a JSON array in {resolved}")
        repository = cls(foods=tuple(parse_food(row) for row in payload))
        _logger.info("Loaded %s foods from %s", len(repository.foods), resolved)
        return repository
