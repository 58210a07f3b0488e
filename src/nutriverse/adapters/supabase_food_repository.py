"""Supabase-backed snapshot of the food catalog."""

import logging

from supabase import Client

from nutriverse.adapters.food_records import FoodSnapshot, parse_food

_logger = logging.getLogger(__name__)


class SupabaseFoodRepository(FoodSnapshot):
    """Reads the foods table once and serves it from memory.

    Rows are ordered by a numeric position column; text ids would sort
    "10" before "2" and break the catalog's load order.
    """

    @classmethod
    def load(
        cls,
        client: Client,
        table: str = "foods",
        order_column: str = "position",
    ) -> "SupabaseFoodRepository":
        """Fetch every row of ``table`` ordered by ``order_column``."""
        response = client.table(table).select("*").order(order_column).execute()
        rows = response.data or []
        repository = cls(foods=tuple(parse_food(row) for row in rows))
        _logger.info("Loaded %s foods from Supabase table %s", len(rows), table)
        return repository
