"""Foods API endpoints."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from fastapi import APIRouter, HTTPException, Request, status

from nutriverse.api.food_models import (
    FoodActionRequest,
    FoodActionResponse,
    serialize_food,
)
from nutriverse.domain.errors import FoodNotFoundError, InvalidActionError
from nutriverse.domain.query import FoodQuery

if TYPE_CHECKING:
    from nutriverse.containers import AppContainer

router = APIRouter(prefix="/foods", tags=["foods"])

_logger = logging.getLogger(__name__)


@router.get("")
async def list_foods(request: Request) -> list[dict[str, object]]:
    """Return foods matching the filters, ranked by relevance when searching.

    Accepts the query parameters category, search, vitamin, mineral,
    healthGoal, season, nutrient and benefit.
    """
    container: AppContainer = request.app.state.container
    query = FoodQuery.from_params(request.query_params)
    try:
        foods = container.food_service.list_foods(query)
    except Exception as exc:
        _logger.exception(
            "Error fetching foods", extra={"filters": query.active_filters()}
        )
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to fetch foods",
        ) from exc
    return [serialize_food(food) for food in foods]


@router.get("/{slug}")
async def get_food(slug: str, request: Request) -> dict[str, object]:
    """Return a single food by slug."""
    container: AppContainer = request.app.state.container
    try:
        food = container.food_service.get_food(slug)
    except FoodNotFoundError as exc:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail="Food not found"
        ) from exc
    except Exception as exc:
        _logger.exception("Error fetching food", extra={"slug": slug})
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to fetch food",
        ) from exc
    return serialize_food(food)


@router.post("")
async def food_action(
    payload: FoodActionRequest, request: Request
) -> FoodActionResponse:
    """Acknowledge a favorite request; nothing is persisted server-side."""
    container: AppContainer = request.app.state.container
    try:
        container.favorite_intent_service.handle(payload.action, payload.food_id)
    except InvalidActionError as exc:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST, detail="Invalid action"
        ) from exc
    return FoodActionResponse(success=True, message="Favorite updated")
