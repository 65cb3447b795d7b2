import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Response

from mealplan.api.dependencies import get_coordinator, get_plan_repository
from mealplan.domain.ShoppingList import ShoppingItem, export_text, group_by_category, summarize
from mealplan.infra.Plan_Repository import PlanRepository
from mealplan.logic.shopping.coordinator import ShoppingListCoordinator
from mealplan.logic.shopping.errors import ShoppingItemNotFoundError, StaleRegenerationError

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/shopping-list")


def _payload(week_id: str, items: List[ShoppingItem]) -> dict:
    return {
        "week_id": week_id,
        "items": [it.to_dict() for it in items],
        "count": len(items),
        "summary": summarize(items),
    }


@router.get("/{week_id}")
async def get_shopping_list(week_id: str, coordinator: ShoppingListCoordinator = Depends(get_coordinator)):
    """Stored list of a week; empty when it was never generated."""
    items = await coordinator.load_list(week_id) or []
    return _payload(week_id, items)


@router.get("/{week_id}/grouped")
async def get_grouped_shopping_list(week_id: str, coordinator: ShoppingListCoordinator = Depends(get_coordinator)):
    items = await coordinator.load_list(week_id) or []
    groups = group_by_category(items)
    return {
        "week_id": week_id,
        "groups": [{"category": c, "items": [it.to_dict() for it in rows]} for c, rows in groups.items()],
        "summary": summarize(items),
    }


@router.get("/{week_id}/export", response_class=Response)
async def export_shopping_list(week_id: str, coordinator: ShoppingListCoordinator = Depends(get_coordinator)):
    items = await coordinator.load_list(week_id) or []
    return Response(content=export_text(items), media_type="text/plain; charset=utf-8")


@router.post("/{week_id}/regenerate")
async def regenerate_shopping_list(week_id: str,
                                   coordinator: ShoppingListCoordinator = Depends(get_coordinator),
                                   plans: PlanRepository = Depends(get_plan_repository)):
    """Rebuild the list from the stored plan and wait for the result."""
    plan = plans.get_week_plan(week_id)
    try:
        items = await coordinator.regenerate(plan)
    except StaleRegenerationError:
        raise HTTPException(status_code=409, detail="superseded by a newer regeneration")
    return _payload(week_id, items)


@router.post("/{week_id}/items/{item_id}/toggle")
async def toggle_item(week_id: str, item_id: str, coordinator: ShoppingListCoordinator = Depends(get_coordinator)):
    try:
        items = await coordinator.toggle(week_id, item_id)
    except ShoppingItemNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return _payload(week_id, items)


@router.post("/{week_id}/clear-checked")
async def clear_checked_items(week_id: str, coordinator: ShoppingListCoordinator = Depends(get_coordinator)):
    items = await coordinator.clear_checked(week_id)
    return _payload(week_id, items)
