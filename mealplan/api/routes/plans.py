import logging
from typing import Dict, List, Optional, Union

from fastapi import APIRouter, Depends
from pydantic import BaseModel, ConfigDict, Field

from mealplan.api.dependencies import get_coordinator, get_plan_repository
from mealplan.domain.Plan import WeekPlan
from mealplan.infra.Plan_Repository import PlanRepository
from mealplan.logic.shopping.coordinator import ShoppingListCoordinator

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/plans")


class RecipeRefIn(BaseModel):
    id: str
    name: str = ""
    calories: float = 0


class QuickFoodIn(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str = ""
    name: str
    category: str = "snack"
    emoji: str = ""
    serving_size: str = Field("", alias="servingSize")
    calories: float = 0
    nutrition: Optional[Dict[str, float]] = None


# A slot holds either a bare recipe id or a {id, name, calories} reference
RecipeSlot = List[Union[str, RecipeRefIn]]


class DayPlanIn(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    day: str
    breakfast: RecipeSlot = []
    lunch: RecipeSlot = []
    dinner: RecipeSlot = []
    snacks: RecipeSlot = []
    breakfast_quick_foods: List[QuickFoodIn] = Field(default_factory=list, alias="breakfastQuickFoods")
    lunch_quick_foods: List[QuickFoodIn] = Field(default_factory=list, alias="lunchQuickFoods")
    dinner_quick_foods: List[QuickFoodIn] = Field(default_factory=list, alias="dinnerQuickFoods")


class WeekPlanIn(BaseModel):
    days: List[DayPlanIn] = []

    def to_week_plan(self, week_id: str) -> WeekPlan:
        return WeekPlan.from_dict({"id": week_id, "days": [d.model_dump() for d in self.days]})


@router.get("/{week_id}")
def get_plan(week_id: str, plans: PlanRepository = Depends(get_plan_repository)):
    return plans.get_week_plan(week_id).to_dict()


@router.put("/{week_id}")
async def save_plan(week_id: str, plan: WeekPlanIn,
                    coordinator: ShoppingListCoordinator = Depends(get_coordinator)):
    """Save the plan and refresh its shopping list in the background.

    Responds as soon as the plan is stored; the list follows shortly.
    """
    await coordinator.save_plan(plan.to_week_plan(week_id))
    return {"saved": True, "regenerating": True, "week_id": week_id}
