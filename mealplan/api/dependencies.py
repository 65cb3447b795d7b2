"""FastAPI dependency providers.

The coordinator is built on first use and shared by every request so that
per-week generations and locks are process-wide. Tests swap any of these
through ``app.dependency_overrides``.
"""
import logging
from typing import Optional

from mealplan.api.api_ai import build_default_cleaner
from mealplan.infra.Plan_Repository import PlanRepository
from mealplan.infra.Recipe_Repository import RecipeRepository
from mealplan.infra.ShoppingList_Repository import ShoppingListRepository
from mealplan.logic.shopping.coordinator import ShoppingListCoordinator
from mealplan.utilities.config import DEFAULT_LANGUAGE

logger = logging.getLogger(__name__)

_coordinator: Optional[ShoppingListCoordinator] = None


def get_plan_repository() -> PlanRepository:
    return PlanRepository()


def get_recipe_repository() -> RecipeRepository:
    return RecipeRepository()


def get_coordinator() -> ShoppingListCoordinator:
    global _coordinator
    if _coordinator is None:
        _coordinator = ShoppingListCoordinator(
            ShoppingListRepository(),
            cleaner=build_default_cleaner(),
            plan_store=get_plan_repository(),
            catalog_loader=get_recipe_repository().load_catalog,
            language=DEFAULT_LANGUAGE,
        )
        logger.info("Shopping list coordinator ready (language=%s)", DEFAULT_LANGUAGE)
    return _coordinator


def reset_coordinator() -> None:
    global _coordinator
    _coordinator = None
