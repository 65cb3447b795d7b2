"""regenerate_shopping_list: the whole plan -> shopping list pass.

Every step is synchronous except the name-cleaning call, which is the only
await point.
"""
import logging
from typing import Any, List, Optional, Sequence

from mealplan.domain.Plan import WeekPlan
from mealplan.domain.ShoppingList import ShoppingItem
from mealplan.events.Event_Bus import GLOBAL_EVENT_BUS, SHOPPING_CLEANING_DEGRADED, EventBus
from mealplan.logic.shopping.collector import Collection, collect
from mealplan.logic.shopping.list_builder import build_shopping_list
from mealplan.logic.shopping.name_cleaning import NameCleaner, clean_names_with_fallback
from mealplan.logic.shopping.normalizer import contains_chinese
from mealplan.logic.shopping.reconciler import reconcile_checked
from mealplan.utilities.config import NAME_CLEANING_TIMEOUT

logger = logging.getLogger(__name__)


async def build_from_collection(collection: Collection, cleaner: Optional[NameCleaner] = None, *,
                                language: str = 'en', timeout: float = NAME_CLEANING_TIMEOUT,
                                event_bus: EventBus = GLOBAL_EVENT_BUS) -> List[ShoppingItem]:
    """Clean and build rows for an already collected plan (checked flags all False)."""
    if collection.missing_recipe_ids:
        logger.warning("Shopping list built without %d recipe(s) missing from the catalog: %s",
                       len(collection.missing_recipe_ids), ", ".join(collection.missing_recipe_ids))
    if collection.is_empty():
        return []
    names = collection.ingredient_names()
    # English lists get Chinese names translated on the way through the cleaner
    translate = language != 'zh' and any(contains_chinese(n) for n in names)
    result = await clean_names_with_fallback(names, cleaner, timeout=timeout, translate=translate)
    if result.degraded:
        event_bus.publish(SHOPPING_CLEANING_DEGRADED, {'reason': result.degraded_reason, 'count': len(names)})
    return build_shopping_list(collection.ingredients, result.names, collection.quick_foods)


async def regenerate_shopping_list(week_plan: WeekPlan, recipe_catalog: Any,
                                   previous_list: Optional[Sequence[ShoppingItem]] = None,
                                   cleaner: Optional[NameCleaner] = None, *, language: str = 'en',
                                   timeout: float = NAME_CLEANING_TIMEOUT,
                                   event_bus: EventBus = GLOBAL_EVENT_BUS) -> List[ShoppingItem]:
    """Rebuild the shopping list of ``week_plan``.

    Resolves with the new rows, checked flags carried over from
    ``previous_list``. Raises CollaboratorUnavailableError only when the
    recipe catalog itself fails; a failing cleaner just means uncleaned names.
    An empty week returns an empty list without calling the cleaner.
    """
    collection = collect(week_plan, recipe_catalog, language=language)
    if collection.is_empty():
        logger.info("Week %s has no ingredients or quick foods; empty shopping list", week_plan.id)
        return []
    items = await build_from_collection(collection, cleaner, language=language, timeout=timeout,
                                        event_bus=event_bus)
    return reconcile_checked(items, previous_list)


__all__ = ['regenerate_shopping_list', 'build_from_collection']
