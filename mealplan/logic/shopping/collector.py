"""Walk a week plan and collect the unique ingredients and quick foods it needs."""
import logging
from typing import Any, List, Optional

from mealplan.domain.Plan import WeekPlan
from mealplan.domain.QuickFood import QuickFood
from mealplan.domain.Recipe import Recipe
from mealplan.domain.ShoppingList import Category
from mealplan.logic.shopping.categorizer import categorize
from mealplan.logic.shopping.errors import CollaboratorUnavailableError
from mealplan.logic.shopping.normalizer import normalize_ingredient, name_key

logger = logging.getLogger(__name__)


class CollectedIngredient:
    """One unique ingredient found in the plan.

    ``name`` is the normalizer's display form and is what gets sent for
    cleaning; ``category`` is fixed here and survives cleaning unchanged.
    """

    def __init__(self, key: str, name: str, raw_name: str, category: Category):
        self.key = key
        self.name = name
        self.raw_name = raw_name
        self.category = category

    def __str__(self) -> str:
        return f"{self.name} [{self.category.value}]"

    __repr__ = __str__


class Collection:
    def __init__(self, ingredients: Optional[List[CollectedIngredient]] = None,
                 quick_foods: Optional[List[QuickFood]] = None,
                 missing_recipe_ids: Optional[List[str]] = None):
        self.ingredients = ingredients or []
        self.quick_foods = quick_foods or []
        self.missing_recipe_ids = missing_recipe_ids or []

    def is_empty(self) -> bool:
        return not self.ingredients and not self.quick_foods

    def ingredient_names(self) -> List[str]:
        return [ing.name for ing in self.ingredients]


def lookup_recipe(catalog: Any, recipe_id: str) -> Optional[Recipe]:
    """Resolve ``recipe_id`` against a catalog object, a mapping or a lookup callable.

    Any failure of the catalog itself becomes CollaboratorUnavailableError.
    """
    try:
        if hasattr(catalog, 'get_recipe_by_id'):
            return catalog.get_recipe_by_id(recipe_id)
        if callable(catalog):
            return catalog(recipe_id)
        return catalog.get(recipe_id)
    except Exception as e:
        raise CollaboratorUnavailableError('recipe catalog', e) from e


def collect(week_plan: WeekPlan, catalog: Any, language: str = 'en') -> Collection:
    """Collect unique ingredients (discovery order) and unique quick foods.

    First occurrence wins for both; later duplicates are dropped. Recipe
    references that no longer resolve are skipped.
    """
    ingredients: dict = {}
    quick_foods: dict = {}
    missing: List[str] = []

    for day in week_plan.days:
        for ref in day.all_recipes():
            recipe = lookup_recipe(catalog, ref.id)
            if recipe is None:
                logger.info("Skipping recipe %s (%s) on %s: not in catalog", ref.id, ref.name, day.day)
                missing.append(ref.id)
                continue
            for ingredient in recipe.ingredients_for(language):
                normalized = normalize_ingredient(ingredient.name)
                if not normalized.key or normalized.key in ingredients:
                    continue
                ingredients[normalized.key] = CollectedIngredient(
                    normalized.key, normalized.display, ingredient.name, categorize(normalized.key)
                )

        for food in day.all_quick_foods():
            k = name_key(food.name)
            if k and k not in quick_foods:
                quick_foods[k] = food

    logger.debug("Collected %d ingredients and %d quick foods for %s",
                 len(ingredients), len(quick_foods), week_plan.id)
    return Collection(list(ingredients.values()), list(quick_foods.values()), missing)


__all__ = ['CollectedIngredient', 'Collection', 'collect', 'lookup_recipe']
