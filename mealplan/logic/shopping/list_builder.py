"""Shopping list builder.

Provides build_shopping_list(ingredients, cleaned_names, quick_foods): merges
cleaned ingredient names and quick foods into final ShoppingItem rows.
"""
from typing import Dict, List, Sequence

from mealplan.domain.QuickFood import QuickFood
from mealplan.domain.ShoppingList import Category, ShoppingItem
from mealplan.logic.shopping.collector import CollectedIngredient
from mealplan.logic.shopping.normalizer import name_key, title_case
from mealplan.utilities.constants import QUICK_FOOD_CATEGORY_MAP


def quick_food_category(food: QuickFood) -> Category:
    return Category(QUICK_FOOD_CATEGORY_MAP.get(food.category.value, Category.PANTRY.value))


def build_shopping_list(ingredients: Sequence[CollectedIngredient], cleaned_names: Sequence[str],
                        quick_foods: Sequence[QuickFood]) -> List[ShoppingItem]:
    """Build unchecked shopping rows: ingredients first, quick foods appended.

    Args:
        ingredients: Collected ingredients, in discovery order.
        cleaned_names: Cleaned display names, index-aligned with ``ingredients``.
        quick_foods: Unique quick foods of the plan.

    Returns:
        List of ShoppingItem with unique normalized names. Ingredient rows carry
        no quantity (amounts are not summed across recipes); a quick food whose
        name matches an ingredient row is dropped.
    """
    if len(cleaned_names) != len(ingredients):
        raise ValueError(f"{len(cleaned_names)} cleaned names for {len(ingredients)} ingredients")

    # key -> category, first occurrence wins; category comes from the pre-cleaning name
    required: Dict[str, Category] = {}
    for original, cleaned in zip(ingredients, cleaned_names):
        k = name_key(cleaned) or original.key
        if k not in required:
            required[k] = original.category

    shopping_list: List[ShoppingItem] = [
        ShoppingItem(
            id=f"shopping-ingredient-{index}",
            name=title_case(k),
            quantity="",
            category=category,
            checked=False,
        )
        for index, (k, category) in enumerate(required.items())
    ]

    for index, food in enumerate(quick_foods):
        k = name_key(food.name)
        if not k or k in required:
            continue
        required[k] = quick_food_category(food)
        shopping_list.append(ShoppingItem(
            id=f"shopping-quickfood-{index}",
            name=title_case(food.name),
            quantity=food.serving_size,
            category=required[k],
            checked=False,
        ))

    return shopping_list


__all__ = ['build_shopping_list', 'quick_food_category']
