"""Meal plan -> shopping list pipeline.

collect -> clean names -> build rows -> reconcile checked flags.
"""
from mealplan.logic.shopping.pipeline import regenerate_shopping_list
from mealplan.logic.shopping.coordinator import ShoppingListCoordinator
from mealplan.domain.ShoppingList import toggle_checked

__all__ = ['regenerate_shopping_list', 'ShoppingListCoordinator', 'toggle_checked']
