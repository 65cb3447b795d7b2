from pathlib import Path

from mealplan.utilities.config import DATA_DIR as _CONFIGURED_DATA_DIR

# Centralized paths for data files (single source of truth)
DATA_DIR = Path(_CONFIGURED_DATA_DIR).resolve()
RECIPES_FILE = DATA_DIR / 'recipes.json'
PLANS_FILE = DATA_DIR / 'plans.json'
SHOPPING_LISTS_FILE = DATA_DIR / 'shopping_lists.json'

__all__ = ['DATA_DIR', 'RECIPES_FILE', 'PLANS_FILE', 'SHOPPING_LISTS_FILE']
