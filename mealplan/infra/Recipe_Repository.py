import logging
from pathlib import Path
from typing import List, Optional

from mealplan.domain.Recipe import Recipe, RecipeCatalog
from mealplan.infra.json_store import read_json
from mealplan.infra.paths import RECIPES_FILE
from mealplan.logic.shopping.errors import CollaboratorUnavailableError

logger = logging.getLogger(__name__)


class RecipeRepository:
    def __init__(self, path: Optional[Path] = None):
        self.path = Path(path) if path is not None else RECIPES_FILE

    def load_recipes(self) -> List[Recipe]:
        """Read recipes from the JSON file. A missing file is an empty catalog."""
        try:
            data = read_json(self.path)
        except Exception as e:
            logger.error(f"Error reading recipes from {self.path}: {e}")
            raise CollaboratorUnavailableError('recipe catalog', e) from e
        if data is None:
            logger.warning(f"Recipes file not found: {self.path}. Using empty catalog.")
            return []
        if isinstance(data, dict):
            data = data.get('recipes', [])
        return [Recipe.from_dict(entry) for entry in data]

    def load_catalog(self) -> RecipeCatalog:
        return RecipeCatalog(self.load_recipes())
