"""Recipe domain entity plus the lightweight reference a meal plan slot keeps."""
from typing import Dict, List, Optional

from mealplan.domain.Ingredient import Ingredient


class Recipe:
    def __init__(self, id: str = "", name: str = "", ingredients: Optional[List[Ingredient]] = None,
                 ingredients_zh: Optional[List[Ingredient]] = None, calories: int = 0):
        self.id = id
        self.name = name
        self.ingredients = ingredients[:] if ingredients else []
        # Translated ingredient list; empty when the recipe was never translated
        self.ingredients_zh = ingredients_zh[:] if ingredients_zh else []
        self.calories = calories

    def __str__(self) -> str:
        return f"{self.name} ({self.id}) - {len(self.ingredients)} ingredients - {self.calories} kcal"

    __repr__ = __str__

    def ingredients_for(self, language: str = "en") -> List[Ingredient]:
        """Return the translated list when asked for 'zh' and it exists, else the default list."""
        if language == "zh" and self.ingredients_zh:
            return self.ingredients_zh
        return self.ingredients

    @staticmethod
    def from_dict(data):
        d = dict(data)
        return Recipe(
            id=str(d.get("id", "")),
            name=d.get("name", ""),
            ingredients=[Ingredient.from_dict(i) for i in d.get("ingredients") or []],
            ingredients_zh=[Ingredient.from_dict(i) for i in d.get("ingredients_zh") or d.get("ingredientsZh") or []],
            calories=int(d.get("calories") or d.get("calories_per_serving") or 0),
        )

    def to_dict(self):
        return {
            "id": self.id,
            "name": self.name,
            "ingredients": [ing.to_dict() for ing in self.ingredients],
            "ingredients_zh": [ing.to_dict() for ing in self.ingredients_zh],
            "calories": self.calories,
        }


class RecipeRef:
    """Display subset of a recipe stored inside a plan slot (id, name, calories).

    Ingredients are never copied into the plan; they are resolved from the
    catalog every time the shopping list is built.
    """

    def __init__(self, id: str, name: str = "", calories: int = 0):
        self.id = id
        self.name = name
        self.calories = calories

    def __str__(self) -> str:
        return f"RecipeRef({self.id}, {self.name})"

    __repr__ = __str__

    @staticmethod
    def from_dict(data):
        if isinstance(data, str):
            return RecipeRef(data)
        d = dict(data)
        return RecipeRef(str(d.get("id", "")), d.get("name", ""), int(d.get("calories") or 0))

    def to_dict(self):
        return {"id": self.id, "name": self.name, "calories": self.calories}


class RecipeCatalog:
    """In-memory id -> Recipe lookup handed to the shopping list pipeline."""

    def __init__(self, recipes: Optional[List[Recipe]] = None):
        self._by_id: Dict[str, Recipe] = {}
        for r in recipes or []:
            self.add(r)

    def add(self, recipe: Recipe):
        self._by_id[recipe.id] = recipe
        return self

    def get_recipe_by_id(self, recipe_id: str) -> Optional[Recipe]:
        return self._by_id.get(recipe_id)

    def __len__(self) -> int:
        return len(self._by_id)

    def __contains__(self, recipe_id) -> bool:
        return recipe_id in self._by_id
