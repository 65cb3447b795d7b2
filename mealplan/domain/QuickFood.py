"""QuickFood domain entity: a standalone add-on item attached to a meal slot."""
from enum import Enum
from typing import Dict, List, Optional


class FoodCategory(str, Enum):
    FRUIT = "fruit"
    VEGGIE = "veggie"
    DAIRY = "dairy"
    GRAIN = "grain"
    PROTEIN = "protein"
    SNACK = "snack"
    DRINK = "drink"

    @classmethod
    def parse(cls, value) -> "FoodCategory":
        """Lenient parse; unknown values become SNACK."""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value or "").strip().lower())
        except ValueError:
            return cls.SNACK


class QuickFood:
    def __init__(self, id: str = "", name: str = "", category=FoodCategory.SNACK, emoji: str = "",
                 serving_size: str = "", calories: float = 0, nutrition: Optional[Dict[str, float]] = None):
        self.id = id
        self.name = name
        self.category = FoodCategory.parse(category)
        self.emoji = emoji
        self.serving_size = serving_size
        self.calories = calories
        n = nutrition or {}
        self.nutrition = {
            'protein': n.get('protein', 0),
            'carbs': n.get('carbs', 0),
            'fat': n.get('fat', 0),
            'fiber': n.get('fiber', 0),
        }

    def __str__(self) -> str:
        return f"{self.emoji} {self.name} ({self.category.value}, {self.serving_size})".strip()

    __repr__ = __str__

    @staticmethod
    def from_dict(data):
        d = dict(data)
        return QuickFood(
            id=str(d.get("id", "")),
            name=d.get("name", ""),
            category=d.get("category"),
            emoji=d.get("emoji", ""),
            serving_size=d.get("serving_size") or d.get("servingSize") or "",
            calories=d.get("calories", 0),
            nutrition=d.get("nutrition"),
        )

    def to_dict(self):
        return {
            "id": self.id,
            "name": self.name,
            "category": self.category.value,
            "emoji": self.emoji,
            "serving_size": self.serving_size,
            "calories": self.calories,
            "nutrition": dict(self.nutrition),
        }


def _qf(id, name, category, emoji, calories, serving_size, protein, carbs, fat, fiber):
    return QuickFood(id, name, category, emoji, serving_size, calories,
                     {'protein': protein, 'carbs': carbs, 'fat': fat, 'fiber': fiber})


# Pre-populated grab-and-go items offered next to recipes when planning a meal
DEFAULT_QUICK_FOODS: List[QuickFood] = [
    _qf('banana', 'Banana', FoodCategory.FRUIT, '\U0001F34C', 105, '1 medium', 1.3, 27, 0.4, 3.1),
    _qf('apple', 'Apple', FoodCategory.FRUIT, '\U0001F34E', 95, '1 medium', 0.5, 25, 0.3, 4.4),
    _qf('orange', 'Orange', FoodCategory.FRUIT, '\U0001F34A', 62, '1 medium', 1.2, 15, 0.2, 3.1),
    _qf('blueberries', 'Blueberries', FoodCategory.FRUIT, '\U0001FAD0', 84, '1 cup', 1.1, 21, 0.5, 3.6),
    _qf('baby-carrots', 'Baby Carrots', FoodCategory.VEGGIE, '\U0001F955', 35, '10 carrots', 0.6, 8, 0.1, 2.9),
    _qf('cucumber', 'Cucumber Slices', FoodCategory.VEGGIE, '\U0001F952', 16, '1 cup', 0.7, 3.8, 0.1, 0.5),
    _qf('greek-yogurt', 'Greek Yogurt', FoodCategory.DAIRY, '\U0001F963', 100, '170g', 17, 6, 0.7, 0),
    _qf('cheese-stick', 'Cheese Stick', FoodCategory.DAIRY, '\U0001F9C0', 80, '1 stick', 7, 1, 6, 0),
    _qf('whole-wheat-toast', 'Whole Wheat Toast', FoodCategory.GRAIN, '\U0001F35E', 80, '1 slice', 4, 14, 1, 2),
    _qf('hard-boiled-egg', 'Hard Boiled Egg', FoodCategory.PROTEIN, '\U0001F95A', 78, '1 large', 6.3, 0.6, 5.3, 0),
    _qf('almonds', 'Almonds', FoodCategory.SNACK, '\U0001F330', 164, '28g', 6, 6, 14, 3.5),
    _qf('hummus', 'Hummus', FoodCategory.SNACK, '\U0001FAD8', 70, '2 tbsp', 2, 4, 5, 2),
    _qf('milk', 'Milk', FoodCategory.DRINK, '\U0001F95B', 103, '1 cup', 8, 12, 2.4, 0),
]


def find_quick_food(food_id: str) -> Optional[QuickFood]:
    for food in DEFAULT_QUICK_FOODS:
        if food.id == food_id:
            return food
    return None
