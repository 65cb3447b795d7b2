"""Plan domain entities: one day of meal slots and a seven-day week."""
from typing import List, Optional

from mealplan.domain.QuickFood import QuickFood
from mealplan.domain.Recipe import RecipeRef

MEAL_SLOTS = ("breakfast", "lunch", "dinner")
DAYS = ["Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday"]


class DayPlan:
    def __init__(self, day: str, breakfast: Optional[List[RecipeRef]] = None,
                 lunch: Optional[List[RecipeRef]] = None, dinner: Optional[List[RecipeRef]] = None,
                 snacks: Optional[List[RecipeRef]] = None,
                 breakfast_quick_foods: Optional[List[QuickFood]] = None,
                 lunch_quick_foods: Optional[List[QuickFood]] = None,
                 dinner_quick_foods: Optional[List[QuickFood]] = None):
        self.day = day
        self.breakfast = breakfast[:] if breakfast else []
        self.lunch = lunch[:] if lunch else []
        self.dinner = dinner[:] if dinner else []
        # Legacy slot, still read when present
        self.snacks = snacks[:] if snacks else []
        self.breakfast_quick_foods = breakfast_quick_foods[:] if breakfast_quick_foods else []
        self.lunch_quick_foods = lunch_quick_foods[:] if lunch_quick_foods else []
        self.dinner_quick_foods = dinner_quick_foods[:] if dinner_quick_foods else []

    def all_recipes(self) -> List[RecipeRef]:
        """Recipe references of the day in slot order: breakfast, lunch, dinner, snacks."""
        return [*self.breakfast, *self.lunch, *self.dinner, *self.snacks]

    def all_quick_foods(self) -> List[QuickFood]:
        return [*self.breakfast_quick_foods, *self.lunch_quick_foods, *self.dinner_quick_foods]

    def is_empty(self) -> bool:
        return not self.all_recipes() and not self.all_quick_foods()

    def __str__(self) -> str:
        return f"{self.day}: {len(self.all_recipes())} recipes, {len(self.all_quick_foods())} quick foods"

    __repr__ = __str__

    @staticmethod
    def from_dict(data):
        d = dict(data)

        def refs(key):
            return [RecipeRef.from_dict(r) for r in d.get(key) or []]

        def foods(key, camel):
            return [QuickFood.from_dict(f) for f in d.get(key) or d.get(camel) or []]

        return DayPlan(
            day=d.get("day", ""),
            breakfast=refs("breakfast"),
            lunch=refs("lunch"),
            dinner=refs("dinner"),
            snacks=refs("snacks"),
            breakfast_quick_foods=foods("breakfast_quick_foods", "breakfastQuickFoods"),
            lunch_quick_foods=foods("lunch_quick_foods", "lunchQuickFoods"),
            dinner_quick_foods=foods("dinner_quick_foods", "dinnerQuickFoods"),
        )

    def to_dict(self):
        return {
            "day": self.day,
            "breakfast": [r.to_dict() for r in self.breakfast],
            "lunch": [r.to_dict() for r in self.lunch],
            "dinner": [r.to_dict() for r in self.dinner],
            "snacks": [r.to_dict() for r in self.snacks],
            "breakfast_quick_foods": [f.to_dict() for f in self.breakfast_quick_foods],
            "lunch_quick_foods": [f.to_dict() for f in self.lunch_quick_foods],
            "dinner_quick_foods": [f.to_dict() for f in self.dinner_quick_foods],
        }


class WeekPlan:
    def __init__(self, id: str, days: Optional[List[DayPlan]] = None):
        self.id = id
        by_name = {d.day: d for d in days or []}
        # Always seven days in calendar order; missing days are empty
        self.days = [by_name.get(name) or DayPlan(name) for name in DAYS]
        # Days with names outside the calendar (rare, imported data) are kept after Sunday
        self.days += [d for d in days or [] if d.day not in DAYS]

    def is_empty(self) -> bool:
        return all(d.is_empty() for d in self.days)

    def __str__(self) -> str:
        return f"WeekPlan {self.id}"

    __repr__ = __str__

    @staticmethod
    def from_dict(data):
        d = dict(data)
        return WeekPlan(str(d.get("id", "")), [DayPlan.from_dict(x) for x in d.get("days") or []])

    def to_dict(self):
        return {"id": self.id, "days": [d.to_dict() for d in self.days]}
