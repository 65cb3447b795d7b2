import unittest

from mealplan.domain.Ingredient import Ingredient
from mealplan.domain.Plan import DAYS, DayPlan, WeekPlan
from mealplan.domain.QuickFood import DEFAULT_QUICK_FOODS, FoodCategory, QuickFood, find_quick_food
from mealplan.domain.Recipe import Recipe, RecipeCatalog, RecipeRef


class TestRecipe(unittest.TestCase):

    def setUp(self):
        self.pancakes = Recipe(
            id="pancakes",
            name="Pancakes",
            ingredients=[Ingredient("Flour", "200", "g"), Ingredient("Milk", "300", "ml"), Ingredient("Eggs", "2")],
            ingredients_zh=[Ingredient("面粉"), Ingredient("牛奶"), Ingredient("鸡蛋")],
            calories=500,
        )

    def test_ingredients_for_language(self):
        self.assertEqual(self.pancakes.ingredients_for("en")[0].name, "Flour")
        self.assertEqual(self.pancakes.ingredients_for("zh")[0].name, "面粉")
        untranslated = Recipe("omelette", "Omelette", [Ingredient("Eggs")])
        self.assertEqual(untranslated.ingredients_for("zh")[0].name, "Eggs")

    def test_from_dict_accepts_legacy_keys(self):
        recipe = Recipe.from_dict({"id": 7, "name": "Soup", "ingredientsZh": [{"name": "汤"}],
                                   "calories_per_serving": "250"})
        self.assertEqual(recipe.id, "7")
        self.assertEqual(recipe.ingredients_zh[0].name, "汤")
        self.assertEqual(recipe.calories, 250)

    def test_ref_and_catalog(self):
        ref = RecipeRef.from_dict({"id": "pancakes", "name": "Pancakes", "calories": 500.0})
        self.assertEqual((ref.id, ref.name, ref.calories), ("pancakes", "Pancakes", 500))
        self.assertEqual(RecipeRef.from_dict("pancakes").id, "pancakes")
        catalog = RecipeCatalog([self.pancakes])
        self.assertIn("pancakes", catalog)
        self.assertIs(catalog.get_recipe_by_id("pancakes"), self.pancakes)
        self.assertIsNone(catalog.get_recipe_by_id("waffles"))


class TestPlan(unittest.TestCase):

    def test_week_always_has_seven_ordered_days(self):
        plan = WeekPlan("2025-W40", [DayPlan("Friday", lunch=[RecipeRef("soup")])])
        self.assertEqual([d.day for d in plan.days], DAYS)
        self.assertFalse(plan.is_empty())
        self.assertTrue(WeekPlan("2025-W41").is_empty())

    def test_day_plan_from_camel_case(self):
        day = DayPlan.from_dict({
            "day": "Monday",
            "breakfast": ["oats"],
            "breakfastQuickFoods": [{"id": "banana", "name": "Banana", "category": "fruit", "servingSize": "1"}],
        })
        self.assertEqual(day.all_recipes()[0].id, "oats")
        self.assertEqual(day.all_quick_foods()[0].serving_size, "1")

    def test_round_trip(self):
        plan = WeekPlan("w", [DayPlan("Monday", dinner=[RecipeRef("r", "R", 10)], snacks=[RecipeRef("s")])])
        again = WeekPlan.from_dict(plan.to_dict())
        self.assertEqual(again.to_dict(), plan.to_dict())
        self.assertEqual([r.id for r in again.days[0].all_recipes()], ["r", "s"])


class TestQuickFood(unittest.TestCase):

    def test_unknown_category_is_snack(self):
        self.assertEqual(QuickFood(category="candy").category, FoodCategory.SNACK)
        self.assertEqual(QuickFood(category="Fruit").category, FoodCategory.FRUIT)

    def test_default_catalogue(self):
        self.assertEqual(len({f.id for f in DEFAULT_QUICK_FOODS}), len(DEFAULT_QUICK_FOODS))
        self.assertEqual(find_quick_food("greek-yogurt").category, FoodCategory.DAIRY)
        self.assertIsNone(find_quick_food("pizza"))


if __name__ == "__main__":
    unittest.main()
