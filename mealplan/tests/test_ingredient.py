import unittest

from mealplan.domain.Ingredient import Ingredient


class TestIngredient(unittest.TestCase):

    def test_from_dict_ignores_unknown_keys(self):
        ingredient = Ingredient.from_dict({"name": "Sugar", "amount": 100, "unit": "grams", "expiry": "soon"})
        self.assertEqual(ingredient, Ingredient("Sugar", "100", "grams"))
        self.assertEqual(ingredient.to_dict(), {"name": "Sugar", "amount": "100", "unit": "grams"})

    def test_missing_fields_default_to_empty(self):
        ingredient = Ingredient.from_dict({"name": "Salt"})
        self.assertEqual((ingredient.amount, ingredient.unit), ("", ""))
        self.assertEqual(str(ingredient), "Salt")
        self.assertEqual(Ingredient.from_dict(None).name, "")

    def test_str(self):
        self.assertEqual(str(Ingredient("flour", "200", "g")), "200 g flour")


if __name__ == "__main__":
    unittest.main()
