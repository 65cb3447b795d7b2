import unittest

from mealplan.domain.ShoppingList import (
    Category, ShoppingItem, clear_checked, export_text, group_by_category, summarize, toggle_checked
)
from mealplan.logic.shopping.reconciler import reconcile_checked


class TestShoppingListHelpers(unittest.TestCase):

    def setUp(self):
        self.items = [
            ShoppingItem("shopping-ingredient-0", "Tomato", "", Category.PRODUCE),
            ShoppingItem("shopping-ingredient-1", "Chicken Breast", "", Category.MEAT, checked=True),
            ShoppingItem("shopping-ingredient-2", "Basil", "", Category.PRODUCE),
            ShoppingItem("shopping-quickfood-0", "Milk", "1 cup", Category.DAIRY),
        ]

    def test_toggle_returns_new_list(self):
        toggled = toggle_checked(self.items, "shopping-ingredient-0")
        self.assertTrue(toggled[0].checked)
        self.assertFalse(self.items[0].checked)
        self.assertEqual(toggled[1:], self.items[1:])
        self.assertIsNot(toggled[1], self.items[1])

    def test_toggle_unknown_id_is_noop(self):
        self.assertEqual(toggle_checked(self.items, "nope"), self.items)

    def test_clear_and_summarize(self):
        self.assertEqual(summarize(self.items), {"total": 4, "checked": 1, "remaining": 3})
        self.assertEqual(summarize(clear_checked(self.items))["checked"], 0)

    def test_group_by_category(self):
        groups = group_by_category(self.items)
        self.assertEqual(list(groups), ["produce", "meat", "dairy"])
        self.assertEqual([it.name for it in groups["produce"]], ["Basil", "Tomato"])

    def test_export_text(self):
        text = export_text(self.items)
        self.assertIn("☐ Basil", text)
        self.assertIn("✓ Chicken Breast", text)
        self.assertLess(text.index("Produce"), text.index("Dairy"))

    def test_round_trip_dict(self):
        item = ShoppingItem.from_dict({"id": "x", "name": "Rice", "category": "weird", "checked": 1})
        self.assertEqual(item.category, Category.OTHER)
        self.assertEqual(ShoppingItem.from_dict(item.to_dict()), item)


class TestReconciler(unittest.TestCase):

    def test_checked_flags_follow_normalized_name(self):
        previous = [
            ShoppingItem("old-1", "Tomatoes", checked=True),
            ShoppingItem("old-2", "Basil", checked=False),
            ShoppingItem("old-3", "Paprika", checked=True),
        ]
        rebuilt = [
            ShoppingItem("shopping-ingredient-0", "Tomato"),
            ShoppingItem("shopping-ingredient-1", "Basil"),
            ShoppingItem("shopping-ingredient-2", "Garlic"),
        ]
        result = reconcile_checked(rebuilt, previous)
        self.assertEqual([it.checked for it in result], [True, False, False])
        self.assertFalse(any(it.checked for it in rebuilt))

    def test_no_previous_list(self):
        rebuilt = [ShoppingItem("a", "Tomato", checked=True)]
        self.assertFalse(reconcile_checked(rebuilt, None)[0].checked)


if __name__ == "__main__":
    unittest.main()
