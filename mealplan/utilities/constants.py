from typing import Final

# Preparation / state words dropped from ingredient names (whole-word, case-insensitive).
# Multi-word phrases come first so "thinly sliced" is removed before "sliced".
PREPARATION_QUALIFIERS: Final[tuple[str, ...]] = (
    'thinly sliced', 'finely chopped', 'roughly chopped', 'finely diced', 'coarsely chopped',
    'bone-in', 'skin-on', 'extra virgin', 'at room temperature', 'to taste',
    'minced', 'diced', 'chopped', 'sliced', 'crushed', 'grated', 'shredded',
    'peeled', 'cubed', 'julienned', 'fresh', 'dried', 'frozen', 'canned',
    'cooked', 'raw', 'whole', 'halved', 'quartered', 'smashed', 'beaten',
    'softened', 'melted', 'rinsed', 'drained', 'trimmed', 'deveined',
    'large', 'medium', 'small', 'young', 'mature',
    'boneless', 'skinless', 'optional', 'divided',
)

# Units recognised right after a leading amount ("2 cloves garlic", "1 cup tomatoes").
MEASURE_UNITS: Final[tuple[str, ...]] = (
    'cups', 'cup', 'tablespoons', 'tablespoon', 'tbsp', 'tbs', 'teaspoons', 'teaspoon', 'tsp',
    'cloves', 'clove', 'grams', 'gram', 'g', 'kilograms', 'kilogram', 'kg', 'ml', 'l',
    'liters', 'liter', 'litres', 'litre', 'ounces', 'ounce', 'oz', 'pounds', 'pound', 'lbs', 'lb',
    'pinch', 'pinches', 'dash', 'handful', 'bunch', 'bunches', 'can', 'cans', 'package',
    'packages', 'pkg', 'pieces', 'piece', 'pcs', 'slices', 'slice', 'sprigs', 'sprig',
    'stalks', 'stalk', 'heads', 'head', 'sticks', 'stick',
)

# Words ending in "s" that are already singular (or have no singular on a shopping list).
PLURAL_EXCEPTIONS: Final[frozenset[str]] = frozenset({
    'asparagus', 'couscous', 'hummus', 'molasses', 'brussels', 'citrus', 'grits',
    'oats', 'chives', 'greens', 'swiss', 'lemongrass', 'watercress', 'bass',
})

# Irregular plurals handled before the suffix rules.
IRREGULAR_PLURALS: Final[dict[str, str]] = {
    'leaves': 'leaf',
    'loaves': 'loaf',
    'halves': 'half',
    'knives': 'knife',
    'geese': 'goose',
    'mice': 'mouse',
    'cookies': 'cookie',
    'brownies': 'brownie',
    'anchovies': 'anchovy',
    'radishes': 'radish',
    'peaches': 'peach',
    'sandwiches': 'sandwich',
    'dishes': 'dish',
    'boxes': 'box',
    'pies': 'pie',
    'veggies': 'veggie',
}

# Shopping list categories, in the order the shopping screen shows them.
CATEGORY_ORDER: Final[tuple[str, ...]] = ('produce', 'meat', 'dairy', 'pantry', 'other')
CATEGORY_LABELS: Final[dict[str, str]] = {
    'produce': '\U0001F96C Produce',
    'meat': '\U0001F356 Meat & Poultry',
    'dairy': '\U0001F95B Dairy',
    'pantry': '\U0001F35E Pantry',
    'other': '\U0001F6D2 Other',
}

# QuickFood category -> shopping list category. Anything missing maps to pantry.
QUICK_FOOD_CATEGORY_MAP: Final[dict[str, str]] = {
    'fruit': 'produce',
    'veggie': 'produce',
    'dairy': 'dairy',
    'protein': 'meat',
}

CHECKED_MARK: Final[str] = '✓'
UNCHECKED_MARK: Final[str] = '☐'
EXPORT_UNDERLINE: Final[str] = '─'

NAME_CLEANING_PROMPT: Final[str] = (
    """
You are a shopping list optimizer. Clean these ingredient names for a grocery list.

RULES:
1. Remove ALL processing details (minced, diced, chopped, sliced, peeled, hulled, etc.)
2. Remove ALL cooking instructions (boneless, skinless, seeds removed, deveined, etc.)
3. Remove ALL quantities, units, punctuation and parentheses
4. Convert ALL plurals to SINGULAR form
5. PRESERVE the specific type/variety (red onion stays "red onion", chicken breast stays "chicken breast")
{translate_rule}
Examples:
- "garlic (minced)" -> "garlic"
- "tomatoes, seeds removed" -> "tomato"
- "chicken breast, boneless skinless" -> "chicken breast"
- "olive oil (extra virgin)" -> "olive oil"

Return ONLY the cleaned names, one per line, in the same order, exactly {count} lines.
No explanations, no numbering, no extra text.

Ingredient names to clean (one per line):
{names}
"""
)

TRANSLATE_RULE: Final[str] = (
    "6. Translate any non-English (e.g. Chinese) name to its natural English grocery name\n"
)
