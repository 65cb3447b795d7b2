"""Carry checked flags from the previous shopping list into a rebuilt one."""
from typing import List, Optional, Sequence

from mealplan.domain.ShoppingList import ShoppingItem
from mealplan.logic.shopping.normalizer import name_key


def reconcile_checked(new_items: Sequence[ShoppingItem],
                      previous_items: Optional[Sequence[ShoppingItem]]) -> List[ShoppingItem]:
    """Return copies of ``new_items`` where ``checked`` is True iff the same
    normalized name was checked in ``previous_items``."""
    checked_keys = {name_key(it.name) for it in previous_items or [] if it.checked}
    return [it.copy(checked=name_key(it.name) in checked_keys) for it in new_items]


__all__ = ['reconcile_checked']
