"""ShoppingList rows and the pure helpers the shopping screen uses on them."""
from enum import Enum
from typing import Dict, List

from mealplan.utilities.constants import (
    CATEGORY_LABELS, CATEGORY_ORDER, CHECKED_MARK, UNCHECKED_MARK, EXPORT_UNDERLINE
)


class Category(str, Enum):
    PRODUCE = "produce"
    MEAT = "meat"
    DAIRY = "dairy"
    PANTRY = "pantry"
    OTHER = "other"

    @classmethod
    def parse(cls, value) -> "Category":
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value or "").strip().lower())
        except ValueError:
            return cls.OTHER


class ShoppingItem:
    def __init__(self, id: str, name: str, quantity: str = "", category=Category.OTHER, checked: bool = False):
        self.id = id
        self.name = name
        self.quantity = quantity
        self.category = Category.parse(category)
        self.checked = bool(checked)

    def copy(self, **changes) -> "ShoppingItem":
        data = {"id": self.id, "name": self.name, "quantity": self.quantity,
                "category": self.category, "checked": self.checked}
        data.update(changes)
        return ShoppingItem(**data)

    def __eq__(self, other) -> bool:
        if not isinstance(other, ShoppingItem):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    def __str__(self) -> str:
        mark = CHECKED_MARK if self.checked else UNCHECKED_MARK
        qty = f" ({self.quantity})" if self.quantity else ""
        return f"{mark} {self.name}{qty} [{self.category.value}]"

    __repr__ = __str__

    @staticmethod
    def from_dict(data):
        d = dict(data)
        return ShoppingItem(
            id=str(d.get("id", "")),
            name=d.get("name", ""),
            quantity=d.get("quantity") or "",
            category=d.get("category"),
            checked=d.get("checked", False),
        )

    def to_dict(self):
        return {
            "id": self.id,
            "name": self.name,
            "quantity": self.quantity,
            "category": self.category.value,
            "checked": self.checked,
        }


def toggle_checked(items: List[ShoppingItem], item_id: str) -> List[ShoppingItem]:
    """Return a new list with the checked flag of ``item_id`` flipped.

    The input list is left untouched. Unknown ids return an unchanged copy.
    """
    return [it.copy(checked=not it.checked) if it.id == item_id else it.copy() for it in items]


def clear_checked(items: List[ShoppingItem]) -> List[ShoppingItem]:
    return [it.copy(checked=False) for it in items]


def summarize(items: List[ShoppingItem]) -> Dict[str, int]:
    checked = sum(1 for it in items if it.checked)
    return {"total": len(items), "checked": checked, "remaining": len(items) - checked}


def group_by_category(items: List[ShoppingItem]) -> Dict[str, List[ShoppingItem]]:
    """Group rows by category in display order, each group sorted by name.

    Categories without rows are omitted.
    """
    groups: Dict[str, List[ShoppingItem]] = {}
    for category in CATEGORY_ORDER:
        rows = [it for it in items if it.category.value == category]
        if rows:
            groups[category] = sorted(rows, key=lambda it: it.name.lower())
    return groups


def export_text(items: List[ShoppingItem]) -> str:
    """Plain-text rendering of the grouped list, as shared from the shopping screen."""
    sections: List[str] = []
    for category, rows in group_by_category(items).items():
        header = CATEGORY_LABELS[category]
        sections.append(f"\n{header}\n{EXPORT_UNDERLINE * len(header)}")
        for it in rows:
            sections.append(f"{CHECKED_MARK if it.checked else UNCHECKED_MARK} {it.name}")
    return "\n".join(sections).strip()
