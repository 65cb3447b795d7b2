import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import List, Optional

from mealplan.domain.ShoppingList import ShoppingItem
from mealplan.infra.json_store import read_json, write_json
from mealplan.infra.paths import SHOPPING_LISTS_FILE
from mealplan.logic.shopping.errors import CollaboratorUnavailableError

logger = logging.getLogger(__name__)


class ShoppingListRepository:
    """Shopping lists keyed by week id: {week_id: {"items": [...], "updated_at": iso}}."""

    def __init__(self, path: Optional[Path] = None):
        self.path = Path(path) if path is not None else SHOPPING_LISTS_FILE

    def _load_store(self) -> dict:
        try:
            return read_json(self.path, default={}) or {}
        except Exception as e:
            logger.error(f"Error reading shopping lists from {self.path}: {e}")
            raise CollaboratorUnavailableError('shopping list store', e) from e

    def load_shopping_list(self, week_id: str) -> Optional[List[ShoppingItem]]:
        """Stored list of ``week_id``, or None if it was never generated."""
        entry = self._load_store().get(week_id)
        if entry is None:
            return None
        return [ShoppingItem.from_dict(row) for row in entry.get('items', [])]

    def save_shopping_list(self, week_id: str, items: List[ShoppingItem]) -> None:
        store = self._load_store()
        store[week_id] = {
            'items': [it.to_dict() for it in items],
            'updated_at': datetime.now(timezone.utc).isoformat(),
        }
        try:
            write_json(self.path, store)
        except OSError as e:
            raise CollaboratorUnavailableError('shopping list store', e) from e
