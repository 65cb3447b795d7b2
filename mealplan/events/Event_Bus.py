"""Simple Event Bus / Observer implementation for shopping list notifications.

Event names used so far:
  shopping.list_regenerated -> payload {"week_id": str, "generation": int, "count": int}
  shopping.cleaning_degraded -> payload {"reason": str, "count": int}
  shopping.regeneration_discarded -> payload {"week_id": str, "generation": int}

Subscribers are callables taking (event_name, payload).
"""
from __future__ import annotations
import logging
from collections import defaultdict
from typing import Callable, Any, Dict, List

logger = logging.getLogger(__name__)

# --- Event name constants (used across modules) ---
SHOPPING_LIST_REGENERATED = "shopping.list_regenerated"
SHOPPING_CLEANING_DEGRADED = "shopping.cleaning_degraded"
SHOPPING_REGENERATION_DISCARDED = "shopping.regeneration_discarded"


class EventBus:
    def __init__(self):
        self._subscribers: Dict[str, List[Callable[[str, Any], None]]] = defaultdict(list)

    def subscribe(self, event_name: str, callback: Callable[[str, Any], None]):
        if callback not in self._subscribers[event_name]:
            self._subscribers[event_name].append(callback)

    def unsubscribe(self, event_name: str, callback: Callable[[str, Any], None]):
        try:
            self._subscribers[event_name].remove(callback)
        except (ValueError, KeyError):
            pass

    def publish(self, event_name: str, payload: Any):
        for cb in list(self._subscribers.get(event_name, [])):
            try:
                cb(event_name, payload)
            except Exception:
                logger.exception("Error delivering %s to %r", event_name, cb)


# A singleton-like instance (can be imported)
GLOBAL_EVENT_BUS = EventBus()

__all__ = [
    'EventBus', 'GLOBAL_EVENT_BUS',
    'SHOPPING_LIST_REGENERATED', 'SHOPPING_CLEANING_DEGRADED', 'SHOPPING_REGENERATION_DISCARDED',
]
