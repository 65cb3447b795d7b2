"""Web-facing observers for shopping list events.

This module subscribes to the GLOBAL_EVENT_BUS for:
  - shopping.list_regenerated
  - shopping.cleaning_degraded
  - shopping.regeneration_discarded

and keeps a small in-memory ring buffer of recent events that the web layer
can poll (since=<last_id_seen>) to refresh the shopping screen once a
background regeneration lands.
"""
from __future__ import annotations
import logging
from datetime import datetime, timezone
from threading import Lock
from typing import Any, Dict, List

from .Event_Bus import (
    GLOBAL_EVENT_BUS, SHOPPING_LIST_REGENERATED, SHOPPING_CLEANING_DEGRADED, SHOPPING_REGENERATION_DISCARDED
)

logger = logging.getLogger(__name__)

_lock = Lock()
_events: List[Dict[str, Any]] = []
_next_id = 1
MAX_EVENTS = 300
_started = False

_FIELDS = ('week_id', 'generation', 'count', 'reason')


def _record(event_name: str, payload: Any):
    global _next_id
    with _lock:
        evt: Dict[str, Any] = {
            'id': _next_id,
            'type': event_name,
            'ts': datetime.now(timezone.utc).isoformat(),
        }
        if isinstance(payload, dict):
            for k in _FIELDS:
                if k in payload:
                    evt[k] = payload[k]
        _events.append(evt)
        _next_id += 1
        if len(_events) > MAX_EVENTS:
            del _events[: len(_events) - MAX_EVENTS]


def start():
    """Idempotent start: subscribe observers once."""
    global _started
    if _started:
        return
    for name in (SHOPPING_LIST_REGENERATED, SHOPPING_CLEANING_DEGRADED, SHOPPING_REGENERATION_DISCARDED):
        GLOBAL_EVENT_BUS.subscribe(name, _record)
    _started = True
    logger.debug("Shopping event observers subscribed")


def get_events(since: int | None = None) -> Dict[str, Any]:
    """Return events newer than 'since' (exclusive).

    If since is None, returns everything still buffered. The response carries
    next_cursor (largest id) so clients can poll with since=next_cursor.
    """
    with _lock:
        if since is None:
            data = list(_events)
        else:
            data = [e for e in _events if e['id'] > since]
        next_cursor = _events[-1]['id'] if _events else since or 0
    return {'events': data, 'next_cursor': next_cursor}


def reset():
    """Drop buffered events (used by tests)."""
    global _next_id
    with _lock:
        _events.clear()
        _next_id = 1


__all__ = ['start', 'get_events', 'reset']
