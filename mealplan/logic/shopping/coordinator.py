"""Per-week regeneration coordinator.

Regenerations of different weeks run fully in parallel. Within one week:

  * every request bumps a generation counter;
  * a newer request cancels an older one still waiting on name cleaning
    (cancel-and-restart), and an older run that finishes late is discarded
    instead of saved;
  * reading the previous list, reconciling checked flags and saving happen
    under a per-week lock, so writers never interleave.

save_plan() persists the plan first and regenerates in the background. Until
that background run finishes, the stored plan is one generation ahead of its
stored shopping list; readers see the previous list during that window.
"""
import asyncio
import inspect
import logging
from collections import defaultdict
from typing import Any, Callable, Dict, List, Optional, Set

from mealplan.domain.Plan import WeekPlan
from mealplan.domain.ShoppingList import ShoppingItem, clear_checked, toggle_checked
from mealplan.events.Event_Bus import (
    GLOBAL_EVENT_BUS, SHOPPING_LIST_REGENERATED, SHOPPING_REGENERATION_DISCARDED, EventBus
)
from mealplan.logic.shopping.collector import collect
from mealplan.logic.shopping.errors import (
    CollaboratorUnavailableError, ShoppingItemNotFoundError, StaleRegenerationError
)
from mealplan.logic.shopping.name_cleaning import NameCleaner
from mealplan.logic.shopping.pipeline import build_from_collection
from mealplan.logic.shopping.reconciler import reconcile_checked
from mealplan.utilities.config import DEFAULT_LANGUAGE, NAME_CLEANING_TIMEOUT

logger = logging.getLogger(__name__)


async def _maybe_await(value):
    if inspect.isawaitable(value):
        return await value
    return value


class ShoppingListCoordinator:
    def __init__(self, store: Any, recipe_catalog: Any = None, cleaner: Optional[NameCleaner] = None,
                 plan_store: Any = None, *, catalog_loader: Optional[Callable[[], Any]] = None,
                 language: str = DEFAULT_LANGUAGE, timeout: float = NAME_CLEANING_TIMEOUT,
                 event_bus: EventBus = GLOBAL_EVENT_BUS):
        if recipe_catalog is None and catalog_loader is None:
            raise ValueError("either recipe_catalog or catalog_loader is required")
        self._store = store
        self._catalog = recipe_catalog
        self._catalog_loader = catalog_loader
        self._cleaner = cleaner
        self._plan_store = plan_store
        self._language = language
        self._timeout = timeout
        self._event_bus = event_bus
        self._generations: Dict[str, int] = defaultdict(int)
        self._locks: Dict[str, asyncio.Lock] = {}
        self._tasks: Dict[str, asyncio.Task] = {}
        self._committing: Set[str] = set()

    # --- collaborators ------------------------------------------------------
    def _lock(self, week_id: str) -> asyncio.Lock:
        return self._locks.setdefault(week_id, asyncio.Lock())

    def _recipe_catalog(self):
        if self._catalog_loader is None:
            return self._catalog
        try:
            return self._catalog_loader()
        except CollaboratorUnavailableError:
            raise
        except Exception as e:
            raise CollaboratorUnavailableError('recipe catalog', e) from e

    async def load_list(self, week_id: str) -> Optional[List[ShoppingItem]]:
        try:
            return await _maybe_await(self._store.load_shopping_list(week_id))
        except CollaboratorUnavailableError:
            raise
        except Exception as e:
            raise CollaboratorUnavailableError('shopping list store', e) from e

    async def _save_list(self, week_id: str, items: List[ShoppingItem]) -> None:
        try:
            await _maybe_await(self._store.save_shopping_list(week_id, items))
        except CollaboratorUnavailableError:
            raise
        except Exception as e:
            raise CollaboratorUnavailableError('shopping list store', e) from e

    # --- regeneration -------------------------------------------------------
    def generation(self, week_id: str) -> int:
        return self._generations[week_id]

    async def _run(self, week_plan: WeekPlan, generation: int) -> List[ShoppingItem]:
        week_id = week_plan.id
        collection = collect(week_plan, self._recipe_catalog(), language=self._language)
        items = await build_from_collection(collection, self._cleaner, language=self._language,
                                            timeout=self._timeout, event_bus=self._event_bus)
        async with self._lock(week_id):
            if generation != self._generations[week_id]:
                logger.info("Discarding shopping list generation %d of %s (now %d)",
                            generation, week_id, self._generations[week_id])
                self._event_bus.publish(SHOPPING_REGENERATION_DISCARDED,
                                        {'week_id': week_id, 'generation': generation})
                raise StaleRegenerationError(week_id, generation)
            self._committing.add(week_id)
            try:
                previous = await self.load_list(week_id)
                items = reconcile_checked(items, previous)
                await self._save_list(week_id, items)
            finally:
                self._committing.discard(week_id)
        logger.info("Shopping list for %s regenerated (generation %d, %d items)",
                    week_id, generation, len(items))
        self._event_bus.publish(SHOPPING_LIST_REGENERATED,
                                {'week_id': week_id, 'generation': generation, 'count': len(items)})
        return items

    def _log_outcome(self, task: asyncio.Task) -> None:
        if task.cancelled():
            logger.debug("Shopping list task %s cancelled", task.get_name())
            return
        exc = task.exception()
        if isinstance(exc, StaleRegenerationError):
            return
        if exc is not None:
            logger.error("Shopping list task %s failed", task.get_name(), exc_info=exc)

    def schedule(self, week_plan: WeekPlan) -> asyncio.Task:
        """Start a regeneration in the background and return its task.

        Must be called from a running event loop. A pending regeneration of the
        same week is cancelled unless it is already saving.
        """
        week_id = week_plan.id
        self._generations[week_id] += 1
        generation = self._generations[week_id]
        pending = self._tasks.get(week_id)
        if pending is not None and not pending.done() and week_id not in self._committing:
            pending.cancel()
        task = asyncio.get_running_loop().create_task(
            self._run(week_plan, generation), name=f"shopping-list:{week_id}:{generation}"
        )
        task.add_done_callback(self._log_outcome)
        self._tasks[week_id] = task
        return task

    async def regenerate(self, week_plan: WeekPlan) -> List[ShoppingItem]:
        """Regenerate and return the saved list.

        If a newer request for the same week supersedes this one, the newer
        result is returned instead.
        """
        task = self.schedule(week_plan)
        while True:
            await asyncio.wait({task})
            if not task.cancelled() and not isinstance(task.exception(), StaleRegenerationError):
                return task.result()
            newer = self._tasks.get(week_plan.id)
            if newer is None or newer is task:
                raise StaleRegenerationError(week_plan.id, self._generations[week_plan.id])
            task = newer

    async def save_plan(self, week_plan: WeekPlan) -> asyncio.Task:
        """Persist the plan, then regenerate its shopping list without waiting for it."""
        if self._plan_store is None:
            raise RuntimeError("coordinator has no plan store")
        try:
            await _maybe_await(self._plan_store.save_week_plan(week_plan))
        except CollaboratorUnavailableError:
            raise
        except Exception as e:
            raise CollaboratorUnavailableError('plan store', e) from e
        return self.schedule(week_plan)

    async def drain(self, week_id: Optional[str] = None) -> None:
        """Wait until background regenerations (of one week, or all) have settled."""
        while True:
            tasks = [t for w, t in self._tasks.items() if (week_id is None or w == week_id) and not t.done()]
            if not tasks:
                return
            await asyncio.wait(tasks)

    # --- shopping screen edits ----------------------------------------------
    async def toggle(self, week_id: str, item_id: str) -> List[ShoppingItem]:
        async with self._lock(week_id):
            items = await self.load_list(week_id) or []
            if not any(it.id == item_id for it in items):
                raise ShoppingItemNotFoundError(week_id, item_id)
            updated = toggle_checked(items, item_id)
            await self._save_list(week_id, updated)
        return updated

    async def clear_checked(self, week_id: str) -> List[ShoppingItem]:
        async with self._lock(week_id):
            updated = clear_checked(await self.load_list(week_id) or [])
            await self._save_list(week_id, updated)
        return updated


__all__ = ['ShoppingListCoordinator']
