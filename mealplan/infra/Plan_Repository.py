import logging
from pathlib import Path
from typing import Optional

from mealplan.domain.Plan import WeekPlan
from mealplan.infra.json_store import read_json, write_json
from mealplan.infra.paths import PLANS_FILE
from mealplan.logic.shopping.errors import CollaboratorUnavailableError

logger = logging.getLogger(__name__)


class PlanRepository:
    def __init__(self, path: Optional[Path] = None):
        self.path = Path(path) if path is not None else PLANS_FILE

    def _load_store(self) -> dict:
        try:
            return read_json(self.path, default={}) or {}
        except Exception as e:
            logger.error(f"Error reading plans from {self.path}: {e}")
            raise CollaboratorUnavailableError('plan store', e) from e

    def get_week_plan(self, week: str) -> WeekPlan:
        """Stored plan of ``week``, or an empty seven-day plan when none is stored."""
        data = self._load_store().get(week)
        if data is None:
            return WeekPlan(week)
        plan = WeekPlan.from_dict(data)
        plan.id = week
        return plan

    def save_week_plan(self, plan: WeekPlan) -> None:
        store = self._load_store()
        store[plan.id] = plan.to_dict()
        write_json(self.path, store)
        logger.info("Saved plan %s", plan.id)
