from typing import Optional
import logging

from fastapi import FastAPI, HTTPException, Query, Request
from fastapi.responses import JSONResponse

from mealplan.api.api_ai import router as ai_router
from mealplan.api.routes import plans, shopping
from mealplan.domain.QuickFood import DEFAULT_QUICK_FOODS, find_quick_food
from mealplan.events.web_observers import start as start_event_observers, get_events as get_web_events
from mealplan.logic.shopping.errors import CollaboratorUnavailableError, ShoppingListError
from mealplan.utilities.config import DEBUG

# Logging
logger = logging.getLogger("mealplan_app")
logging.basicConfig(
    level=logging.DEBUG if DEBUG else logging.INFO,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

# Initialize FastAPI app
app = FastAPI(title="Meal Planner Shopping List API")

# Include routers
app.include_router(shopping.router)
app.include_router(plans.router)
app.include_router(ai_router)


@app.on_event("startup")
def _startup_web_observers():
    """Register event bus subscribers for web notifications when the app starts."""
    start_event_observers()
    logger.info("Web observers for shopping events started")


# -------------------- Error mapping --------------------
@app.exception_handler(CollaboratorUnavailableError)
async def _collaborator_unavailable(request: Request, exc: CollaboratorUnavailableError):
    logger.error("%s %s failed: %s", request.method, request.url.path, exc)
    return JSONResponse(status_code=503, content={"detail": "could not refresh list",
                                                  "collaborator": exc.collaborator})


@app.exception_handler(ShoppingListError)
async def _shopping_list_error(request: Request, exc: ShoppingListError):
    logger.warning("%s %s rejected: %s", request.method, request.url.path, exc)
    return JSONResponse(status_code=400, content={"detail": str(exc)})


# -------------------- Quick foods --------------------
@app.get("/api/quick-foods")
def list_quick_foods():
    return [food.to_dict() for food in DEFAULT_QUICK_FOODS]


@app.get("/api/quick-foods/{food_id}")
def get_quick_food(food_id: str):
    food = find_quick_food(food_id)
    if food is None:
        raise HTTPException(status_code=404, detail="Quick food not found")
    return food.to_dict()


# -------------------- Events --------------------
@app.get("/api/events")
def get_events(since: Optional[int] = Query(default=None)):
    """Shopping events newer than ``since`` for clients polling for list refreshes."""
    return get_web_events(since)


@app.get("/health")
def health():
    return {"status": "ok"}
