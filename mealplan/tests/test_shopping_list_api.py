import json

import pytest
from fastapi.testclient import TestClient

from mealplan.api import api_ai
from mealplan.api.api_run import app
from mealplan.api.dependencies import get_coordinator, get_plan_repository
from mealplan.infra.Plan_Repository import PlanRepository
from mealplan.infra.Recipe_Repository import RecipeRepository
from mealplan.infra.ShoppingList_Repository import ShoppingListRepository
from mealplan.logic.shopping.coordinator import ShoppingListCoordinator

WEEK = "2025-W40"

RECIPES = [
    {"id": "curry", "name": "Chicken Curry",
     "ingredients": [{"name": "2 chicken breasts, diced"}, {"name": "1 large onion"}, {"name": "curry powder"}]},
    {"id": "salad", "name": "Greek Salad",
     "ingredients": [{"name": "Tomatoes"}, {"name": "feta cheese"}, {"name": "onions"}]},
]

PLAN = {
    "days": [
        {"day": "Monday", "lunch": [{"id": "curry", "name": "Chicken Curry"}],
         "lunch_quick_foods": [{"id": "apple", "name": "Apple", "category": "fruit", "serving_size": "1 medium"}]},
        {"day": "Tuesday", "dinner": ["salad"]},
    ]
}


class FakeCleaner:
    async def clean_names(self, names, translate=False):
        return [n.lower() for n in names]


@pytest.fixture
def client(tmp_path):
    (tmp_path / "recipes.json").write_text(json.dumps(RECIPES), encoding="utf-8")
    plans = PlanRepository(tmp_path / "plans.json")
    coordinator = ShoppingListCoordinator(
        ShoppingListRepository(tmp_path / "shopping_lists.json"),
        cleaner=FakeCleaner(),
        plan_store=plans,
        catalog_loader=RecipeRepository(tmp_path / "recipes.json").load_catalog,
    )
    app.dependency_overrides[get_coordinator] = lambda: coordinator
    app.dependency_overrides[get_plan_repository] = lambda: plans
    with TestClient(app) as test_client:
        test_client.coordinator = coordinator
        yield test_client
    app.dependency_overrides.clear()


def _names(data):
    return [it["name"] for it in data["items"]]


def test_unknown_week_has_empty_list(client):
    resp = client.get(f"/api/shopping-list/{WEEK}")
    assert resp.status_code == 200
    assert resp.json() == {"week_id": WEEK, "items": [], "count": 0,
                           "summary": {"total": 0, "checked": 0, "remaining": 0}}


def test_save_plan_then_list_refreshes(client):
    resp = client.put(f"/api/plans/{WEEK}", json=PLAN)
    assert resp.status_code == 200
    assert resp.json()["saved"] is True

    client.portal.call(client.coordinator.drain, WEEK)

    data = client.get(f"/api/shopping-list/{WEEK}").json()
    assert _names(data) == ["Chicken Breast", "Onion", "Curry Powder", "Tomato", "Feta Cheese", "Apple"]
    assert data["items"][-1]["quantity"] == "1 medium"
    assert client.get(f"/api/plans/{WEEK}").json()["days"][0]["lunch"][0]["id"] == "curry"


def test_regenerate_toggle_and_clear(client):
    client.put(f"/api/plans/{WEEK}", json=PLAN)
    data = client.post(f"/api/shopping-list/{WEEK}/regenerate").json()
    onion = next(it for it in data["items"] if it["name"] == "Onion")

    toggled = client.post(f"/api/shopping-list/{WEEK}/items/{onion['id']}/toggle").json()
    assert toggled["summary"]["checked"] == 1

    again = client.post(f"/api/shopping-list/{WEEK}/regenerate").json()
    assert [it["name"] for it in again["items"] if it["checked"]] == ["Onion"]

    cleared = client.post(f"/api/shopping-list/{WEEK}/clear-checked").json()
    assert cleared["summary"]["checked"] == 0


def test_save_plan_accepts_camel_case_quick_foods(client):
    plan = {"days": [{"day": "Monday", "breakfastQuickFoods": [
        {"id": "banana", "name": "Banana", "category": "fruit", "servingSize": "1 medium"}]}]}
    assert client.put(f"/api/plans/{WEEK}", json=plan).status_code == 200
    client.portal.call(client.coordinator.drain, WEEK)

    items = client.get(f"/api/shopping-list/{WEEK}").json()["items"]
    assert [(it["name"], it["quantity"]) for it in items] == [("Banana", "1 medium")]


def test_malformed_plan_is_rejected_by_validation(client):
    for body in ({"days": "Monday"},
                 {"days": [{"lunch": ["curry"]}]},
                 {"days": [{"day": "Monday", "lunch": [42]}]},
                 {"days": [{"day": "Monday", "lunch_quick_foods": [{"id": "x"}]}]}):
        resp = client.put(f"/api/plans/{WEEK}", json=body)
        assert resp.status_code == 422
        assert isinstance(resp.json()["detail"], list)

    assert client.get(f"/api/plans/{WEEK}").json()["days"][0]["lunch"] == []


def test_toggle_unknown_item_is_404(client):
    resp = client.post(f"/api/shopping-list/{WEEK}/items/nope/toggle")
    assert resp.status_code == 404


def test_grouped_and_export(client):
    client.put(f"/api/plans/{WEEK}", json=PLAN)
    client.post(f"/api/shopping-list/{WEEK}/regenerate")

    grouped = client.get(f"/api/shopping-list/{WEEK}/grouped").json()
    assert [g["category"] for g in grouped["groups"]] == ["produce", "meat", "dairy", "pantry"]

    text = client.get(f"/api/shopping-list/{WEEK}/export").text
    assert "☐ Chicken Breast" in text


def test_unreadable_catalog_is_503(client, tmp_path):
    client.put(f"/api/plans/{WEEK}", json=PLAN)
    client.portal.call(client.coordinator.drain, WEEK)
    (tmp_path / "recipes.json").write_text("{broken", encoding="utf-8")

    resp = client.post(f"/api/shopping-list/{WEEK}/regenerate")

    assert resp.status_code == 503
    assert resp.json()["detail"] == "could not refresh list"
    # previous list untouched
    assert len(client.get(f"/api/shopping-list/{WEEK}").json()["items"]) == 6


def test_quick_foods_catalogue(client):
    foods = client.get("/api/quick-foods").json()
    assert any(f["id"] == "banana" for f in foods)
    assert client.get("/api/quick-foods/banana").json()["name"] == "Banana"
    assert client.get("/api/quick-foods/unknown").status_code == 404


def test_events_endpoint_reports_regeneration(client):
    cursor = client.get("/api/events").json()["next_cursor"]
    client.put(f"/api/plans/{WEEK}", json=PLAN)
    client.post(f"/api/shopping-list/{WEEK}/regenerate")
    events = client.get("/api/events", params={"since": cursor}).json()["events"]
    assert any(e["type"] == "shopping.list_regenerated" and e["week_id"] == WEEK for e in events)


def test_clean_names_preview_without_key(client, monkeypatch):
    monkeypatch.setattr(api_ai, "OPENAI_API_KEY", "")
    resp = client.post("/api/ai/clean-names", json={"names": ["Tomatoes", "2 cloves garlic"]})
    assert resp.status_code == 200
    assert resp.json() == {"names": ["Tomatoes", "2 cloves garlic"], "degraded_reason": "unconfigured"}
    assert client.post("/api/ai/clean-names", json={"names": "garlic"}).status_code == 422
