from fastapi import (
    FastAPI,
    Request,
    Query,
    Form,
    Depends,
    Response,
)
from fastapi.responses import HTMLResponse, JSONResponse, RedirectResponse
from fastapi.staticfiles import StaticFiles
from fastapi.templating import Jinja2Templates

from contextlib import asynccontextmanager
from datetime import datetime
from typing import Optional
import logging

from macroplan.api.state import get_store
from macroplan.domain.MealPlan import UnknownSlotError
from macroplan.infra.pdf_utils import generate_pdf_for_week
from macroplan.logic.planner import (
    AddDish,
    DeleteDish,
    AddDishToMeal,
    RemoveDishFromMeal,
    SetActiveTab,
    UpdateDraft,
    ClearPlan,
    SaveRation,
    LoadRation,
    DeleteRation,
)
from macroplan.logic.planner.store import PlannerStore
from macroplan.logic.reporting.nutrition import compute_week_nutrition
from macroplan.utilities.config import STATIC_DIR, TEMPLATES_DIR
from macroplan.utilities.constants import DAYS, MEALS, TABS, PERCENT_LABEL_MIN
from macroplan.events.web_observers import start as start_event_observers, get_events as get_web_events

# Routers
from macroplan.api.routes import dishes, plan, rations

# Logging
logger = logging.getLogger("macroplan_app")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Register event bus subscribers for the activity feed when the app starts."""
    start_event_observers()
    logger.info("Web observers for planner events started")
    yield


# Initialize FastAPI app
app = FastAPI(title="MacroPlan: weekly meal & macro planner", lifespan=lifespan)

# Include routers
app.include_router(dishes.router)
app.include_router(plan.router)
app.include_router(rations.router)

# Static files
app.mount("/static", StaticFiles(directory=str(STATIC_DIR)), name="static")

# Templates
templates = Jinja2Templates(directory=str(TEMPLATES_DIR))


@app.exception_handler(UnknownSlotError)
async def _unknown_slot_handler(request: Request, exc: UnknownSlotError):
    logger.warning("Rejected %s %s: %s", request.method, request.url.path, exc)
    return JSONResponse(status_code=400, content={"detail": "Invalid day or meal"})


def _ts() -> int:
    """Cache-busting timestamp for static assets."""
    return int(datetime.now().timestamp())


def _back_to(tab: str) -> RedirectResponse:
    return RedirectResponse(url=f"/?tab={tab}", status_code=303)


# -------------------- UI PAGES --------------------
@app.get("/", response_class=HTMLResponse)
def main_page(request: Request,
              tab: Optional[str] = Query(default=None),
              store: PlannerStore = Depends(get_store)):
    if tab is not None:
        store.dispatch(SetActiveTab(tab))
    state = store.state
    return templates.TemplateResponse(
        request,
        "index.html",
        {
            "active_tab": state.active_tab,
            "tabs": TABS,
            "days": DAYS,
            "meals": MEALS,
            "dishes": store.catalog.get_items(),
            "plan": store.plan,
            "nutrition": compute_week_nutrition(store.plan),
            "draft": state.draft,
            "rations": state.rations.list_rations(),
            "percent_label_min": PERCENT_LABEL_MIN,
            "time": _ts(),
        }
    )


# -------------------- Dish database (form posts) --------------------
@app.post("/dishes")
def add_dish_form(
    name: str = Form(""),
    link: str = Form(""),
    protein: str = Form(""),
    fats: str = Form(""),
    carbs: str = Form(""),
    calories: str = Form(""),
    store: PlannerStore = Depends(get_store),
):
    # Draft is kept when the dish is rejected, so the form comes back filled in
    store.dispatch(UpdateDraft({
        "name": name, "link": link, "protein": protein,
        "fats": fats, "carbs": carbs, "calories": calories,
    }))
    store.dispatch(AddDish())
    return _back_to("database")


@app.post("/dishes/{dish_id}/delete")
def delete_dish_form(dish_id: str, store: PlannerStore = Depends(get_store)):
    store.dispatch(DeleteDish(dish_id))
    return _back_to("database")


# -------------------- Planner (form posts) --------------------
@app.post("/plan/{day}/{slot}")
def add_dish_to_meal_form(day: str, slot: str, dish_id: str = Form(...),
                          store: PlannerStore = Depends(get_store)):
    store.dispatch(AddDishToMeal(day, slot, dish_id))
    return _back_to("planner")


@app.post("/plan/{day}/{slot}/{dish_id}/remove")
def remove_dish_from_meal_form(day: str, slot: str, dish_id: str,
                               store: PlannerStore = Depends(get_store)):
    store.dispatch(RemoveDishFromMeal(day, slot, dish_id))
    return _back_to("planner")


@app.post("/plan/clear")
def clear_plan_form(store: PlannerStore = Depends(get_store)):
    store.dispatch(ClearPlan())
    return _back_to("planner")


# -------------------- Rations (form posts) --------------------
@app.post("/rations")
def save_ration_form(name: str = Form(""), store: PlannerStore = Depends(get_store)):
    store.dispatch(SaveRation(name))
    return _back_to("ratios")


@app.post("/rations/load")
def load_ration_form(name: str = Form(...), store: PlannerStore = Depends(get_store)):
    plan = store.dispatch(LoadRation(name))
    return _back_to("planner" if plan is not None else "ratios")


@app.post("/rations/delete")
def delete_ration_form(name: str = Form(...), store: PlannerStore = Depends(get_store)):
    store.dispatch(DeleteRation(name))
    return _back_to("ratios")


# -------------------- API: nutrition, activity, export --------------------
@app.get('/api/nutrition')
def api_nutrition(store: PlannerStore = Depends(get_store)):
    """Return per-day totals and percentages, week totals and daily averages."""
    return compute_week_nutrition(store.plan)


@app.get('/api/events')
def api_events(
    since: Optional[int] = Query(default=None, description="Return events with id greater than this value")
):
    """
    Return recent planner activity (dishes added/deleted, plan changes, rations).

    Client polling strategy:
        1. First call without 'since' to load the backlog.
        2. Store 'next_cursor' from response.
        3. Subsequent polls: /api/events?since=<next_cursor>
    """
    return get_web_events(since)


@app.get("/export_pdf")
def export_pdf(store: PlannerStore = Depends(get_store)):
    pdf_bytes = generate_pdf_for_week(store.plan)
    return Response(
        content=pdf_bytes,
        media_type="application/pdf",
        headers={
            "Content-Disposition": "attachment; filename=meal_plan.pdf"
        },
    )
