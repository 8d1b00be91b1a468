from fastapi import APIRouter, Depends, HTTPException

from macroplan.api.state import get_store
from macroplan.logic.planner import AddDishToMeal, RemoveDishFromMeal, ClearPlan
from macroplan.logic.planner.store import PlannerStore
from macroplan.logic.reporting.nutrition import day_totals, macro_percentages
from macroplan.utilities.validators import DishIdInput

router = APIRouter(prefix="/api/plan", tags=["plan"])


@router.get("")
def get_plan(store: PlannerStore = Depends(get_store)):
    return {"meals": store.plan.to_dict()}


@router.get("/totals/{day}")
def get_day_totals(day: str, store: PlannerStore = Depends(get_store)):
    return {
        "day": day,
        "totals": day_totals(store.plan, day),
        "percentages": macro_percentages(store.plan, day),
    }


@router.post("/clear")
def clear_plan(store: PlannerStore = Depends(get_store)):
    store.dispatch(ClearPlan())
    return {"status": "ok"}


@router.post("/{day}/{slot}")
def assign_dish(day: str, slot: str, payload: DishIdInput, store: PlannerStore = Depends(get_store)):
    entries = store.dispatch(AddDishToMeal(day, slot, payload.dish_id))
    if entries is None:
        raise HTTPException(status_code=404, detail="Dish not found")
    return {"day": day, "slot": slot, "dishes": [d.to_dict() for d in entries]}


@router.delete("/{day}/{slot}/{dish_id}")
def remove_dish(day: str, slot: str, dish_id: str, store: PlannerStore = Depends(get_store)):
    remaining = store.dispatch(RemoveDishFromMeal(day, slot, dish_id))
    return {"day": day, "slot": slot, "dishes": [d.to_dict() for d in remaining]}
