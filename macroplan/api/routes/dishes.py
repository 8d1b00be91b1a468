from typing import List

from fastapi import APIRouter, Depends

from macroplan.api.state import get_store
from macroplan.logic.planner import AddDish, DeleteDish
from macroplan.logic.planner.store import PlannerStore
from macroplan.utilities.validators import DishDraft

router = APIRouter(prefix="/api/dishes", tags=["dishes"])


@router.get("")
def list_dishes(store: PlannerStore = Depends(get_store)) -> List[dict]:
    """Return the catalog in order."""
    return store.catalog.to_dict()


@router.post("")
def add_dish(draft: DishDraft, store: PlannerStore = Depends(get_store)):
    """Add a dish; an incomplete draft is ignored rather than rejected."""
    dish = store.dispatch(AddDish(draft=draft.model_dump()))
    if dish is None:
        return {"status": "ignored", "missing": draft.missing_fields()}
    return {"status": "success", "dish": dish.to_dict(), "count": len(store.catalog)}


@router.delete("/{dish_id}")
def delete_dish(dish_id: str, store: PlannerStore = Depends(get_store)):
    removed = store.dispatch(DeleteDish(dish_id))
    return {"status": "ok", "removed": removed is not None, "count": len(store.catalog)}
