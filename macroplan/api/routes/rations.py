from fastapi import APIRouter, Depends, HTTPException

from macroplan.api.state import get_store
from macroplan.logic.planner import SaveRation, LoadRation, DeleteRation
from macroplan.logic.planner.store import PlannerStore
from macroplan.utilities.validators import RationInput

router = APIRouter(prefix="/api/rations", tags=["rations"])


@router.get("")
def list_rations(store: PlannerStore = Depends(get_store)):
    rations = store.state.rations.list_rations()
    return {
        "count": len(rations),
        "rations": [
            {"name": r.name, "created_at": r.created_at.isoformat(), "dishes": r.dish_count()}
            for r in rations
        ],
    }


@router.post("")
def save_ration(payload: RationInput, store: PlannerStore = Depends(get_store)):
    ration = store.dispatch(SaveRation(payload.name))
    return {"status": "success", "ration": ration.to_dict()}


@router.post("/load")
def load_ration(payload: RationInput, store: PlannerStore = Depends(get_store)):
    plan = store.dispatch(LoadRation(payload.name))
    if plan is None:
        raise HTTPException(status_code=404, detail="Ration not found")
    return {"status": "success", "meals": plan.to_dict()}


@router.post("/delete")
def delete_ration(payload: RationInput, store: PlannerStore = Depends(get_store)):
    return {"status": "ok", "removed": store.dispatch(DeleteRation(payload.name))}
