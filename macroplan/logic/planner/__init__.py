"""Planner state and its update cycle."""
from .actions import (
    AddDish, DeleteDish, AddDishToMeal, RemoveDishFromMeal, SetActiveTab,
    UpdateDraft, ClearPlan, SaveRation, LoadRation, DeleteRation,
)
from .store import PlannerState, PlannerStore, update

__all__ = [
    "AddDish", "DeleteDish", "AddDishToMeal", "RemoveDishFromMeal", "SetActiveTab",
    "UpdateDraft", "ClearPlan", "SaveRation", "LoadRation", "DeleteRation",
    "PlannerState", "PlannerStore", "update",
]
