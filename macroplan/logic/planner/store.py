"""Planner store: one owned state object, changed only through ``update``.

The catalog persists itself on every mutation; the plan lives in memory and
is gone when the process stops. Rations are persisted by their repository.
"""
import logging
from threading import Lock
from typing import Any, Dict, Optional

from macroplan.domain.Catalog import DishCatalog
from macroplan.domain.MealPlan import MealPlan
from macroplan.events.Event_Bus import GLOBAL_EVENT_BUS
from macroplan.events.event_helpers import publish_dish_assigned, publish_dish_removed
from macroplan.infra.Catalog_Repository import CatalogRepository
from macroplan.infra.Ration_Repository import RationRepository
from macroplan.infra.storage import KeyValueStore
from macroplan.utilities.constants import DEFAULT_TAB, TABS
from .actions import (
    AddDish, DeleteDish, AddDishToMeal, RemoveDishFromMeal, SetActiveTab,
    UpdateDraft, ClearPlan, SaveRation, LoadRation, DeleteRation,
)

logger = logging.getLogger(__name__)

DRAFT_FIELDS = ("name", "link", "protein", "fats", "carbs", "calories")


class PlannerState:
    def __init__(self, catalog: DishCatalog, rations: RationRepository,
                 plan: Optional[MealPlan] = None, bus=None):
        self.catalog = catalog
        self.rations = rations
        self.plan = plan if plan is not None else MealPlan()
        self.active_tab = DEFAULT_TAB
        self.draft: Dict[str, Any] = {}
        self.bus = bus if bus is not None else GLOBAL_EVENT_BUS


def update(state: PlannerState, action) -> Any:
    """Apply one action to the state and return its result.

    Results:
      AddDish -> new Dish or None (incomplete draft)
      DeleteDish -> removed Dish or None
      AddDishToMeal -> the slot's list, or None for an unknown dish id
      RemoveDishFromMeal -> the slot's remaining list
      SaveRation -> Ration or None; LoadRation -> MealPlan or None; DeleteRation -> bool
    Unknown day or slot labels raise UnknownSlotError.
    """
    if isinstance(action, AddDish):
        draft = action.draft if action.draft is not None else state.draft
        dish = state.catalog.add_dish(draft)
        if dish is not None:
            state.draft = {}
        return dish

    if isinstance(action, DeleteDish):
        return state.catalog.delete_dish(action.dish_id)

    if isinstance(action, AddDishToMeal):
        dish = state.catalog.get(action.dish_id)
        if dish is None:
            logger.debug(f"Dish {action.dish_id} not in catalog; nothing assigned")
            return None
        entries = state.plan.add_dish_to_meal(action.day, action.slot, dish)
        publish_dish_assigned(action.day, action.slot, dish, bus=state.bus)
        return entries

    if isinstance(action, RemoveDishFromMeal):
        before = len(state.plan.get_meal(action.day, action.slot))
        remaining = state.plan.remove_dish_from_meal(action.day, action.slot, action.dish_id)
        removed = before - len(remaining)
        if removed:
            publish_dish_removed(action.day, action.slot, action.dish_id, removed, bus=state.bus)
        return remaining

    if isinstance(action, SetActiveTab):
        if action.tab in TABS:
            state.active_tab = action.tab
        return state.active_tab

    if isinstance(action, UpdateDraft):
        for key, value in action.fields.items():
            if key in DRAFT_FIELDS:
                state.draft[key] = value
        return dict(state.draft)

    if isinstance(action, ClearPlan):
        state.plan.clear()
        return state.plan

    if isinstance(action, SaveRation):
        return state.rations.save_ration(action.name, state.plan)

    if isinstance(action, LoadRation):
        plan = state.rations.load_ration(action.name)
        if plan is not None:
            state.plan = plan
        return plan

    if isinstance(action, DeleteRation):
        return state.rations.delete_ration(action.name)

    raise TypeError(f"Unsupported action: {action!r}")


class PlannerStore:
    """Owns the planner state; every change goes through dispatch()."""

    def __init__(self, state: PlannerState):
        self.state = state
        self._lock = Lock()

    @classmethod
    def from_storage(cls, store: KeyValueStore, bus=None, **catalog_kwargs) -> "PlannerStore":
        """Load the catalog once from the key-value store and start with an empty plan."""
        bus = bus if bus is not None else GLOBAL_EVENT_BUS
        catalog = DishCatalog.load(CatalogRepository(store), **catalog_kwargs).set_event_bus(bus)
        rations = RationRepository(store, bus=bus)
        logger.info(f"Planner store ready with {len(catalog)} dishes")
        return cls(PlannerState(catalog, rations, bus=bus))

    def dispatch(self, action) -> Any:
        with self._lock:
            return update(self.state, action)

    # Read-only conveniences for views
    @property
    def catalog(self) -> DishCatalog:
        return self.state.catalog

    @property
    def plan(self) -> MealPlan:
        return self.state.plan
