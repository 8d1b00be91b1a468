"""Dish catalog aggregate: ordered, persisted collection of Dish records."""
import logging
import time
from typing import Callable, Iterable, List, Optional

from macroplan.domain.Dish import Dish
from macroplan.events.Event_Bus import GLOBAL_EVENT_BUS
from macroplan.events.event_helpers import publish_dish_added, publish_dish_deleted
from macroplan.utilities.validators import DishDraft

logger = logging.getLogger(__name__)


def _now_ms() -> int:
    return time.time_ns() // 1_000_000


class DishCatalog:
    def __init__(self, dishes: Optional[Iterable[Dish]] = None, repository=None,
                 clock: Callable[[], int] = _now_ms):
        self.items: List[Dish] = list(dishes or [])
        self._repository = repository
        self._clock = clock
        self._event_bus = GLOBAL_EVENT_BUS

    @classmethod
    def load(cls, repository, **kwargs) -> "DishCatalog":
        """Build the catalog from its repository (seed dishes when nothing usable is stored)."""
        return cls(repository.load(), repository=repository, **kwargs)

    # --- Observer helpers -------------------------------------------------
    def set_event_bus(self, bus):
        self._event_bus = bus
        return self

    def _persist(self):
        if self._repository is not None:
            self._repository.save(self.items)

    def _fresh_id(self) -> str:
        '''
        Identifier from the current time in milliseconds; bumped while it
        collides with an existing one.
        '''
        taken = {d.id for d in self.items}
        candidate = int(self._clock())
        while str(candidate) in taken:
            candidate += 1
        return str(candidate)

    def add_dish(self, draft) -> Optional[Dish]:
        '''
        Appends a new dish built from the draft and persists the catalog.
        Incomplete drafts are ignored and None is returned.
        '''
        if not isinstance(draft, DishDraft):
            draft = DishDraft.model_validate(draft or {})
        missing = draft.missing_fields()
        if missing:
            logger.debug(f"Ignoring incomplete dish draft (missing: {', '.join(missing)})")
            return None
        dish = Dish(
            id=self._fresh_id(),
            name=draft.name,
            protein=draft.protein,
            fats=draft.fats,
            carbs=draft.carbs,
            calories=draft.calories,
            link=draft.link,
        )
        self.items.append(dish)
        self._persist()
        publish_dish_added(dish, bus=self._event_bus)
        return dish

    def delete_dish(self, dish_id: str) -> Optional[Dish]:
        '''
        Removes the dish with this identifier, keeping the order of the rest.
        Persists even when nothing matched. Returns the removed dish, if any.
        '''
        removed = self.get(dish_id)
        self.items = [d for d in self.items if d.id != dish_id]
        self._persist()
        if removed is not None:
            publish_dish_deleted(removed, bus=self._event_bus)
        return removed

    def get(self, dish_id: str) -> Optional[Dish]:
        for dish in self.items:
            if dish.id == dish_id:
                return dish
        return None

    def get_items(self) -> List[Dish]:
        return list(self.items)

    def __len__(self):
        return len(self.items)

    def __iter__(self):
        return iter(list(self.items))

    def __str__(self) -> str:
        items_str = ",\n\t".join(str(item) for item in self.items)
        return f"Dishes:\n\t{items_str}"

    def to_dict(self):
        return [d.to_dict() for d in self.items]
