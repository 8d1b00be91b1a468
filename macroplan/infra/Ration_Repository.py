"""Saved rations persistence: a JSON array of named plan snapshots under one key."""
import json
import logging
from typing import List, Optional

from macroplan.domain.MealPlan import MealPlan
from macroplan.domain.Ration import Ration
from macroplan.events.event_helpers import publish_ration_saved, publish_ration_deleted
from macroplan.infra.storage import KeyValueStore
from macroplan.utilities.constants import RATIONS_STORAGE_KEY

logger = logging.getLogger(__name__)


class RationRepository:
    def __init__(self, store: KeyValueStore, key: str = RATIONS_STORAGE_KEY, bus=None):
        self.store = store
        self.key = key
        self._bus = bus

    def load(self) -> List[Ration]:
        raw = self.store.get(self.key)
        if raw is None:
            return []
        try:
            data = json.loads(raw)
            if not isinstance(data, list):
                raise ValueError(f"expected a list, got {type(data).__name__}")
            return [Ration.from_dict(entry) for entry in data]
        except (ValueError, TypeError, KeyError) as e:
            logger.warning(f"Stored rations under '{self.key}' are unreadable ({e}); starting empty")
            return []

    def save(self, rations: List[Ration]) -> None:
        self.store.set(self.key, json.dumps([r.to_dict() for r in rations], ensure_ascii=False))

    def list_rations(self) -> List[Ration]:
        return self.load()

    def save_ration(self, name: str, plan: MealPlan) -> Optional[Ration]:
        """Snapshot the plan under name; a ration with the same name is replaced in place."""
        name = (name or "").strip()
        if not name:
            return None
        ration = Ration(name, plan)
        rations = self.load()
        for i, existing in enumerate(rations):
            if existing.name == name:
                rations[i] = ration
                break
        else:
            rations.append(ration)
        self.save(rations)
        logger.info(f"Ration saved: {name} ({ration.dish_count()} dishes)")
        publish_ration_saved(name, bus=self._bus)
        return ration

    def load_ration(self, name: str) -> Optional[MealPlan]:
        for ration in self.load():
            if ration.name == name:
                return ration.plan.copy()
        return None

    def delete_ration(self, name: str) -> bool:
        rations = self.load()
        kept = [r for r in rations if r.name != name]
        if len(kept) == len(rations):
            return False
        self.save(kept)
        logger.info(f"Ration deleted: {name}")
        publish_ration_deleted(name, bus=self._bus)
        return True
