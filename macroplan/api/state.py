"""Process-wide planner store used by the web layer (overridable in tests)."""
import logging
from threading import Lock
from typing import Optional

from macroplan.infra.paths import STORAGE_FILE
from macroplan.infra.storage import JsonFileStore
from macroplan.logic.planner.store import PlannerStore

logger = logging.getLogger(__name__)

_lock = Lock()
_store: Optional[PlannerStore] = None


def get_store() -> PlannerStore:
    """FastAPI dependency: the single PlannerStore, built on first use."""
    global _store
    with _lock:
        if _store is None:
            logger.info(f"Loading planner storage from {STORAGE_FILE}")
            _store = PlannerStore.from_storage(JsonFileStore(STORAGE_FILE))
        return _store

