"""Simple Event Bus / Observer implementation for planner activity.

Event names:
  catalog.dish_added   -> payload {"dish": Dish}
  catalog.dish_deleted -> payload {"dish": Dish}
  plan.dish_assigned   -> payload {"day": str, "slot": str, "dish": Dish}
  plan.dish_removed    -> payload {"day": str, "slot": str, "dish_id": str, "removed": int}
  ration.saved         -> payload {"name": str}
  ration.deleted       -> payload {"name": str}

Subscribers are callables taking (event_name, payload).
"""
from __future__ import annotations
import logging
from collections import defaultdict
from typing import Callable, Any, Dict, List

logger = logging.getLogger(__name__)

# --- Event name constants (used across modules) ---
CATALOG_DISH_ADDED = "catalog.dish_added"
CATALOG_DISH_DELETED = "catalog.dish_deleted"
PLAN_DISH_ASSIGNED = "plan.dish_assigned"
PLAN_DISH_REMOVED = "plan.dish_removed"
RATION_SAVED = "ration.saved"
RATION_DELETED = "ration.deleted"

ALL_EVENTS = (
	CATALOG_DISH_ADDED, CATALOG_DISH_DELETED,
	PLAN_DISH_ASSIGNED, PLAN_DISH_REMOVED,
	RATION_SAVED, RATION_DELETED,
)


class EventBus:
	def __init__(self):
		self._subscribers: Dict[str, List[Callable[[str, Any], None]]] = defaultdict(list)

	def subscribe(self, event_name: str, callback: Callable[[str, Any], None]):
		if callback not in self._subscribers[event_name]:
			self._subscribers[event_name].append(callback)

	def publish(self, event_name: str, payload: Any):
		for cb in list(self._subscribers.get(event_name, [])):
			try:
				cb(event_name, payload)
			except Exception as e:  # pragma: no cover - a bad listener must not break a mutation
				logger.error("Error delivering %s to %r: %s", event_name, cb, e)


# A singleton-like instance (can be imported)
GLOBAL_EVENT_BUS = EventBus()


__all__ = [
	'EventBus', 'GLOBAL_EVENT_BUS', 'ALL_EVENTS',
	'CATALOG_DISH_ADDED', 'CATALOG_DISH_DELETED', 'PLAN_DISH_ASSIGNED',
	'PLAN_DISH_REMOVED', 'RATION_SAVED', 'RATION_DELETED',
]
