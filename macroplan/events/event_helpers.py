"""Event helper utilities.

Helpers for publishing planner events on an event bus (the global one unless
another bus is given).

Quick import:
    from macroplan.events.event_helpers import (
        publish_dish_added, publish_dish_deleted,
        publish_dish_assigned, publish_dish_removed,
        publish_ration_saved, publish_ration_deleted,
    )
"""
from __future__ import annotations
from typing import Any, Optional
from .Event_Bus import (
    EventBus, GLOBAL_EVENT_BUS,
    CATALOG_DISH_ADDED, CATALOG_DISH_DELETED,
    PLAN_DISH_ASSIGNED, PLAN_DISH_REMOVED,
    RATION_SAVED, RATION_DELETED,
)

__all__ = [
    'publish_dish_added', 'publish_dish_deleted',
    'publish_dish_assigned', 'publish_dish_removed',
    'publish_ration_saved', 'publish_ration_deleted',
]


def _bus(bus: Optional[EventBus]) -> EventBus:
    return bus if bus is not None else GLOBAL_EVENT_BUS


def publish_dish_added(dish: Any, bus: Optional[EventBus] = None):
    """Publish a catalog.dish_added event."""
    _bus(bus).publish(CATALOG_DISH_ADDED, {'dish': dish})


def publish_dish_deleted(dish: Any, bus: Optional[EventBus] = None):
    """Publish a catalog.dish_deleted event."""
    _bus(bus).publish(CATALOG_DISH_DELETED, {'dish': dish})


def publish_dish_assigned(day: str, slot: str, dish: Any, bus: Optional[EventBus] = None):
    _bus(bus).publish(PLAN_DISH_ASSIGNED, {'day': day, 'slot': slot, 'dish': dish})


def publish_dish_removed(day: str, slot: str, dish_id: str, removed: int,
                         bus: Optional[EventBus] = None):
    """Publish a plan.dish_removed event; removed is the number of entries dropped."""
    _bus(bus).publish(PLAN_DISH_REMOVED, {
        'day': day,
        'slot': slot,
        'dish_id': dish_id,
        'removed': removed,
    })


def publish_ration_saved(name: str, bus: Optional[EventBus] = None):
    _bus(bus).publish(RATION_SAVED, {'name': name})


def publish_ration_deleted(name: str, bus: Optional[EventBus] = None):
    _bus(bus).publish(RATION_DELETED, {'name': name})
