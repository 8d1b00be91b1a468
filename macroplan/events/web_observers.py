"""Web-facing observers for planner events.

Subscribes to the GLOBAL_EVENT_BUS for every planner event and keeps a
lightweight in-memory ring buffer of recent activity that the web layer
serves at /api/events.

Design:
  * Each event gets an auto-increment integer id (cursor) so clients can
    request only newer events (since=<last_id_seen>).
  * A Lock guards the buffer; FastAPI runs sync handlers in a thread pool.
  * MAX_EVENTS caps memory use.
"""
from __future__ import annotations
from typing import List, Dict, Any
from threading import Lock
from datetime import datetime, timezone

from macroplan.utilities.config import MAX_EVENTS
from .Event_Bus import GLOBAL_EVENT_BUS, ALL_EVENTS

_lock = Lock()
_events: List[Dict[str, Any]] = []
_next_id = 1
_started = False


def _record(event_name: str, payload: Any):  # signature expected by EventBus
    global _next_id
    with _lock:
        evt = {
            'id': _next_id,
            'type': event_name,
            'ts': datetime.now(timezone.utc).isoformat().replace('+00:00', 'Z'),
        }
        if isinstance(payload, dict):
            dish = payload.get('dish')
            if dish is not None and hasattr(dish, 'name'):
                evt['dish_id'] = dish.id
                evt['name'] = dish.name
            for k in ('day', 'slot', 'dish_id', 'removed', 'name'):
                if k in payload and k not in evt:
                    evt[k] = payload[k]
        _events.append(evt)
        _next_id += 1
        # Trim buffer
        if len(_events) > MAX_EVENTS:
            del _events[: len(_events) - MAX_EVENTS]


def start():
    """Idempotent start: subscribe observers once."""
    global _started
    if _started:
        return
    for name in ALL_EVENTS:
        GLOBAL_EVENT_BUS.subscribe(name, _record)
    _started = True


def get_events(since: int | None = None) -> Dict[str, Any]:
    """Return events newer than 'since' (exclusive).

    If since is None, returns the whole buffer. next_cursor is the largest id,
    so clients can poll with since=next_cursor.
    """
    with _lock:
        if since is None:
            data = list(_events)
        else:
            data = [e for e in _events if e['id'] > since]
        next_cursor = _events[-1]['id'] if _events else since or 0
    return {'events': data, 'next_cursor': next_cursor}


__all__ = ['start', 'get_events']
