"""Actions understood by the planner store's update function."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict


@dataclass(frozen=True)
class AddDish:
    """Add the current draft (or the given fields) to the catalog."""
    draft: Dict[str, Any] | None = None


@dataclass(frozen=True)
class DeleteDish:
    dish_id: str


@dataclass(frozen=True)
class AddDishToMeal:
    day: str
    slot: str
    dish_id: str


@dataclass(frozen=True)
class RemoveDishFromMeal:
    day: str
    slot: str
    dish_id: str


@dataclass(frozen=True)
class SetActiveTab:
    tab: str


@dataclass(frozen=True)
class UpdateDraft:
    """Merge form field values into the new-dish draft."""
    fields: Dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class ClearPlan:
    pass


@dataclass(frozen=True)
class SaveRation:
    name: str


@dataclass(frozen=True)
class LoadRation:
    name: str


@dataclass(frozen=True)
class DeleteRation:
    name: str
