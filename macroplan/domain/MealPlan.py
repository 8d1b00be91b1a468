"""MealPlan domain entity: week of days, each split into fixed meal slots holding dish copies."""
from typing import Dict, List

from macroplan.domain.Dish import Dish
from macroplan.utilities.constants import DAYS, MEALS


class UnknownSlotError(ValueError):
    """Raised for a day or meal label outside the fixed sets."""


def check_slot(day: str, slot: str) -> None:
    if day not in DAYS or slot not in MEALS:
        raise UnknownSlotError(f"Invalid day or meal: {day!r} / {slot!r}")


class MealPlan:
    def __init__(self, meals: Dict[str, Dict[str, List[Dish]]] = None):
        # Sparse: days and slots appear on first use
        self.meals: Dict[str, Dict[str, List[Dish]]] = {}
        for day, slots in (meals or {}).items():
            for slot, dishes in slots.items():
                check_slot(day, slot)
                self.meals.setdefault(day, {})[slot] = [d.copy() for d in dishes]

    def add_dish_to_meal(self, day: str, slot: str, dish: Dish) -> List[Dish]:
        '''Appends a copy of the dish to (day, slot); returns that slot's list.'''
        check_slot(day, slot)
        entries = self.meals.setdefault(day, {}).setdefault(slot, [])
        entries.append(dish.copy())
        return entries

    def remove_dish_from_meal(self, day: str, slot: str, dish_id: str) -> List[Dish]:
        '''Drops every entry with this dish id from (day, slot); returns what is left.'''
        check_slot(day, slot)
        day_meals = self.meals.setdefault(day, {})
        remaining = [d for d in day_meals.get(slot, []) if d.id != dish_id]
        day_meals[slot] = remaining
        return remaining

    def get_meal(self, day: str, slot: str) -> List[Dish]:
        check_slot(day, slot)
        return list(self.meals.get(day, {}).get(slot, []))

    def is_empty(self) -> bool:
        return not any(d for slots in self.meals.values() for d in slots.values())

    def clear(self):
        self.meals = {}

    def copy(self) -> "MealPlan":
        return MealPlan(self.meals)

    def to_dict(self):
        return {
            day: {slot: [d.to_dict() for d in dishes] for slot, dishes in slots.items()}
            for day, slots in self.meals.items()
        }

    @staticmethod
    def from_dict(data) -> "MealPlan":
        d = data if isinstance(data, dict) else {}
        meals = {
            day: {slot: [Dish.from_dict(x) for x in (dishes or [])] for slot, dishes in (slots or {}).items()}
            for day, slots in d.items()
        }
        return MealPlan(meals)

    def __str__(self) -> str:
        lines = []
        for day in DAYS:
            for slot in MEALS:
                names = [d.name for d in self.meals.get(day, {}).get(slot, [])]
                if names:
                    lines.append(f"{day} / {slot}: {', '.join(names)}")
        return "\n".join(lines) or "(empty plan)"

    __repr__ = __str__
