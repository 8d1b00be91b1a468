"""Ration domain entity: a named snapshot of a meal plan."""
from datetime import datetime
from typing import Optional

from macroplan.domain.MealPlan import MealPlan


class Ration:
    def __init__(self, name: str, plan: MealPlan, created_at: Optional[datetime] = None):
        self.name = name
        self.plan = plan.copy()
        self.created_at = created_at or datetime.now().replace(microsecond=0)

    def dish_count(self) -> int:
        return sum(len(dishes) for slots in self.plan.meals.values() for dishes in slots.values())

    def __str__(self) -> str:
        return f"{self.name} - {self.dish_count()} dishes - saved {self.created_at.isoformat()}"

    __repr__ = __str__

    @staticmethod
    def from_dict(data):
        d = dict(data)
        created = d.get("created_at")
        try:
            created_at = datetime.fromisoformat(created) if created else None
        except (TypeError, ValueError):
            created_at = None
        return Ration(d["name"], MealPlan.from_dict(d.get("plan", {})), created_at=created_at)

    def to_dict(self):
        return {
            "name": self.name,
            "created_at": self.created_at.isoformat(),
            "plan": self.plan.to_dict(),
        }
