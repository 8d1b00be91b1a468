"""Dish domain entity: name, macro-nutrients (g), calories, optional recipe link."""
import math
from typing import Optional

NUMERIC_FIELDS = ("protein", "fats", "carbs", "calories")


def _is_amount(value) -> bool:
    """Non-negative finite int or float; bools do not count."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return math.isfinite(value) and value >= 0


class Dish:
    __slots__ = ("_id", "_name", "_protein", "_fats", "_carbs", "_calories", "_link")

    def __init__(self, id: str, name: str, protein=0, fats=0, carbs=0, calories=0,
                 link: Optional[str] = None):
        # No setters: a dish never changes after creation
        self._id = str(id)
        self._name = name
        self._protein = protein
        self._fats = fats
        self._carbs = carbs
        self._calories = calories
        self._link = link or None

    @property
    def id(self) -> str: return self._id

    @property
    def name(self) -> str: return self._name

    @property
    def protein(self): return self._protein

    @property
    def fats(self): return self._fats

    @property
    def carbs(self): return self._carbs

    @property
    def calories(self): return self._calories

    @property
    def link(self) -> Optional[str]: return self._link

    def copy(self) -> "Dish":
        """Return an equal, independent Dish (plan entries are copies, never catalog references)."""
        return Dish(self._id, self._name, self._protein, self._fats, self._carbs,
                    self._calories, self._link)

    def __eq__(self, other):
        if not isinstance(other, Dish):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    def __hash__(self):
        return hash((self._id, self._name))

    def __str__(self) -> str:
        return (f"{self._name} - P: {self._protein}g | F: {self._fats}g | "
                f"C: {self._carbs}g | {self._calories} kcal")

    def __repr__(self) -> str:
        return f"Dish(id={self._id!r}, name={self._name!r})"

    @staticmethod
    def from_dict(data):
        '''Creates a Dish from a stored dictionary. Ignores unknown keys.'''
        d = dict(data) if isinstance(data, dict) else {}
        allowed = {"id", "name", "protein", "fats", "carbs", "calories", "link"}
        filtered = {k: v for k, v in d.items() if k in allowed}
        if "id" not in filtered or "name" not in filtered:
            raise ValueError(f"Dish record needs 'id' and 'name': {data!r}")
        bad = [k for k in NUMERIC_FIELDS if not _is_amount(filtered.get(k))]
        if bad:
            raise ValueError(f"Dish record has invalid {', '.join(bad)}: {data!r}")
        return Dish(**filtered)

    def to_dict(self):
        '''Converts the Dish to a dictionary for JSON persistence.'''
        d = {
            "id": self._id,
            "name": self._name,
            "protein": self._protein,
            "fats": self._fats,
            "carbs": self._carbs,
            "calories": self._calories,
        }
        if self._link:
            d["link"] = self._link
        return d
