"""
Input validation schemas using Pydantic.

New-dish input never fails validation: a draft is either complete (and
becomes a Dish) or ignored.
"""
import math

from pydantic import BaseModel, Field, field_validator
from typing import List, Optional, Union

Number = Union[int, float]

NUMERIC_FIELDS = ("protein", "fats", "carbs", "calories")


def _coerce_number(v):
    """Turn form text into a number; anything unusable becomes None."""
    if v is None or isinstance(v, bool):
        return None
    if isinstance(v, (int, float)):
        return v
    if isinstance(v, str):
        s = v.strip().replace(',', '.')
        if not s:
            return None
        try:
            return int(s)
        except ValueError:
            pass
        try:
            return float(s)
        except ValueError:
            return None
    return None


class DishDraft(BaseModel):
    """Partially filled new-dish form."""
    name: Optional[str] = None
    protein: Optional[Number] = None
    fats: Optional[Number] = None
    carbs: Optional[Number] = None
    calories: Optional[Number] = None
    link: Optional[str] = None

    @field_validator('name', 'link', mode='before')
    @classmethod
    def strip_text(cls, v):
        """Remove leading/trailing whitespace; blank text counts as absent."""
        if v is None:
            return None
        v = str(v).strip()
        return v or None

    @field_validator(*NUMERIC_FIELDS, mode='before')
    @classmethod
    def coerce_numbers(cls, v):
        return _coerce_number(v)

    def missing_fields(self) -> List[str]:
        missing = [] if self.name else ['name']
        for key in NUMERIC_FIELDS:
            value = getattr(self, key)
            if value is None or not math.isfinite(value) or value < 0:
                missing.append(key)
        return missing

    def is_complete(self) -> bool:
        return not self.missing_fields()


class DishIdInput(BaseModel):
    dish_id: str = Field(..., min_length=1)


class RationInput(BaseModel):
    """Schema for saving the current plan under a name."""
    name: str = Field(..., min_length=1, max_length=100)

    @field_validator('name')
    @classmethod
    def validate_name(cls, v):
        if not v.strip():
            raise ValueError('Ration name cannot be empty')
        return v.strip()
