"""Nutrition aggregation logic for a meal plan.

Totals are plain dicts keyed by 'protein', 'fats', 'carbs', 'calories'.
"""
from decimal import Decimal, ROUND_HALF_UP
from typing import Dict

from macroplan.domain.MealPlan import MealPlan, UnknownSlotError
from macroplan.utilities.constants import DAYS, MEALS, MACRO_KEYS, TOTAL_KEYS

DAYS_PER_WEEK = len(DAYS)


def _zero_totals() -> Dict[str, float]:
    return {k: 0 for k in TOTAL_KEYS}


def round_half_up(value, places: int = 0):
    """Round like a calculator (halves away from zero); int result when places == 0."""
    quantum = Decimal(1).scaleb(-places)
    rounded = Decimal(str(value)).quantize(quantum, rounding=ROUND_HALF_UP)
    return int(rounded) if places == 0 else float(rounded)


def day_totals(plan: MealPlan, day: str) -> Dict[str, float]:
    """Sum macros and calories over every slot of one day."""
    if day not in DAYS:
        raise UnknownSlotError(f"Invalid day: {day!r}")
    totals = _zero_totals()
    for dishes in plan.meals.get(day, {}).values():
        for dish in dishes:
            totals['protein'] += dish.protein
            totals['fats'] += dish.fats
            totals['carbs'] += dish.carbs
            totals['calories'] += dish.calories
    return totals


def week_totals(plan: MealPlan) -> Dict[str, float]:
    totals = _zero_totals()
    for day in DAYS:
        for key, value in day_totals(plan, day).items():
            totals[key] += value
    return totals


def percentages_from_totals(totals: Dict[str, float]) -> Dict[str, float]:
    """Share of each macro in the macro gram sum (calories excluded), one decimal."""
    macro_sum = sum(totals.get(k, 0) for k in MACRO_KEYS)
    if not macro_sum:
        return {k: 0 for k in MACRO_KEYS}
    return {k: round_half_up(totals.get(k, 0) / macro_sum * 100, 1) for k in MACRO_KEYS}


def macro_percentages(plan: MealPlan, day: str) -> Dict[str, float]:
    return percentages_from_totals(day_totals(plan, day))


def daily_averages(plan: MealPlan) -> Dict[str, float]:
    """Week totals over seven days: calories to a whole unit, macros to one decimal."""
    week = week_totals(plan)
    averages = {k: round_half_up(week[k] / DAYS_PER_WEEK, 1) for k in MACRO_KEYS}
    averages['calories'] = round_half_up(week['calories'] / DAYS_PER_WEEK)
    return averages


def compute_week_nutrition(plan: MealPlan):
    """Aggregate nutrition stats for the whole plan.

    Returns structure:
    {
      'days': {
         'Monday': {'protein': g, 'fats': g, 'carbs': g, 'calories': kcal,
                    'percentages': {'protein': %, 'fats': %, 'carbs': %},
                    'meals': {'Breakfast': [dish dict, ...], ...}},
         ...
      },
      'week_totals': {'protein': g, 'fats': g, 'carbs': g, 'calories': kcal},
      'averages': {'protein': g, 'fats': g, 'carbs': g, 'calories': kcal}
    }
    """
    days_result = {}
    for day in DAYS:
        totals = day_totals(plan, day)
        days_result[day] = {
            **totals,
            'percentages': percentages_from_totals(totals),
            'meals': {slot: [d.to_dict() for d in plan.meals.get(day, {}).get(slot, [])] for slot in MEALS},
        }
    return {
        'days': days_result,
        'week_totals': week_totals(plan),
        'averages': daily_averages(plan),
    }


__all__ = [
    "day_totals", "week_totals", "macro_percentages", "percentages_from_totals",
    "daily_averages", "compute_week_nutrition", "round_half_up",
]
