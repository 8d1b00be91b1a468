from typing import Final

DAYS: Final[tuple[str, ...]] = (
    "Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday"
)
MEALS: Final[tuple[str, ...]] = ("Breakfast", "Lunch", "Dinner", "Snack")
MACRO_KEYS: Final[tuple[str, ...]] = ("protein", "fats", "carbs")
TOTAL_KEYS: Final[tuple[str, ...]] = ("protein", "fats", "carbs", "calories")

TABS: Final[tuple[str, ...]] = ("planner", "database", "stats", "ratios")
DEFAULT_TAB: Final[str] = "planner"

# Keys inside the key-value store
CATALOG_STORAGE_KEY: Final[str] = "dishDatabase"
RATIONS_STORAGE_KEY: Final[str] = "savedRations"

# Percent bars only print their label above this share
PERCENT_LABEL_MIN: Final[float] = 10.0

SEED_DISHES: Final[tuple[dict, ...]] = (
    {"id": "1", "name": "Oatmeal with berries", "protein": 12, "fats": 8, "carbs": 45, "calories": 310},
    {"id": "2", "name": "Chicken breast with rice", "protein": 35, "fats": 10, "carbs": 50, "calories": 430},
    {"id": "3", "name": "Greek salad", "protein": 8, "fats": 15, "carbs": 12, "calories": 220},
    {"id": "4", "name": "Cottage cheese with honey", "protein": 18, "fats": 5, "carbs": 20, "calories": 195},
)
