"""MacroPlan: weekly meal planner with macro and calorie aggregation."""
__version__ = "0.1.0"
