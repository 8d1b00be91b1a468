"""Core business logic layer.

Subpackages:
- planner: owned planner state and its update cycle
- reporting: nutrition totals, percentages and averages
"""
__all__ = ["planner", "reporting"]
