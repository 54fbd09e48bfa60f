"""nutriplan - nutrition target calculation for the meal planner."""

__version__ = "0.1.0"
