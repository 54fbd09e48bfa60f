"""Nutrition target domain: body metrics in, daily targets out."""

from .calculator import (
    NutritionTargetCalculator,
    calculate_bmi,
    calculate_bmr,
    calculate_macro_percentages,
    calculate_tdee,
    compute_nutrition_targets,
    estimate_weeks_to_goal,
    validate_metrics,
)

__all__ = [
    "NutritionTargetCalculator",
    "validate_metrics",
    "calculate_bmr",
    "calculate_tdee",
    "calculate_bmi",
    "compute_nutrition_targets",
    "estimate_weeks_to_goal",
    "calculate_macro_percentages",
]
