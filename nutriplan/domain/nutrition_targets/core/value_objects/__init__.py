"""Value objects for nutrition target domain."""

from .activity_level import PAL_MULTIPLIERS, ActivityLevel
from .bmr import BMR
from .gender import Gender
from .macro_split import MacroPercentages, MacroSplit
from .metric_input import MetricInput
from .nutrition_targets import NutritionTargets
from .tdee import TDEE
from .time_to_goal import TimeToGoal
from .validation_result import ValidationResult

__all__ = [
    "ActivityLevel",
    "PAL_MULTIPLIERS",
    "Gender",
    "MetricInput",
    "ValidationResult",
    "BMR",
    "TDEE",
    "MacroSplit",
    "MacroPercentages",
    "TimeToGoal",
    "NutritionTargets",
]
