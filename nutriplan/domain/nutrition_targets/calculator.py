"""Nutrition target calculator - the public functional API.

Converts validated body metrics into daily calorie and macronutrient
targets. All functions are pure: no I/O, no shared state.
"""

from typing import Optional, Union

from .calculation.body_composition import calculate_bmi
from .calculation.bmr_service import BMRService
from .calculation.goal_time_service import GoalTimeService
from .calculation.target_service import TargetService
from .calculation.tdee_service import TDEEService
from .core.constants import DEFAULT_CALORIE_DEFICIT, DEFAULT_TARGET_BODY_FAT_PERCENT
from .core.ports.calculators import (
    IBMRCalculator,
    IGoalTimeEstimator,
    ITargetCalculator,
    ITDEECalculator,
)
from .core.rounding import round_half_away
from .core.value_objects.activity_level import ActivityLevel
from .core.value_objects.bmr import BMR
from .core.value_objects.gender import Gender
from .core.value_objects.macro_split import MacroPercentages, MacroSplit
from .core.value_objects.metric_input import MetricInput
from .core.value_objects.nutrition_targets import NutritionTargets
from .core.value_objects.time_to_goal import TimeToGoal
from .core.value_objects.validation_result import ValidationResult
from .validation.metric_validator import MetricValidator

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


class NutritionTargetCalculator:
    """Run the BMR → TDEE → targets pipeline.

    Flow:
    1. Calculate BMR from weight, height, age and gender
    2. Scale BMR by the activity multiplier to get TDEE
    3. Subtract the deficit and clamp to the calorie floor
    4. Split calories into protein, fat and carbs
    5. Estimate weekly loss and weeks to the target body fat
    """

    def __init__(
        self,
        bmr_service: Optional[IBMRCalculator] = None,
        tdee_service: Optional[ITDEECalculator] = None,
        target_service: Optional[ITargetCalculator] = None,
        goal_time_service: Optional[IGoalTimeEstimator] = None,
    ):
        self._bmr_service = bmr_service or BMRService()
        self._tdee_service = tdee_service or TDEEService()
        self._target_service = target_service or TargetService()
        self._goal_time_service = goal_time_service or GoalTimeService()

    def compute(
        self,
        metrics: MetricInput,
        activity_level: Union[ActivityLevel, str],
        deficit: Optional[float] = None,
        target_body_fat: Optional[float] = None,
    ) -> NutritionTargets:
        """Compute the full set of nutrition targets.

        Args:
            metrics: Validated body metrics
            activity_level: Physical activity level
            deficit: Daily kcal deficit (default 500)
            target_body_fat: Body fat % to project time to (default 13)

        Returns:
            NutritionTargets: Fresh, fully populated targets

        Raises:
            InvalidTargetError: If target body fat is outside 3-60%
        """
        if deficit is None:
            deficit = DEFAULT_CALORIE_DEFICIT
        if target_body_fat is None:
            target_body_fat = DEFAULT_TARGET_BODY_FAT_PERCENT

        bmr = self._bmr_service.calculate(
            metrics.weight, metrics.height, metrics.age, metrics.gender
        )
        tdee = self._tdee_service.calculate(bmr, activity_level)

        daily_target = self._target_service.daily_calorie_target(
            tdee, metrics.gender, deficit
        )
        macros = self._target_service.macro_split(daily_target, metrics.weight)
        weekly_loss = self._target_service.weekly_weight_loss(deficit)

        # Projection uses the unrounded rate; only the published value is rounded
        time_to_goal = self._goal_time_service.estimate(
            current_weight=metrics.weight,
            current_body_fat=metrics.body_fat_percent,
            target_body_fat=target_body_fat,
            weekly_weight_loss=self._target_service.raw_weekly_weight_loss(deficit),
        )

        return NutritionTargets(
            bmr=round_half_away(bmr.value),
            tdee=round_half_away(tdee.value),
            daily_calorie_target=round_half_away(daily_target),
            protein_target=macros.protein_g,
            carb_target=macros.carbs_g,
            fat_target=macros.fat_g,
            estimated_weekly_weight_loss=weekly_loss,
            estimated_time_to_goal=time_to_goal,
        )


_validator = MetricValidator()
_calculator = NutritionTargetCalculator()


def validate_metrics(metrics: MetricInput) -> ValidationResult:
    """Range-check body metrics, reporting every violation in field order."""
    return _validator.validate(metrics)


def calculate_bmr(weight: float, height: float, age: float, gender: Union[Gender, str]) -> float:
    """Unrounded Mifflin-St Jeor BMR in kcal/day.

    Raises:
        ValueError: If the formula result is not positive, which cannot
            happen for metrics that pass validation (minimum 264 kcal)
        UnsupportedGenderError: If gender is not male/female
    """
    return BMRService().calculate(weight, height, age, gender).value


def calculate_tdee(bmr: float, activity_level: Union[ActivityLevel, str]) -> float:
    """Unrounded TDEE; unknown activity levels use the sedentary multiplier."""
    return TDEEService().calculate(BMR(bmr), activity_level).value


def compute_nutrition_targets(
    metrics: MetricInput,
    activity_level: Union[ActivityLevel, str],
    deficit: Optional[float] = None,
    target_body_fat: Optional[float] = None,
) -> NutritionTargets:
    """Compute daily calorie and macro targets for validated metrics."""
    return _calculator.compute(metrics, activity_level, deficit, target_body_fat)


def estimate_weeks_to_goal(
    current_weight: float,
    current_body_fat: float,
    target_body_fat: float,
    weekly_weight_loss: float,
) -> TimeToGoal:
    """Project weeks to the target body fat, or an unattainable outcome."""
    return GoalTimeService().estimate(
        current_weight, current_body_fat, target_body_fat, weekly_weight_loss
    )


def calculate_macro_percentages(protein: int, carbs: int, fat: int) -> MacroPercentages:
    """Share of total calories per macro, rounded to whole percent."""
    return MacroSplit(protein_g=protein, carbs_g=carbs, fat_g=fat).percentages()
