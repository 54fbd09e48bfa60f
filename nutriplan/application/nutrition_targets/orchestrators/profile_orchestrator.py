"""ProfileOrchestrator - coordinates validation and target calculation."""

from dataclasses import dataclass
from typing import Optional, Union

import structlog

from nutriplan.domain.nutrition_targets.calculation.body_composition import (
    bmi_category,
    calculate_bmi,
)
from nutriplan.domain.nutrition_targets.calculator import NutritionTargetCalculator
from nutriplan.domain.nutrition_targets.core.value_objects.activity_level import (
    ActivityLevel,
)
from nutriplan.domain.nutrition_targets.core.value_objects.macro_split import (
    MacroPercentages,
)
from nutriplan.domain.nutrition_targets.core.value_objects.metric_input import (
    MetricInput,
)
from nutriplan.domain.nutrition_targets.core.value_objects.nutrition_targets import (
    NutritionTargets,
)
from nutriplan.domain.nutrition_targets.core.value_objects.validation_result import (
    ValidationResult,
)
from nutriplan.domain.nutrition_targets.validation.metric_validator import (
    MetricValidator,
)

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class ProfileCalculations:
    """Everything a profile stores after a calculation.

    Attributes:
        bmi: Body mass index
        bmi_category: underweight, normal, overweight or obese
        targets: Daily nutrition targets
        macro_percentages: Calorie share of each macro
    """

    bmi: float
    bmi_category: str
    targets: NutritionTargets
    macro_percentages: MacroPercentages


class ProfileOrchestrator:
    """
    Orchestrates validation and calculation for user profiles.

    Flow:
    1. Validate body metrics (caller decides what to do with errors)
    2. Calculate BMR, TDEE, calorie target and macros
    3. Calculate BMI and macro percentages
    """

    def __init__(
        self,
        validator: Optional[MetricValidator] = None,
        calculator: Optional[NutritionTargetCalculator] = None,
    ):
        self._validator = validator or MetricValidator()
        self._calculator = calculator or NutritionTargetCalculator()

    def validate(self, metrics: MetricInput) -> ValidationResult:
        return self._validator.validate(metrics)

    def calculate_profile_metrics(
        self,
        metrics: MetricInput,
        activity_level: Union[ActivityLevel, str],
        deficit: Optional[float] = None,
        target_body_fat: Optional[float] = None,
    ) -> ProfileCalculations:
        """
        Calculate complete profile metrics.

        Args:
            metrics: Validated body metrics
            activity_level: Physical activity level
            deficit: Optional daily kcal deficit
            target_body_fat: Optional target body fat percentage

        Returns:
            ProfileCalculations with all computed metrics
        """
        targets = self._calculator.compute(
            metrics,
            activity_level,
            deficit=deficit,
            target_body_fat=target_body_fat,
        )
        bmi = calculate_bmi(metrics.weight, metrics.height)

        logger.debug(
            "Profile metrics calculated",
            bmr=targets.bmr,
            tdee=targets.tdee,
            daily_calorie_target=targets.daily_calorie_target,
        )

        return ProfileCalculations(
            bmi=bmi,
            bmi_category=bmi_category(bmi),
            targets=targets,
            macro_percentages=targets.macro_split().percentages(),
        )
