"""CalculateProfileMetricsCommand - compute targets for a new profile."""

from dataclasses import dataclass
from typing import Optional, Union

import structlog

from nutriplan.domain.nutrition_targets.core.exceptions.domain_errors import (
    InvalidMetricsError,
)
from nutriplan.domain.nutrition_targets.core.value_objects.activity_level import (
    ActivityLevel,
)
from nutriplan.domain.nutrition_targets.core.value_objects.metric_input import (
    MetricInput,
)

from ..orchestrators.profile_orchestrator import (
    ProfileCalculations,
    ProfileOrchestrator,
)

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class CalculateProfileMetricsCommand:
    """Command to calculate nutrition metrics for a profile.

    Attributes:
        metrics: Raw body metrics entered by the user
        activity_level: Physical activity level
        deficit: Optional daily kcal deficit (default 500)
        target_body_fat: Optional target body fat % (default 13)
    """

    metrics: MetricInput
    activity_level: Union[ActivityLevel, str]
    deficit: Optional[float] = None
    target_body_fat: Optional[float] = None


class CalculateProfileMetricsHandler:
    """Handler for CalculateProfileMetricsCommand.

    Validates metrics first; nothing is calculated for invalid input.
    """

    def __init__(self, orchestrator: Optional[ProfileOrchestrator] = None):
        self._orchestrator = orchestrator or ProfileOrchestrator()

    def handle(self, command: CalculateProfileMetricsCommand) -> ProfileCalculations:
        """
        Handle profile metrics calculation.

        Args:
            command: CalculateProfileMetricsCommand with body metrics

        Returns:
            ProfileCalculations for the profile

        Raises:
            InvalidMetricsError: If any metric is out of range (carries
                every violation)
            InvalidTargetError: If target body fat is outside 3-60%
        """
        validation = self._orchestrator.validate(command.metrics)
        if not validation.valid:
            logger.info("Profile metrics rejected", errors=list(validation.errors))
            raise InvalidMetricsError(validation.errors)

        calculations = self._orchestrator.calculate_profile_metrics(
            command.metrics,
            command.activity_level,
            deficit=command.deficit,
            target_body_fat=command.target_body_fat,
        )

        logger.info(
            "Profile metrics calculated",
            daily_calorie_target=calculations.targets.daily_calorie_target,
            weeks_to_goal=calculations.targets.estimated_time_to_goal.weeks,
        )
        return calculations
