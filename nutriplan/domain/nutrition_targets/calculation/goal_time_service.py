"""GoalTimeService - weeks to reach a target body fat."""

import math
from typing import Optional

import structlog

from ..core.constants import FAT_SHARE_OF_WEIGHT_LOSS
from ..core.ports.calculators import IGoalTimeEstimator
from ..core.value_objects.time_to_goal import TimeToGoal
from .body_composition import fat_mass, target_weight

logger = structlog.get_logger(__name__)


class GoalTimeService(IGoalTimeEstimator):
    """Project weeks needed to reach a target body-fat percentage.

    Assumes lean mass stays constant and that only 70% of the weight
    lost is fat:

        target_weight = lean_mass / (1 - target_bf / 100)
        fat_to_lose   = current_fat_mass - target_weight × target_bf / 100
        weeks         = ceil((fat_to_lose / 0.7) / weekly_weight_loss)

    A plan that loses no weight (zero or negative weekly loss) is
    reported as unattainable instead of an infinite week count.
    """

    def estimate(
        self,
        current_weight: float,
        current_body_fat: float,
        target_body_fat: float,
        weekly_weight_loss: Optional[float],
    ) -> TimeToGoal:
        """Project time to reach target body fat.

        Args:
            current_weight: Current weight in kg
            current_body_fat: Current body fat percentage
            target_body_fat: Target body fat percentage (3-60)
            weekly_weight_loss: Expected kg lost per week

        Returns:
            TimeToGoal: Whole weeks, 0 when already at target, or
                unattainable when weekly loss is not positive

        Raises:
            InvalidTargetError: If target body fat is outside 3-60%. The
                target is checked first, so an invalid target raises even
                when the weekly loss alone would make the goal unattainable.

        Example:
            >>> GoalTimeService().estimate(80.0, 25.0, 15.0, 0.5).weeks
            27
        """
        goal_weight = target_weight(current_weight, current_body_fat, target_body_fat)

        if weekly_weight_loss is None or not weekly_weight_loss > 0:
            logger.info(
                "Goal unattainable under current plan",
                weekly_weight_loss=weekly_weight_loss,
            )
            return TimeToGoal.unattainable(
                f"weekly weight loss must be positive, got {weekly_weight_loss}"
            )

        fat_to_lose = fat_mass(current_weight, current_body_fat) - fat_mass(
            goal_weight, target_body_fat
        )
        # Already at or below target
        if fat_to_lose <= 1e-9:
            return TimeToGoal.in_weeks(0)

        weight_to_lose = fat_to_lose / FAT_SHARE_OF_WEIGHT_LOSS
        return TimeToGoal.in_weeks(math.ceil(weight_to_lose / weekly_weight_loss))
