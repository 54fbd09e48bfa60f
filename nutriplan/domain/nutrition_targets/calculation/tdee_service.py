"""TDEEService - Total Daily Energy Expenditure calculation."""

from typing import Union

import structlog

from ..core.ports.calculators import ITDEECalculator
from ..core.value_objects.activity_level import FALLBACK_ACTIVITY_LEVEL, ActivityLevel
from ..core.value_objects.bmr import BMR
from ..core.value_objects.tdee import TDEE

logger = structlog.get_logger(__name__)


class TDEEService(ITDEECalculator):
    """Calculate Total Daily Energy Expenditure.

    Formula:
        TDEE = BMR × PAL

    PAL Multipliers:
        - Sedentary: 1.2
        - Light: 1.375
        - Moderate: 1.55
        - Active: 1.725
        - Very Active: 1.9

    An unrecognized activity level falls back to the sedentary
    multiplier instead of failing the calculation.
    """

    def multiplier_for(self, activity_level: Union[ActivityLevel, str]) -> float:
        """Resolve the PAL multiplier, falling back to sedentary."""
        level = ActivityLevel.resolve(activity_level)
        if level is None:
            logger.warning(
                "Unrecognized activity level, using fallback",
                activity_level=activity_level,
                fallback=FALLBACK_ACTIVITY_LEVEL.value,
            )
            level = FALLBACK_ACTIVITY_LEVEL
        return level.pal_multiplier()

    def calculate(self, bmr: BMR, activity_level: Union[ActivityLevel, str]) -> TDEE:
        """Calculate TDEE from BMR and activity level.

        Args:
            bmr: Basal metabolic rate
            activity_level: Physical activity level (enum or string)

        Returns:
            TDEE: Total daily energy expenditure in kcal/day

        Example:
            >>> TDEEService().calculate(BMR(1800.0), ActivityLevel.LIGHT).value
            2475.0
        """
        return TDEE(value=bmr.value * self.multiplier_for(activity_level))
